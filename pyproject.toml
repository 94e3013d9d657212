[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyengine"
version = "0.1.0"
description = "A small, educational 2D game engine core: vector and matrix math, transforms, a camera, a game loop, drawing primitives and shader management."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "2d", "math", "transform", "camera", "renderer", "shader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyengine = "tinyengine.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyengine"]

[tool.pytest.ini_options]
addopts = "-ra"
