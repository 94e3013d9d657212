"""Loading shader sources from files and building shaders from them."""

from __future__ import annotations

import os
from pathlib import Path

from tinyengine.backend import OpenGLBackend
from tinyengine.shader import Shader, ShaderError

BUILTIN_SHADER_DIR = os.path.join("assets", "shaders")


def load_shader_from_file(file_path: str | os.PathLike[str]) -> str:
    """Return the text of a shader source file; raise ShaderError if it cannot be read."""
    try:
        return Path(file_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ShaderError(f"failed to read shader file {file_path}: {exc}") from exc


def create_shader_from_files(
    vertex_path: str | os.PathLike[str],
    fragment_path: str | os.PathLike[str],
    backend: OpenGLBackend,
) -> Shader:
    """Read a vertex and a fragment shader file and link them into a program."""
    try:
        vertex_source = load_shader_from_file(vertex_path)
    except ShaderError as exc:
        raise ShaderError(f"failed to load vertex shader: {exc}") from exc

    try:
        fragment_source = load_shader_from_file(fragment_path)
    except ShaderError as exc:
        raise ShaderError(f"failed to load fragment shader: {exc}") from exc

    shader = Shader(backend)

    try:
        shader.load_vertex_shader(vertex_source)
    except ShaderError as exc:
        raise ShaderError(f"failed to load vertex shader: {exc}") from exc

    try:
        shader.load_fragment_shader(fragment_source)
    except ShaderError as exc:
        raise ShaderError(f"failed to load fragment shader: {exc}") from exc

    try:
        shader.link_program()
    except ShaderError as exc:
        raise ShaderError(f"failed to link shader program: {exc}") from exc

    return shader


def get_builtin_shader_paths(shader_name: str) -> tuple[str, str]:
    """Return the (vertex, fragment) paths of a built-in shader."""
    vertex_path = os.path.join(BUILTIN_SHADER_DIR, f"{shader_name}.vert")
    fragment_path = os.path.join(BUILTIN_SHADER_DIR, f"{shader_name}.frag")
    return vertex_path, fragment_path


def create_builtin_shader(shader_name: str, backend: OpenGLBackend) -> Shader:
    """Build a shader from the built-in shader files of that name."""
    vertex_path, fragment_path = get_builtin_shader_paths(shader_name)
    return create_shader_from_files(vertex_path, fragment_path, backend)