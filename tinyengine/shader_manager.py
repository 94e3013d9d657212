"""A registry of named shader programs with one current program."""

from __future__ import annotations

import os
from typing import Sequence

from tinyengine.backend import OpenGLBackend
from tinyengine.shader import Shader, ShaderError
from tinyengine.shader_loader import create_builtin_shader, create_shader_from_files


class ShaderManager:
    """Holds shaders by name and tracks which one is in use."""

    def __init__(self, backend: OpenGLBackend) -> None:
        self._backend = backend
        self._shaders: dict[str, Shader] = {}
        self._current: str | None = None

    def load_shader(self, name: str, vertex_source: str, fragment_source: str) -> None:
        """Compile and link a shader from source and register it under ``name``.

        A shader already registered under that name is deleted first.
        """
        if name in self._shaders:
            self.delete_shader(name)

        shader = Shader(self._backend)
        try:
            shader.load_vertex_shader(vertex_source)
        except ShaderError as exc:
            raise ShaderError(f"failed to load vertex shader '{name}': {exc}") from exc
        try:
            shader.load_fragment_shader(fragment_source)
        except ShaderError as exc:
            raise ShaderError(f"failed to load fragment shader '{name}': {exc}") from exc
        try:
            shader.link_program()
        except ShaderError as exc:
            raise ShaderError(f"failed to link shader program '{name}': {exc}") from exc

        self._shaders[name] = shader

    def load_shader_from_files(
        self,
        name: str,
        vertex_path: str | os.PathLike[str],
        fragment_path: str | os.PathLike[str],
    ) -> None:
        """Build a shader from files and register it, replacing one of the same name."""
        try:
            shader = create_shader_from_files(vertex_path, fragment_path, self._backend)
        except ShaderError as exc:
            raise ShaderError(f"failed to create shader '{name}' from files: {exc}") from exc
        self._register(name, shader)

    def load_builtin_shader(self, name: str) -> None:
        """Build a built-in shader and register it under its own name."""
        try:
            shader = create_builtin_shader(name, self._backend)
        except ShaderError as exc:
            raise ShaderError(f"failed to load builtin shader '{name}': {exc}") from exc
        self._register(name, shader)

    def _register(self, name: str, shader: Shader) -> None:
        if name in self._shaders:
            self.delete_shader(name)
        self._shaders[name] = shader

    def get_shader(self, name: str) -> Shader | None:
        """The shader registered under ``name``, or None."""
        return self._shaders.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._shaders

    def __len__(self) -> int:
        return len(self._shaders)

    def use_shader(self, name: str) -> bool:
        """Make the named shader current; False if there is no such shader."""
        shader = self._shaders.get(name)
        if shader is None:
            return False
        shader.use()
        self._current = name
        return True

    @property
    def current_shader(self) -> str | None:
        """Name of the shader in use, or None."""
        return self._current

    def delete_shader(self, name: str) -> bool:
        """Delete the named shader; False if there is no such shader."""
        shader = self._shaders.pop(name, None)
        if shader is None:
            return False
        shader.delete()
        if self._current == name:
            self._current = None
        return True

    def delete_all_shaders(self) -> None:
        for shader in self._shaders.values():
            shader.delete()
        self._shaders.clear()
        self._current = None

    def shader_names(self) -> list[str]:
        """Registered shader names in alphabetical order."""
        return sorted(self._shaders)

    def _current_shader_object(self) -> Shader | None:
        if self._current is None:
            return None
        return self._shaders.get(self._current)

    def _location(self, name: str) -> tuple[Shader, int] | None:
        shader = self._current_shader_object()
        if shader is None:
            return None
        location = shader.uniform_location(name)
        if location < 0:
            return None
        return shader, location

    def set_uniform_mat4(self, name: str, matrix: Sequence[float]) -> bool:
        """Set a 4x4 matrix uniform on the current shader; False if not possible."""
        found = self._location(name)
        if found is None:
            return False
        shader, location = found
        shader.set_uniform_mat4(location, matrix)
        return True

    def set_uniform_vec3(self, name: str, vector: Sequence[float]) -> bool:
        """Set a vector uniform on the current shader; False if not possible."""
        found = self._location(name)
        if found is None:
            return False
        shader, location = found
        shader.set_uniform_vec3(location, vector)
        return True

    def set_uniform_float(self, name: str, value: float) -> bool:
        """Set a float uniform on the current shader; False if not possible."""
        found = self._location(name)
        if found is None:
            return False
        shader, location = found
        shader.set_uniform_float(location, value)
        return True