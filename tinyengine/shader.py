"""A shader program built from a vertex and a fragment shader."""

from __future__ import annotations

from typing import Sequence

from tinyengine.backend import (
    COMPILE_STATUS,
    FRAGMENT_SHADER,
    GL_FALSE,
    LINK_STATUS,
    VERTEX_SHADER,
    OpenGLBackend,
)


class ShaderError(Exception):
    """A shader could not be created, compiled or linked."""


class Shader:
    """Compiles shaders and links them into a program through a backend."""

    def __init__(self, backend: OpenGLBackend) -> None:
        self._backend = backend
        self._program_id = 0
        self._vertex_shader_id = 0
        self._fragment_shader_id = 0

    def load_vertex_shader(self, source: str) -> None:
        self._vertex_shader_id = self._compile(source, VERTEX_SHADER)

    def load_fragment_shader(self, source: str) -> None:
        self._fragment_shader_id = self._compile(source, FRAGMENT_SHADER)

    def _compile(self, source: str, shader_type: int) -> int:
        backend = self._backend
        shader_id = backend.create_shader(shader_type)
        if shader_id == 0:
            raise ShaderError("failed to create shader")

        backend.shader_source(shader_id, source)
        backend.compile_shader(shader_id)

        if backend.get_shader_iv(shader_id, COMPILE_STATUS) == GL_FALSE:
            log = backend.get_shader_info_log(shader_id)
            backend.delete_shader(shader_id)
            raise ShaderError(f"shader compilation failed: {log}")
        return shader_id

    def link_program(self) -> None:
        """Link the loaded shaders into a program, then release the shaders."""
        if self._vertex_shader_id == 0:
            raise ShaderError("vertex shader not loaded")
        if self._fragment_shader_id == 0:
            raise ShaderError("fragment shader not loaded")

        backend = self._backend
        self._program_id = backend.create_program()
        if self._program_id == 0:
            raise ShaderError("failed to create shader program")

        backend.attach_shader(self._program_id, self._vertex_shader_id)
        backend.attach_shader(self._program_id, self._fragment_shader_id)
        backend.link_program(self._program_id)

        if backend.get_program_iv(self._program_id, LINK_STATUS) == GL_FALSE:
            log = backend.get_program_info_log(self._program_id)
            raise ShaderError(f"shader program linking failed: {log}")

        backend.detach_shader(self._program_id, self._vertex_shader_id)
        backend.detach_shader(self._program_id, self._fragment_shader_id)
        backend.delete_shader(self._vertex_shader_id)
        backend.delete_shader(self._fragment_shader_id)
        self._vertex_shader_id = 0
        self._fragment_shader_id = 0

    def use(self) -> None:
        """Make the program current, if there is one."""
        if self._program_id != 0:
            self._backend.use_program(self._program_id)

    def delete(self) -> None:
        """Delete the program and any shaders still held."""
        if self._program_id != 0:
            self._backend.delete_program(self._program_id)
            self._program_id = 0
        if self._vertex_shader_id != 0:
            self._backend.delete_shader(self._vertex_shader_id)
            self._vertex_shader_id = 0
        if self._fragment_shader_id != 0:
            self._backend.delete_shader(self._fragment_shader_id)
            self._fragment_shader_id = 0

    @property
    def program_id(self) -> int:
        """The program handle, 0 while there is none."""
        return self._program_id

    def uniform_location(self, name: str) -> int:
        """Location of a uniform; -1 when no program is linked."""
        if self._program_id == 0:
            return -1
        return self._backend.get_uniform_location(self._program_id, name)

    def set_uniform_mat4(self, location: int, matrix: Sequence[float]) -> None:
        if location >= 0:
            self._backend.uniform_matrix4fv(location, matrix)

    def set_uniform_vec3(self, location: int, vector: Sequence[float]) -> None:
        if location >= 0:
            self._backend.uniform3fv(location, vector)

    def set_uniform_float(self, location: int, value: float) -> None:
        if location >= 0:
            self._backend.uniform1f(location, value)

    def set_uniform_int(self, location: int, value: int) -> None:
        if location >= 0:
            self._backend.uniform1i(location, value)