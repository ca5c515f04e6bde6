"""Shader programs and the unit-cube mesh used to draw every block."""

from __future__ import annotations

from pathlib import Path

import numpy as np

GL_TRIANGLES = 0x0004

_CUBE_VERTICES = (
    # positions            normals
    (-0.5, -0.5, -0.5, 0.0, 0.0, -1.0),
    (0.5, -0.5, -0.5, 0.0, 0.0, -1.0),
    (0.5, 0.5, -0.5, 0.0, 0.0, -1.0),
    (0.5, 0.5, -0.5, 0.0, 0.0, -1.0),
    (-0.5, 0.5, -0.5, 0.0, 0.0, -1.0),
    (-0.5, -0.5, -0.5, 0.0, 0.0, -1.0),

    (-0.5, -0.5, 0.5, 0.0, 0.0, 1.0),
    (0.5, -0.5, 0.5, 0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5, 0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5, 0.0, 0.0, 1.0),
    (-0.5, 0.5, 0.5, 0.0, 0.0, 1.0),
    (-0.5, -0.5, 0.5, 0.0, 0.0, 1.0),

    (-0.5, 0.5, 0.5, -1.0, 0.0, 0.0),
    (-0.5, 0.5, -0.5, -1.0, 0.0, 0.0),
    (-0.5, -0.5, -0.5, -1.0, 0.0, 0.0),
    (-0.5, -0.5, -0.5, -1.0, 0.0, 0.0),
    (-0.5, -0.5, 0.5, -1.0, 0.0, 0.0),
    (-0.5, 0.5, 0.5, -1.0, 0.0, 0.0),

    (0.5, 0.5, 0.5, 1.0, 0.0, 0.0),
    (0.5, 0.5, -0.5, 1.0, 0.0, 0.0),
    (0.5, -0.5, -0.5, 1.0, 0.0, 0.0),
    (0.5, -0.5, -0.5, 1.0, 0.0, 0.0),
    (0.5, -0.5, 0.5, 1.0, 0.0, 0.0),
    (0.5, 0.5, 0.5, 1.0, 0.0, 0.0),

    (-0.5, -0.5, -0.5, 0.0, -1.0, 0.0),
    (0.5, -0.5, -0.5, 0.0, -1.0, 0.0),
    (0.5, -0.5, 0.5, 0.0, -1.0, 0.0),
    (0.5, -0.5, 0.5, 0.0, -1.0, 0.0),
    (-0.5, -0.5, 0.5, 0.0, -1.0, 0.0),
    (-0.5, -0.5, -0.5, 0.0, -1.0, 0.0),

    (-0.5, 0.5, -0.5, 0.0, 1.0, 0.0),
    (0.5, 0.5, -0.5, 0.0, 1.0, 0.0),
    (0.5, 0.5, 0.5, 0.0, 1.0, 0.0),
    (0.5, 0.5, 0.5, 0.0, 1.0, 0.0),
    (-0.5, 0.5, 0.5, 0.0, 1.0, 0.0),
    (-0.5, 0.5, -0.5, 0.0, 1.0, 0.0),
)


def cube_vertices() -> np.ndarray:
    """The unit cube as 36 rows of (x, y, z, nx, ny, nz)."""
    return np.array(_CUBE_VERTICES, dtype=np.float32)


def load_shader_sources(vertex_path, fragment_path) -> tuple[str, str]:
    """Read the vertex and fragment shader sources from disk."""
    return Path(vertex_path).read_text(), Path(fragment_path).read_text()


def _pyglet_program(vertex_source: str, fragment_source: str):
    from pyglet.graphics.shader import Shader as GLShader
    from pyglet.graphics.shader import ShaderProgram

    return ShaderProgram(
        GLShader(vertex_source, "vertex"),
        GLShader(fragment_source, "fragment"),
    )


class Shader:
    """A linked vertex + fragment program with uniform setters.

    Setting a uniform the program does not have is silently ignored,
    as the driver does for an unknown uniform location.
    """

    def __init__(self, vertex_source: str, fragment_source: str, program_factory=None) -> None:
        factory = program_factory or _pyglet_program
        self.program = factory(vertex_source, fragment_source)

    @classmethod
    def from_files(cls, vertex_path, fragment_path, program_factory=None) -> "Shader":
        """Build a shader from source files."""
        vertex_source, fragment_source = load_shader_sources(vertex_path, fragment_path)
        return cls(vertex_source, fragment_source, program_factory)

    def use(self) -> None:
        """Make this program current."""
        self.program.use()

    def _set(self, name: str, value) -> None:
        if name in self.program.uniforms:
            self.program[name] = value

    def set_mat4(self, name: str, value) -> None:
        """Upload a 4x4 matrix (row-major numpy layout) in column-major order."""
        matrix = np.asarray(value, dtype=float)
        if matrix.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
        self._set(name, tuple(float(v) for v in matrix.T.flatten()))

    def set_vec3(self, name: str, value) -> None:
        """Upload a 3-component vector."""
        vec = np.asarray(value, dtype=float)
        if vec.shape != (3,):
            raise ValueError(f"expected a 3-component vector, got shape {vec.shape}")
        self._set(name, tuple(float(v) for v in vec))

    def set_float(self, name: str, value: float) -> None:
        """Upload a float."""
        self._set(name, float(value))

    def set_int(self, name: str, value: int) -> None:
        """Upload an integer."""
        self._set(name, int(value))


def _attribute_names(program) -> tuple[str, str]:
    ordered = sorted(program.attributes.items(), key=lambda item: item[1]["location"])
    if len(ordered) < 2:
        raise ValueError("shader program needs a position and a normal attribute")
    return ordered[0][0], ordered[1][0]


class CubeRenderer:
    """Draws the unit cube with whatever transform the shader holds."""

    def __init__(self) -> None:
        self._vertices = cube_vertices()
        self._vertex_lists: dict[int, object] = {}

    def _vertex_list_for(self, program):
        key = id(program)
        vertex_list = self._vertex_lists.get(key)
        if vertex_list is None:
            position_name, normal_name = _attribute_names(program)
            positions = tuple(float(v) for v in self._vertices[:, :3].flatten())
            normals = tuple(float(v) for v in self._vertices[:, 3:].flatten())
            vertex_list = program.vertex_list(
                len(self._vertices),
                GL_TRIANGLES,
                **{position_name: ("f", positions), normal_name: ("f", normals)},
            )
            self._vertex_lists[key] = vertex_list
        return vertex_list

    def draw(self, shader: Shader) -> None:
        """Draw the 36 cube vertices as triangles with ``shader``."""
        shader.use()
        self._vertex_list_for(shader.program).draw(GL_TRIANGLES)

    def delete(self) -> None:
        """Release the GPU buffers."""
        for vertex_list in self._vertex_lists.values():
            vertex_list.delete()
        self._vertex_lists.clear()

    def __enter__(self) -> "CubeRenderer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.delete()