"""Shader sources loaded from .vert/.frag/.geom files sharing one stem."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from alers.ids import next_id

log = logging.getLogger(__name__)


@dataclass
class Shader:
    """Vertex, fragment and optional geometry shader sources."""

    vertex_shader: str
    fragment_shader: str
    geometry_shader: Optional[str] = None
    id: int = field(default_factory=next_id)

    @property
    def uid(self) -> int:
        return self.id


class ShaderLoadError(Exception):
    """A required shader source file could not be read."""

    def __init__(self, error: OSError, shader: str, path: str):
        super().__init__(
            f"shader source could not be read\nPath: {path}\nShader: {shader}\nError: {error}"
        )
        self.error = error
        self.shader = shader
        self.path = path


def _read_required(path: str, shader: str) -> str:
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError as err:
        raise ShaderLoadError(err, shader, path) from err


class ShaderLoader:
    """Reads <path>.vert and <path>.frag, plus <path>.geom when it exists."""

    def load(self, path: str) -> List[Shader]:
        vertex_path = f"{path}.vert"
        fragment_path = f"{path}.frag"
        geometry_path = f"{path}.geom"
        log.info("shader_load, vertex: %s", vertex_path)
        log.info("shader_load, fragment: %s", fragment_path)
        log.info("shader_load, geom: %s", geometry_path)

        vertex = _read_required(vertex_path, "vertex shader")
        fragment = _read_required(fragment_path, "fragment shader")
        try:
            with open(geometry_path, encoding="utf-8") as handle:
                geometry: Optional[str] = handle.read()
        except OSError:
            geometry = None
        return [Shader(vertex, fragment, geometry)]