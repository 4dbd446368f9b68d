"""Loading of Wavefront OBJ meshes and their MTL materials."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .bounds import FLT_MAX, Bounds, Vec3, bounds_of

log = logging.getLogger(__name__)

Vec2 = Tuple[float, float]


@dataclass
class Vertex:
    """A mesh vertex with a position and a texture coordinate."""

    position: Vec3 = (0.0, 0.0, 0.0)
    tex_coord: Vec2 = (0.0, 0.0)


@dataclass
class Material:
    """Surface properties read from an MTL file."""

    name: str = ""
    ambient: Vec3 = (1.0, 1.0, 1.0)
    diffuse: Vec3 = (1.0, 1.0, 1.0)
    specular: Vec3 = (1.0, 1.0, 1.0)
    shininess: float = 32.0
    diffuse_texture: str = ""


def _tokens(line: str) -> list[str]:
    return [token for token in line.strip().split(" ") if token]


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _require(parts: list[str], count: int, line: str) -> None:
    if len(parts) < count:
        raise ValueError(f"malformed line: {line.strip()!r}")


def _vec3(parts: list[str], line: str) -> Vec3:
    _require(parts, 4, line)
    return (_to_float(parts[1]), _to_float(parts[2]), _to_float(parts[3]))


def _open_text(path):
    return open(path, encoding="utf-8", errors="replace")


def load_mtl(mtl_path) -> tuple[Material, Optional[str]]:
    """Read an MTL file and return its material and texture path.

    The texture path is resolved against the directory of the MTL file and is
    ``None`` when the file names no diffuse map.
    """
    log.info("loading material: %s", mtl_path)
    material = Material()
    texture_path: Optional[str] = None
    directory = os.path.dirname(os.path.abspath(mtl_path))
    with _open_text(mtl_path) as stream:
        for line in stream:
            parts = _tokens(line)
            if not parts:
                continue
            keyword = parts[0]
            if keyword == "map_Kd":
                _require(parts, 2, line)
                texture_path = os.path.join(directory, parts[1])
                log.info("texture path: %s", texture_path)
            elif keyword == "Kd":
                material.diffuse = _vec3(parts, line)
            elif keyword == "Ks":
                material.specular = _vec3(parts, line)
            elif keyword == "Ns":
                _require(parts, 2, line)
                material.shininess = _to_float(parts[1])
            elif keyword == "Ka":
                material.ambient = _vec3(parts, line)
    return material, texture_path


def retrieve_mtl_path(obj_path) -> Optional[str]:
    """Return the MTL file named by the first ``mtllib`` line of an OBJ file.

    Returns ``None`` when the OBJ file cannot be read or names no library.
    """
    try:
        stream = _open_text(obj_path)
    except OSError:
        return None
    with stream:
        for line in stream:
            line = line.strip()
            if line.startswith("mtllib"):
                parts = line.split(" ")
                if len(parts) < 2:
                    return None
                directory = os.path.dirname(os.path.abspath(obj_path))
                return os.path.join(directory, parts[1])
    return None


def load_vertices(obj_path) -> list[Vertex]:
    """Read an OBJ file and return the vertices of its triangles in order.

    Only the first three corners of each face are used. Indices that do not
    name a known position or texture coordinate leave that attribute at its
    default.
    """
    log.info("loading vertices: %s", obj_path)
    positions: list[Vec3] = []
    tex_coords: list[Vec2] = []
    vertices: list[Vertex] = []
    with _open_text(obj_path) as stream:
        for line in stream:
            parts = _tokens(line)
            if not parts:
                continue
            keyword = parts[0]
            if keyword == "v":
                positions.append(_vec3(parts, line))
            elif keyword == "vt":
                _require(parts, 3, line)
                tex_coords.append((_to_float(parts[1]), _to_float(parts[2])))
            elif keyword == "f":
                _require(parts, 4, line)
                vertices.extend(
                    _face_vertex(corner, positions, tex_coords) for corner in parts[1:4]
                )
    return vertices


def _face_vertex(corner: str, positions: list[Vec3], tex_coords: list[Vec2]) -> Vertex:
    indices = corner.split("/")
    vertex = Vertex()
    pos_index = _to_int(indices[0]) - 1
    if 0 <= pos_index < len(positions):
        vertex.position = positions[pos_index]
    if len(indices) > 1 and indices[1]:
        tex_index = _to_int(indices[1]) - 1
        if 0 <= tex_index < len(tex_coords):
            vertex.tex_coord = tex_coords[tex_index]
    return vertex


def file_size(obj_path) -> int:
    """Return the size of the file in bytes, or 0 when it cannot be read."""
    try:
        return os.path.getsize(obj_path)
    except OSError:
        return 0


@dataclass(init=False)
class ModelData:
    """A mesh loaded from an OBJ file together with its material."""

    obj_path: str
    vertices: list[Vertex] = field(default_factory=list)
    material: Material = field(default_factory=Material)
    texture_path: Optional[str] = None
    bounds: Bounds = field(default_factory=Bounds)

    def __init__(self, obj_path) -> None:
        self.obj_path = str(obj_path)
        self.vertices = load_vertices(obj_path)
        self.material = Material()
        self.texture_path = None
        mtl_path = retrieve_mtl_path(obj_path)
        log.info("material path: %s", mtl_path)
        if mtl_path is None:
            log.warning("no material library in %s", obj_path)
        else:
            try:
                self.material, self.texture_path = load_mtl(mtl_path)
            except OSError:
                log.error("cannot open file: %s", mtl_path)
        self.bounds = self.calculate_bounds()

    def calculate_bounds(self) -> Bounds:
        """Return the bounds of all vertex positions."""
        return bounds_of(vertex.position for vertex in self.vertices)

    def calculate_center(self) -> Vec3:
        """Return the midpoint of the box around all vertex positions."""
        lo = [FLT_MAX] * 3
        hi = [-FLT_MAX] * 3
        for vertex in self.vertices:
            for axis, value in enumerate(vertex.position):
                lo[axis] = min(lo[axis], value)
                hi[axis] = max(hi[axis], value)
        return tuple((a + b) / 2.0 for a, b in zip(lo, hi))