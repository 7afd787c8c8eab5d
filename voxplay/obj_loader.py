"""A reader for Wavefront OBJ geometry with per-corner vertex de-duplication."""

from __future__ import annotations

import os
from typing import Iterable

from voxplay.types import Mesh, Vertex


def _components(words: list[str], count: int, command: str) -> tuple[float, ...]:
    if len(words) > count:
        raise ValueError(f"'{command}' takes at most {count} components")
    values = [float(word) for word in words]
    return tuple(values + [0.0] * (count - len(values)))


def _face_corner(text: str) -> tuple[int, int, int]:
    tokens = text.split("/")
    if len(tokens) != 3:
        raise ValueError(f"face corner {text!r} must be position/texcoord/normal")
    position, tex_coord, normal = (int(token) - 1 for token in tokens)
    return position, tex_coord, normal


def _lookup(items: list, index: int, kind: str):
    if not 0 <= index < len(items):
        raise ValueError(f"{kind} index {index + 1} out of range")
    return items[index]


def parse_obj(lines: Iterable[str]) -> list[Mesh]:
    """Parse OBJ text lines into meshes; quads are split into two triangles."""
    meshes: list[Mesh] = []
    positions: list[tuple[float, ...]] = []
    tex_coords: list[tuple[float, ...]] = []
    normals: list[tuple[float, ...]] = []
    unique: dict[Vertex, int] = {}

    for line in lines:
        if line.startswith("#"):
            continue
        words = line.split()
        if not words:
            continue
        command, args = words[0], words[1:]

        if command == "o":
            meshes.append(Mesh(args[0] if args else ""))
        elif command == "v":
            positions.append(_components(args, 3, command))
        elif command == "vt":
            tex_coords.append(_components(args, 2, command))
        elif command == "vn":
            normals.append(_components(args, 3, command))
        elif command == "f":
            if not meshes:
                raise ValueError("face defined before any object ('o') line")
            corners = [_face_corner(word) for word in args]
            if len(corners) == 4:
                a, b, c, d = corners
                corners = [a, b, c, a, c, d]

            mesh = meshes[-1]
            offset = sum(len(m.vertices) for m in meshes[:-1])
            for p, t, n in corners:
                vertex = Vertex(
                    position=_lookup(positions, p, "position"),
                    normal=_lookup(normals, n, "normal"),
                    tex_coord=_lookup(tex_coords, t, "texture coordinate"),
                )
                index = unique.get(vertex)
                if index is None:
                    index = offset + len(mesh.vertices)
                    mesh.vertices.append(vertex)
                    unique[vertex] = index
                mesh.indices.append(index)
    return meshes


def load_obj(path: str | os.PathLike) -> list[Mesh]:
    """Read meshes from an OBJ file."""
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle)