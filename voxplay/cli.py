"""Command line entry: build the voxel scene and report its mesh."""

from __future__ import annotations

import argparse

from voxplay.camera import PerspectiveCamera
from voxplay.debug import benchmark
from voxplay.world import World

SHAPES = ("noise", "fill", "plane", "sphere")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="voxplay", description="Generate a voxel chunk and mesh it."
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="noise seed (default: current time)")
    parser.add_argument("--shape", choices=SHAPES, default="noise",
                        help="what to fill the chunk with")
    parser.add_argument("--benchmark", type=int, default=0, metavar="ITERATIONS",
                        help="time the meshing over this many iterations")
    return parser


def _build_camera() -> PerspectiveCamera:
    camera = PerspectiveCamera()
    camera.set_position(0.0, 0.0, 20.0)
    camera.set_projection(45, 0.01, 10000.0)
    camera.update()
    return camera


def _build_world(seed: int | None, shape: str) -> World:
    world = World(seed)
    if shape != "noise":
        world.grid.clear()
        fillers = {
            "fill": world.fill,
            "plane": world.fill_plane,
            "sphere": world.fill_sphere,
        }
        fillers[shape](world.grid.size())
        world.update()
    return world


def main(argv=None) -> int:
    args = _parser().parse_args(argv)
    if args.benchmark < 0:
        _parser().error("--benchmark must not be negative")

    _build_camera()
    world = _build_world(args.seed, args.shape)

    if args.benchmark:
        benchmark("generate_vertex_buffer()", world.update, args.benchmark)

    count = len(world.vertices)
    print(f"vertices: {count}")
    print(f"triangles: {count // 3}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())