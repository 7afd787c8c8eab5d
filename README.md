# voxplay

Building blocks for a small voxel renderer, written in plain Python on top of
numpy.

## Modules

- `voxplay.grid`: `UniformGrid3D`, a 32×32×32 binary voxel grid stored as
  32-bit words along y (columns), x (rows) and z (depths). `set_value` keeps
  all three layouts in step; `set_column`, `set_row` and `set_depth` overwrite
  only their own layout. `Octree` holds a node value and, after `subdivide()`,
  eight children.
- `voxplay.world`: `World` holds one grid and the triangle list meshed from
  it. `fill_noise(seed)` builds gradient-noise terrain (each column 1 to 31
  voxels tall), `fill`, `fill_plane` and `fill_sphere` set voxels, and
  `update()` turns runs of filled voxels along each axis into faces stored in
  `world.vertices`. `generate_noise(seed)` does both. Helpers `create_mask`,
  `get_info` and `generate_face` are exposed as well.
- `voxplay.camera`: `PerspectiveCamera` and `OrthographicCamera`, with
  `update()` recomputing view and projection matrices and
  `view_projection_matrix()` returning their product. `to_degree` wraps an
  angle into (-360, 360).
- `voxplay.transform`: matrix helpers (`translate`, `rotate`, `scale`,
  `perspective`, `ortho`, `look_at`) and `Voxel`, a type tag with its own
  transform.
- `voxplay.types`: `Vertex` (frozen, hashable), `Instance` with
  `update()` building an `InstanceBuffer`, `Mesh`,
  `DrawElementsIndirectCommand` with `pack()`, and the enums `VertexDraw`,
  `VertexType` and `Primitive`.
- `voxplay.obj_loader`: `parse_obj(lines)` and `load_obj(path)` read
  Wavefront OBJ objects (`o`, `v`, `vt`, `vn`, `f`), split quads into two
  triangles and reuse identical vertices. Face corners must be written as
  `position/texcoord/normal`.
- `voxplay.model`: `Model` (meshes from one OBJ file plus its instances) and
  `ResourceManager`, which numbers models in load order.
- `voxplay.lights`: `Light`, `DirectionalLight` and `PointLight`, each
  carrying an id.
- `voxplay.ecs`: `Registry` and `Entity`, a small component store looked up
  by component type.
- `voxplay.buffer`: `Buffer`, an in-memory byte buffer split into partitions
  that grows when `upsert` writes past a partition's end.
- `voxplay.input`: `KeyboardKey`, `MouseButton` and `KeyAction` codes, and
  `Input`, which records key, button, cursor and scroll state.
- `voxplay.timing`: `FrameClock`, giving delta time and an FPS average over
  up to 60 frames.
- `voxplay.controls`: `CameraController`, which moves and turns a camera from
  an `Input` state (W/S/A/D/E/Q, scroll wheel, left-button drag).
- `voxplay.debug`: `log` and `benchmark`.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from voxplay.world import World
from voxplay.camera import PerspectiveCamera

world = World(seed=42)
print(len(world.vertices), "vertices")

camera = PerspectiveCamera()
camera.set_position(0.0, 0.0, 20.0)
camera.set_projection(45.0, 0.01, 10000.0)
camera.set_viewport_size(800.0, 600.0)
camera.update()
print(camera.view_projection_matrix())
```

Reading a mesh:

```python
from voxplay.model import ResourceManager

resources = ResourceManager()
model = resources.load_model("cube.obj")
print(len(model.vertices()), len(model.indices()))
```

## Command line

```
voxplay
```

builds a noise-terrain chunk and prints its vertex and triangle counts.
Options:

- `--seed N`: noise seed (default: the current time).
- `--shape {noise,fill,plane,sphere}`: what to fill the chunk with.
- `--benchmark ITERATIONS`: time the meshing over that many runs and print
  the average in milliseconds.

For example:

```
voxplay --shape sphere --benchmark 10
```

## What it does not do

There is no window, no GPU rendering, no shader or texture handling and no
on-screen control panel. Meshes, matrices and buffers are computed in memory
and left for the caller to draw; `Input` only records the state it is told
about, and nothing reads a real keyboard or mouse.