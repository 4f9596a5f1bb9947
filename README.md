# alers

Building blocks for small game engines, in plain Python: geometry, signed
distance fields, textures and shaders, resource stores, input events, frame
timing, UI layout and an entity world.

## Modules

- `alers.ids`: `next_id()` hands out integers unique within the process; meshes,
  textures and shaders take their `id` from it.
- `alers.mesh`: `VertexBuffer` holds flat data as rows of named attributes
  (`offset`, `column_len`, `row_len`). `Mesh` has the built-in shapes
  `Mesh.new_cube()`, `Mesh.new_plane()`, `Mesh.new_ndc_plane()` and
  `Mesh.new_bounding_box()`, `bounding_box_matrix()` (a 4x4 numpy array),
  `tri_len()` and `tri_get(i)`, which returns a `Tri` with positions, normals,
  UVs and the face normal. `tri_get` needs position, normal and uv attributes
  and raises `ValueError` otherwise. `mesh_triangle_iter(mesh)` yields triples
  of points read straight from the vertex data.
- `alers.sdf`: `closest_point_on_triangle`, `build_mesh_sdf(mesh, resolution)`
  (a `MeshSDF` sampled on a resolution³ grid around the bounding box, enlarged by
  a fifth of its size on each side), `find_quadrant`, `sdf_distance(sdf, point,
  transform)` with a 4x4 transform, `sign`, and `Ray` with `position_at(t)`,
  which clamps `t` to the ray's range.
- `alers.texture`: `Texture.load(path)` reads images through Pillow as 8-bit RGB,
  or Radiance `.hdr` files as float RGB, with rows flipped so the bottom row
  comes first. Failures raise `TextureLoadError`. Also `read_hdr`,
  `flip_vertically`, `TextureLoader`, and the enums `PixelFormat`,
  `TextureWrapType` and `TextureMagnificationType`.
- `alers.shader`: `ShaderLoader().load(path)` reads `<path>.vert` and
  `<path>.frag`, plus `<path>.geom` when it exists, into a `Shader`. A missing
  vertex or fragment file raises `ShaderLoadError`.
- `alers.stash`: `Stash(loader, root)` keeps resources under integer keys
  (`load`, `register`, `get`, `remove`, iteration). `load` resolves its argument
  with `find_resource_path(path, root)`, which gives `<root>/resources/<path>`.
- `alers.input`: the `Key`, `Action`, `MouseButton` and `Modifier` enums, the
  event types `KeyInput`, `MouseMotion`, `MouseButtonInput` and `CharInput`,
  and `MouseTracker`, which turns absolute cursor positions into motion events
  whose relative part is a fraction of the window size.
- `alers.display`: `Rect`, `TargetMonitor` and `DisplaySetting`.
- `alers.tick`: `FixedStep(frame_step, clock=None)` splits the time since the
  last `prepare_tick()` into steps of at most `frame_step`; a clock function can
  be passed in for testing.
- `alers.variable`: `Variable` and `to_variable(value, name)` for named floats,
  bools and 3- or 4-component vectors, with `name_str()`, `value_str()`,
  `as_float()` and `as_bool()`.
- `alers.layout`: `Layout`, `NoLayout` and `TableLayout` (`add_row`,
  `add_column`, `arrange`). Bad row indexes raise `RowNotFoundError`.
- `alers.widgets`: `Empty`, `Text`, `Button` (hover and press state from input
  events, `current_color()`), `Panel` (`push`, `resize`, `refresh_layout`,
  `input`) and `Panels`.
- `alers.world`: `World` stores entities that implement `Spawnable`, indexed by
  the component kinds registered for their type. Commands (`SpawnCommand`,
  `KillCommand`) go through `command_sender().send(...)` and are carried out by
  `resolve_world_commands()`. `visit(component_type, visitor)` accepts a
  callable or an object with a `visit` method. `Tickable` and `Inputable` are
  the other component kinds.
- `alers.eventstream`: `EventStreamBuffer`, a fixed-size ring of events sent to
  everyone or to chosen reader ids, and `EventStreamReader.try_read()`.
- `alers.tetris_templates`: `Templates` with the block shapes of a falling-block
  game, and `random_one_piece(rng=None)`. Note that `add_i()` stores the
  straight piece under `BlockTypeId.ZRIGHT`, replacing the shapes stored there,
  and that `random_one_piece` chooses among the first `len(blocks)` ids.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from alers.mesh import Mesh
from alers.sdf import build_mesh_sdf

cube = Mesh.new_cube()
print(cube.tri_len())          # 12
tri = cube.tri_get(0)
print(tri.position[0])         # (-1.0, -1.0, -1.0)

sdf = build_mesh_sdf(cube, 4)
```

Table layouts divide a parent by relative weights:

```python
from alers.layout import Layout, TableLayout

table = TableLayout()
table.add_row(1.0)
table.add_column(0, 1.0)
table.add_column(0, 1.0)

parent = Layout.new_local((0, 0), (200, 100))
left, right = Layout(), Layout()
table.arrange(parent, [left, right])
print(left.size, right.position)   # (100, 100) (100, 0)
```

## What this package does not do

It opens no windows, draws nothing and plays no game: there is no renderer,
no window or event loop, and no physics. Widgets keep their state and colours
but do not draw themselves. Meshes come only from vertex data you supply or
from the built-in shapes; there is no loader for model files and no font
handling. It has no command-line program.