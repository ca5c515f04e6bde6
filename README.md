# magmavoxel

A small first-person voxel sandbox. The package generates hilly terrain from
Perlin noise. You fly over it with the mouse and the WASD keys. Every left
click fires a projectile that knocks out the first block it hits.

## Installing

```
pip install .
```

The game draws with OpenGL 3.3 through `pyglet`. `numpy` does the vector
and matrix work.

## Playing

```
magmavoxel
```

Options:

| Option         | Default             | Meaning                     |
|----------------|---------------------|-----------------------------|
| `--vertex`     | `shaders/cube.vert` | vertex shader path          |
| `--fragment`   | `shaders/cube.frag` | fragment shader path        |
| `--width`      | `1920`              | window width in pixels      |
| `--height`     | `1080`              | window height in pixels     |

Shader paths are relative to the directory you start the game from. If a
shader file cannot be read, or the window cannot be created, the command
prints an error and exits with status 1.

Controls:

| Input        | Action                                  |
|--------------|-----------------------------------------|
| Mouse        | Look around                             |
| W / S        | Move forward / backward                 |
| A / D        | Strafe left / right                     |
| Left click   | Fire a projectile, with a muzzle flash  |
| Escape       | Close the window (pyglet's default)     |

## What the package does not include

- **No shader files.** You must supply your own vertex and fragment shaders.
  - The program sets these uniforms: `model`, `view`, `projection`, `lightPos`, `viewPos` and `blockColor`. A uniform the program lacks is ignored.
  - The program needs two vertex attributes. The one at the lowest location receives positions and the next one receives normals.
- **No saving or loading.** There is no save file or level format. The world lives only in memory.
- **Chunks are not drawn.** `VoxelChunk` builds mesh data, but the game draws the world through `VoxelWorld` as one cube per visible voxel.

## Using the pieces as a library

The world, camera and projectile logic do not need a window and can be used
on their own:

```python
import numpy as np

from magmavoxel.camera import Camera, Movement
from magmavoxel.world import VoxelWorld
from magmavoxel.projectiles import fire, step_projectiles
from magmavoxel.transforms import perspective

world = VoxelWorld()
world.generate_terrain(32, 32, 8)

camera = Camera(np.array([0.0, 30.0, 30.0]))
camera.process_mouse_movement(0.0, -200.0)     # look down
camera.process_keyboard(Movement.FORWARD, 0.5)

projectiles = fire(camera)
projectiles = step_projectiles(projectiles, world, 0.016)

view_proj = perspective(np.radians(60.0), 16 / 9, 0.1, 100.0) @ camera.view_matrix()
for position in world.visible_voxels(view_proj):
    ...
```

`visible_voxels` returns positions farthest first. It drops:

- inactive voxels,
- voxels farther than 400 units,
- fully enclosed voxels,
- off-screen voxels.

Other pieces:

- `magmavoxel.app.Game`: camera, world and projectiles, driven by `handle_mouse_move`, `handle_mouse_press` and `update`.
- `magmavoxel.transforms`: `normalize`, `look_at`, `perspective`, `translation` and `scaling`. They produce 4×4 numpy matrices that multiply column vectors.
- `magmavoxel.noise.perlin_noise3`: classic 3D Perlin noise with optional power-of-two wrapping.
- `magmavoxel.chunk.VoxelChunk`: a 16×16×16 chunk that builds a face-culled triangle mesh (`update_mesh`, `vertex_count`, `mesh_data`).
- `magmavoxel.voxel_utils.to_chunk_pos` / `to_local_pos`: convert world voxel coordinates into chunk and in-chunk coordinates.
- `magmavoxel.rendering`:
  - `Shader`, built from sources or with `Shader.from_files`.
  - `CubeRenderer`.
  - `cube_vertices`.
  - `load_shader_sources`.

## Running the tests

```
pip install .[test]
pytest
```