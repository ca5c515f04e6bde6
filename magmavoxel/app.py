"""The game: state, input handling, per-frame update and the window loop."""

from __future__ import annotations

import argparse
import math
import sys

import numpy as np

from .camera import Camera, Movement
from .projectiles import GUN_PARTS, Projectile, fire, step_projectiles
from .rendering import CubeRenderer, Shader, load_shader_sources
from .transforms import normalize, perspective, scaling, translation
from .world import VoxelWorld

MOUSE_LEFT = 1
START_POSITION = (0.0, 30.0, 30.0)
START_FRONT = (0.0, -0.5, -1.0)
TERRAIN_SIZE = (32, 32, 8)
FIELD_OF_VIEW = 60.0
NEAR_PLANE = 0.1
FAR_PLANE = 100.0
SKY_COLOR = (0.52, 0.80, 0.92, 1.0)
GROUND_COLOR = (0.2, 0.8, 0.2)
LIGHT_POSITION = (10.0, 10.0, 10.0)
GUN_OFFSET = (0.3, -0.3, -1.5)
FLASH_COLOR = (1.5, 1.2, 0.0)
BULLET_COLOR = (1.0, 0.2, 0.2)


class Game:
    """Camera, world and projectiles, driven by input events."""

    def __init__(self, world: VoxelWorld | None = None) -> None:
        self.camera = Camera(START_POSITION)
        self.camera.front = normalize(START_FRONT)
        if world is None:
            world = VoxelWorld()
            world.generate_terrain(*TERRAIN_SIZE)
        self.world = world
        self.projectiles: list[Projectile] = []
        self.last_x = 400.0
        self.last_y = 300.0
        self.first_mouse = True

    def handle_mouse_move(self, xpos: float, ypos: float) -> None:
        """Turn the camera from a cursor position (y grows downwards)."""
        if self.first_mouse:
            self.last_x = float(xpos)
            self.last_y = float(ypos)
            self.first_mouse = False

        x_offset = float(xpos) - self.last_x
        y_offset = self.last_y - float(ypos)
        self.last_x = float(xpos)
        self.last_y = float(ypos)
        self.camera.process_mouse_movement(x_offset, y_offset)

    def handle_mouse_press(self, button: int) -> None:
        """Fire on a left-button press."""
        if button == MOUSE_LEFT:
            self.projectiles.extend(fire(self.camera))

    def update(self, delta_time: float, pressed_keys) -> None:
        """Move the camera for held directions and advance projectiles."""
        held = set(pressed_keys)
        for movement in Movement:
            if movement in held:
                self.camera.process_keyboard(movement, delta_time)
        self.projectiles = step_projectiles(self.projectiles, self.world, delta_time)


def _draw_frame(game: Game, shader: Shader, renderer: CubeRenderer, aspect: float) -> None:
    view = game.camera.view_matrix()
    projection = perspective(math.radians(FIELD_OF_VIEW), aspect, NEAR_PLANE, FAR_PLANE)
    view_proj = projection @ view

    shader.use()
    shader.set_mat4("view", view)
    shader.set_mat4("projection", projection)
    shader.set_vec3("lightPos", LIGHT_POSITION)
    shader.set_vec3("viewPos", game.camera.position)

    shader.set_vec3("blockColor", GROUND_COLOR)
    game.world.draw(renderer, shader, view_proj)

    for projectile in game.projectiles:
        still = float(np.linalg.norm(projectile.velocity)) < 0.01
        size = 0.15 if still else 0.2
        model = translation(projectile.position) @ scaling(size)
        shader.set_mat4("model", model)
        shader.set_vec3("blockColor", FLASH_COLOR if still else BULLET_COLOR)
        renderer.draw(shader)

    cam_rot = np.identity(4)
    cam_rot[:3, :3] = view[:3, :3]
    gun_vp = projection @ cam_rot @ translation(GUN_OFFSET)
    for part in GUN_PARTS:
        model = translation(part.offset) @ scaling(part.scale)
        shader.set_mat4("model", gun_vp @ model)
        shader.set_vec3("blockColor", part.color)
        renderer.draw(shader)


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="magmavoxel", description="Voxel shooter.")
    parser.add_argument("--vertex", default="shaders/cube.vert", help="vertex shader path")
    parser.add_argument("--fragment", default="shaders/cube.frag", help="fragment shader path")
    parser.add_argument("--width", type=int, default=1920)
    parser.add_argument("--height", type=int, default=1080)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parse_args(argv)
    try:
        vertex_source, fragment_source = load_shader_sources(args.vertex, args.fragment)
    except OSError as exc:
        print(f"Failed to read shaders: {exc}", file=sys.stderr)
        return 1

    import pyglet
    from pyglet import gl
    from pyglet.window import key

    config = gl.Config(major_version=3, minor_version=3, depth_size=24, double_buffer=True)
    try:
        window = pyglet.window.Window(
            args.width, args.height, caption="Magma Voxel", config=config
        )
    except pyglet.window.NoSuchConfigException as exc:
        print(f"Failed to create window: {exc}", file=sys.stderr)
        return 1

    window.set_exclusive_mouse(True)
    keys = key.KeyStateHandler()
    window.push_handlers(keys)
    bindings = {
        key.W: Movement.FORWARD,
        key.S: Movement.BACKWARD,
        key.A: Movement.LEFT,
        key.D: Movement.RIGHT,
    }

    gl.glEnable(gl.GL_DEPTH_TEST)
    gl.glDisable(gl.GL_CULL_FACE)
    gl.glClearColor(*SKY_COLOR)

    shader = Shader(vertex_source, fragment_source)
    renderer = CubeRenderer()
    game = Game()
    cursor = [game.last_x, game.last_y]
    aspect = args.width / args.height

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        cursor[0] += dx
        cursor[1] -= dy
        game.handle_mouse_move(cursor[0], cursor[1])

    @window.event
    def on_mouse_drag(x, y, dx, dy, buttons, modifiers):
        on_mouse_motion(x, y, dx, dy)

    @window.event
    def on_mouse_press(x, y, button, modifiers):
        game.handle_mouse_press(button)

    @window.event
    def on_draw():
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        _draw_frame(game, shader, renderer, aspect)

    def tick(dt):
        game.update(dt, {movement for symbol, movement in bindings.items() if keys[symbol]})

    pyglet.clock.schedule(tick)
    try:
        pyglet.app.run()
    finally:
        renderer.delete()
    return 0