import numpy as np
import pytest

from magmavoxel.app import MOUSE_LEFT, Game, main
from magmavoxel.camera import Movement
from magmavoxel.world import Voxel, VoxelWorld


def empty_game():
    return Game(world=VoxelWorld())


def test_initial_camera_state():
    game = empty_game()
    assert np.allclose(game.camera.position, [0.0, 30.0, 30.0])
    assert np.isclose(np.linalg.norm(game.camera.front), 1.0)
    assert game.camera.front[1] < 0.0 and game.camera.front[2] < 0.0
    assert game.projectiles == []


def test_default_game_generates_terrain():
    game = Game()
    assert len(game.world.voxels) > 0
    assert all(v.active for v in game.world.voxels.values())


def test_first_mouse_move_has_no_offset():
    game = empty_game()
    game.handle_mouse_move(123.0, 456.0)
    assert game.camera.yaw == pytest.approx(-90.0)
    assert game.camera.pitch == pytest.approx(0.0)
    assert game.first_mouse is False


def test_mouse_move_right_increases_yaw():
    game = empty_game()
    game.handle_mouse_move(100.0, 100.0)
    game.handle_mouse_move(110.0, 100.0)
    assert game.camera.yaw == pytest.approx(-90.0 + 10.0 * game.camera.sensitivity)


def test_mouse_move_up_increases_pitch():
    game = empty_game()
    game.handle_mouse_move(100.0, 100.0)
    game.handle_mouse_move(100.0, 50.0)
    assert game.camera.pitch > 0.0
    assert game.camera.front[1] > 0.0


def test_left_click_fires_bullet_and_flash():
    game = empty_game()
    game.handle_mouse_press(MOUSE_LEFT)
    assert len(game.projectiles) == 2
    speeds = sorted(float(np.linalg.norm(p.velocity)) for p in game.projectiles)
    assert speeds[0] == 0.0 and speeds[1] > 0.0


def test_other_button_does_not_fire():
    game = empty_game()
    game.handle_mouse_press(MOUSE_LEFT + 1)
    assert game.projectiles == []


def test_update_moves_forward():
    game = empty_game()
    start = game.camera.position.copy()
    front = game.camera.front.copy()
    game.update(0.5, {Movement.FORWARD})
    moved = game.camera.position - start
    assert np.allclose(moved, front * game.camera.speed * 0.5)


def test_update_without_keys_keeps_position():
    game = empty_game()
    start = game.camera.position.copy()
    game.update(0.5, set())
    assert np.allclose(game.camera.position, start)


def test_opposite_keys_cancel():
    game = empty_game()
    start = game.camera.position.copy()
    game.update(0.25, {Movement.LEFT, Movement.RIGHT})
    assert np.allclose(game.camera.position, start)


def test_muzzle_flash_expires_bullet_remains():
    game = empty_game()
    game.handle_mouse_press(MOUSE_LEFT)
    game.update(0.1, set())
    assert len(game.projectiles) == 1
    assert float(np.linalg.norm(game.projectiles[0].velocity)) > 0.0


def test_bullet_knocks_out_voxel():
    world = VoxelWorld()
    game = Game(world=world)
    game.camera.position = np.array([0.0, 0.0, 0.0])
    game.camera.front = np.array([0.0, 0.0, -1.0])
    world.voxels[(0, 0, -5)] = Voxel()
    game.handle_mouse_press(MOUSE_LEFT)
    for _ in range(40):
        game.update(0.01, set())
    assert world.voxels[(0, 0, -5)].active is False
    assert game.projectiles == []


def test_main_fails_on_missing_shaders(tmp_path, capsys):
    code = main(["--vertex", str(tmp_path / "x.vert"), "--fragment", str(tmp_path / "x.frag")])
    assert code == 1
    assert "Failed to read shaders" in capsys.readouterr().err