import math

import pytest

from tinyengine.camera import Camera2D
from tinyengine.constants import EPSILON
from tinyengine.vector import Vector2


def test_default_camera():
    camera = Camera2D()
    assert camera.position == Vector2(0, 0)
    assert camera.zoom == 1.0
    assert camera.rotation == 0.0


def test_camera_with_values():
    position = Vector2(10, 5)
    camera = Camera2D(position, 2.0, math.pi / 4)
    assert camera.position == position
    assert camera.zoom == 2.0
    assert camera.rotation == math.pi / 4


def test_view_matrix():
    camera = Camera2D(Vector2(5, 3), 2.0, 0)
    view_point = camera.view_matrix().transform_point(Vector2(10, 8))
    assert view_point.x == pytest.approx(10.0, abs=EPSILON)
    assert view_point.y == pytest.approx(10.0, abs=EPSILON)


def test_projection_matrix():
    camera = Camera2D()
    screen_point = camera.projection_matrix(800.0, 600.0).transform_point(Vector2(0, 0))
    assert screen_point.x == 400.0
    assert screen_point.y == 300.0


def test_view_projection_matrix_maps_origin_to_center():
    camera = Camera2D()
    screen_point = camera.view_projection_matrix(800.0, 600.0).transform_point(Vector2(0, 0))
    assert screen_point.x == pytest.approx(400.0)
    assert screen_point.y == pytest.approx(300.0)


def test_screen_to_world():
    camera = Camera2D()
    world_point = camera.screen_to_world(Vector2(400, 300), 800.0, 600.0)
    assert world_point.x == pytest.approx(0.0, abs=EPSILON)
    assert world_point.y == pytest.approx(0.0, abs=EPSILON)


def test_screen_to_world_singular_view_falls_back_to_origin():
    camera = Camera2D(Vector2(3, 4), 0.0, 0.0)
    assert camera.screen_to_world(Vector2(100, 100), 800.0, 600.0) == Vector2(0, 0)


def test_world_to_screen():
    camera = Camera2D()
    screen_point = camera.world_to_screen(Vector2(0, 0), 800.0, 600.0)
    assert screen_point.x == pytest.approx(400.0, abs=EPSILON)
    assert screen_point.y == pytest.approx(300.0, abs=EPSILON)


def test_screen_world_round_trip():
    camera = Camera2D(Vector2(10, 5), 1.5, math.pi / 6)
    original = Vector2(20, 15)
    screen_point = camera.world_to_screen(original, 800.0, 600.0)
    back = camera.screen_to_world(screen_point, 800.0, 600.0)
    assert back.x == pytest.approx(original.x, abs=1e-8)
    assert back.y == pytest.approx(original.y, abs=1e-8)


def test_set_position():
    camera = Camera2D()
    camera.position = Vector2(15, 25)
    assert camera.position == Vector2(15, 25)


def test_set_zoom():
    camera = Camera2D()
    camera.set_zoom(2.5)
    assert camera.zoom == 2.5
    camera.set_zoom(-1.0)
    assert camera.zoom == 2.5
    camera.set_zoom(0.0)
    assert camera.zoom == 2.5


def test_set_rotation_degrees():
    camera = Camera2D()
    camera.set_rotation_degrees(90)
    assert camera.rotation == pytest.approx(math.pi / 2, abs=EPSILON)


def test_move():
    camera = Camera2D(Vector2(5, 3), 1.0, 0.0)
    camera.move(Vector2(2, 4))
    assert camera.position == Vector2(7, 7)


def test_zoom_by():
    camera = Camera2D(Vector2(0, 0), 2.0, 0.0)
    camera.zoom_by(1.5)
    assert camera.zoom == 3.0
    camera.zoom_by(-1.0)
    assert camera.zoom == 3.0
    camera.zoom_by(0.0)
    assert camera.zoom == 3.0


def test_rotate():
    camera = Camera2D(Vector2(0, 0), 1.0, math.pi / 4)
    camera.rotate(math.pi / 4)
    assert camera.rotation == pytest.approx(math.pi / 2, abs=EPSILON)


def test_rotate_degrees():
    camera = Camera2D()
    camera.rotate_degrees(45)
    camera.rotate_degrees(45)
    assert camera.rotation == pytest.approx(math.pi / 2, abs=EPSILON)


def test_bounds():
    camera = Camera2D()
    low, high = camera.bounds(800.0, 600.0)
    assert low.x < 0
    assert low.y < 0
    assert high.x > 0
    assert high.y > 0


def test_look_at():
    camera = Camera2D()
    camera.look_at(Vector2(100, 50))
    assert camera.position == Vector2(100, 50)


def test_follow_target():
    camera = Camera2D()
    camera.follow_target(Vector2(10, 5), 5.0, 1.0)
    distance = camera.position.distance(Vector2(0, 0))
    assert distance > 0
    assert distance <= 5.0


def test_follow_target_reaches_close_target():
    camera = Camera2D()
    camera.follow_target(Vector2(1, 1), 10.0, 1.0)
    assert camera.position == Vector2(1, 1)


def test_follow_target_already_at_target():
    target = Vector2(5, 3)
    camera = Camera2D(target, 1.0, 0.0)
    camera.follow_target(target, 5.0, 1.0)
    assert camera.position == target


def test_follow_target_invalid_parameters():
    camera = Camera2D()
    original = camera.position
    camera.follow_target(Vector2(10, 5), -1.0, 1.0)
    assert camera.position == original
    camera.follow_target(Vector2(10, 5), 5.0, -1.0)
    assert camera.position == original