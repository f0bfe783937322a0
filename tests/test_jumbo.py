import math
import random

import pytest

from blobarena.jumbo import Jumbo


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def polygon(self, points, fill):
        self.calls.append((points, fill))


def make_jumbo(x=960.0, y=520.0, size=20, speed=1.0, seed=5):
    return Jumbo(x, y, size, speed, (10, 20, 30), rng=random.Random(seed))


def test_triangle_corners_lie_on_circle():
    j = make_jumbo()
    points = j.triangle_points()
    assert len(points) == 3
    for px, py in points:
        assert math.hypot(px - j.x, py - j.y) == pytest.approx(j.size, abs=1.5)


def test_render_shifts_and_draws_triangle():
    canvas = RecordingCanvas()
    j = make_jumbo()
    j.render(canvas, 100.0, 20.0)
    assert (j.x, j.y) == (960.0 - 100.0, 520.0 - 20.0)
    assert canvas.calls == [(j.triangle_points(), (10, 20, 30))]


def test_follows_hero_at_follow_speed():
    j = make_jumbo()
    start = (j.x, j.y)
    j.move(0.05, j.x + 50.0, j.y)
    moved = math.hypot(j.x - start[0], j.y - start[1])
    assert moved == pytest.approx(1.0 * 120.0 * 0.05)


def test_wanders_at_varied_speed_when_hero_far():
    j = make_jumbo()
    start = (j.x, j.y)
    j.move(0.05, -5000.0, -5000.0)
    moved = math.hypot(j.x - start[0], j.y - start[1])
    assert 0.95 * 80.0 * 0.05 - 1e-6 <= moved <= 1.05 * 80.0 * 0.05 + 1e-6


def test_bounces_off_left_edge_heading_down():
    j = make_jumbo(x=-100.0)
    j.move(0.01, 5000.0, 5000.0)
    assert j.x == 20.0
    tip = j.triangle_points()[0]
    assert tip[1] > j.y


def test_bounces_off_right_edge_heading_up():
    j = make_jumbo(x=3000.0)
    j.move(0.01, -5000.0, 5000.0)
    assert j.x == 1920.0 - 20
    tip = j.triangle_points()[0]
    assert tip[1] < j.y


def test_stays_inside_arena():
    j = make_jumbo(x=25.0, y=25.0, speed=8.0, seed=9)
    for _ in range(300):
        j.move(0.2, -9000.0, -9000.0)
        assert j.size <= j.x <= 1920.0 - j.size
        assert j.size <= j.y <= 1040.0 - j.size


def test_update_sets_values_without_limits():
    j = make_jumbo()
    j.update(40.0, 60.0, 300, 0.0)
    assert (j.x, j.y, j.size, j.speed) == (40.0, 60.0, 300, 0.0)
    for px, py in j.triangle_points():
        assert math.hypot(px - j.x, py - j.y) == pytest.approx(300, abs=1.5)