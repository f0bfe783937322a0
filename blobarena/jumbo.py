"""Large triangular roamer that turns towards the hero when close."""

from __future__ import annotations

import math
import random
from typing import Any

from .circle import ARENA_HEIGHT, ARENA_WIDTH, BLACK, Circle, Color, clamp_to_arena

FOLLOW_THRESHOLD = 200.0
_FULL_TURN = 2.0 * 3.14159265359
_WRAP_TURN = 2 * 3.14159
_TURN_LIMIT = 1.5708
_VARIATION_SCALE = 6.2832
_FOLLOW_SPEED = 120.0
_WANDER_SPEED = 80.0
_BOUNDARY_COOLDOWN = 2.0
_CORNER_OFFSET = 2.0944

_FROM_LEFT = (0.7854, 2.3562)
_FROM_RIGHT = (3.9270, 5.4978)
_FROM_TOP = (0.7854, 2.3562)
_FROM_BOTTOM = (-0.7854, 0.7854)

_rng = random.Random()


class Jumbo(Circle):
    """A big roamer drawn as a triangle pointing where it heads."""

    def __init__(
        self,
        x: float,
        y: float,
        size: int,
        speed: float,
        color: Color = BLACK,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(x, y, size, int(speed), color)
        self.speed = float(speed)
        self._rng = rng if rng is not None else _rng
        self._direction_timer = 0.0
        self._direction_change_interval = 2.5
        self._boundary_cooldown = 0.0
        self._target_angle = self._rng.uniform(0.0, _FULL_TURN)
        self._face(self._target_angle)

    def _face(self, angle: float) -> None:
        self._dir_x = math.cos(angle)
        self._dir_y = math.sin(angle)

    def move(self, delta_time: float, hero_x: float, hero_y: float) -> None:
        """Turn, advance one step and bounce off the arena edges."""
        self._direction_timer += delta_time

        dx = hero_x - self.x
        dy = hero_y - self.y
        distance = math.hypot(dx, dy)
        following = distance < FOLLOW_THRESHOLD
        smoothing = 2.0 - 0.1**delta_time
        current = math.atan2(self._dir_y, self._dir_x)

        if following and distance > 0.1:
            self._target_angle = math.atan2(dy, dx)
        elif self._direction_timer >= self._direction_change_interval:
            target = self._rng.uniform(
                self._target_angle - _TURN_LIMIT, self._target_angle + _TURN_LIMIT
            )
            if target < 0:
                target += _WRAP_TURN
            if target >= _WRAP_TURN:
                target -= _WRAP_TURN
            self._target_angle = target
            self._direction_timer = 0.0
        current += smoothing * (self._target_angle - current)
        self._face(current)

        variation = 0.95 + 0.1 * (self._rng.uniform(0.0, _FULL_TURN) / _VARIATION_SCALE)
        if following:
            step = self.speed * _FOLLOW_SPEED * delta_time
        else:
            step = self.speed * _WANDER_SPEED * variation * delta_time
        self.x += self._dir_x * step
        self.y += self._dir_y * step

        if self._bounce(delta_time):
            self._face(self._target_angle)
        self.x = clamp_to_arena(self.x, self.size, ARENA_WIDTH)
        self.y = clamp_to_arena(self.y, self.size, ARENA_HEIGHT)

    def _bounce(self, delta_time: float) -> bool:
        self._boundary_cooldown -= delta_time
        if self._boundary_cooldown > 0.0:
            return False
        low = float(self.size)
        high_x = ARENA_WIDTH - low
        high_y = ARENA_HEIGHT - low
        hit = False
        if self.x < low:
            self.x = low
            self._target_angle = self._rng.uniform(*_FROM_LEFT)
            hit = True
        elif self.x > high_x:
            self.x = high_x
            self._target_angle = self._rng.uniform(*_FROM_RIGHT)
            hit = True
        if self.y < low:
            self.y = low
            self._target_angle = self._rng.uniform(*_FROM_TOP)
            hit = True
        elif self.y > high_y:
            self.y = high_y
            self._target_angle = self._rng.uniform(*_FROM_BOTTOM)
            hit = True
        if hit:
            self._boundary_cooldown = _BOUNDARY_COOLDOWN
        return hit

    def update(self, x: float, y: float, size: int, speed: float) -> None:
        """Reposition and pick a fresh random heading."""
        self.x = float(x)
        self.y = float(y)
        self.size = int(size)
        self.speed = float(speed)
        self._target_angle = self._rng.uniform(0.0, _FULL_TURN)
        self._face(self._target_angle)
        self._direction_timer = 0.0
        self._direction_change_interval = 5.0

    def triangle_points(self) -> list[tuple[int, int]]:
        """Corners of the triangle, the first one at the heading."""
        angle = math.atan2(self._dir_y, self._dir_x)
        return [
            (
                int(self.x + self.size * math.cos(angle + offset)),
                int(self.y + self.size * math.sin(angle + offset)),
            )
            for offset in (0.0, _CORNER_OFFSET, -_CORNER_OFFSET)
        ]

    def render(self, canvas: Any, camera_x: float, camera_y: float) -> None:
        """Shift into view space and draw the triangle on ``canvas``.

        The canvas must provide ``polygon(points, fill)``.
        """
        self.x -= camera_x
        self.y -= camera_y
        canvas.polygon(self.triangle_points(), self.color)