"""Slow drifting hazard that changes heading now and then."""

from __future__ import annotations

import math
import random

from .circle import ARENA_HEIGHT, ARENA_WIDTH, BLACK, Circle, Color, clamp_to_arena

_FULL_TURN = 2.0 * 3.14159265359
_SPEED_FACTOR = 50.0

_rng = random.Random()


class Trap(Circle):
    """A hazard that drifts in a random direction, re-rolled every 10 seconds."""

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
        self._direction_change_interval = 10.0
        self._dir_x, self._dir_y = self._random_direction()

    def _random_direction(self) -> tuple[float, float]:
        angle = self._rng.uniform(0.0, _FULL_TURN)
        return math.cos(angle), math.sin(angle)

    def move(self, delta_time: float) -> None:
        """Drift one step and stay inside the arena."""
        self._direction_timer += delta_time
        if self._direction_timer >= self._direction_change_interval:
            self._dir_x, self._dir_y = self._random_direction()
            self._direction_timer = 0.0

        step = self.speed * _SPEED_FACTOR * delta_time
        self.x += self._dir_x * step
        self.y += self._dir_y * step
        self.x = clamp_to_arena(self.x, self.size, ARENA_WIDTH)
        self.y = clamp_to_arena(self.y, self.size, ARENA_HEIGHT)

    def update(self, x: float, y: float, size: int, speed: float) -> None:
        """Set position, size and speed as given."""
        self.x = float(x)
        self.y = float(y)
        self.size = int(size)
        self.speed = float(speed)