"""The hero blob steered towards the mouse."""

from __future__ import annotations

import math

from .circle import ARENA_HEIGHT, ARENA_WIDTH, BLACK, Circle, Color, clamp_to_arena

MAX_SIZE = 250
MIN_SPEED = 0.1
_SPEED_FACTOR = 100.0


class Player(Circle):
    """The hero: moves straight towards a target point."""

    def __init__(
        self, x: float, y: float, size: int, speed: float, color: Color = BLACK
    ) -> None:
        super().__init__(x, y, size, int(speed), color)
        self.speed = float(speed)

    def move(self, mx: int, my: int, delta_time: float) -> None:
        """Advance towards (mx, my) and stay inside the arena."""
        dx = float(mx) - self.x
        dy = float(my) - self.y
        distance = math.hypot(dx, dy)
        if distance > 0.1:
            step = self.speed * _SPEED_FACTOR * delta_time
            self.x += dx / distance * step
            self.y += dy / distance * step
        self.x = clamp_to_arena(self.x, self.size, ARENA_WIDTH)
        self.y = clamp_to_arena(self.y, self.size, ARENA_HEIGHT)

    def update(self, x: float, y: float, size: int, speed: float) -> None:
        """Set position, size and speed, capping size and flooring speed."""
        self.x = float(x)
        self.y = float(y)
        self.size = min(int(size), MAX_SIZE)
        self.speed = max(float(speed), MIN_SPEED)