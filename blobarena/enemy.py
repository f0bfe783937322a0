"""Enemy blob that chases the hero when close and otherwise hunts food."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable

from .circle import ARENA_HEIGHT, ARENA_WIDTH, BLACK, Circle, Color, clamp_to_arena

MAX_SIZE = 250
MIN_SPEED = 0.1
_FULL_TURN = 2.0 * 3.14159265359
_SPEED_FACTOR = 100.0
_CHASE_FACTOR = 5.0
_NO_FOOD_DISTANCE = 1e9

_rng = random.Random()


class Enemy(Circle):
    """A rival blob steered by the hero's position and the food nearby."""

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
        self._direction_change_interval = 2.0
        self._dir_x, self._dir_y = self._random_direction()

    def _random_direction(self) -> tuple[float, float]:
        angle = self._rng.uniform(0.0, _FULL_TURN)
        return math.cos(angle), math.sin(angle)

    def _nearest_food(self, food: Iterable[Circle]) -> tuple[float, Circle] | None:
        nearest = min(
            ((math.hypot(item.x - self.x, item.y - self.y), item) for item in food),
            key=lambda pair: pair[0],
            default=None,
        )
        if nearest is None or not nearest[0] < _NO_FOOD_DISTANCE:
            return None
        return nearest

    def move(self, delta_time: float, food: Iterable[Circle], hero: Circle) -> None:
        """Steer, advance one step and stay inside the arena."""
        dx = hero.x - self.x
        dy = hero.y - self.y
        to_hero = math.hypot(dx, dy)

        if 0.1 < to_hero < self.size * _CHASE_FACTOR:
            self._dir_x, self._dir_y = dx / to_hero, dy / to_hero
        else:
            nearest = self._nearest_food(food)
            if nearest is not None and nearest[0] > 0.1:
                distance, target = nearest
                self._dir_x = (target.x - self.x) / distance
                self._dir_y = (target.y - self.y) / distance
            else:
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
        """Set position, size and speed, capping size and flooring speed."""
        self.x = float(x)
        self.y = float(y)
        self.size = min(int(size), MAX_SIZE)
        self.speed = max(float(speed), MIN_SPEED)