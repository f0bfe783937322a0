"""Round arena body shared by food, the hero and the enemies."""

from __future__ import annotations

from typing import Any

ARENA_WIDTH = 1920.0
ARENA_HEIGHT = 1040.0

Color = tuple[int, int, int]
BLACK: Color = (0, 0, 0)


def clamp_to_arena(value: float, size: float, limit: float) -> float:
    """Keep a coordinate at least ``size`` away from 0 and from ``limit``."""
    size = float(size)
    return max(size, min(limit - size, value))


class Circle:
    """A filled circle with a position, radius, speed and colour."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        size: int = 0,
        speed: int = 0,
        color: Color = BLACK,
    ) -> None:
        self.init(x, y, size, speed, color)

    def init(self, x: float, y: float, size: int, speed: int, color: Color) -> None:
        """Reset every attribute of the circle."""
        self.x = float(x)
        self.y = float(y)
        self.size = int(size)
        self.speed = int(speed)
        self.color = color

    def update(self, x: float, y: float, size: int, color: Color) -> None:
        """Move, resize and recolour the circle, keeping its speed."""
        self.x = float(x)
        self.y = float(y)
        self.size = int(size)
        self.color = color

    def render(self, canvas: Any, camera_x: float, camera_y: float) -> None:
        """Shift the circle into view space and draw it on ``canvas``.

        The canvas must provide ``ellipse(left, top, right, bottom, fill)``.
        """
        self.x -= camera_x
        self.y -= camera_y
        cx, cy = int(self.x), int(self.y)
        canvas.ellipse(
            cx - self.size, cy - self.size, cx + self.size, cy + self.size, self.color
        )