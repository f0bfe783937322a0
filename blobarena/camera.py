"""Viewport that either stays fixed on the arena or follows the hero."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

SCREEN_WIDTH = 1920.0
SCREEN_HEIGHT = 1040.0
MAP_WIDTH = 1920.0
MAP_HEIGHT = 1040.0

FOLLOW_KEY = 0x31  # the '1' key
STATIC_KEY = 0x32  # the '2' key

_SMOOTHING = 0.1


class CameraMode(Enum):
    """How the camera positions the view."""

    STATIC_VIEW = 0
    FOLLOW_PLAYER = 1


_MODE_SCALE = {
    CameraMode.STATIC_VIEW: 1.0,
    CameraMode.FOLLOW_PLAYER: 2.0,
}

_KEY_MODES = {
    FOLLOW_KEY: CameraMode.FOLLOW_PLAYER,
    STATIC_KEY: CameraMode.STATIC_VIEW,
}


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if high < value:
        return high
    return value


class Camera:
    """Tracks the drawing offset and zoom of the arena view."""

    _shared: ClassVar[Camera | None] = None

    def __init__(
        self,
        screen_width: float = SCREEN_WIDTH,
        screen_height: float = SCREEN_HEIGHT,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.mode = CameraMode.STATIC_VIEW
        self.scale = _MODE_SCALE[self.mode]
        self._offset: tuple[float, float] | None = None

    @classmethod
    def instance(cls) -> Camera:
        """Return the camera shared by the whole game."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def set_mode(self, mode: CameraMode) -> None:
        """Switch mode; the zoom scale follows the mode."""
        self.mode = CameraMode(mode)
        self.scale = _MODE_SCALE[self.mode]

    def handle_input(self, key: int | str) -> None:
        """React to a key press: '1' follows the hero, '2' fixes the view."""
        code = ord(key) if isinstance(key, str) else key
        mode = _KEY_MODES.get(code)
        if mode is not None:
            self.set_mode(mode)

    def calculate_offset(self, hero_x: float, hero_y: float) -> tuple[float, float]:
        """Return the (x, y) drawing offset for a hero at the given position."""
        half_w = self.screen_width / 2.0
        half_h = self.screen_height / 2.0
        if self._offset is None:
            self._offset = (hero_x - half_w, hero_y - half_h)

        if self.mode is not CameraMode.FOLLOW_PLAYER:
            self._offset = (0.0, 0.0)
            return self._offset

        target_x = _clamp(hero_x - half_w, 0.0, MAP_WIDTH - self.screen_width)
        target_y = _clamp(hero_y - half_h, 0.0, MAP_HEIGHT - self.screen_height)
        current_x, current_y = self._offset
        current_x += (target_x - current_x) * _SMOOTHING
        current_y += (target_y - current_y) * _SMOOTHING
        self._offset = (current_x, current_y)
        return self._offset