"""Movement rules and drawing geometry for a blob arena: player, enemies, traps, jumbo and camera."""

__version__ = "0.1.0"

__all__ = ["camera", "circle", "player", "enemy", "trap", "jumbo"]