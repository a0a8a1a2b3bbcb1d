"""Grid-based raycaster: .cub level parsing, DDA ray casting, drawing and a pygame window."""

__version__ = "0.1.0"
__all__ = ["tiles", "player", "level", "parsing", "image", "raycast", "game"]