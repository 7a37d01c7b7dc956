"""The viewing camera: projection, scale, position and rotation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .geometry import Map

__all__ = ["Projection", "Camera", "scale_to_fit", "camera_for"]


class Projection(Enum):
    """How the map is projected onto the screen."""

    ISOMETRIC = auto()
    SIDE_PARALLEL = auto()
    TOP = auto()


def scale_to_fit(map: Map, window_width: int, window_height: int) -> float:
    """Return a scale that fits ``map`` into the window, never below 2."""
    if map.max_x <= 0 or map.max_y <= 0:
        raise ValueError(f"map has no extent: {map.max_x}x{map.max_y}")
    scale = min(window_width // map.max_x, window_height // map.max_y)
    if scale < 4:
        return 2.0
    return scale / 2


@dataclass
class Camera:
    """Camera settings for one window."""

    window_width: int
    window_height: int
    projection: Projection = Projection.ISOMETRIC
    color_pallet: bool = False
    scale_factor: float = 2.0
    scale_z: float = 1.0
    move_x: float = 0
    move_y: float = 0
    alpha: float = 0.0
    beta: float = 0.0
    gamma: float = 0.0

    def reset(self, map: Map) -> None:
        """Restore scale, position and rotation; projection and palette are kept."""
        self.scale_factor = scale_to_fit(map, self.window_width, self.window_height)
        self.scale_z = 1.0
        self.move_x = self.window_width // 2
        self.move_y = self.window_height // 2
        self.alpha = 0.0
        self.beta = 0.0
        self.gamma = 0.0


def camera_for(map: Map, window_width: int, window_height: int) -> Camera:
    """Return an isometric camera centred in the window and scaled to ``map``."""
    camera = Camera(window_width, window_height)
    camera.reset(map)
    return camera