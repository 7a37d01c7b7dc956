"""Points, the height map that holds them and the lines drawn between them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

__all__ = ["Point", "Map", "Line", "make_grid", "make_line"]


@dataclass
class Point:
    """A point of the map with its colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    color: int = 0


@dataclass
class Map:
    """A grid of points indexed as ``coordinates[x][y]`` with its extents."""

    coordinates: list[list[Point]] = field(default_factory=list)
    max_x: int = 0
    max_y: int = 0
    max_z: int = 0
    min_z: int = 0

    def center_to_origin(self) -> None:
        """Shift every point so that the middle of the grid sits at (0, 0)."""
        dx = self.max_x // 2
        dy = self.max_y // 2
        for column in self.coordinates[: self.max_x]:
            for point in column[: self.max_y]:
                point.x -= dx
                point.y -= dy


@dataclass
class Line:
    """A segment between two points and the map extent used to scale heights."""

    start: Point
    end: Point
    transform_z: float


def make_grid(width: int, depth: int) -> list[list[Point]]:
    """Return ``width`` columns of ``depth`` zeroed points each."""
    if width < 0 or depth < 0:
        raise ValueError(f"grid size must not be negative, got {width}x{depth}")
    return [[Point() for _ in range(depth)] for _ in range(width)]


def make_line(start: Point, end: Point, map: Map) -> Line:
    """Return a line between copies of ``start`` and ``end``.

    Its ``transform_z`` is the largest of the map's height range, width and depth.
    """
    transform_z = max(map.max_z - map.min_z, max(map.max_x, map.max_y))
    return Line(replace(start), replace(end), transform_z)