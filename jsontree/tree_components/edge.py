from dataclasses import dataclass
from typing import Tuple

from .core import format_number

Point = Tuple[float, float]


@dataclass(frozen=True)
class Edge:

    source_id: int
    target_id: int
    start: Point
    end: Point

    @property
    def control_points(self) -> Tuple[Point, Point]:
        (sx, sy), (ex, ey) = self.start, self.end
        mid_x = (sx + ex) / 2
        return (mid_x, sy), (mid_x, ey)

    @property
    def path_data(self) -> str:
        (c1x, c1y), (c2x, c2y) = self.control_points
        points = [self.start, (c1x, c1y), (c2x, c2y), self.end]
        sx, sy, ax, ay, bx, by, ex, ey = (format_number(v) for point in points for v in point)
        return f"M{sx},{sy} C{ax},{ay} {bx},{by} {ex},{ey}"
