from typing import List, Optional

from .core import Rectangle


class Placer:
    """Pushes candidate rectangles down until they clear earlier placements.

    The scan is a single forward sweep over ``occupied`` in insertion order:
    after a push, only the rectangles not yet visited are tested against the
    new position. A rectangle scanned before the push can therefore still
    overlap the result. Only ``y`` is ever adjusted.
    """

    def __init__(self, buffer: float = 10, occupied: Optional[List[Rectangle]] = None) -> None:
        self.buffer = buffer
        self.occupied: List[Rectangle] = occupied if occupied is not None else []

    def place(self, x: float, y: float, width: float, height: float) -> float:
        adjusted_y = y
        for other in self.occupied:
            candidate = Rectangle(x, adjusted_y, width, height)
            if candidate.overlaps(other):
                adjusted_y = other.bottom + self.buffer

        self.occupied.append(Rectangle(x, adjusted_y, width, height))
        return adjusted_y
