from dataclasses import dataclass
from typing import Optional, Tuple

from .core import Line, Rectangle


@dataclass(frozen=True)
class Node:

    id: int
    rect: Rectangle
    lines: Tuple[Line, ...]
    parent_id: Optional[int] = None

    @property
    def element_id(self) -> str:
        return f"node-{self.id}"
