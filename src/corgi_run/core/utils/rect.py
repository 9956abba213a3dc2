"""
rect.py
-------
Float axis-aligned rectangle and the overlap test used for collisions.
Edges are inclusive: touching boxes overlap (unlike pygame.Rect.colliderect).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Top-left anchored rectangle in field coordinates (y grows downward)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def inset(self, amount: float) -> "Rect":
        """Shrink by ``amount`` on every side."""
        return Rect(
            self.x + amount,
            self.y + amount,
            self.width - amount * 2,
            self.height - amount * 2,
        )

    def as_tuple(self):
        return (self.x, self.y, self.width, self.height)


def overlaps(a: Rect, b: Rect) -> bool:
    """Separating-axis test; boxes that only touch still count as overlapping."""
    return not (
        a.right < b.left
        or a.left > b.right
        or a.bottom < b.top
        or a.top > b.bottom
    )
