"""Integer rectangles, detections and rectangle overlap."""

from __future__ import annotations

from dataclasses import dataclass, field


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return int(value / 2)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with an integer top-left corner and size."""

    x: int
    y: int
    width: int
    height: int

    def area(self) -> int:
        """Width times height."""
        return self.width * self.height

    def top_left(self) -> tuple[int, int]:
        """The (x, y) corner of the rectangle."""
        return (self.x, self.y)

    def center(self) -> tuple[int, int]:
        """The integer centre, with half sizes truncated toward zero."""
        return (self.x + _half(self.width), self.y + _half(self.height))

    def clipped(self, width: int, height: int) -> Rect:
        """Fit the rectangle inside an image of the given size.

        A rectangle running past the right or bottom edge is shortened so it
        ends one pixel inside the image; a negative corner is moved to zero.
        """
        x, y, w, h = self.x, self.y, self.width, self.height
        if x + w > width:
            w = width - x - 1
        if x < 0:
            x = 0
        if y + h > height:
            h = height - y - 1
        if y < 0:
            y = 0
        return Rect(x, y, w, h)


@dataclass(frozen=True)
class Detection:
    """A detected person: an image box and a 3D position."""

    bbox: Rect
    point3d: tuple[float, float, float] = field(default=(0.0, 0.0, 0.0))


def overlap_roi(r1: Rect, r2: Rect) -> float:
    """Fraction of ``r1`` covered by ``r2``; 0.0 when they do not overlap."""
    x_tl = max(r1.x, r2.x)
    y_tl = max(r1.y, r2.y)
    x_br = min(r1.x + r1.width, r2.x + r2.width)
    y_br = min(r1.y + r1.height, r2.y + r2.height)
    if x_tl < x_br and y_tl < y_br:
        return (x_br - x_tl) * (y_br - y_tl) / float(r1.area())
    return 0.0