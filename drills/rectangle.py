"""Axis-aligned rectangles that may have negative width or height."""

import sys
from dataclasses import dataclass
from itertools import product


@dataclass(frozen=True)
class Rectangle:
    """A rectangle given by a corner and a signed width and height."""

    x: int
    y: int
    width: int
    height: int

    def canonicalize(self):
        """Return the same rectangle with non-negative width and height."""
        x, width = (self.x + self.width, -self.width) if self.width < 0 else (self.x, self.width)
        y, height = (self.y + self.height, -self.height) if self.height < 0 else (self.y, self.height)
        return Rectangle(x, y, width, height)

    def intersection(self, other):
        """Return the overlap of two rectangles; an empty one has zero size."""
        a = self.canonicalize()
        b = other.canonicalize()
        x = max(a.x, b.x)
        y = max(a.y, b.y)
        width = min(a.x + a.width, b.x + b.width) - x
        height = min(a.y + a.height, b.y + b.height) - y
        if width < 0 or height < 0:
            width = height = 0
        return Rectangle(x, y, width, height)

    def describe(self):
        """Return ``(x1,y1) to (x2,y2)``, or ``<empty>`` for a zero-size rectangle."""
        r = self.canonicalize()
        if r.width == 0 and r.height == 0:
            return "<empty>"
        return f"({r.x},{r.y}) to ({r.x + r.width},{r.y + r.height})"


def main(argv=None):
    """Print four sample rectangles and all their pairwise intersections."""
    rects = {
        "r1": Rectangle(2, 3, 5, 6),
        "r2": Rectangle(4, 5, -5, -7),
        "r3": Rectangle(-2, 7, 7, -10),
        "r4": Rectangle(0, 7, -4, 2),
    }
    out = sys.stdout
    for name, rect in rects.items():
        out.write(f"{name} is {rect.describe()}\n")
    for (n1, a), (n2, b) in product(rects.items(), repeat=2):
        out.write(f"intersection({n1},{n2}): {a.intersection(b).describe()}\n")
    return 0