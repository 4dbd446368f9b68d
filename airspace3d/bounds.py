"""Axis-aligned bounding boxes in three dimensions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

Vec3 = Tuple[float, float, float]

# Largest finite single-precision float; used as the "empty" sentinel.
FLT_MAX = 3.4028234663852886e38


@dataclass
class Bounds:
    """A box given by its minimum and maximum corners and a center point.

    A freshly made box is empty: its minimum lies above its maximum, so
    merging any real box into it yields that box.
    """

    min: Vec3 = (FLT_MAX, FLT_MAX, FLT_MAX)
    max: Vec3 = (-FLT_MAX, -FLT_MAX, -FLT_MAX)
    center: Vec3 = (0.0, 0.0, 0.0)

    @property
    def is_empty(self) -> bool:
        """True when the box encloses no point at all."""
        return any(lo > hi for lo, hi in zip(self.min, self.max))

    def merge(self, other: Bounds) -> None:
        """Grow this box in place so that it also encloses ``other``.

        The center is left as it is.
        """
        self.min = tuple(min(a, b) for a, b in zip(self.min, other.min))
        self.max = tuple(max(a, b) for a, b in zip(self.max, other.max))


def bounds_of(points: Iterable[Vec3]) -> Bounds:
    """Return the bounds of ``points`` with the center at the box midpoint."""
    lo = [FLT_MAX, FLT_MAX, FLT_MAX]
    hi = [-FLT_MAX, -FLT_MAX, -FLT_MAX]
    for point in points:
        for axis, value in enumerate(point):
            lo[axis] = min(lo[axis], value)
            hi[axis] = max(hi[axis], value)
    center = tuple((a + b) / 2.0 for a, b in zip(lo, hi))
    return Bounds(min=tuple(lo), max=tuple(hi), center=center)