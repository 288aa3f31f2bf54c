from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

Coords = Tuple[float, ...]


@dataclass(frozen=True, slots=True)
class Instance:
    """Validated point set; coordinates are coerced to float tuples."""

    points: Tuple[Coords, ...]

    def __post_init__(self) -> None:
        pts = tuple(tuple(float(c) for c in p) for p in self.points)
        if pts:
            dim = len(pts[0])
            if dim < 2:
                raise ValueError("points need at least two coordinates")
            for idx, p in enumerate(pts):
                if len(p) != dim:
                    raise ValueError(f"point #{idx} has {len(p)} coordinates, expected {dim}")
                if not all(math.isfinite(c) for c in p):
                    raise ValueError(f"point #{idx} has non-finite coordinates: {p}")
        object.__setattr__(self, "points", pts)

    @property
    def n(self) -> int:
        return len(self.points)

    @property
    def dim(self) -> int:
        return len(self.points[0]) if self.points else 0


__all__ = ["Instance"]
