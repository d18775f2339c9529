"""
polygon area and score.

the score is the area enclosed by the hull, scaled up and floored so
the player sees a whole number.
"""

import math

import numpy as np
from numpy.typing import ArrayLike

from .config import DEFAULT_CONFIG


def polygon_area(polygon: ArrayLike) -> float:
    """
    shoelace area of an ordered ring (closing vertex optional).

    orientation doesn't matter: the absolute value is returned.
    fewer than 3 vertices → 0.0
    """
    pts = np.asarray(polygon, dtype=np.float64).reshape(-1, 2)
    if len(pts) < 3:
        return 0.0

    x, y = pts[:, 0], pts[:, 1]
    # sum of x_i * y_j - x_j * y_i over consecutive pairs, with wraparound
    twice_area = np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)
    return abs(float(twice_area)) / 2.0


def score_for_area(area: float, scale: int = DEFAULT_CONFIG.score_scale) -> int:
    """score = floor(area * scale)."""
    return int(math.floor(area * scale))
