"""
project vocabulary coordinates into the open unit disk.

the map keeps the direction from the origin and compresses the
magnitude with r → r / (1 + r), so every finite coordinate lands
strictly inside the disk and (0, 0) stays put.
"""

import math
from typing import Optional

from .vocabulary import Vocabulary

DiskPoint = tuple[float, float]

# largest radius handed out; keeps huge coordinates strictly inside the disk
_RIM = 1.0 - 1e-12


def to_disk(x: float, y: float) -> DiskPoint:
    """
    compress a raw 2D coordinate into the open unit disk.

    args:
        x, y: finite raw coordinate

    returns:
        (x / (1 + z), y / (1 + z)) with z = |(x, y)|
    """
    z = math.hypot(x, y)
    if math.isinf(z):
        # magnitude overflows; only the direction is left to keep
        m = max(abs(x), abs(y))
        x, y = x / m, y / m
        z = math.hypot(x, y)
        return (x / z * _RIM, y / z * _RIM)

    px, py = x / (1 + z), y / (1 + z)
    r = math.hypot(px, py)
    # once 1 + z rounds to z the point would sit on the rim
    if r >= _RIM:
        px, py = px / r * _RIM, py / r * _RIM
    return (px, py)


def project_word(word: str, vocab: Vocabulary) -> Optional[DiskPoint]:
    """
    look up a word and project it into the disk.

    returns None if the normalized word isn't in the vocabulary.
    """
    coord = vocab.lookup(word)
    if coord is None:
        return None
    return to_disk(*coord)
