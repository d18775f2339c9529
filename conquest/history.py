"""append-only history of accepted words and their disk points."""

from dataclasses import dataclass
from typing import Iterator

import numpy as np
from numpy.typing import NDArray

from .projection import DiskPoint


@dataclass(frozen=True)
class HistoryEntry:
    """one accepted submission."""

    # the word as the player typed it
    word: str
    point: DiskPoint


class PointHistory:
    """
    ordered game history.

    entries are kept in submission order and never removed. submitting
    the same word twice adds a second entry at the same point.
    """

    def __init__(self):
        self._entries: list[HistoryEntry] = []

    def append(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def all_points(self) -> list[DiskPoint]:
        return [e.point for e in self._entries]

    def as_array(self) -> NDArray[np.float64]:
        """points as a float array of shape (N, 2)."""
        return np.array(self.all_points(), dtype=np.float64).reshape(-1, 2)

    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)
