"""
vocabulary store — read-only word → 2D coordinate lookup.

the 2D coordinates are produced offline; this module just loads them,
either from a single json mapping or from the words.json + .npy pair
the embedding pipeline writes.
"""

import json
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from .config import Config, DEFAULT_CONFIG

Coord = tuple[float, float]


def normalize_word(word: str) -> str:
    """lowercase and trim, the same way for loading and lookup."""
    return word.strip().lower()


class Vocabulary(Mapping):
    """immutable mapping: normalized word → raw (x, y) coordinate."""

    def __init__(self, entries: Mapping[str, Coord] | None = None):
        coords: dict[str, Coord] = {}
        for raw_word, raw_coord in (entries or {}).items():
            word = normalize_word(raw_word)
            if word in coords:
                raise ValueError(f"duplicate vocabulary word after normalization: {word!r}")
            coords[word] = _as_coord(word, raw_coord)
        self._coords = coords

    def __getitem__(self, word: str) -> Coord:
        return self._coords[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._coords)

    def __len__(self) -> int:
        return len(self._coords)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self):,} words)"

    def lookup(self, word: str) -> Optional[Coord]:
        """normalize then look up; None if the word is unknown."""
        return self._coords.get(normalize_word(word))


def _as_coord(word: str, raw) -> Coord:
    # strings and bools would otherwise unpack or cast quietly
    if isinstance(raw, (str, bytes)) or (
        isinstance(raw, (list, tuple)) and any(isinstance(v, bool) for v in raw)
    ):
        raise ValueError(f"coordinate for {word!r} must be a pair of numbers, got: {raw!r}")
    try:
        x, y = (float(v) for v in raw)
    except (TypeError, ValueError):
        raise ValueError(f"coordinate for {word!r} must be a pair of numbers, got: {raw!r}")
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"coordinate for {word!r} is not finite: ({x}, {y})")
    return (x, y)


def load_vocabulary(source: Config | Path | str = DEFAULT_CONFIG) -> Vocabulary:
    """
    load vocabulary from a json object { word: [x, y], ... }.

    args:
        source: builder config (uses config.vocab_path) or a direct path

    returns:
        Vocabulary with normalized keys
    """
    path = source.vocab_path if isinstance(source, Config) else Path(source)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a json object of word -> [x, y]")
    return Vocabulary(data)


def load_vocabulary_arrays(config: Config = DEFAULT_CONFIG) -> Vocabulary:
    """
    load vocabulary from words.json + coords_2d.npy.

    words.json is a list where index i → word, and the .npy file holds
    a float array of shape (V, 2) with row i → coordinate of word i.
    """
    with open(config.words_path, "r", encoding="utf-8") as f:
        words: list[str] = json.load(f)
    coords: NDArray[np.float64] = np.load(config.coords_path)

    if coords.shape != (len(words), 2):
        raise ValueError(
            f"coords shape mismatch: {coords.shape} != ({len(words)}, 2)"
        )

    return Vocabulary({word: (coords[i, 0], coords[i, 1]) for i, word in enumerate(words)})
