"""
word conquest core

players submit words; each known word is projected into the unit
disk, and the area of the concave hull around every point played so
far is the score.
"""

from .config import Config, DEFAULT_CONFIG
from .vocabulary import Vocabulary, load_vocabulary, load_vocabulary_arrays
from .projection import to_disk, project_word
from .history import HistoryEntry, PointHistory
from .hull import concave_hull, convex_hull
from .scoring import polygon_area, score_for_area
from .game import GameController, GameState, SubmitResult

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "Vocabulary",
    "load_vocabulary",
    "load_vocabulary_arrays",
    "to_disk",
    "project_word",
    "HistoryEntry",
    "PointHistory",
    "concave_hull",
    "convex_hull",
    "polygon_area",
    "score_for_area",
    "GameController",
    "GameState",
    "SubmitResult",
]
