"""
game controller: word in, score out.

each submission projects the word into the disk, appends it to the
history, recomputes the concave hull over every point so far and scores
the enclosed area. a submission either commits all of that or (for an
unknown word) changes nothing but the error message.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

from .config import Config, DEFAULT_CONFIG
from .history import HistoryEntry, PointHistory
from .hull import concave_hull
from .projection import DiskPoint, project_word
from .scoring import polygon_area, score_for_area
from .vocabulary import Vocabulary


@dataclass
class GameState:
    """everything one game session owns."""

    history: PointHistory = field(default_factory=PointHistory)

    # None until the first accepted word
    hull: Optional[list[DiskPoint]] = None

    score: int = 0
    score_delta: int = 0
    last_error: Optional[str] = None


@dataclass
class SubmitResult:
    """what the presentation layer gets back from a submission."""

    accepted: bool
    score: int
    score_delta: int
    hull: list[DiskPoint]
    points: list[HistoryEntry]
    error_message: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """json-ready shape with camelCase keys."""
        return {
            "accepted": self.accepted,
            "score": self.score,
            "scoreDelta": self.score_delta,
            "hull": [{"x": x, "y": y} for x, y in self.hull],
            "points": [
                {"word": e.word, "x": e.point[0], "y": e.point[1]}
                for e in self.points
            ],
            "errorMessage": self.error_message,
        }


class GameController:
    """
    owns one GameState and serializes submissions against it.

    independent controllers share nothing, so several sessions can run
    side by side in the same process.
    """

    def __init__(
        self,
        vocab: Vocabulary,
        config: Config = DEFAULT_CONFIG,
        verbose: bool = False,
    ):
        self.vocab = vocab
        self.config = config
        self.verbose = verbose
        self.state = GameState()
        self._lock = threading.Lock()

    def submit(self, raw_word: str) -> SubmitResult:
        """
        play one word.

        args:
            raw_word: the word as typed; case and surrounding spaces ignored

        returns:
            SubmitResult with accepted=False and error_message set if the
            word is unknown, otherwise the new score, delta, hull and points
        """
        with self._lock:
            point = project_word(raw_word, self.vocab)
            if point is None:
                self.state.last_error = self.config.not_found_message.format(word=raw_word)
                return self._result(accepted=False)

            entry = HistoryEntry(word=raw_word, point=point)
            points = np.vstack([self.state.history.as_array(), [point]])

            hull = [(float(x), float(y)) for x, y in concave_hull(points, config=self.config)]
            new_score = score_for_area(polygon_area(hull), self.config.score_scale)
            delta = new_score - self.state.score

            if delta < 0 and self.verbose:
                print(
                    f"warning: score dropped {self.state.score} -> {new_score} "
                    f"after {raw_word!r} (hull area should never shrink)"
                )

            # commit
            self.state.history.append(entry)
            self.state.hull = hull
            self.state.score = new_score
            self.state.score_delta = delta
            self.state.last_error = None

            if self.verbose:
                print(f"  {raw_word!r} -> ({point[0]:.4f}, {point[1]:.4f}), score {new_score} ({delta:+d})")

            return self._result(accepted=True)

    def snapshot(self) -> SubmitResult:
        """
        current state in the same shape as a submission result.

        nothing is submitted, so accepted is always True; error_message
        still carries the last failed submission, if any.
        """
        with self._lock:
            return self._result(accepted=True)

    def _result(self, accepted: bool) -> SubmitResult:
        state = self.state
        return SubmitResult(
            accepted=accepted,
            score=state.score,
            score_delta=state.score_delta,
            hull=list(state.hull or []),
            points=state.history.entries(),
            error_message=state.last_error,
        )
