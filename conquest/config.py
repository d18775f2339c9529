"""
configuration constants for word conquest.

all the game-balance numbers live here so they're easy to tweak.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """game configuration — tweak these as needed."""

    # hull concavity: edges shorter than this are never dug into.
    # points live in the unit disk, so 10 keeps the plain convex hull
    concavity: float = 10.0

    # score = floor(area * score_scale)
    score_scale: int = 10_000

    # an inner point can only join an edge if it sits within this
    # angle of both edge endpoints
    max_concave_angle_deg: float = 90.0

    # max size of the search box around an edge, as a fraction of the
    # point cloud's bounding box
    max_search_bbox_fraction: float = 0.6

    # paths (relative to project root by default)
    data_dir: Path = Path("data")

    # filenames for the vocabulary store
    vocab_file: str = "vocab_2d.json"
    words_file: str = "words.json"
    coords_file: str = "coords_2d.npy"

    not_found_message: str = (
        'The word "{word}" was not found in the vocabulary. '
        "Please try another word."
    )

    def __post_init__(self):
        """ensure paths are Path objects and balance numbers are sane."""
        self.data_dir = Path(self.data_dir)
        if self.concavity <= 0:
            raise ValueError(f"concavity must be positive, got: {self.concavity}")
        if self.score_scale <= 0:
            raise ValueError(f"score_scale must be positive, got: {self.score_scale}")

    @property
    def vocab_path(self) -> Path:
        return self.data_dir / self.vocab_file

    @property
    def words_path(self) -> Path:
        return self.data_dir / self.words_file

    @property
    def coords_path(self) -> Path:
        return self.data_dir / self.coords_file


# default config instance
DEFAULT_CONFIG = Config()
