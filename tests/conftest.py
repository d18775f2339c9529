import os
import sys

import pytest

# Ensure the repo root (containing the `conquest` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from conquest import Config, GameController, Vocabulary


# raw coordinates chosen so the disk points are easy to reason about:
# (1, 0) -> (0.5, 0), (0, 1) -> (0, 0.5), (3, 4) -> (0.5, 0.667)
WORDS = {
    'cat': (3.0, 4.0),
    'dog': (0.0, 0.0),
    'east': (1.0, 0.0),
    'north': (0.0, 1.0),
    'west': (-1.0, 0.0),
    'south': (0.0, -1.0),
}


@pytest.fixture()
def vocab():
    return Vocabulary(WORDS)


@pytest.fixture()
def config():
    return Config()


@pytest.fixture()
def game(vocab, config):
    return GameController(vocab, config=config)
