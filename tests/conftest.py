import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from grid import Grid
from engine import Recorder


# 5x6, the only route from (0,0) to (4,5) snakes along the edges: 19 moves
SNAKE = """
......
#####.
......
.#####
......
"""

# goal walled off completely
BLOCKED = """
......
......
......
....##
....#.
"""


@pytest.fixture
def snake_grid():
    return Grid.from_text(SNAKE)


@pytest.fixture
def blocked_grid():
    return Grid.from_text(BLOCKED)


@pytest.fixture
def record():
    """Run an algorithm headless to completion and hand back the Recorder."""
    def _record(algo_key, seed=None, data=None):
        rec = Recorder()
        rec.start(algo_key, seed=seed, data=data)
        rec.run_to_completion()
        return rec
    return _record
