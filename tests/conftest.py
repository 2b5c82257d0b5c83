import pytest

from connect4_engine.debug import debug, DebugLevel
from connect4_engine.game.rules import GameEngine

# Two interleaved column pairs, then columns 4-6 together: fills a 7x6 board
# with no four in a row and strict alternation.
TIE_SEQUENCE = (
    [0, 1, 1, 0, 1, 0, 0, 1, 0, 1, 1, 0]
    + [2, 3, 3, 2, 3, 2, 2, 3, 2, 3, 3, 2]
    + [4, 5, 6, 4, 5, 6, 5, 4, 4, 6, 6, 5, 4, 5, 6, 4, 5, 6]
)

HORIZONTAL_WIN = [0, 0, 1, 1, 2, 2, 3]
VERTICAL_WIN = [0, 6, 0, 6, 0, 6, 0]
DOWN_RIGHT_WIN = [3, 2, 2, 1, 1, 0, 1, 0, 0, 6, 0]
DOWN_LEFT_WIN = [3, 4, 4, 5, 5, 6, 5, 6, 6, 0, 6]


@pytest.fixture(autouse=True)
def reset_debug():
    """Keep logging configuration from leaking between tests."""
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def engine():
    return GameEngine()


def play(engine, moves):
    """Apply moves in order and return the outcomes."""
    return [engine.drop_piece(column) for column in moves]
