"""
Shared fixtures: the textbook divisions used across the test suite.
"""

from pathlib import Path

import pytest

from baseball_elimination.solver import Division


DATA_DIR = Path(__file__).parent / "data"

TEAMS4_ROWS = [
    ("Atlanta", 83, 71, 8, [0, 1, 6, 1]),
    ("Philadelphia", 80, 79, 3, [1, 0, 0, 2]),
    ("New_York", 78, 78, 6, [6, 0, 0, 0]),
    ("Montreal", 77, 82, 3, [1, 2, 0, 0]),
]

TEAMS5_ROWS = [
    ("New_York", 75, 59, 28, [0, 3, 8, 7, 3]),
    ("Baltimore", 71, 63, 28, [3, 0, 2, 7, 7]),
    ("Boston", 69, 66, 27, [8, 2, 0, 0, 3]),
    ("Toronto", 63, 72, 27, [7, 7, 0, 0, 3]),
    ("Detroit", 49, 86, 27, [3, 7, 3, 3, 0]),
]


@pytest.fixture
def teams4() -> Division:
    return Division.from_rows(TEAMS4_ROWS)


@pytest.fixture
def teams5() -> Division:
    return Division.from_rows(TEAMS5_ROWS)


@pytest.fixture
def teams4_path() -> Path:
    return DATA_DIR / "teams4.txt"


@pytest.fixture
def teams5_path() -> Path:
    return DATA_DIR / "teams5.txt"


@pytest.fixture
def teams4_rows():
    """Mutable copy of the teams4 rows for tests that corrupt them."""
    return [[name, wins, losses, remaining, list(against)] for name, wins, losses, remaining, against in TEAMS4_ROWS]
