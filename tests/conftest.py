"""
Shared fixtures for the elimination tests.
"""

from pathlib import Path

import pytest

from baseball_elimination.loader.schedule_loader import load_division
from baseball_elimination.models.division import Division

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def teams4():
    """The classic four-team division (Atlanta leads with 83 wins)."""
    return load_division(DATA_DIR / "teams4.txt")


@pytest.fixture
def teams5():
    """Five-team division where Detroit is eliminated by all four rivals."""
    return load_division(DATA_DIR / "teams5.txt")


@pytest.fixture
def teams4_rows():
    return [
        ("Atlanta", 83, 71, 8, (0, 1, 6, 1)),
        ("Philadelphia", 80, 79, 3, (1, 0, 0, 2)),
        ("New_York", 78, 78, 6, (6, 0, 0, 0)),
        ("Montreal", 77, 82, 3, (1, 2, 0, 0)),
    ]


@pytest.fixture
def single_team():
    return Division.from_rows([("Solo", 10, 5, 0, (0,))])
