# tests/conftest.py
import random
import sys
from pathlib import Path

import pytest

# Add src/ to sys.path so "bitsudoku" imports without an install
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture
def puzzle_text():
    """Puzzle with a known unique solution."""
    return PUZZLE


@pytest.fixture
def solution_text():
    """Unique solution of ``puzzle_text``."""
    return SOLUTION


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(20240611)
