"""Pytest configuration for the selector vocabulary tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

TEST_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = TEST_DIR.parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

DATASET_DIR = TEST_DIR / "datasets"


@pytest.fixture
def dataset_dir() -> Path:
    """Directory holding the selector and blueprint fixtures."""

    return DATASET_DIR
