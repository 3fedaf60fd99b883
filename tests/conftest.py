"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path

from aoc2024.logger import get_logger, reset_logger

ENV_VARS = ["AOC_INPUT", "AOC_LOG_LEVEL", "AOC_LOG_DIR"]


@pytest.fixture(autouse=True)
def fresh_logger():
    """Give every test its own quiet logger and metrics."""
    reset_logger()
    get_logger(enable_console=False)
    yield
    reset_logger()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove AOC_* variables and restore them (even ones .env adds) afterwards."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def sample_pairs_text() -> str:
    """Published example for the two-column puzzle."""
    return "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


@pytest.fixture
def sample_reports_text() -> str:
    """Published example for the report safety puzzle."""
    return (
        "7 6 4 2 1\n"
        "1 2 7 8 9\n"
        "9 7 6 2 1\n"
        "1 3 2 4 5\n"
        "8 6 4 4 1\n"
        "1 3 6 7 9\n"
    )


@pytest.fixture
def pairs_file(tmp_path, sample_pairs_text) -> Path:
    """Write the two-column example to disk."""
    path = tmp_path / "puzzle_input.txt"
    path.write_text(sample_pairs_text)
    return path


@pytest.fixture
def reports_file(tmp_path, sample_reports_text) -> Path:
    """Write the report example to disk."""
    path = tmp_path / "reports.txt"
    path.write_text(sample_reports_text)
    return path
