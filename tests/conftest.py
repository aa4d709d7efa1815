"""Pytest configuration and shared fixtures for langsift tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_TESTS_ROOT = Path(__file__).resolve().parent


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    src_path = _TESTS_ROOT.parent / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def fixtures_root() -> Path:
    """Directory holding options files and text samples."""
    return _TESTS_ROOT / "fixtures"


@pytest.fixture
def french_text() -> str:
    """French sentence long enough for trigram scoring."""
    return "Ceci est un texte français suffisamment long pour être détecté correctement"


@pytest.fixture
def russian_text() -> str:
    """Russian sentence long enough for trigram scoring."""
    return "Это пример текста на русском языке для распознавания"
