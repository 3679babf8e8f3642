"""Test configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Offscreen Qt so widget tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# src/ holds the top-level packages, same as main.py sets up
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from core.models import Song


@pytest.fixture()
def imagine():
    return Song("Imagine", "John Lennon", "Rock", 183)


@pytest.fixture()
def bold():
    return Song("Bold", "X", "Pop", 200)


@pytest.fixture()
def songs():
    return [
        Song("imagine", "John Lennon", "Rock", 183),
        Song("Bold", "x", "Pop", 200),
        Song("Anthem", "Blur", "britpop", 95),
        Song("Zebra", "Beach House", "Dream Pop", 95),
    ]
