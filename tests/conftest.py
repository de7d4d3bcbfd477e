"""
Pytest fixtures for Side Shooter tests.
"""

import numpy as np
import pytest

from sideshooter.round import RoundController


@pytest.fixture
def controller():
    """A fresh 800x600 round with a seeded spawn generator."""
    return RoundController(width=800, height=600, rng=np.random.default_rng(0))


@pytest.fixture
def empty_controller(controller):
    """A fresh round with the initial enemy removed."""
    controller.enemies.clear()
    return controller
