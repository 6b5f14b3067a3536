"""
Test setup: headless matplotlib and a clean configuration for every test
"""
import matplotlib
matplotlib.use('Agg')

import pytest

from ecosim.config import SimulationConfig


@pytest.fixture(autouse=True)
def restore_config():
    """Undo any SimulationConfig overrides a test applies."""
    SimulationConfig.restore_base()
    yield
    SimulationConfig.restore_base()
