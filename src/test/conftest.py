import sys
from pathlib import Path

import numpy as np
import pytest
import pint

# Ensure src/ is on sys.path so 'planar_rotations' imports work from a checkout
_SRC = str(Path(__file__).parent.parent)
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from planar_rotations import configure


@pytest.fixture(scope="session")
def ureg():
    """Fresh pint unit registry."""
    return pint.UnitRegistry()


@pytest.fixture
def rng():
    """Seeded generator for reproducible sampling."""
    return np.random.default_rng(0)


@pytest.fixture(autouse=True)
def default_settings():
    """Restore default settings after every test."""
    yield
    configure()
