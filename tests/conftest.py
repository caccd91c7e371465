"""Global test configuration.

Seeds RNGs for more deterministic behavior and auto-marks the property
suite so CI can select it with ``-m property``.
"""

import os
import random
from pathlib import Path

import numpy as np
import pytest

from numtower.core.context_config import MathContextConfig


def pytest_sessionstart(session: pytest.Session) -> None:
    """Seed common RNGs to improve test determinism."""
    seed = int(os.environ.get("NUMTOWER_TEST_SEED", "12345"))
    random.seed(seed)
    np.random.seed(seed)


@pytest.fixture(autouse=True)
def _reset_ambient_context():
    """Leave no ambient math context behind between tests."""
    yield
    MathContextConfig.clear_context()


def pytest_collection_modifyitems(session: pytest.Session, config: pytest.Config, items: list) -> None:
    """Auto-mark tests under tests/property with the 'property' marker."""
    for item in items:
        try:
            p = Path(str(item.fspath))
            if any(part == "property" for part in p.parts) and "tests" in p.parts:
                item.add_marker(pytest.mark.property)
        except (TypeError, ValueError):
            # items without a filesystem path stay unmarked
            pass
