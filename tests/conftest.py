"""
Pytest configuration file.

Puts the repo root on sys.path so that 'import src...' works without an
editable install, and provides shared clock fixtures.
"""
import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def fake_clock():
    """Bind a FakeClock starting at 0 ms as the process clock for one test."""
    from src.utils.time import FakeClock, reset_clock, set_clock

    clock = FakeClock()
    set_clock(clock)
    yield clock
    reset_clock()
