"""Shared fixtures for mudlog tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from mudlog.models import Measurement, WorkingSet

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def well7_path():
    return FIXTURES_DIR / "bloodhound_well7.xls"


@pytest.fixture
def make_set():
    """Build a working set with one measurement per depth; rop records the input position."""

    def _make(*depths: int) -> WorkingSet:
        return WorkingSet([Measurement(depth=d, rop=float(i)) for i, d in enumerate(depths)])

    return _make
