"""Pytest configuration for NextBlock."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from nextblock.models import Block  # noqa: E402
from nextblock.telescope import Telescope, run  # noqa: E402


@pytest.fixture
def telescope_901152() -> Telescope:
    return run(Block(height=901152, weight=1_000_000, tx_count=333))
