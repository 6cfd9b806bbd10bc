"""Composition root — builds every deriver for one block and assembles the composite date."""

import logging
from dataclasses import dataclass

from nextblock.atmosphere import Atmosphere
from nextblock.delta import Delta
from nextblock.lunar import Lunar
from nextblock.models import Block, Observations
from nextblock.solar import Solar
from nextblock.tidal import Tidal

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Telescope:
    """Every readout for a single block height. Built per block, never mutated."""

    delta: Delta
    lunar: Lunar
    solar: Solar
    tidal: Tidal
    atmosphere: Atmosphere

    @property
    def height(self) -> int:
        return self.delta.height

    def formatted_date(self) -> str:
        """Composite date, e.g. ``"AG_4_1_3_1440"``."""
        return self.delta.format_composite_date(
            self.solar.season_index,
            self.lunar.cycle_index,
            self.lunar.position_in_cycle,
        )

    def observe(self) -> Observations:
        return Observations(
            lunar_observations=self.lunar.observe(),
            solar_observations=self.solar.observe(),
        )


def create_telescope(block: Block) -> Telescope:
    """Build a Telescope from a Block.

    Raises:
        InvalidHeightError: If block.height is not an integer.
    """
    return Telescope(
        delta=Delta(block.height),
        lunar=Lunar(block.height),
        solar=Solar(block.height),
        tidal=Tidal(block.height),
        atmosphere=Atmosphere(block.weight, block.tx_count),
    )


def run(block: Block) -> Telescope:
    """Top-level entry point: takes a Block and returns its Telescope.

    Args:
        block: Caller-supplied block record.

    Returns:
        Fully assembled Telescope.
    """
    telescope = create_telescope(block)
    LOG.debug("Block %d -> %s", telescope.height, telescope.formatted_date())
    return telescope
