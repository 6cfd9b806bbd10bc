"""Block height wrapper — difference arithmetic, date estimation and the composite date."""

import logging
import math
import numbers
from datetime import datetime

from pytz import utc

from nextblock.constants import (
    BLOCK_INTERVAL,
    ERA_AFTER_GENESIS,
    ERA_BEFORE_GENESIS,
    GENESIS_BLOCK_DATE,
    GENESIS_BLOCK_HEIGHT,
    HALVING_BLOCK,
)
from nextblock.models import Immutable

LOG = logging.getLogger(__name__)


class InvalidHeightError(ValueError):
    """Block height missing where required, or not an integer."""


def validate_height(value: object) -> int:
    """Return value as an int, or raise InvalidHeightError.

    Any integral number (``int``, ``numpy.int64``, ``2.0``) is accepted;
    bools, fractions, nan and non-numbers are not.
    """
    if isinstance(value, bool):
        raise InvalidHeightError("Block height must be an integer")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    LOG.debug("Rejected block height %r", value)
    raise InvalidHeightError("Block height must be an integer")


def parse_height(text: str) -> int:
    """Parse a typed-in block height such as ``"901152"`` or ``"2.0"``.

    Raises:
        InvalidHeightError: If text is not a whole number.
    """
    try:
        value: int | float = float(text) if "." in text else int(text)
    except ValueError as e:
        raise InvalidHeightError(f"Block height must be an integer: {text!r}") from e
    return validate_height(value)


def require_height(value: object) -> int:
    """Like validate_height, but a missing height is an error too."""
    if value is None:
        LOG.debug("Rejected missing block height")
        raise InvalidHeightError("Block height must be an integer")
    return validate_height(value)


class Delta(Immutable):
    """A single block height, the anchor every other deriver builds on.

    Args:
        height: Block height. Defaults to the genesis height when omitted.

    Raises:
        InvalidHeightError: If height is given but is not an integer.
    """

    __slots__ = ("_height",)

    def __init__(self, height: int | None = None) -> None:
        object.__setattr__(
            self,
            "_height",
            GENESIS_BLOCK_HEIGHT if height is None else validate_height(height),
        )

    def __repr__(self) -> str:
        return f"Delta(height={self._height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Delta):
            return NotImplemented
        return self._height == other._height

    def __hash__(self) -> int:
        return hash(self._height)

    @property
    def height(self) -> int:
        return self._height

    @property
    def era(self) -> str:
        """Era token: AG (after genesis) for non-negative heights, BG otherwise."""
        return ERA_AFTER_GENESIS if self._height >= 0 else ERA_BEFORE_GENESIS

    @property
    def halving_epoch(self) -> int:
        return self._height // HALVING_BLOCK

    @staticmethod
    def height_from_date(date: datetime) -> int:
        """Estimate the block height at date, assuming one block per 10 minutes.

        Naive datetimes are read as UTC. No bounds checking: dates before
        genesis give negative heights.
        """
        if date.tzinfo is None:
            date = utc.localize(date)
        return (date - GENESIS_BLOCK_DATE) // BLOCK_INTERVAL

    def delta(self, other: "int | Delta") -> int:
        """Signed block difference; positive when self is ahead of other."""
        if not isinstance(other, Delta):
            other = Delta(other)
        return self._height - other.height

    def format_composite_date(
        self, season_index: int, cycle_index: int, position_in_cycle: int
    ) -> str:
        """Format the height as an astronomical date string.

        Format: ``{era}_{halving}_{season}_{moon}_{position}``. Underscores keep
        the result usable as a hashtag. Season and moon are 1-based; position is
        zero-padded to at least four digits and never truncated.

        Args:
            season_index: Solar season index (0-based).
            cycle_index: Lunar cycle index (0-based).
            position_in_cycle: Position within the lunar cycle (0-4031).

        Returns:
            e.g. ``"AG_4_1_3_2016"``.
        """
        return (
            f"{self.era}_{self.halving_epoch}_{season_index + 1}"
            f"_{cycle_index + 1}_{position_in_cycle:04d}"
        )


def create_delta(height: int | None = None) -> Delta:
    return Delta(height)
