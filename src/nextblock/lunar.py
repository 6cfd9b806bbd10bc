"""Lunar phase and cycle derivation.

A lunar cycle spans two difficulty adjustments (4032 blocks) and is split into
eight equal phases of 504 blocks. Thirteen cycles make a lunar year.
"""

from nextblock.constants import (
    BLOCKS_IN_LUNAR_CYCLE,
    BLOCKS_IN_LUNAR_PHASE,
    BLOCKS_IN_LUNAR_YEAR,
)
from nextblock.delta import Delta, require_height
from nextblock.models import (
    LUNAR_CYCLES,
    LUNAR_PHASES,
    Immutable,
    LunarCycle,
    LunarObservations,
    LunarPhase,
)


class Lunar(Immutable):
    """Lunar readout for a block height.

    Args:
        height: Block height. Required, unlike Delta.

    Raises:
        InvalidHeightError: If height is missing or not an integer.
    """

    __slots__ = ("delta",)

    def __init__(self, height: int | None = None) -> None:
        object.__setattr__(self, "delta", Delta(require_height(height)))

    def __repr__(self) -> str:
        return f"Lunar(height={self.height})"

    @property
    def height(self) -> int:
        return self.delta.height

    # --- Positions ---

    @property
    def position_in_year(self) -> int:
        return self.height % BLOCKS_IN_LUNAR_YEAR

    @property
    def position_in_cycle(self) -> int:
        return self.height % BLOCKS_IN_LUNAR_CYCLE

    @property
    def position_in_phase(self) -> int:
        return self.height % BLOCKS_IN_LUNAR_PHASE

    # --- Phases ---

    @property
    def phase_index(self) -> int:
        return self.position_in_cycle * len(LUNAR_PHASES) // BLOCKS_IN_LUNAR_CYCLE

    @property
    def next_phase_index(self) -> int:
        return (self.phase_index + 1) % len(LUNAR_PHASES)

    @property
    def blocks_until_next_phase(self) -> int:
        return BLOCKS_IN_LUNAR_PHASE - (self.position_in_cycle % BLOCKS_IN_LUNAR_PHASE)

    @property
    def phase_block_height(self) -> int:
        return self.height % BLOCKS_IN_LUNAR_PHASE

    def phase(self) -> LunarPhase:
        return LUNAR_PHASES[self.phase_index]

    def next_phase(self) -> LunarPhase:
        return LUNAR_PHASES[self.next_phase_index]

    # --- Cycles ---

    @property
    def cycle_index(self) -> int:
        return self.position_in_year // BLOCKS_IN_LUNAR_CYCLE

    @property
    def next_cycle_index(self) -> int:
        return (self.cycle_index + 1) % len(LUNAR_CYCLES)

    @property
    def blocks_until_next_cycle(self) -> int:
        return BLOCKS_IN_LUNAR_CYCLE - self.position_in_cycle

    @property
    def cycle_block_height(self) -> int:
        return self.height % BLOCKS_IN_LUNAR_CYCLE

    def cycle(self) -> LunarCycle:
        return LUNAR_CYCLES[self.cycle_index]

    def next_cycle(self) -> LunarCycle:
        return LUNAR_CYCLES[self.next_cycle_index]

    def observe(self) -> LunarObservations:
        """Snapshot the current and upcoming phase/cycle for this height."""
        return LunarObservations(
            current_phase=self.phase(),
            current_cycle=self.cycle(),
            next_phase=self.next_phase(),
            next_cycle=self.next_cycle(),
            blocks_until_next_phase=self.blocks_until_next_phase,
            blocks_until_next_cycle=self.blocks_until_next_cycle,
            phase_block_height=self.phase_block_height,
            cycle_block_height=self.cycle_block_height,
        )


def create_lunar(height: int | None = None) -> Lunar:
    return Lunar(height)
