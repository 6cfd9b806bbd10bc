"""Solar season derivation. One solar cycle per halving, four seasons each."""

from nextblock.constants import BLOCKS_IN_SOLAR_CYCLE, BLOCKS_IN_SOLAR_SEASON
from nextblock.delta import Delta
from nextblock.models import SOLAR_SEASONS, Immutable, SolarObservations, SolarSeason


class Solar(Immutable):
    """Solar readout for a block height. Defaults to genesis like Delta."""

    __slots__ = ("delta",)

    def __init__(self, height: int | None = None) -> None:
        object.__setattr__(self, "delta", Delta(height))

    def __repr__(self) -> str:
        return f"Solar(height={self.height})"

    @property
    def height(self) -> int:
        return self.delta.height

    @property
    def position_in_cycle(self) -> int:
        return self.height % BLOCKS_IN_SOLAR_CYCLE

    @property
    def season_index(self) -> int:
        return self.position_in_cycle * len(SOLAR_SEASONS) // BLOCKS_IN_SOLAR_CYCLE

    @property
    def next_season_index(self) -> int:
        return (self.season_index + 1) % len(SOLAR_SEASONS)

    def season(self) -> SolarSeason:
        return SOLAR_SEASONS[self.season_index]

    def next_season(self) -> SolarSeason:
        return SOLAR_SEASONS[self.next_season_index]

    @property
    def blocks_until_next_season(self) -> int:
        return BLOCKS_IN_SOLAR_SEASON - (self.position_in_cycle % BLOCKS_IN_SOLAR_SEASON)

    @property
    def blocks_until_next_cycle(self) -> int:
        return BLOCKS_IN_SOLAR_CYCLE - self.position_in_cycle

    @property
    def season_block_height(self) -> int:
        return self.height % BLOCKS_IN_SOLAR_SEASON

    @property
    def cycle_block_height(self) -> int:
        return self.height % BLOCKS_IN_SOLAR_CYCLE

    @property
    def season_position(self) -> int:
        return self.position_in_cycle % BLOCKS_IN_SOLAR_SEASON

    def observe(self) -> SolarObservations:
        return SolarObservations(
            current_phase=self.season(),
            next_phase=self.next_season(),
            blocks_until_next_phase=self.blocks_until_next_season,
            blocks_until_next_cycle=self.blocks_until_next_cycle,
            phase_block_height=self.season_block_height,
            cycle_block_height=self.cycle_block_height,
        )


def create_solar(height: int | None = None) -> Solar:
    return Solar(height)
