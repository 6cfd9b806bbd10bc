"""Data model definitions — catalogs, derived snapshots and the input record."""

from dataclasses import dataclass
from enum import Enum


class Immutable:
    """Base for derivers whose attributes are fixed once __init__ returns."""

    __slots__ = ()

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


@dataclass(frozen=True)
class Block:
    """Raw caller input. Only height drives the celestial derivations."""

    height: int
    weight: int = 0  # Block weight in weight units (atmosphere only)
    tx_count: int = 0  # Transaction count (atmosphere only)


@dataclass(frozen=True)
class LunarPhase:
    name: str  # "full", "waning gibbous", ...
    emoji: str


@dataclass(frozen=True)
class LunarCycle:
    name: str  # "Orange Moon", "Bird Moon", ...
    emoji: str


@dataclass(frozen=True)
class SolarSeason:
    name: str  # "Spring", "Summer", ...
    emoji: str
    suffix: str  # "Equinox" or "Solstice"


LUNAR_PHASES: tuple[LunarPhase, ...] = (
    LunarPhase(name="full", emoji="🌕"),
    LunarPhase(name="waning gibbous", emoji="🌖"),
    LunarPhase(name="last quarter", emoji="🌗"),
    LunarPhase(name="waning crescent", emoji="🌘"),
    LunarPhase(name="new", emoji="🌑"),
    LunarPhase(name="waxing crescent", emoji="🌒"),
    LunarPhase(name="first quarter", emoji="🌓"),
    LunarPhase(name="waxing gibbous", emoji="🌔"),
)

LUNAR_CYCLES: tuple[LunarCycle, ...] = (
    LunarCycle(name="Orange Moon", emoji="🍊"),
    LunarCycle(name="Bird Moon", emoji="🪶"),
    LunarCycle(name="Friend Moon", emoji="🫂"),
    LunarCycle(name="Whale Moon", emoji="🐳"),
    LunarCycle(name="Bull Moon", emoji="🐂"),
    LunarCycle(name="Bear Moon", emoji="🐻"),
    LunarCycle(name="Corn Moon", emoji="🌽"),
    LunarCycle(name="Lightning Moon", emoji="⚡"),
    LunarCycle(name="Squirrel Moon", emoji="🥜"),
    LunarCycle(name="Wave Moon", emoji="🌊"),
    LunarCycle(name="Ice Moon", emoji="🧊"),
    LunarCycle(name="Diamond Moon", emoji="💎"),
    LunarCycle(name="Satoshi's Moon", emoji="₿"),
)

SOLAR_SEASONS: tuple[SolarSeason, ...] = (
    SolarSeason(name="Spring", emoji="🌱", suffix="Equinox"),
    SolarSeason(name="Summer", emoji="🌞", suffix="Solstice"),
    SolarSeason(name="Autumn", emoji="🍂", suffix="Equinox"),
    SolarSeason(name="Winter", emoji="❄️", suffix="Solstice"),
)


class TideType(str, Enum):
    HIGH = "high"
    LOW = "low"


class TidePhase(str, Enum):
    RISING = "rising"
    FALLING = "falling"
    SLACK_HIGH = "slack_high"  # Peak of high tide
    SLACK_LOW = "slack_low"  # Bottom of low tide


@dataclass(frozen=True)
class TidalState:
    """Complete tidal state for one block height. Recomputed, never stored."""

    event_number: int  # 0-111 (tidal event within the lunar cycle)
    cycle_number: int  # 0-55 (complete high-low pair within the lunar cycle)
    blocks_into_event: int  # 0-35
    blocks_until_next: int  # 1-36
    type: TideType
    phase: TidePhase
    height: int  # -18..+18
    next_tide_block: int  # Absolute height of the next extremum
    previous_tide_block: int  # Absolute height of the previous extremum
    is_spring_tide: bool  # New or full moon
    is_neap_tide: bool  # Quarter moons


@dataclass(frozen=True)
class TidalCycleInfo:
    """Tidal bookkeeping for the lunar cycle containing a height."""

    start_block: int  # First block of the lunar cycle
    end_block: int  # Last block of the lunar cycle
    total_events: int
    high_tides: int
    low_tides: int


@dataclass(frozen=True)
class LunarObservations:
    current_phase: LunarPhase
    current_cycle: LunarCycle
    next_phase: LunarPhase
    next_cycle: LunarCycle
    blocks_until_next_phase: int
    blocks_until_next_cycle: int
    phase_block_height: int
    cycle_block_height: int


@dataclass(frozen=True)
class SolarObservations:
    current_phase: SolarSeason
    next_phase: SolarSeason
    blocks_until_next_phase: int
    blocks_until_next_cycle: int
    phase_block_height: int
    cycle_block_height: int


@dataclass(frozen=True)
class Observations:
    """Lunar and solar snapshots for one height. The sole input to readouts."""

    lunar_observations: LunarObservations
    solar_observations: SolarObservations
