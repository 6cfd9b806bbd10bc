"""Tidal derivation — a deterministic tide synchronized with the lunar cycle.

The tide is a continuous triangle wave over a 72-block cycle: +18 at the top of
the cycle, falling one block per block to -18 at position 36, then rising back.
Highs and lows alternate every 36 blocks, so one lunar cycle (4032 blocks)
holds exactly 56 high-low pairs.
"""

from nextblock.constants import (
    BLOCKS_IN_LUNAR_CYCLE,
    BLOCKS_PER_TIDAL_EVENT,
    BLOCKS_PER_TIDE_CYCLE,
    MAX_HIGH_TIDE,
    MAX_LOW_TIDE,
    SLACK_TIDE,
    SLACK_WATER_WINDOW,
    TIDAL_EVENTS_PER_LUNAR_CYCLE,
    TIDE_CYCLES_PER_LUNAR_CYCLE,
)
from nextblock.delta import Delta, require_height
from nextblock.lunar import Lunar
from nextblock.models import Immutable, TidalCycleInfo, TidalState, TidePhase, TideType

_SPRING_PHASES = frozenset({"new", "full"})
_NEAP_PHASES = frozenset({"first quarter", "last quarter"})

_PHASE_DESCRIPTIONS: dict[TidePhase, str] = {
    TidePhase.RISING: "rising",
    TidePhase.FALLING: "falling",
    TidePhase.SLACK_HIGH: "at peak",
    TidePhase.SLACK_LOW: "at ebb",
}

_TIDE_EMOJIS: dict[tuple[TideType, str], str] = {
    (TideType.HIGH, "rising"): "🌊⬆️",
    (TideType.HIGH, "slack"): "🌊",
    (TideType.HIGH, "falling"): "🌊⬇️",
    (TideType.LOW, "rising"): "🏖️⬆️",
    (TideType.LOW, "slack"): "🏖️",
    (TideType.LOW, "falling"): "🏖️⬇️",
}

_HIGH_TIDE_BANNER = f"🌊 High Tide (+{MAX_HIGH_TIDE})"
_LOW_TIDE_BANNER = f"🏖️ Low Tide ({MAX_LOW_TIDE})"
_SLACK_TIDE_BANNERS = {
    SLACK_TIDE: f"〰️ Slack Tide (+{SLACK_TIDE})",
    -SLACK_TIDE: f"〰️ Slack Tide (-{SLACK_TIDE})",
}


class TideDisplayError(RuntimeError):
    """Tide display string could not be built."""


def _height_at(position_in_cycle: int) -> int:
    half = BLOCKS_PER_TIDE_CYCLE // 2
    if position_in_cycle <= half:
        return MAX_HIGH_TIDE - position_in_cycle
    return MAX_LOW_TIDE + (position_in_cycle - half)


def _phase_at(position_in_cycle: int) -> TidePhase:
    half = BLOCKS_PER_TIDE_CYCLE // 2
    # Peak sits at 0 (== 72), trough at 36
    if (
        position_in_cycle <= SLACK_WATER_WINDOW
        or position_in_cycle >= BLOCKS_PER_TIDE_CYCLE - SLACK_WATER_WINDOW
    ):
        return TidePhase.SLACK_HIGH
    if abs(position_in_cycle - half) <= SLACK_WATER_WINDOW:
        return TidePhase.SLACK_LOW
    if position_in_cycle > half:
        return TidePhase.RISING
    return TidePhase.FALLING


class Tidal(Immutable):
    """Tidal readout for a block height.

    Args:
        height: Block height. Required, like Lunar.

    Raises:
        InvalidHeightError: If height is missing or not an integer.
    """

    __slots__ = ("delta", "lunar")

    def __init__(self, height: int | None = None) -> None:
        height = require_height(height)
        object.__setattr__(self, "delta", Delta(height))
        object.__setattr__(self, "lunar", Lunar(height))

    def __repr__(self) -> str:
        return f"Tidal(height={self.height})"

    @property
    def height(self) -> int:
        return self.delta.height

    @property
    def position_in_cycle(self) -> int:
        return self.height % BLOCKS_PER_TIDE_CYCLE

    @property
    def blocks_into_event(self) -> int:
        return self.position_in_cycle % BLOCKS_PER_TIDAL_EVENT

    def tide_height(self) -> int:
        """Tide height in blocks, -18..+18, changing by exactly 1 per block."""
        return _height_at(self.position_in_cycle)

    def tide_type(self) -> TideType:
        # Zero is classified as high
        return TideType.HIGH if self.tide_height() >= 0 else TideType.LOW

    def tide_phase(self) -> TidePhase:
        return _phase_at(self.position_in_cycle)

    def blocks_until_next_tide(self) -> int:
        return BLOCKS_PER_TIDAL_EVENT - self.blocks_into_event

    def next_tide_block(self) -> int:
        return self.height + self.blocks_until_next_tide()

    def previous_tide_block(self) -> int:
        into = self.blocks_into_event
        if into == 0:
            return self.height - BLOCKS_PER_TIDAL_EVENT
        return self.height - into

    def is_spring_tide(self) -> bool:
        return self.lunar.phase().name in _SPRING_PHASES

    def is_neap_tide(self) -> bool:
        return self.lunar.phase().name in _NEAP_PHASES

    def tidal_state(self) -> TidalState:
        event_number = (self.height % BLOCKS_IN_LUNAR_CYCLE) // BLOCKS_PER_TIDAL_EVENT
        return TidalState(
            event_number=event_number,
            cycle_number=event_number // 2,
            blocks_into_event=self.blocks_into_event,
            blocks_until_next=self.blocks_until_next_tide(),
            type=self.tide_type(),
            phase=self.tide_phase(),
            height=self.tide_height(),
            next_tide_block=self.next_tide_block(),
            previous_tide_block=self.previous_tide_block(),
            is_spring_tide=self.is_spring_tide(),
            is_neap_tide=self.is_neap_tide(),
        )

    def tidal_cycle_info(self) -> TidalCycleInfo:
        start = self.height - (self.height % BLOCKS_IN_LUNAR_CYCLE)
        return TidalCycleInfo(
            start_block=start,
            end_block=start + BLOCKS_IN_LUNAR_CYCLE - 1,
            total_events=TIDAL_EVENTS_PER_LUNAR_CYCLE,
            high_tides=TIDE_CYCLES_PER_LUNAR_CYCLE,
            low_tides=TIDE_CYCLES_PER_LUNAR_CYCLE,
        )

    def description(self) -> str:
        """Human-readable tide, e.g. ``"low tide rising (neap tide)"``."""
        type_description = f"{self.tide_type().value} tide"
        description = f"{type_description} {_PHASE_DESCRIPTIONS[self.tide_phase()]}"

        special: list[str] = []
        if self.is_spring_tide():
            special.append("spring tide")
        if self.is_neap_tide():
            special.append("neap tide")
        if special:
            description += f" ({', '.join(special)})"
        return description

    def emoji(self) -> str:
        phase = self.tide_phase()
        if phase in (TidePhase.SLACK_HIGH, TidePhase.SLACK_LOW):
            kind = "slack"
        else:
            kind = phase.value
        return _TIDE_EMOJIS[(self.tide_type(), kind)]

    def display(self) -> str:
        """Formatted tide string.

        Extremes (+18/-18) and the slack tides either side of them (+17/-17)
        get a fixed banner; everything else shows emoji, description and the
        signed height.

        Raises:
            TideDisplayError: If the display string cannot be built.
        """
        try:
            tide_height = self.tide_height()
            if tide_height == MAX_HIGH_TIDE:
                return _HIGH_TIDE_BANNER
            if tide_height == MAX_LOW_TIDE:
                return _LOW_TIDE_BANNER
            if tide_height in _SLACK_TIDE_BANNERS:
                return _SLACK_TIDE_BANNERS[tide_height]

            signed = f"+{tide_height}" if tide_height > 0 else f"{tide_height}"
            return f"{self.emoji()} Tide: {self.description()} ({signed} blocks)"
        except Exception as e:
            raise TideDisplayError(f"Failed to get tide display: {e}") from e


def create_tidal(height: int | None = None) -> Tidal:
    return Tidal(height)


# --- Standalone helpers taking a raw height ---


def get_tide_height(height: int) -> int:
    return Tidal(height).tide_height()


def get_tide_type(height: int) -> TideType:
    return Tidal(height).tide_type()


def get_tide_phase(height: int) -> TidePhase:
    return Tidal(height).tide_phase()


def get_blocks_until_next_tide(height: int) -> int:
    return Tidal(height).blocks_until_next_tide()


def get_next_tide_block(height: int) -> int:
    return Tidal(height).next_tide_block()


def get_tidal_state(height: int) -> TidalState:
    return Tidal(height).tidal_state()


def get_tidal_cycle_info(height: int) -> TidalCycleInfo:
    return Tidal(height).tidal_cycle_info()


def is_spring_tide(height: int) -> bool:
    return Tidal(height).is_spring_tide()


def is_neap_tide(height: int) -> bool:
    return Tidal(height).is_neap_tide()


def get_tide_description(height: int) -> str:
    return Tidal(height).description()


def get_tide_emoji(height: int) -> str:
    return Tidal(height).emoji()


def get_tide_display(height: int) -> str:
    return Tidal(height).display()
