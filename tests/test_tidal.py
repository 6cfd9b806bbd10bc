from __future__ import annotations

import numpy as np
import pytest

from nextblock.delta import InvalidHeightError
from nextblock.models import TidePhase, TideType
from nextblock.tidal import (
    Tidal,
    TideDisplayError,
    create_tidal,
    get_blocks_until_next_tide,
    get_next_tide_block,
    get_tidal_cycle_info,
    get_tidal_state,
    get_tide_description,
    get_tide_display,
    get_tide_emoji,
    get_tide_height,
    get_tide_phase,
    get_tide_type,
    is_neap_tide,
    is_spring_tide,
)


@pytest.mark.parametrize("bad", [None, 1.5, "72"])
def test_requires_integer_height(bad: object) -> None:
    with pytest.raises(InvalidHeightError):
        Tidal(bad)  # type: ignore[arg-type]


def test_create_tidal_without_height_fails() -> None:
    with pytest.raises(InvalidHeightError):
        create_tidal()


@pytest.mark.parametrize(
    "height, tide",
    [
        (0, 18),
        (1, 17),
        (18, 0),
        (35, -17),
        (36, -18),
        (37, -17),
        (54, 0),
        (71, 17),
        (72, 18),
    ],
)
def test_tide_height_triangle_wave(height: int, tide: int) -> None:
    assert Tidal(height).tide_height() == tide


@pytest.mark.parametrize(
    "height, tide_type",
    [(0, TideType.HIGH), (18, TideType.HIGH), (19, TideType.LOW), (54, TideType.HIGH), (53, TideType.LOW)],
)
def test_tide_type_zero_counts_as_high(height: int, tide_type: TideType) -> None:
    assert Tidal(height).tide_type() is tide_type


@pytest.mark.parametrize(
    "height, phase",
    [
        (0, TidePhase.SLACK_HIGH),
        (4, TidePhase.SLACK_HIGH),
        (5, TidePhase.FALLING),
        (31, TidePhase.FALLING),
        (32, TidePhase.SLACK_LOW),
        (36, TidePhase.SLACK_LOW),
        (40, TidePhase.SLACK_LOW),
        (41, TidePhase.RISING),
        (67, TidePhase.RISING),
        (68, TidePhase.SLACK_HIGH),
        (71, TidePhase.SLACK_HIGH),
    ],
)
def test_tide_phase_windows(height: int, phase: TidePhase) -> None:
    assert Tidal(height).tide_phase() is phase


@pytest.mark.parametrize(
    "height, until, nxt, previous",
    [
        (0, 36, 36, -36),
        (10, 26, 36, 0),
        (36, 36, 72, 0),
        (40, 32, 72, 36),
        (71, 1, 72, 36),
    ],
)
def test_next_and_previous_extremum(height: int, until: int, nxt: int, previous: int) -> None:
    tidal = Tidal(height)
    assert tidal.blocks_until_next_tide() == until
    assert tidal.next_tide_block() == nxt
    assert tidal.previous_tide_block() == previous


@pytest.mark.parametrize(
    "height, spring, neap",
    [
        (0, True, False),  # full
        (504, False, False),  # waning gibbous
        (1008, False, True),  # last quarter
        (2016, True, False),  # new
        (3024, False, True),  # first quarter
    ],
)
def test_spring_and_neap_follow_lunar_phase(height: int, spring: bool, neap: bool) -> None:
    tidal = Tidal(height)
    assert tidal.is_spring_tide() is spring
    assert tidal.is_neap_tide() is neap


@pytest.mark.parametrize(
    "height, description",
    [
        (0, "high tide at peak (spring tide)"),
        (10, "high tide falling (spring tide)"),
        (510, "high tide falling"),
        (560, "high tide rising"),
        (540, "low tide at ebb"),
        (1030, "low tide falling (neap tide)"),
    ],
)
def test_description(height: int, description: str) -> None:
    assert Tidal(height).description() == description


@pytest.mark.parametrize(
    "height, display",
    [
        (0, "🌊 High Tide (+18)"),
        (36, "🏖️ Low Tide (-18)"),
        (1, "〰️ Slack Tide (+17)"),
        (35, "〰️ Slack Tide (-17)"),
        (37, "〰️ Slack Tide (-17)"),
        (510, "🌊⬇️ Tide: high tide falling (+12 blocks)"),
        (522, "🌊⬇️ Tide: high tide falling (0 blocks)"),
        (560, "🌊⬆️ Tide: high tide rising (+2 blocks)"),
        (1030, "🏖️⬇️ Tide: low tide falling (neap tide) (-4 blocks)"),
    ],
)
def test_display(height: int, display: str) -> None:
    assert Tidal(height).display() == display


def test_slack_emoji() -> None:
    assert Tidal(2).emoji() == "🌊"
    assert Tidal(33).emoji() == "🏖️"


def test_display_wraps_unexpected_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(self: Tidal) -> str:
        raise KeyError("phase")

    monkeypatch.setattr(Tidal, "description", boom)
    with pytest.raises(TideDisplayError, match="Failed to get tide display") as excinfo:
        Tidal(510).display()
    assert isinstance(excinfo.value.__cause__, KeyError)


def test_tidal_state_at_901152() -> None:
    state = Tidal(901152).tidal_state()
    assert state.event_number == 56
    assert state.cycle_number == 28
    assert state.blocks_into_event == 0
    assert state.blocks_until_next == 36
    assert state.type is TideType.HIGH
    assert state.phase is TidePhase.SLACK_HIGH
    assert state.height == 18
    assert state.next_tide_block == 901188
    assert state.previous_tide_block == 901116
    assert state.is_spring_tide is True
    assert state.is_neap_tide is False


def test_tidal_cycle_info() -> None:
    info = Tidal(901152).tidal_cycle_info()
    assert info.start_block == 899136
    assert info.end_block == 903167
    assert info.total_events == 112
    assert info.high_tides == info.low_tides == 56


def test_standalone_helpers_match_instance() -> None:
    height = 1030
    tidal = Tidal(height)
    assert get_tide_height(height) == tidal.tide_height()
    assert get_tide_type(height) is tidal.tide_type()
    assert get_tide_phase(height) is tidal.tide_phase()
    assert get_blocks_until_next_tide(height) == tidal.blocks_until_next_tide()
    assert get_next_tide_block(height) == tidal.next_tide_block()
    assert get_tidal_state(height) == tidal.tidal_state()
    assert get_tidal_cycle_info(height) == tidal.tidal_cycle_info()
    assert is_spring_tide(height) is tidal.is_spring_tide()
    assert is_neap_tide(height) is tidal.is_neap_tide()
    assert get_tide_description(height) == tidal.description()
    assert get_tide_emoji(height) == tidal.emoji()
    assert get_tide_display(height) == tidal.display()


def test_standalone_helpers_validate_height() -> None:
    with pytest.raises(InvalidHeightError):
        get_tide_height(1.5)  # type: ignore[arg-type]


def test_accepts_numpy_heights() -> None:
    height = np.arange(901150, 901153)[-1]
    assert Tidal(height).tidal_state() == Tidal(901152).tidal_state()
    assert get_tide_height(np.int64(36)) == -18
