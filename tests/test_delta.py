from __future__ import annotations

from datetime import datetime, timedelta

import numpy as np
import pytest
from pytz import timezone

from nextblock.constants import GENESIS_BLOCK_DATE, GENESIS_BLOCK_HEIGHT
from nextblock.delta import Delta, InvalidHeightError, create_delta, parse_height


def test_default_height_is_genesis() -> None:
    assert Delta().height == GENESIS_BLOCK_HEIGHT
    assert create_delta().height == GENESIS_BLOCK_HEIGHT


def test_delta_against_int_and_delta() -> None:
    assert Delta(5).delta(3) == 2
    assert Delta(3).delta(Delta(5)) == -2
    assert Delta().delta(10) == GENESIS_BLOCK_HEIGHT - 10


@pytest.mark.parametrize("bad", [1.5, "100", True, float("nan"), float("inf")])
def test_rejects_non_integer_height(bad: object) -> None:
    with pytest.raises(InvalidHeightError):
        Delta(bad)  # type: ignore[arg-type]


def test_delta_rejects_non_integer_other() -> None:
    with pytest.raises(InvalidHeightError):
        Delta(5).delta(2.5)  # type: ignore[arg-type]


def test_integral_float_is_accepted() -> None:
    delta = Delta(2.0)  # type: ignore[arg-type]
    assert delta.height == 2
    assert isinstance(delta.height, int)


@pytest.mark.parametrize(
    "value",
    [np.int64(901152), np.int32(901152), np.uint32(901152), np.float64(901152.0)],
)
def test_numpy_integers_are_accepted(value: object) -> None:
    delta = Delta(value)  # type: ignore[arg-type]
    assert delta.height == 901152
    assert type(delta.height) is int


def test_delta_against_numpy_height() -> None:
    assert Delta(10).delta(np.arange(3, 5)[-1]) == 6  # type: ignore[arg-type]


@pytest.mark.parametrize("text, expected", [("901152", 901152), ("2.0", 2), ("-7", -7)])
def test_parse_height(text: str, expected: int) -> None:
    assert parse_height(text) == expected


@pytest.mark.parametrize("text", ["1.5", "abc", "", "nan"])
def test_parse_height_rejects_non_integers(text: str) -> None:
    with pytest.raises(InvalidHeightError):
        parse_height(text)


def test_invalid_height_is_a_value_error() -> None:
    assert issubclass(InvalidHeightError, ValueError)


@pytest.mark.parametrize(
    "offset, expected",
    [
        (timedelta(0), 0),
        (timedelta(minutes=10), 1),
        (timedelta(minutes=9, seconds=59), 0),
        (timedelta(days=1), 144),
        (timedelta(minutes=-1), -1),
    ],
)
def test_height_from_date(offset: timedelta, expected: int) -> None:
    assert Delta().height_from_date(GENESIS_BLOCK_DATE + offset) == expected


def test_height_from_naive_date_reads_as_utc() -> None:
    assert Delta.height_from_date(datetime(2009, 1, 3, 18, 25, 5)) == 1


def test_height_from_date_respects_timezone() -> None:
    seoul = timezone("Asia/Seoul").localize(datetime(2009, 1, 4, 3, 25, 5))
    assert Delta.height_from_date(seoul) == 1


@pytest.mark.parametrize(
    "height, args, expected",
    [
        (210000, (0, 1, 100), "AG_1_1_2_0100"),
        (0, (0, 0, 0), "AG_0_1_1_0000"),
        (901152, (1, 2, 2016), "AG_4_2_3_2016"),
        (420000, (3, 12, 12345), "AG_2_4_13_12345"),
        (-1, (0, 0, 7), "BG_-1_1_1_0007"),
    ],
)
def test_format_composite_date(height: int, args: tuple[int, int, int], expected: str) -> None:
    assert Delta(height).format_composite_date(*args) == expected


def test_era_and_halving_epoch() -> None:
    assert Delta(0).era == "AG"
    assert Delta(-5).era == "BG"
    assert Delta(209999).halving_epoch == 0
    assert Delta(210000).halving_epoch == 1


def test_equality_by_height() -> None:
    assert Delta(7) == Delta(7)
    assert Delta(7) != Delta(8)
    assert len({Delta(7), Delta(7)}) == 1


def test_height_cannot_be_reassigned() -> None:
    delta = Delta(7)
    with pytest.raises(AttributeError):
        delta._height = 8  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del delta._height
    assert delta.height == 7
