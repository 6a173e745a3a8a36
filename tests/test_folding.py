from logging import DEBUG
from operator import add

import pytest

from listkit import (
    reduce_left,
    reduce_left_from_first,
    reduce_while,
    reduce_while_from_first,
    scan_left,
    scan_left_from_first,
    scan_left_while,
    scan_left_while_from_first,
)


def below_five(value: int) -> bool:
    return value < 5


def test_scan_left_starts_with_seed_and_covers_all_elements() -> None:
    values = [1, 2, 3, 4]

    result = scan_left(values, seed=0, function=add)

    assert result == (0, 1, 3, 6, 10)
    assert len(result) == len(values) + 1
    assert result[-1] == reduce_while(values, 0, add, lambda _: True)


def test_scan_left_of_empty_is_seed_only() -> None:
    assert scan_left([], seed="seed", function=add) == ("seed",)


def test_scan_left_passes_element_before_accumulator() -> None:
    result = scan_left(["a", "b", "c"], seed="", function=add)

    assert result == ("", "a", "ba", "cba")


def test_scan_left_while_keeps_first_failing_accumulation() -> None:
    assert scan_left_while([1, 2, 3, 4], 0, add, below_five) == (0, 1, 3, 6)


def test_scan_left_while_stops_processing_elements() -> None:
    seen: list[int] = []

    def tracked(element: int, accumulator: int) -> int:
        seen.append(element)
        return element + accumulator

    scan_left_while([1, 2, 3, 4], 0, tracked, below_five)

    assert seen == [1, 2, 3]


def test_scan_left_while_does_not_check_seed() -> None:
    assert scan_left_while([1], 10, add, below_five) == (10, 11)


def test_unseeded_scans_use_first_element() -> None:
    assert scan_left_from_first([1, 2, 3], add) == (1, 3, 6)
    assert scan_left_while_from_first([1, 2, 3, 4], add, below_five) == (1, 3, 6)
    assert scan_left_from_first([7], add) == (7,)


def test_unseeded_scans_of_empty_are_empty() -> None:
    assert scan_left_from_first([], add) == ()
    assert scan_left_while_from_first([], add, below_five) == ()


def test_reduce_while_returns_last_accumulation() -> None:
    assert reduce_while([1, 2, 3, 4], 0, add, below_five) == 6
    assert reduce_while([], 0, add, below_five) == 0


def test_reduce_while_from_first() -> None:
    assert reduce_while_from_first([1, 2, 3, 4], add, below_five) == 6
    assert reduce_while_from_first([], add, below_five) is None


def test_full_reductions() -> None:
    assert reduce_left([1, 2, 3], seed=10, function=add) == 16
    assert reduce_left_from_first([1, 2, 3], add) == 6
    assert reduce_left_from_first([], add) is None


def test_accumulation_errors_propagate() -> None:
    def failing(element: int, accumulator: int) -> int:
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        scan_left([1], 0, failing)


def test_early_stop_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(DEBUG, logger="listkit.folding")

    scan_left_while([1, 2, 3, 4], 0, add, below_five)

    assert [record.getMessage() for record in caplog.records] == [
        "Stopped scan at index 2 of 4, predicate failed",
    ]
