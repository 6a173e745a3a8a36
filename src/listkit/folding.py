from collections.abc import Callable, Sequence
from logging import getLogger

from listkit.optional import last_option
from listkit.utils.functions import always

__all__ = (
    "reduce_left",
    "reduce_left_from_first",
    "reduce_while",
    "reduce_while_from_first",
    "scan_left",
    "scan_left_from_first",
    "scan_left_while",
    "scan_left_while_from_first",
)

logger = getLogger(__name__)


def scan_left_while[Element, Accumulator](
    sequence: Sequence[Element],
    /,
    seed: Accumulator,
    function: Callable[[Element, Accumulator], Accumulator],
    predicate: Callable[[Accumulator], bool],
) -> tuple[Accumulator, ...]:
    """
    Collect running accumulations from left to right until predicate fails.

    The seed is always the first result. Each next accumulation is computed
    with `function(element, accumulator)` and appended to the results.
    When `predicate` does not hold for the appended accumulation the scan
    stops and remaining elements are not processed.

    Parameters
    ----------
    sequence : Sequence[Element]
        The elements to be accumulated.
    seed : Accumulator
        The initial accumulator value.
    function : Callable[[Element, Accumulator], Accumulator]
        Accumulation step receiving the element and the current accumulator.
    predicate : Callable[[Accumulator], bool]
        Check if the scan should continue after the given accumulation.

    Returns
    -------
    tuple[Accumulator, ...]
        The seed followed by computed accumulations, the last of them being
        the first one which failed the predicate if any did.
    """
    results: list[Accumulator] = [seed]
    accumulator: Accumulator = seed
    for index, element in enumerate(sequence):
        accumulator = function(element, accumulator)
        results.append(accumulator)
        if not predicate(accumulator):
            logger.debug(
                "Stopped scan at index %d of %d, predicate failed",
                index,
                len(sequence),
            )
            break

    return tuple(results)


def scan_left_while_from_first[Element](
    sequence: Sequence[Element],
    /,
    function: Callable[[Element, Element], Element],
    predicate: Callable[[Element], bool],
) -> tuple[Element, ...]:
    """
    Variant of `scan_left_while` using the first element as the seed.

    Returns an empty tuple for an empty sequence.
    """
    if not sequence:
        return ()

    return scan_left_while(
        sequence[1:],
        seed=sequence[0],
        function=function,
        predicate=predicate,
    )


def scan_left[Element, Accumulator](
    sequence: Sequence[Element],
    /,
    seed: Accumulator,
    function: Callable[[Element, Accumulator], Accumulator],
) -> tuple[Accumulator, ...]:
    """
    Collect all running accumulations, starting with the seed.
    """
    return scan_left_while(
        sequence,
        seed=seed,
        function=function,
        predicate=always(True),
    )


def scan_left_from_first[Element](
    sequence: Sequence[Element],
    /,
    function: Callable[[Element, Element], Element],
) -> tuple[Element, ...]:
    return scan_left_while_from_first(
        sequence,
        function=function,
        predicate=always(True),
    )


def reduce_while[Element, Accumulator](
    sequence: Sequence[Element],
    /,
    seed: Accumulator,
    function: Callable[[Element, Accumulator], Accumulator],
    predicate: Callable[[Accumulator], bool],
) -> Accumulator:
    """
    Fold elements from left to right until predicate fails.

    Parameters
    ----------
    sequence : Sequence[Element]
        The elements to be accumulated.
    seed : Accumulator
        The initial accumulator value, returned as is for an empty sequence.
    function : Callable[[Element, Accumulator], Accumulator]
        Accumulation step receiving the element and the current accumulator.
    predicate : Callable[[Accumulator], bool]
        Check if folding should continue after the given accumulation.

    Returns
    -------
    Accumulator
        The last accumulation reached, see `scan_left_while`.
    """
    return scan_left_while(
        sequence,
        seed=seed,
        function=function,
        predicate=predicate,
    )[-1]


def reduce_while_from_first[Element](
    sequence: Sequence[Element],
    /,
    function: Callable[[Element, Element], Element],
    predicate: Callable[[Element], bool],
) -> Element | None:
    """
    Variant of `reduce_while` using the first element as the seed.

    Returns
    -------
    Element | None
        The last accumulation reached or None for an empty sequence.
    """
    return last_option(
        scan_left_while_from_first(
            sequence,
            function=function,
            predicate=predicate,
        )
    )


def reduce_left[Element, Accumulator](
    sequence: Sequence[Element],
    /,
    seed: Accumulator,
    function: Callable[[Element, Accumulator], Accumulator],
) -> Accumulator:
    return reduce_while(
        sequence,
        seed=seed,
        function=function,
        predicate=always(True),
    )


def reduce_left_from_first[Element](
    sequence: Sequence[Element],
    /,
    function: Callable[[Element, Element], Element],
) -> Element | None:
    return reduce_while_from_first(
        sequence,
        function=function,
        predicate=always(True),
    )
