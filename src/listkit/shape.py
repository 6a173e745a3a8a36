from collections.abc import Sequence

__all__ = (
    "flatten",
    "int_range",
    "to_list_of_list",
)


def flatten[Element](
    sequences: Sequence[Sequence[Element]],
    /,
) -> tuple[Element, ...]:
    """
    Concatenate nested sequences keeping outer, then inner order.

    Parameters
    ----------
    sequences : Sequence[Sequence[Element]]
        The sequences to be joined.

    Returns
    -------
    tuple[Element, ...]
        A new tuple with all elements of all nested sequences.
    """
    return tuple(element for sequence in sequences for element in sequence)


def to_list_of_list[Element](
    sequence: Sequence[Element],
    /,
) -> tuple[tuple[Element], ...]:
    """
    Wrap each element into its own single element tuple.
    """
    return tuple((element,) for element in sequence)


def int_range(
    start: int,
    end: int,
    /,
) -> tuple[int, ...]:
    """
    Prepare consecutive integers from start (inclusive) to end (exclusive).

    Parameters
    ----------
    start : int
        The first integer of the result.
    end : int
        The integer right after the last one of the result.

    Returns
    -------
    tuple[int, ...]
        Ascending integers, empty when start is not lower than end.
    """
    return tuple(range(start, end))
