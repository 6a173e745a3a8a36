from collections.abc import Callable, Sequence

from listkit.shape import int_range

__all__ = (
    "map_with_index",
    "zip_with",
    "zip_with_optional",
)


def zip_with_optional[First, Second, Result](
    first: Sequence[First],
    second: Sequence[Second],
    /,
    function: Callable[[First, Second], Result | None],
) -> tuple[Result, ...]:
    """
    Combine two sequences element by element dropping missing results.

    Elements are paired by position up to the length of the shorter sequence,
    remaining elements of the longer one are ignored.

    Parameters
    ----------
    first : Sequence[First]
        Sequence providing first arguments.
    second : Sequence[Second]
        Sequence providing second arguments.
    function : Callable[[First, Second], Result | None]
        Combining function, returning None when a pair has no result.

    Returns
    -------
    tuple[Result, ...]
        Results of all pairs which produced a value, in pairing order.
    """
    results: list[Result] = []
    for left, right in zip(first, second, strict=False):
        result: Result | None = function(left, right)
        if result is not None:
            results.append(result)

    return tuple(results)


def zip_with[First, Second, Result](
    first: Sequence[First],
    second: Sequence[Second],
    /,
    function: Callable[[First, Second], Result],
) -> tuple[Result, ...]:
    """
    Combine two sequences element by element.

    Every computed value is kept unless the function itself returned None.
    Pairing stops with the shorter sequence.
    """
    return zip_with_optional(first, second, function)


def map_with_index[Element, Result](
    sequence: Sequence[Element],
    /,
    function: Callable[[Element, int], Result],
) -> tuple[Result, ...]:
    """
    Map elements together with their zero based position.

    Parameters
    ----------
    sequence : Sequence[Element]
        The sequence to be mapped.
    function : Callable[[Element, int], Result]
        Mapping receiving an element and its index.

    Returns
    -------
    tuple[Result, ...]
        Mapped elements, in order.
    """
    return zip_with(sequence, int_range(0, len(sequence)), function)
