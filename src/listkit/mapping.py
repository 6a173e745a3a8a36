from collections.abc import Callable, Sequence
from logging import getLogger

from listkit.utils.functions import identity
from listkit.zipping import zip_with_optional

__all__ = (
    "cat_optional",
    "map_optional",
    "map_optional_zipped",
    "sequence",
    "take_while_optional",
    "traverse",
)

logger = getLogger(__name__)


def map_optional[Element, Result](
    elements: Sequence[Element],
    /,
    function: Callable[[Element], Result | None],
) -> tuple[Result, ...]:
    """
    Map all elements dropping those without a result.

    Unlike `take_while_optional` every element is processed, a missing result
    only skips the element.

    Parameters
    ----------
    elements : Sequence[Element]
        The sequence to be mapped.
    function : Callable[[Element], Result | None]
        Mapping returning None for elements without a result.

    Returns
    -------
    tuple[Result, ...]
        Present results in input order.
    """
    results: list[Result] = []
    for element in elements:
        result: Result | None = function(element)
        if result is not None:
            results.append(result)

    return tuple(results)


def map_optional_zipped[Element, Result](
    elements: Sequence[Element],
    /,
    function: Callable[[Element], Result | None],
) -> tuple[Result, ...]:
    """
    Same as `map_optional`, expressed as zipping the sequence with itself.
    """
    return zip_with_optional(
        elements,
        elements,
        lambda element, _: function(element),
    )


def cat_optional[Element](
    elements: Sequence[Element | None],
    /,
) -> tuple[Element, ...]:
    """
    Collect present values of a sequence of optionals, in order.
    """
    return map_optional(elements, identity)


def take_while_optional[Element, Result](
    elements: Sequence[Element],
    /,
    function: Callable[[Element], Result | None],
) -> tuple[Result, ...]:
    """
    Map elements until the first one without a result.

    Processing stops at the first missing result, the function is not called
    for any of the remaining elements.

    Parameters
    ----------
    elements : Sequence[Element]
        The sequence to be mapped.
    function : Callable[[Element], Result | None]
        Mapping returning None for elements without a result.

    Returns
    -------
    tuple[Result, ...]
        Results collected before the first missing one.
    """
    results: list[Result] = []
    for index, element in enumerate(elements):
        result: Result | None = function(element)
        if result is None:
            logger.debug(
                "Stopped mapping at index %d of %d, missing result",
                index,
                len(elements),
            )
            break

        results.append(result)

    return tuple(results)


def traverse[Element, Result](
    elements: Sequence[Element],
    /,
    function: Callable[[Element], Result | None],
) -> tuple[Result, ...] | None:
    """
    Map all elements or fail as a whole.

    Parameters
    ----------
    elements : Sequence[Element]
        The sequence to be mapped.
    function : Callable[[Element], Result | None]
        Mapping returning None for elements without a result.

    Returns
    -------
    tuple[Result, ...] | None
        Results of all elements when each one produced a value,
        None otherwise. Empty input gives an empty tuple.
    """
    results: tuple[Result, ...] = take_while_optional(elements, function)
    if len(results) == len(elements):
        return results

    else:
        logger.debug(
            "Traverse failed after %d of %d elements",
            len(results),
            len(elements),
        )
        return None


def sequence[Element](
    optionals: Sequence[Element | None],
    /,
) -> tuple[Element, ...] | None:
    """
    Turn a sequence of optionals into an optional tuple.

    Returns
    -------
    tuple[Element, ...] | None
        All values when none of them is missing, None otherwise.
    """
    return traverse(optionals, identity)
