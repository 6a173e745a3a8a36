from collections.abc import Callable, Sequence
from operator import eq

__all__ = (
    "group",
    "group_by",
)


def group_by[Element](
    sequence: Sequence[Element],
    /,
    predicate: Callable[[Element, Element], bool],
) -> tuple[tuple[Element, ...], ...]:
    """
    Split a sequence into runs of consecutive elements.

    Each element is checked against the first element (anchor) of the run
    being built using `predicate(element, anchor)`, not against its direct
    predecessor. When the check fails the element starts a new run and
    becomes its anchor.

    Parameters
    ----------
    sequence : Sequence[Element]
        The sequence to be split.
    predicate : Callable[[Element, Element], bool]
        Check if the element belongs to the run of the given anchor.

    Returns
    -------
    tuple[tuple[Element, ...], ...]
        Non-empty runs which joined together reproduce the input sequence.
        Empty when the input sequence is empty.
    """
    if not sequence:
        return ()

    groups: list[tuple[Element, ...]] = []
    anchor: Element = sequence[0]
    current: list[Element] = [anchor]
    for element in sequence[1:]:
        if not predicate(element, anchor):
            groups.append(tuple(current))
            current = []
            anchor = element

        current.append(element)

    groups.append(tuple(current))
    return tuple(groups)


def group[Element](
    sequence: Sequence[Element],
    /,
) -> tuple[tuple[Element, ...], ...]:
    """
    Split a sequence into runs of consecutive equal elements.
    """
    return group_by(sequence, eq)
