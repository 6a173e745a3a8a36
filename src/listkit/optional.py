from collections.abc import Sequence

__all__ = (
    "head_option",
    "last_option",
)


def head_option[Element](
    sequence: Sequence[Element],
    /,
) -> Element | None:
    """
    Access the first element of a sequence if any.

    Parameters
    ----------
    sequence : Sequence[Element]
        The input sequence.

    Returns
    -------
    Element | None
        The first element, or None if the sequence is empty.
        A stored None element is indistinguishable from an empty sequence.
    """
    if sequence:
        return sequence[0]

    else:
        return None


def last_option[Element](
    sequence: Sequence[Element],
    /,
) -> Element | None:
    """
    Access the last element of a sequence if any.

    Parameters
    ----------
    sequence : Sequence[Element]
        The input sequence.

    Returns
    -------
    Element | None
        The last element, or None if the sequence is empty.
    """
    if sequence:
        return sequence[-1]

    else:
        return None
