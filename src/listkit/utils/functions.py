from collections.abc import Callable
from typing import Any

__all__ = (
    "always",
    "identity",
)


def identity[Value](
    value: Value,
    /,
) -> Value:
    """
    Return the argument unchanged.
    """
    return value


def always[Value](
    value: Value,
    /,
) -> Callable[..., Value]:
    """
    Prepare a function ignoring its arguments and returning the given value.

    `always(True)` is the predicate used by scans and folds which should
    never stop early.
    """

    def always_value(
        *args: Any,
        **kwargs: Any,
    ) -> Value:
        return value

    return always_value
