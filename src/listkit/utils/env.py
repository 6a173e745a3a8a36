from os import getenv as os_getenv
from typing import Literal, overload

__all__ = (
    "getenv_bool",
    "getenv_str",
)


def _lookup(
    key: str,
    /,
    *,
    required: bool,
    has_default: bool,
) -> str | None:
    if value := os_getenv(key):
        return value

    elif required and not has_default:
        raise ValueError(f"Required environment value `{key}` is missing!")

    else:
        return None


@overload
def getenv_bool(
    key: str,
    /,
) -> bool | None: ...


@overload
def getenv_bool(
    key: str,
    /,
    default: bool,
) -> bool: ...


@overload
def getenv_bool(
    key: str,
    /,
    *,
    required: Literal[True],
) -> bool: ...


def getenv_bool(
    key: str,
    /,
    default: bool | None = None,
    *,
    required: bool = False,
) -> bool | None:
    """
    Read a boolean flag from the environment.

    'true', '1' and 't' (case-insensitive) mean True, any other
    non-empty value means False.

    Parameters
    ----------
    key : str
        The environment variable name
    default : bool | None, optional
        Value used when the variable is not set or empty
    required : bool, default=False
        Raise ValueError when the variable is not set and there is no default

    Returns
    -------
    bool | None
        The flag value, or the default
    """
    value: str | None = _lookup(
        key,
        required=required,
        has_default=default is not None,
    )
    if value is None:
        return default

    else:
        return value.lower() in ("true", "1", "t")


@overload
def getenv_str(
    key: str,
    /,
) -> str | None: ...


@overload
def getenv_str(
    key: str,
    /,
    default: str,
) -> str: ...


@overload
def getenv_str(
    key: str,
    /,
    *,
    required: Literal[True],
) -> str: ...


def getenv_str(
    key: str,
    /,
    default: str | None = None,
    *,
    required: bool = False,
) -> str | None:
    """
    Read a text value from the environment, see `getenv_bool` for arguments.
    """
    value: str | None = _lookup(
        key,
        required=required,
        has_default=default is not None,
    )
    if value is None:
        return default

    else:
        return value
