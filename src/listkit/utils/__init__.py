from listkit.utils.env import getenv_bool, getenv_str
from listkit.utils.functions import always, identity
from listkit.utils.logs import setup_logging

__all__ = (
    "always",
    "getenv_bool",
    "getenv_str",
    "identity",
    "setup_logging",
)
