from logging.config import dictConfig

from listkit.utils.env import getenv_bool, getenv_str

__all__ = ("setup_logging",)


def setup_logging(
    *loggers: str,
    time: bool = True,
    debug: bool = getenv_bool("DEBUG_LOGGING", __debug__),
    disable_existing_loggers: bool = False,
) -> None:
    """\
    Configure console logging for an application using listkit.

    The library itself only emits DEBUG records from the "listkit" loggers
    when an operation stops early, nothing is printed unless those are enabled.

    Parameters
    ----------
    *loggers: str
        names of loggers to configure, "listkit" is always included.
    time: bool = True
        include timestamps in logs.
    debug: bool = DEBUG_LOGGING
        include debug logs, defaults to the DEBUG_LOGGING environment flag.
    disable_existing_loggers: bool = False
        disable other loggers which were created before calling the setup.

    NOTE: LISTKIT_LOG_FORMAT environment value replaces the default line format
    """
    level: str = "DEBUG" if debug else "INFO"
    line_format: str = getenv_str(
        "LISTKIT_LOG_FORMAT",
        "%(asctime)s [%(levelname)-4s] [%(name)s] %(message)s"
        if time
        else "[%(levelname)-4s] [%(name)s] %(message)s",
    )

    dictConfig(
        config={
            "version": 1,
            "disable_existing_loggers": disable_existing_loggers,
            "formatters": {
                "standard": {
                    "format": line_format,
                    "datefmt": "%d/%b/%Y:%H:%M:%S %z",
                },
            },
            "handlers": {
                "console": {
                    "level": level,
                    "formatter": "standard",
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                name: {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                }
                for name in ("listkit", *loggers)
            },
            "root": {
                "handlers": ["console"],
                "level": level,
            },
        },
    )
