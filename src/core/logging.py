import logging
import sys

HANDLER_NAME = "mock-client"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> logging.Handler:
    """
    Route framework logs to STDOUT so they interleave with test output
    (``pytest -s``). Only the handler installed by a previous call is
    replaced; handlers owned by pytest or the application stay attached.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}")
        level = resolved

    logger = logging.getLogger()
    logger.setLevel(level)

    for h in list(logger.handlers):
        if h.get_name() == HANDLER_NAME:
            logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    return handler


def set_harness_logging_level(level: int = logging.WARNING) -> None:
    """Lowers logging level for the HTTP stack used by the application harness."""
    for name in ("httpx", "httpcore", "asyncio"):
        logging.getLogger(name).setLevel(level)
