"""Console logging setup for the status hooks."""

import logging

__all__ = ["configure_logs", "LOG_FORMAT"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"

# Marks the handler installed here so repeated setup does not stack handlers
_HANDLER_NAME = "status_hooks.console"


def configure_logs(level: int = logging.INFO) -> None:
    """Configure console logging once per process.

    The root logger gets a single stream handler, no matter how often this
    is called; later calls only adjust the root level. aiohttp and asyncio
    are kept at WARNING, status_hooks loggers at DEBUG.

    Args:
        level: Root logger level.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for framework in ("aiohttp", "asyncio"):
        logging.getLogger(framework).setLevel(logging.WARNING)
    logging.getLogger("status_hooks").setLevel(logging.DEBUG)
