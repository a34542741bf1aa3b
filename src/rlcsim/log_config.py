# src/rlcsim/log_config.py
"""
Console logging for the `rlcsim` entry point.

Importing the package never touches logging configuration; only the console
script calls `setup_logging`, so applications embedding `rlcsim` keep their
own root handlers.
"""
import logging
import sys
from typing import Optional, TextIO, Union

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"


def setup_logging(level: Union[int, str] = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Routes log records to a console stream (stderr by default).

    A handler installed by an earlier call is replaced, not stacked.
    Handlers installed by anything else are left alone.

    Returns:
        The handler attached to the root logger.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if getattr(handler, "_rlcsim_console", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._rlcsim_console = True
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)
    logging.getLogger(__name__).debug("Logging configured.")
    return console_handler
