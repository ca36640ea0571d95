"""Logging setup of the ``doxy2md`` command.

The library modules only create ``logging.getLogger(__name__)`` loggers;
handlers are installed here, once, by the command line entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def resolve_log_level(verbose: bool = False, debug: bool = False) -> int:
    """Map ``--verbose`` and ``--debug`` to a logging level, debug first.

    Without either switch only warnings and errors are shown, which is
    where the builders report unknown constructs.
    """
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def configure_logging(log_level: int, log_file: Optional[str] = None, trace_mode: bool = False) -> logging.Logger:
    """Replace the root handlers with a stderr handler and an optional log file.

    Parameters
    ----------
    log_level : int
        Level of the root logger and of its handlers
    log_file : str, optional
        File receiving a copy of the records; appended to
    trace_mode : bool, default False
        Use the timestamped format showing logger names

    Returns
    -------
    logging.Logger
        The root logger

    """
    formatter = logging.Formatter(TRACE_FORMAT if trace_mode else PLAIN_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    problem = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            problem = e

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(log_level)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if problem is not None:
        root.warning("Cannot write the log to %s: %s", log_file, problem)
    return root
