"""
Logging setup for the Person API.

Everything logs through the root logger: a console handler always,
plus a file handler when ``LOG_FILE`` is configured.  Records look
like ``2024-01-01 12:00:00 [INFO] devtalk_api.app.main: message``.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Attach handlers to the root logger unless it already has some.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names mean
        ``INFO``.
    logfile : Optional[str]
        File to append log records to, resolved against the current
        working directory.

    Returns
    -------
    bool
        ``True`` if handlers were attached, ``False`` if the root logger
        was configured already (tests, repeated ``create_app`` calls).
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True
