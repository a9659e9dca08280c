"""
Logging setup for the API process.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Uvicorn is started with
``log_config=None`` by ``run.py``, so its ``uvicorn.*`` loggers
propagate to the root logger and share the same format as the
application modules.

Within the application, ``services.user_service`` logs every created,
updated and deleted user at INFO and rejected payloads at WARNING.
``main`` logs requests rejected by validation at WARNING and start‑up
at INFO.  ``user_management_client`` logs failed API calls at ERROR.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to also write log records to.  Relative paths
        are resolved against the current working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (second create_app call, pytest, ...).
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
