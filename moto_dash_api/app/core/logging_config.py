"""
Root logger configuration for the API.

``setup_logging`` is called from the application's lifespan handler,
so importing the package never touches the logging tree.  Each call
replaces the handlers installed by a previous call, which lets a
second ``create_app(settings)`` (a test, ``run.py``) apply its own
``log_level`` and ``log_file``.  Handlers attached by anything else,
such as pytest's capture handler, are left in place.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Set on every handler created here so a later call can find them.
_OWNED_MARKER = "_moto_dash_handler"


def _owned_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWNED_MARKER, False)]


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Point the root logger at the console and, optionally, a file.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"warning"``.  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  Missing parent directories are created.
    """
    root = logging.getLogger()
    for handler in _owned_handlers(root):
        root.removeHandler(handler)
        handler.close()

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        setattr(handler, _OWNED_MARKER, True)
        handler.setFormatter(formatter)
        root.addHandler(handler)
