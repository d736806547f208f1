"""Package logger setup.

One handler and the configured level live on the ``dense_grid`` logger; module
loggers are plain children that propagate to it, so
:func:`~dense_grid.src.utils.config_loader.set_log_level` reaches loggers that
were created at import time.
"""

from __future__ import annotations

import logging
from pathlib import Path

from . import config_loader

_FORMATTER = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")


def _package_logger() -> logging.Logger:
    package = logging.getLogger(config_loader.PACKAGE_LOGGER)
    if not package.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(_FORMATTER)
        package.addHandler(handler)
        package.setLevel(getattr(logging, config_loader.LOG_LEVEL, logging.WARNING))
    return package


def get_logger(name: str, file_path: str | None = None) -> logging.Logger:
    """Return the logger for ``name``, optionally also writing to ``file_path``.

    ``name`` should sit under the ``dense_grid`` namespace to inherit the
    package handler and level. Repeated calls with the same ``file_path`` add
    its handler only once.
    """
    _package_logger()
    logger = logging.getLogger(name)
    if file_path:
        target = Path(file_path).resolve()
        attached = any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == target
            for h in logger.handlers
        )
        if not attached:
            target.parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(target, encoding="utf-8")
            f_handler.setFormatter(_FORMATTER)
            logger.addHandler(f_handler)
    return logger
