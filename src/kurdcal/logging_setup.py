"""
kurdcal.logging_setup
---------------------
Root logging configuration for entry points (CLI, diagnostics).

Library modules never call this; they use `logging.getLogger(__name__)`.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

# Chatty optional dependencies used by the diagnostics
NOISY_LOGGERS: tuple[str, ...] = ("matplotlib", "PIL", "skyfield")

_configured = False  # guard against double-initialisation
_handler: Optional[logging.Handler] = None


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'")
    return value


def setup_logging(
    level: Optional[Union[int, str]] = None,
    *,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    quiet: Iterable[str] = NOISY_LOGGERS,
    force: bool = False,
) -> None:
    """
    Configure root logging once.

    With `level=None` the level comes from `KURDCAL_LOG_LEVEL` (see kurdcal.config).
    Later calls are ignored unless `force=True`.
    """
    global _configured, _handler
    if _configured and not force:
        return

    if level is None:
        from .config import load_settings
        level = load_settings().log_level
    lvl = _coerce_level(level)

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.setLevel(lvl)

    _handler = logging.StreamHandler()
    _handler.setLevel(lvl)
    _handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    root.addHandler(_handler)

    for name in quiet:
        logging.getLogger(name).setLevel(max(lvl, logging.WARNING))

    _configured = True
    logging.getLogger(__name__).debug("logging configured at %s", logging.getLevelName(lvl))
