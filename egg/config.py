from __future__ import annotations
import logging
import os
import sys
from pathlib import Path


_DEFAULT_LOG_LEVEL = logging.WARNING


def path_from_env(var: str) -> Path | None:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())


def get_prelude_path() -> Path | None:
    """Egg file evaluated into each new Interpreter scope, if configured."""
    return path_from_env('EGG_PRELUDE_PATH')


def get_log_level() -> int:
    name = os.environ.get('EGG_LOG_LEVEL', '').strip().upper()
    if not name:
        return _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else _DEFAULT_LOG_LEVEL


def configure_logging(level: int | None = None) -> None:
    """Attach a stderr handler to the `egg` logger hierarchy.

    Only hosts (e.g. the language server) call this; the library itself
    never configures logging on import.
    """
    logger = logging.getLogger('egg')
    logger.setLevel(get_log_level() if level is None else level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
        logger.addHandler(handler)
