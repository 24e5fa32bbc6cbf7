from __future__ import annotations

import logging
import os

_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_LOG_LEVEL = logging.WARNING


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-integer %s=%r", var, raw)
        return default
    return value if value > 0 else default


def get_recursion_limit() -> int:
    return int_from_env('LISPY_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_log_level() -> int:
    """Level for the `lispy` logger, from LISPY_LOG_LEVEL. Defaults to WARNING."""
    name = os.environ.get('LISPY_LOG_LEVEL', '').strip().upper()
    if name:
        level = getattr(logging, name, None)
        if isinstance(level, int):
            return level
    return _DEFAULT_LOG_LEVEL
