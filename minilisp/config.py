from __future__ import annotations
import logging
import os

# Width of the signed integer type; fixed, the reader's overflow guard depends on it
INT_BITS = 32

_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_RECURSION_LIMIT = 10000


def get_log_level() -> int:
    """Logging level from MINILISP_LOG_LEVEL (a level name), WARNING otherwise."""
    raw = os.environ.get("MINILISP_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> int:
    """Python recursion limit the interpreter needs, from MINILISP_RECURSION_LIMIT."""
    raw = os.environ.get("MINILISP_RECURSION_LIMIT")
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else _DEFAULT_RECURSION_LIMIT


def int_bounds(bits: int = INT_BITS) -> tuple[int, int]:
    """Inclusive (min, max) of a signed integer of the given width."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
