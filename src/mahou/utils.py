from __future__ import annotations

import logging
import os

_TRUTHY = ("1", "true", "yes", "on")


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger namespaced under ``mahou.``.

    >>> get_logger("lexer").name
    'mahou.lexer'
    >>> get_logger("mahou.lexer").name
    'mahou.lexer'
    """
    if not (name == "mahou" or name.startswith("mahou.")):
        name = f"mahou.{name}"
    return logging.getLogger(name)


def debug_py_trace_enabled() -> bool:
    """True when MAHOU_DEBUG_PY_TRACE asks for Python tracebacks on errors."""
    return os.environ.get("MAHOU_DEBUG_PY_TRACE", "").strip().lower() in _TRUTHY
