"""
Logging utilities for the Invoice Editor.

Provides a logger factory that maps a module's __file__ to its dotted name
under the invoice_editor logger. Only that package logger carries a
handler; module loggers propagate to it, so every record is formatted the
same way and printed once.
"""

import logging
import os
from pathlib import Path

PACKAGE_LOGGER = "invoice_editor"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_level() -> int:
    """
    Return the configured level.

    INVOICE_EDITOR_LOG_LEVEL wins over the generic LOG_LEVEL; unknown
    names fall back to INFO.
    """
    name = os.getenv("INVOICE_EDITOR_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def module_name(path: str) -> str:
    """
    Convert a source file path into a dotted logger name.

    ".../invoice_editor/services/invoice_store.py" becomes
    "invoice_editor.services.invoice_store" and a package __init__ names
    the package itself. Files outside the package are named by their stem.
    """
    parts = Path(path).with_suffix("").parts
    if PACKAGE_LOGGER not in parts:
        return f"{PACKAGE_LOGGER}.{Path(path).stem}"
    start = len(parts) - 1 - parts[::-1].index(PACKAGE_LOGGER)
    dotted = list(parts[start:])
    if dotted[-1] == "__init__":
        dotted.pop()
    return ".".join(dotted)


def _configure_package_logger() -> logging.Logger:
    log = logging.getLogger(PACKAGE_LOGGER)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        log.addHandler(handler)
    log.setLevel(log_level())
    return log


def logger(name: str) -> logging.Logger:
    """
    Return the logger for name.

    Args:
        name: Logger name or __file__ path.

    Returns:
        A logger inside the invoice_editor hierarchy.
    """
    _configure_package_logger()
    if "/" in name or "\\" in name:
        name = module_name(name)
    elif name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
