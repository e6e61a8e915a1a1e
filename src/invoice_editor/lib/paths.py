"""
Path utilities for the Invoice Editor.

Resolves the directories used by the disk-backed invoice store.
"""

import os
import tempfile
from pathlib import Path


def temp_dir() -> Path:
    """Return the system temporary directory as a Path."""
    return Path(tempfile.gettempdir())


def store_dir() -> Path:
    """
    Return the directory holding the persisted invoice document.

    Uses INVOICE_EDITOR_STORE_DIR when set, otherwise a fixed folder
    under the system temporary directory.
    """
    configured = os.getenv("INVOICE_EDITOR_STORE_DIR")
    if configured:
        return Path(configured).expanduser()
    return temp_dir() / "invoice_editor"
