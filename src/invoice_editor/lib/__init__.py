"""
Local library modules shared across the Invoice Editor.

Modules:
    logs: Logging utilities
    objects: JSON serialization helpers
    paths: Path utilities
    caches: Disk-backed byte storage
"""

from invoice_editor.lib import caches, logs, objects, paths

__all__ = ["caches", "logs", "objects", "paths"]
