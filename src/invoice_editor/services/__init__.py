"""
Store factory for the Invoice Editor.

This module provides the get_invoice_store() factory function that returns
the appropriate InvoiceStore implementation based on configuration.

Available Implementations:
- memory: In-process dictionary (nothing survives a restart)
- disk: diskcache directory (default)

The store is cached at the module level, so the same instance is reused
across all sessions. Configure via INVOICE_EDITOR_STORE environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from invoice_editor.lib import logs
from invoice_editor.services.invoice_store import InvoiceStore
from invoice_editor.services.invoice_store_disk import DiskInvoiceStore
from invoice_editor.services.invoice_store_memory import MemoryInvoiceStore

LOG = logs.logger(__file__)

_STORE_REGISTRY: Dict[str, Callable[[], InvoiceStore]] = {
    "memory": lambda: MemoryInvoiceStore(),
    "disk": lambda: DiskInvoiceStore(),
}


@cache
def get_invoice_store(kind: str | None = None) -> InvoiceStore:
    """Return the configured invoice store implementation."""
    resolved_kind = (kind or os.getenv("INVOICE_EDITOR_STORE", "disk")).lower()
    LOG.info("get_invoice_store - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _STORE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown invoice store kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "DiskInvoiceStore",
    "InvoiceStore",
    "MemoryInvoiceStore",
    "get_invoice_store",
]
