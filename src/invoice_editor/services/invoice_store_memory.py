"""
In-memory implementation of InvoiceStore.

Keeps documents in a plain dict for the lifetime of the process. Useful for:
- Tests that need a store without touching the filesystem
- Running the editor without persistence between restarts
"""

from typing import MutableMapping

from invoice_editor.models.invoice import STORAGE_KEY
from invoice_editor.services.invoice_store import InvoiceStore


class MemoryInvoiceStore(InvoiceStore):
    """Invoice store backed by a dictionary."""

    def __init__(
        self,
        data: MutableMapping[str, bytes] | None = None,
        key: str = STORAGE_KEY,
    ) -> None:
        """
        Initialize with optional pre-populated storage.

        Args:
            data: Mapping used as the backing store, or None for a new dict.
            key: Storage key the document is kept under.
        """
        super().__init__(key)
        self.data: MutableMapping[str, bytes] = data if data is not None else {}

    def read_bytes(self, key: str) -> bytes | None:
        """Return the bytes under key, or None."""
        return self.data.get(key)

    def write_bytes(self, key: str, data: bytes) -> None:
        """Store data under key."""
        self.data[key] = data
