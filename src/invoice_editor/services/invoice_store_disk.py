"""
Disk-backed implementation of InvoiceStore.

Stores the encoded document in a diskcache directory so an invoice being
edited survives a restart. The directory comes from
INVOICE_EDITOR_STORE_DIR, falling back to a folder in the system temp
directory.
"""

from pathlib import Path

from invoice_editor.lib import caches, logs, paths
from invoice_editor.models.invoice import STORAGE_KEY
from invoice_editor.services.invoice_store import InvoiceStore

LOG = logs.logger(__file__)


class DiskInvoiceStore(InvoiceStore):
    """
    Invoice store backed by a DiskCache directory.

    Attributes:
        cache: Underlying byte cache.
    """

    def __init__(
        self, cache_dir: str | Path | None = None, key: str = STORAGE_KEY
    ) -> None:
        """
        Open (or create) the cache directory.

        Args:
            cache_dir: Directory for the cache, or None for the configured default.
            key: Storage key the document is kept under.
        """
        super().__init__(key)
        directory = Path(cache_dir) if cache_dir else paths.store_dir()
        LOG.info("Using invoice store directory %s", directory)
        self.cache = caches.DiskCache(directory)

    def read_bytes(self, key: str) -> bytes | None:
        """Return the bytes under key, or None."""
        return self.cache.get(key)

    def write_bytes(self, key: str, data: bytes) -> None:
        """Store data under key."""
        self.cache.set(key, data)

    def close(self) -> None:
        """Release the underlying cache."""
        self.cache.close()
