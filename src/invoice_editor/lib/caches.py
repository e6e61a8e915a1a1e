"""
Disk-backed key-value storage.

Provides a DiskCache class that keeps raw byte values on disk using the
diskcache library. It is the backing store for persisted invoice
documents and has no notion of what the bytes contain.
"""

from pathlib import Path

import diskcache


class DiskCache:
    """
    Disk-based byte store.

    Thread-safe and process-safe, so a document written by one session
    is visible to the next process that opens the same directory.

    Attributes:
        cache_dir: Path to the cache directory.
    """

    def __init__(self, cache_dir: str | Path) -> None:
        """
        Initialize the disk cache.

        Args:
            cache_dir: Directory path for storing cache files.
                       Created if it doesn't exist.
        """
        self.cache_dir = Path(cache_dir)
        self._cache = diskcache.Cache(str(self.cache_dir))

    def get(self, key: str) -> bytes | None:
        """
        Return the bytes stored under key, or None when absent.

        Values that are not bytes (written by something else) count as absent.
        """
        value = self._cache.get(key, default=None)
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        return None

    def set(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any previous value."""
        self._cache.set(key, value)

    def close(self) -> None:
        """Close the cache and release resources."""
        self._cache.close()
