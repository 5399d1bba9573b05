"""Store port interface."""

from pathlib import Path
from typing import Protocol


class StorePort(Protocol):
    """Port for the cache directory and key-to-archive mapping."""

    def cache_dir(self) -> Path:
        """Get the cache directory, creating it if absent."""
        ...

    def archive_path(self, key: str) -> Path:
        """Get path where the archive for a key lives."""
        ...

    def exists(self, key: str) -> bool:
        """Check if an archive exists for a key."""
        ...
