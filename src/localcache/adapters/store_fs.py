"""Filesystem store adapter."""

from pathlib import Path

from ..core.keys import archive_name


class FsStoreAdapter:
    """One flat directory of ``<sanitized key>.tar.zst`` archives.

    The file name is the whole index; there is no manifest or metadata.
    """

    def __init__(self, base_dir: Path):
        """Initialize with the cache directory (created lazily)."""
        self.base_dir = base_dir

    def cache_dir(self) -> Path:
        """Get the cache directory, creating it if absent.

        Creation errors propagate; concurrent creation is tolerated.
        """
        self.base_dir.mkdir(parents=True, exist_ok=True)
        return self.base_dir

    def archive_path(self, key: str) -> Path:
        """Get path where the archive for a key lives."""
        return self.cache_dir() / archive_name(key)

    def exists(self, key: str) -> bool:
        """Check if an archive exists for a key."""
        return self.archive_path(key).is_file()
