"""Archive port interface."""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class ArchivePort(Protocol):
    """Port for packing paths into a compressed archive and back.

    Implementations report every failure as ``False`` instead of raising.
    """

    def compress(self, archive_path: Path, paths: Sequence[str], level: int = 3) -> bool:
        """Compress paths into archive_path."""
        ...

    def decompress(self, archive_path: Path, target_dir: Path) -> bool:
        """Extract archive_path into target_dir."""
        ...
