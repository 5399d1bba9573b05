"""Adapters for local-cache ports."""

from .archive_tarzstd import TarZstdArchiveAdapter
from .clock_utc import UtcClockAdapter
from .logger_std import StdLoggerAdapter
from .output_actions import ActionsOutputAdapter
from .state_fs import FsStateAdapter
from .store_fs import FsStoreAdapter

__all__ = [
    "ActionsOutputAdapter",
    "FsStateAdapter",
    "FsStoreAdapter",
    "StdLoggerAdapter",
    "TarZstdArchiveAdapter",
    "UtcClockAdapter",
]
