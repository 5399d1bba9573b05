"""Core domain for local-cache."""

from .config import LocalCacheConfig
from .errors import (
    ArchiveToolNotFoundError,
    ConfigurationError,
    LocalCacheError,
    StateError,
)
from .keys import parse_restore_keys, resolve_paths, sanitize_key
from .models import LookupResult, PendingSave, RestoreResult
from .service import CacheService

__all__ = [
    "ArchiveToolNotFoundError",
    "CacheService",
    "ConfigurationError",
    "LocalCacheConfig",
    "LocalCacheError",
    "LookupResult",
    "PendingSave",
    "RestoreResult",
    "StateError",
    "parse_restore_keys",
    "resolve_paths",
    "sanitize_key",
]
