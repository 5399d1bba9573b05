"""Core domain models."""

from dataclasses import dataclass
from typing import Any

from .errors import StateError


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Outcome of a lookup.

    ``cache_hit`` is only true when the primary key matched; a restore-key
    match reports ``cache_hit=False`` with ``matched_key`` set.
    """

    cache_hit: bool
    matched_key: str | None = None


@dataclass(frozen=True, slots=True)
class RestoreResult:
    """Outcome of a restore, same hit semantics as LookupResult."""

    cache_hit: bool
    restored_key: str | None = None

    @property
    def partial_match(self) -> bool:
        return not self.cache_hit and self.restored_key is not None


@dataclass(frozen=True, slots=True)
class PendingSave:
    """Save registered by a restore miss, performed in the post phase."""

    key: str
    path: str
    compression_level: int = 3

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "path": self.path,
            "compression_level": self.compression_level,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PendingSave":
        try:
            return cls(
                key=str(data["key"]),
                path=str(data["path"]),
                compression_level=int(data.get("compression_level", 3)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise StateError(f"Invalid pending save state: {e}") from e
