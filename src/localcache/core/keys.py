"""Cache key and path specification helpers."""

import re

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]")

ARCHIVE_SUFFIX = ".tar.zst"


def sanitize_key(key: str) -> str:
    """Map a cache key to a filesystem-safe name.

    Every character outside ``[A-Za-z0-9]`` becomes ``_``. Distinct keys can
    map to the same name (``a-b`` and ``a.b``); such keys share one archive.
    """
    return _UNSAFE_CHARS.sub("_", key)


def archive_name(key: str) -> str:
    return f"{sanitize_key(key)}{ARCHIVE_SUFFIX}"


def resolve_paths(raw: str) -> list[str]:
    """Split a newline-delimited path spec, dropping blank lines."""
    return [line.strip() for line in raw.split("\n") if line.strip()]


def parse_restore_keys(raw: str | None) -> list[str]:
    """Parse newline-delimited restore keys (same rules as paths)."""
    if not raw:
        return []
    return resolve_paths(raw)
