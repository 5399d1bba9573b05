"""Shared test doubles and fixtures."""

from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from localcache.core import CacheService, PendingSave, sanitize_key


class RecordingStore:
    """Store double backed by a set of keys, recording every probe."""

    def __init__(self, base_dir: Path, keys: Sequence[str] = ()):
        self.base_dir = base_dir
        self.keys = set(keys)
        self.probes: list[str] = []

    def cache_dir(self) -> Path:
        return self.base_dir

    def archive_path(self, key: str) -> Path:
        return self.base_dir / f"{sanitize_key(key)}.tar.zst"

    def exists(self, key: str) -> bool:
        self.probes.append(key)
        return key in self.keys


class ScriptedArchive:
    """Archive double returning scripted results and recording calls."""

    def __init__(self, compress_ok: bool = True, failing_archives: Sequence[str] = ()):
        self.compress_ok = compress_ok
        self.failing_archives = set(failing_archives)
        self.compress_calls: list[tuple[Path, list[str], int]] = []
        self.decompress_calls: list[tuple[Path, Path]] = []

    def compress(self, archive_path: Path, paths: Sequence[str], level: int = 3) -> bool:
        self.compress_calls.append((archive_path, list(paths), level))
        return self.compress_ok

    def decompress(self, archive_path: Path, target_dir: Path) -> bool:
        self.decompress_calls.append((archive_path, target_dir))
        return archive_path.name not in self.failing_archives


class MemoryState:
    def __init__(self) -> None:
        self.entries: dict[str, PendingSave] = {}

    def write(self, run_id: str, pending: PendingSave) -> None:
        self.entries[run_id] = pending

    def read(self, run_id: str) -> PendingSave | None:
        return self.entries.get(run_id)

    def clear(self, run_id: str) -> None:
        self.entries.pop(run_id, None)


class FixedClock:
    def now(self) -> datetime:
        return datetime(2024, 1, 1, tzinfo=UTC)


class CapturingLogger:
    """Logger double keeping (level, message, fields) records."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def debug(self, message: str, **kwargs: Any) -> None:
        self.records.append(("debug", message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.records.append(("info", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.records.append(("warning", message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.records.append(("error", message, kwargs))

    def log_operation(
        self,
        op: str,
        key: str,
        durations: dict[str, float],
        cache_hit: bool = False,
        **kwargs: Any,
    ) -> None:
        self.records.append(("operation", op, {"key": key, "cache_hit": cache_hit, **kwargs}))

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


@pytest.fixture
def store(tmp_path: Path) -> RecordingStore:
    return RecordingStore(tmp_path / "cache")


@pytest.fixture
def archive() -> ScriptedArchive:
    return ScriptedArchive()


@pytest.fixture
def state() -> MemoryState:
    return MemoryState()


@pytest.fixture
def logger() -> CapturingLogger:
    return CapturingLogger()


@pytest.fixture
def service(
    store: RecordingStore,
    archive: ScriptedArchive,
    state: MemoryState,
    logger: CapturingLogger,
) -> CacheService:
    return CacheService(
        store=store,
        archive=archive,
        state=state,
        clock=FixedClock(),
        logger=logger,
    )
