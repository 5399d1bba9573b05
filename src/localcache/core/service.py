"""Core CacheService orchestration."""

import os
from collections.abc import Sequence
from pathlib import Path

from ..ports import ArchivePort, ClockPort, LoggerPort, StatePort, StorePort
from .keys import resolve_paths
from .models import LookupResult, PendingSave, RestoreResult

DEFAULT_COMPRESSION_LEVEL = 3


class CacheService:
    """Save, restore and look up cache archives.

    Every key is resolved exact-match first, then through the restore keys in
    priority order. Operations never raise: failures are logged and reported
    through the normal return value.
    """

    def __init__(
        self,
        store: StorePort,
        archive: ArchivePort,
        state: StatePort,
        clock: ClockPort,
        logger: LoggerPort,
    ):
        self.store = store
        self.archive = archive
        self.state = state
        self.clock = clock
        self.logger = logger

    def lookup(self, primary_key: str, restore_keys: Sequence[str] = ()) -> LookupResult:
        """Find the best matching key without extracting anything."""
        try:
            self.logger.info("Looking up cache", primary_key=primary_key)

            if self.store.exists(primary_key):
                self.logger.info("Found exact match cache", key=primary_key)
                return LookupResult(cache_hit=True, matched_key=primary_key)

            for restore_key in restore_keys:
                if self.store.exists(restore_key):
                    self.logger.info("Found partial match cache", key=restore_key)
                    return LookupResult(cache_hit=False, matched_key=restore_key)

            self.logger.info("No matching cache found")
            return LookupResult(cache_hit=False)
        except Exception as e:
            self.logger.error("Error looking up cache", error=str(e))
            return LookupResult(cache_hit=False)

    def restore(
        self,
        paths: Sequence[str],
        primary_key: str,
        restore_keys: Sequence[str] = (),
        target_dir: Path = Path("/"),
    ) -> RestoreResult:
        """Extract the best matching archive into target_dir.

        ``paths`` is not used for extraction; file locations come from the
        archive itself. A restore key only counts once its archive has been
        extracted successfully, so a corrupt fallback is skipped.
        """
        start_time = self.clock.now()
        try:
            self.logger.info("Starting to restore cache", primary_key=primary_key)
            if restore_keys:
                self.logger.debug("Restore keys", keys=", ".join(restore_keys))
            if paths:
                self.logger.debug("Cache paths", paths=", ".join(paths))

            result = RestoreResult(cache_hit=False)
            if self.store.exists(primary_key):
                self.logger.info("Found exact match cache", key=primary_key)
                if self._extract(primary_key, target_dir):
                    result = RestoreResult(cache_hit=True, restored_key=primary_key)

            if result.restored_key is None:
                for restore_key in restore_keys:
                    if not self.store.exists(restore_key):
                        continue
                    self.logger.info("Found partial match cache", key=restore_key)
                    if self._extract(restore_key, target_dir):
                        result = RestoreResult(cache_hit=False, restored_key=restore_key)
                        break

            if result.restored_key is None:
                self.logger.info("No matching cache found")
        except Exception as e:
            self.logger.error("Error restoring cache", error=str(e))
            result = RestoreResult(cache_hit=False)

        duration = (self.clock.now() - start_time).total_seconds()
        self.logger.log_operation(
            op="restore",
            key=primary_key,
            durations={"total": duration},
            cache_hit=result.cache_hit,
            restored_key=result.restored_key,
        )
        return result

    def save(
        self,
        paths: Sequence[str],
        key: str,
        compression_level: int = DEFAULT_COMPRESSION_LEVEL,
    ) -> bool:
        """Archive the paths that exist under key, replacing any prior archive.

        Returns False without touching the archiver when none of the paths
        exist.
        """
        start_time = self.clock.now()
        try:
            self.logger.info("Starting to save cache", key=key)
            self.logger.debug("Cache paths", paths=", ".join(paths))

            existing = [p for p in paths if os.path.exists(p)]
            if not existing:
                self.logger.warning("No paths found to cache, skipping cache save")
                success = False
            else:
                archive_path = self.store.archive_path(key)
                success = self.archive.compress(archive_path, existing, compression_level)
                if success:
                    self.logger.info("Cache saved successfully", key=key)
                else:
                    self.logger.warning("Cache save failed", key=key)
        except Exception as e:
            self.logger.error("Error saving cache", error=str(e))
            success = False

        duration = (self.clock.now() - start_time).total_seconds()
        self.logger.log_operation(
            op="save",
            key=key,
            durations={"total": duration},
            saved=success,
        )
        return success

    def defer_save(
        self,
        run_id: str,
        key: str,
        raw_paths: str,
        compression_level: int = DEFAULT_COMPRESSION_LEVEL,
    ) -> bool:
        """Remember a save to perform once the run's main work is done."""
        try:
            self.state.write(
                run_id,
                PendingSave(key=key, path=raw_paths, compression_level=compression_level),
            )
            self.logger.info("Registered deferred cache save", run_id=run_id, key=key)
            return True
        except Exception as e:
            self.logger.error("Error registering deferred save", error=str(e))
            return False

    def run_deferred_save(self, run_id: str) -> bool | None:
        """Perform the save registered for run_id.

        Returns None when nothing was registered, otherwise the save result.
        The registration is consumed either way.
        """
        try:
            pending = self.state.read(run_id)
        except Exception as e:
            self.logger.warning("Cannot load deferred save state", run_id=run_id, error=str(e))
            self._clear_state(run_id)
            return False
        if pending is None:
            self.logger.debug("No deferred save registered", run_id=run_id)
            return None

        self.logger.info("Executing deferred save", run_id=run_id, key=pending.key)
        try:
            return self.save(
                resolve_paths(pending.path), pending.key, pending.compression_level
            )
        finally:
            self._clear_state(run_id)

    def _clear_state(self, run_id: str) -> None:
        try:
            self.state.clear(run_id)
        except OSError as e:
            self.logger.warning("Cannot clear deferred save state", error=str(e))

    def _extract(self, key: str, target_dir: Path) -> bool:
        archive_path = self.store.archive_path(key)
        if self.archive.decompress(archive_path, target_dir):
            self.logger.info("Cache restored successfully", key=key)
            return True
        self.logger.warning("Cache restore failed", key=key)
        return False
