"""Filesystem state adapter."""

import json
import os
import tempfile
from pathlib import Path

from ..core.errors import StateError
from ..core.keys import sanitize_key
from ..core.models import PendingSave


class FsStateAdapter:
    """Stores one JSON document per run id under a state directory."""

    def __init__(self, state_dir: Path):
        self.state_dir = state_dir

    def state_path(self, run_id: str) -> Path:
        return self.state_dir / f"{sanitize_key(run_id)}.json"

    def write(self, run_id: str, pending: PendingSave) -> None:
        """Persist a pending save for a run, replacing any previous one."""
        self.state_dir.mkdir(parents=True, exist_ok=True)
        path = self.state_path(run_id)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=self.state_dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(pending.to_dict(), f)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def read(self, run_id: str) -> PendingSave | None:
        """Load the pending save for a run, or None if nothing was registered."""
        path = self.state_path(run_id)
        if not path.is_file():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StateError(f"Cannot read state file {path}: {e}") from e
        if not isinstance(data, dict):
            raise StateError(f"State file {path} does not hold an object")
        return PendingSave.from_dict(data)

    def clear(self, run_id: str) -> None:
        self.state_path(run_id).unlink(missing_ok=True)
