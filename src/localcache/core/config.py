"""Centralized configuration for local-cache."""

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path


def _default_cache_dir() -> Path:
    home = os.environ.get("HOME") or "/tmp"
    return Path(home) / ".local-cache"


def _default_run_id() -> str:
    run_id = os.environ.get("GITHUB_RUN_ID")
    if not run_id:
        return "local"
    attempt = os.environ.get("GITHUB_RUN_ATTEMPT")
    return f"{run_id}-{attempt}" if attempt else run_id


@dataclass(slots=True)
class LocalCacheConfig:
    """All local-cache configuration in one place.

    Environment variables (all optional):
        RUNNER_TOOL_CACHE:  Cache directory. Default "$HOME/.local-cache".
        GITHUB_WORKSPACE:   Default restore target. Falls back to "/".
        RUNNER_TEMP:        Temp directory, used when the restore target is
                            not writable. Default is the system temp dir.
        GITHUB_OUTPUT:      File that step outputs are appended to.
                            Outputs go to stdout when unset.
        GITHUB_RUN_ID:      Run identifier keying the deferred-save state,
                            suffixed with GITHUB_RUN_ATTEMPT when present.
        LC_STATE_DIR:       Deferred-save state directory.
                            Default "$RUNNER_TEMP/local-cache-state".
        LC_LOG_LEVEL:       Logging level. Default "INFO".
    """

    cache_dir: Path = field(default_factory=_default_cache_dir)
    temp_dir: Path = field(default_factory=lambda: Path(tempfile.gettempdir()))
    workspace_dir: Path | None = None
    output_file: Path | None = None
    state_dir: Path | None = None
    run_id: str = "local"
    log_level: str = "INFO"

    @property
    def default_target_dir(self) -> Path:
        return self.workspace_dir if self.workspace_dir is not None else Path("/")

    @property
    def resolved_state_dir(self) -> Path:
        if self.state_dir is not None:
            return self.state_dir
        return self.temp_dir / "local-cache-state"

    @classmethod
    def from_env(cls, *, log_level: str | None = None) -> "LocalCacheConfig":
        """Build config from environment variables + explicit overrides."""
        tool_cache = os.environ.get("RUNNER_TOOL_CACHE")
        workspace = os.environ.get("GITHUB_WORKSPACE")
        temp = os.environ.get("RUNNER_TEMP")
        output = os.environ.get("GITHUB_OUTPUT")
        state = os.environ.get("LC_STATE_DIR")
        return cls(
            cache_dir=Path(tool_cache) if tool_cache else _default_cache_dir(),
            temp_dir=Path(temp) if temp else Path(tempfile.gettempdir()),
            workspace_dir=Path(workspace) if workspace else None,
            output_file=Path(output) if output else None,
            state_dir=Path(state) if state else None,
            run_id=_default_run_id(),
            log_level=log_level or os.environ.get("LC_LOG_LEVEL", "INFO"),
        )
