"""Local cache error types."""


class LocalCacheError(Exception):
    """Base exception for local cache errors."""

    pass


class ConfigurationError(LocalCacheError):
    """Required input is missing or malformed."""

    pass


class ArchiveToolNotFoundError(LocalCacheError):
    """External archiving tool is not available on PATH."""

    def __init__(self, tool: str):
        super().__init__(f"{tool} not found on PATH")
        self.tool = tool


class StateError(LocalCacheError):
    """Deferred-save state could not be read or written."""

    pass
