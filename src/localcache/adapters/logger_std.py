"""Standard logging adapter."""

import logging
import sys
from typing import Any


class StdLoggerAdapter:
    """Standard Python logging implementation of LoggerPort."""

    def __init__(self, name: str = "localcache", level: str = "INFO"):
        """Initialize logger."""
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            self.logger.addHandler(handler)
            self.logger.propagate = False

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, kwargs)

    def log_operation(
        self,
        op: str,
        key: str,
        durations: dict[str, float],
        cache_hit: bool = False,
        **kwargs: Any,
    ) -> None:
        """Log a summary line for one cache operation."""
        fields: dict[str, Any] = {"op": op, "key": key, "cache_hit": cache_hit}
        for name, seconds in durations.items():
            fields[f"{name}_s"] = round(seconds, 3)
        fields.update(kwargs)
        self._log(logging.INFO, "Operation complete", fields)

    def _log(self, level: int, message: str, fields: dict[str, Any]) -> None:
        if fields:
            details = " ".join(f"{k}={v}" for k, v in fields.items() if v is not None)
            message = f"{message} {details}" if details else message
        self.logger.log(level, message)
