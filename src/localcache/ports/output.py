"""Output port interface."""

from typing import Protocol


class OutputPort(Protocol):
    """Port for publishing step outputs to the host runner."""

    def set_output(self, name: str, value: str) -> None:
        """Publish a named output value."""
        ...
