"""State port interface."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..core.models import PendingSave


class StatePort(Protocol):
    """Port for state carried from the main phase to the post phase."""

    def write(self, run_id: str, pending: "PendingSave") -> None:
        """Persist a pending save for a run."""
        ...

    def read(self, run_id: str) -> "PendingSave | None":
        """Load the pending save for a run, if any."""
        ...

    def clear(self, run_id: str) -> None:
        """Forget the pending save for a run."""
        ...
