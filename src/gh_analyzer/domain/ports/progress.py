"""Port: progress observer — notified as the analysis moves through its phases."""

from __future__ import annotations

from typing import Protocol


class ProgressObserver(Protocol):
    """Receives phase updates from the analysis pipeline."""

    def phase(self, message: str) -> None:
        """A new phase has started."""
        ...

    def finished(self, message: str) -> None:
        """The pipeline completed successfully."""
        ...


class NullProgress:
    """Observer that ignores every update."""

    def phase(self, message: str) -> None:
        pass

    def finished(self, message: str) -> None:
        pass
