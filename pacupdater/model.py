"""State shown by the updater window."""

from __future__ import annotations

from dataclasses import dataclass, field

from .update_manager import PendingUpdate, parse_updates

CLEARED = " "
CHECKING = "Checking..."
UP_TO_DATE = "System up to date"
UPDATES_FOUND = "Updates found!"
UPDATING_ALL = "Updating All..."


@dataclass
class UpdaterState:
    """The status line and the list of pending updates."""

    status: str = ""
    rows: list[PendingUpdate] = field(default_factory=list)

    def clear(self) -> None:
        """Empty the list and blank the status line."""
        self.status = CLEARED
        self.rows.clear()

    def begin_check(self) -> None:
        """Reset the list before a new check."""
        self.clear()
        self.status = CHECKING

    def handle_update_result(self, output: str) -> None:
        """Fill the list from the output of a check."""
        if not output.strip():
            self.status = UP_TO_DATE
            return
        self.status = UPDATES_FOUND
        self.rows.extend(parse_updates(output))

    def begin_update_all(self) -> None:
        self.status = UPDATING_ALL

    def row_labels(self) -> list[str]:
        return [row.label for row in self.rows]