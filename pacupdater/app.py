"""Terminal front end for checking and applying updates."""

from __future__ import annotations

import argparse
import gettext
import logging
import queue
import sys
from collections.abc import Callable, Iterable
from enum import Enum, auto
from typing import TextIO

from .config import GETTEXT_PACKAGE, LOCALEDIR, PROGRAM_NAME, VERSION
from .model import UpdaterState
from .update_manager import (
    UpdateError,
    check_updates,
    check_updates_async,
    install_package_async,
    update_all_async,
)

HELP = (
    "Commands: r(efresh), c(lear), a(ll), u(pdate) N, about, h(elp), q(uit)"
)


class _Event(Enum):
    RESULT = auto()
    REFRESH = auto()


def about_text() -> str:
    """Return the text of the about box."""
    return f"{PROGRAM_NAME} {VERSION}\nLists and installs pending pacman updates."


class UpdaterWindow:
    """Interactive view over an UpdaterState, fed by background workers."""

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        checker: Callable[[Callable[[str], None]], object] = check_updates_async,
        installer: Callable[[str, Callable[[], None]], object] = install_package_async,
        upgrader: Callable[[Callable[[], None] | None], object] = update_all_async,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.state = UpdaterState()
        self._checker = checker
        self._installer = installer
        self._upgrader = upgrader
        self._events: queue.Queue[tuple[_Event, str | None]] = queue.Queue()
        self._pending = 0

    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def render(self) -> None:
        self._write(self.state.status)
        for number, label in enumerate(self.state.row_labels(), start=1):
            self._write(f"  {number}. {label}")

    def check_for_updates(self) -> None:
        """Start a fresh check; the result arrives through wait_idle."""
        self.state.begin_check()
        self.render()
        self._pending += 1
        self._checker(lambda output: self._events.put((_Event.RESULT, output)))

    def clear_list(self) -> None:
        self.state.clear()
        self.render()

    def install(self, number: int) -> None:
        """Install the update shown at the given 1-based position."""
        if not 1 <= number <= len(self.state.rows):
            raise IndexError(f"No such update: {number}")
        package = self.state.rows[number - 1].package
        self._pending += 1
        self._installer(package, lambda: self._events.put((_Event.REFRESH, None)))

    def update_all(self) -> None:
        self.state.begin_update_all()
        self.render()
        self._upgrader(None)

    def show_about(self) -> None:
        self._write(about_text())

    def wait_idle(self, timeout: float | None = None) -> None:
        """Handle worker results until no work is outstanding or time runs out."""
        while self._pending:
            try:
                kind, payload = self._events.get(timeout=timeout)
            except queue.Empty:
                return
            self._pending -= 1
            if kind is _Event.RESULT:
                self.state.handle_update_result(payload or "")
                self.render()
            else:
                self.check_for_updates()

    def handle_command(self, line: str) -> bool:
        """Carry out one command; return False when the user quits."""
        words = line.split()
        if not words:
            return True
        command, args = words[0].lower(), words[1:]
        if command in {"q", "quit"}:
            return False
        if command in {"r", "refresh"}:
            self.check_for_updates()
        elif command in {"c", "clear"}:
            self.clear_list()
        elif command in {"a", "all"}:
            self.update_all()
        elif command in {"u", "update"}:
            try:
                self.install(int(args[0]))
            except (IndexError, ValueError):
                self._write(f"No such update: {' '.join(args)}")
        elif command == "about":
            self.show_about()
        elif command in {"h", "help"}:
            self._write(HELP)
        else:
            self._write(f"Unknown command: {command}")
        return True

    def run(self, lines: Iterable[str] | None = None) -> int:
        """Read commands until quit or end of input."""
        self._write(HELP)
        for line in lines if lines is not None else sys.stdin:
            if not self.handle_command(line):
                break
            self.wait_idle()
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME, description="List and install pending pacman updates."
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {VERSION}"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="print pending updates and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    gettext.bindtextdomain(GETTEXT_PACKAGE, LOCALEDIR)
    gettext.textdomain(GETTEXT_PACKAGE)
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)

    if args.check:
        try:
            output = check_updates()
        except UpdateError as exc:
            print(exc, file=sys.stderr)
            return 1
        state = UpdaterState()
        state.handle_update_result(output)
        print(state.status)
        for label in state.row_labels():
            print(label)
        return 0

    return UpdaterWindow().run()