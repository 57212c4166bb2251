"""Query and apply pending pacman updates."""

from __future__ import annotations

import logging
import subprocess
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass

log = logging.getLogger(__name__)

CHECK_COMMAND = ("checkupdates",)
UPDATE_ALL_COMMAND = ("pkexec", "pacman", "y", "-Syu", "--noconfirm")
# What the background check reports when the checker cannot be started.
ERROR_OUTPUT = "Error"


class UpdateError(RuntimeError):
    """A package-management command could not be started."""


@dataclass(frozen=True)
class PendingUpdate:
    """One package with an update waiting."""

    package: str
    version: str

    @property
    def label(self) -> str:
        return f"{self.package} - {self.version}"


def parse_updates(output: str) -> list[PendingUpdate]:
    """Read the lines printed by checkupdates into pending updates.

    The package is the first space-separated field and the version the last;
    a line with a single field has an empty version.
    """
    updates = []
    for line in output.split("\n"):
        line = line.removesuffix("\r")
        if not line.strip():
            continue
        parts = line.split(" ")
        package = parts[0]
        version = parts[-1] if len(parts) > 1 else ""
        if package:
            updates.append(PendingUpdate(package, version))
    return updates


def install_command(package: str) -> tuple[str, ...]:
    """Return the command that installs one package."""
    return ("pkexec", "pacman", "-y", "-S", package, "--noconfirm")


def _run(command: Sequence[str]) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(list(command), capture_output=True)
    except OSError as exc:
        raise UpdateError(f"cannot run {command[0]}: {exc}") from exc


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _log_result(header: str, result: subprocess.CompletedProcess) -> None:
    log.info(header)
    log.info("Status: %s", result.returncode)
    log.info("Stdout: %s", _decode(result.stdout))
    log.info("Stderr: %s", _decode(result.stderr))


def check_updates() -> str:
    """Run checkupdates and return what it printed."""
    return _decode(_run(CHECK_COMMAND).stdout)


def install_package(package: str) -> subprocess.CompletedProcess:
    """Install one package through pkexec and pacman."""
    result = _run(install_command(package))
    _log_result(f"Command executed for {package}", result)
    return result


def update_all() -> subprocess.CompletedProcess:
    """Upgrade the whole system through pkexec and pacman."""
    result = _run(UPDATE_ALL_COMMAND)
    _log_result("all packages updating", result)
    return result


def _spawn(work: Callable[[], None]) -> threading.Thread:
    thread = threading.Thread(target=work, daemon=True)
    thread.start()
    return thread


def check_updates_async(on_done: Callable[[str], None]) -> threading.Thread:
    """Check for updates in the background and hand the output to on_done."""

    def work() -> None:
        try:
            output = check_updates()
        except UpdateError:
            output = ERROR_OUTPUT
        on_done(output)

    return _spawn(work)


def install_package_async(
    package: str, on_done: Callable[[], None]
) -> threading.Thread:
    """Install a package in the background, calling on_done when finished."""
    log.info("Thread started for: %s", package)

    def work() -> None:
        try:
            install_package(package)
        except UpdateError as exc:
            log.error("Command failed to execute for %s: %s", package, exc)
        on_done()

    return _spawn(work)


def update_all_async(
    on_done: Callable[[], None] | None = None,
) -> threading.Thread:
    """Upgrade the system in the background, calling on_done if given."""
    log.info("thread started for updating all")

    def work() -> None:
        try:
            update_all()
        except UpdateError as exc:
            log.error("Command failed to execute: %s", exc)
        if on_done is not None:
            on_done()

    return _spawn(work)