"""Build-time settings of the updater."""

from __future__ import annotations

from pathlib import PurePosixPath

VERSION = "0.1.0"
PROGRAM_NAME = "updater"
GETTEXT_PACKAGE = "updater"
LOCALEDIR = "/usr/share/locale"
PKGDATADIR = "/usr/share/updater"
APPLICATION_ID = "org.gnome.Example"


def resource_path(name: str) -> PurePosixPath:
    """Return the location of a data file installed alongside the program."""
    if not name or "/" in name or name in {".", ".."}:
        raise ValueError(f"not a plain file name: {name!r}")
    return PurePosixPath(PKGDATADIR) / name