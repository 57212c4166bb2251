# pacupdater

A small interactive terminal program for Arch-based systems. It shows
which packages have pending updates and installs them, one at a time or
all at once.

Pending updates come from `checkupdates`. Installing goes through `pkexec`
and `pacman`, so you are asked to authenticate for each install.

## Requirements

- Python 3.10 or later
- `checkupdates` (from `pacman-contrib`)
- `pacman` and `pkexec` (polkit)

## Installation

```sh
pip install .
```

## Usage

Print the pending updates once and exit:

```sh
pacupdater --check
```

This prints a status line ("Updates found!" or "System up to date")
followed by one `package - version` line per pending update. If
`checkupdates` cannot be started, the error goes to standard error and the
exit status is 1.

Start the interactive session:

```sh
pacupdater
```

`pacupdater --version` prints the version and `pacupdater --help` lists
the options.

In the session, type one command per line:

| Command          | What it does                                              |
|------------------|-----------------------------------------------------------|
| `r`, `refresh`   | Clear the list, run `checkupdates` and show the numbered list of pending updates |
| `c`, `clear`     | Empty the list                                             |
| `u N`, `update N`| Install the update numbered `N`; the list is checked again when the install has finished |
| `a`, `all`       | Start a full system upgrade (`pacman -Syu`) in the background |
| `about`          | Show the program name and version                          |
| `h`, `help`      | Show the list of commands                                  |
| `q`, `quit`      | Leave; end of input does the same                          |

After each command the session waits until any running check or install
has reported back before reading the next line. The output of `pacman` for
each install or upgrade is logged to standard error.

## Using it from Python

The parts that do not need the terminal session can be used on their own:

```python
from pacupdater.update_manager import parse_updates, check_updates

for update in parse_updates(check_updates()):
    print(update.package, update.version)
```

`check_updates()` raises `pacupdater.update_manager.UpdateError` when
`checkupdates` cannot be started. `install_package(package)` and
`update_all()` run the install and upgrade commands and return the
finished process; `check_updates_async`, `install_package_async` and
`update_all_async` do the same on a background thread and call back when
done.

`pacupdater.model.UpdaterState` holds the status line and the rows of
pending updates with no terminal code, which makes it simple to drive from
a script or from tests. `pacupdater.app.UpdaterWindow` is the interactive
session; its checker, installer and upgrader can be replaced when it is
constructed.

## What it does not do

There is no graphical window: everything happens in the terminal. The
full system upgrade does not refresh the list when it finishes; use
`refresh` afterwards.

## Running the tests

```sh
pip install ".[test]"
pytest
```