import subprocess
from unittest import mock

import pytest

from pacupdater import update_manager
from pacupdater.update_manager import PendingUpdate, UpdateError


def _completed(args, stdout=b"", stderr=b"", code=0):
    return subprocess.CompletedProcess(args, code, stdout=stdout, stderr=stderr)


def test_parse_updates_takes_first_and_last_fields():
    output = "linux 6.1-1 -> 6.2-1\nvim 9.0-1 -> 9.1-1\n"
    updates = update_manager.parse_updates(output)
    assert updates == [
        PendingUpdate("linux", "6.2-1"),
        PendingUpdate("vim", "9.1-1"),
    ]


def test_parse_updates_skips_blank_lines_and_crlf():
    output = "\n   \nbash 5.1 -> 5.2\r\n\n"
    assert update_manager.parse_updates(output) == [PendingUpdate("bash", "5.2")]


def test_parse_updates_single_field_has_empty_version():
    assert update_manager.parse_updates("lonely") == [PendingUpdate("lonely", "")]


def test_parse_updates_skips_line_with_leading_space():
    assert update_manager.parse_updates(" indented 1 -> 2") == []


def test_parse_updates_empty_output():
    assert update_manager.parse_updates("") == []


def test_label_joins_package_and_version():
    update = PendingUpdate("glibc", "2.39")
    assert update.label == f"{update.package} - {update.version}"


@mock.patch("subprocess.run")
def test_check_updates_returns_stdout(run):
    run.return_value = _completed(["checkupdates"], stdout=b"a 1 -> 2\n")
    assert update_manager.check_updates() == "a 1 -> 2\n"
    assert run.call_args.args[0] == ["checkupdates"]


@mock.patch("subprocess.run", side_effect=FileNotFoundError("checkupdates"))
def test_check_updates_raises_when_missing(run):
    with pytest.raises(UpdateError):
        update_manager.check_updates()


@mock.patch("subprocess.run")
def test_install_package_runs_pacman(run):
    run.return_value = _completed([])
    result = update_manager.install_package("vim")
    assert run.call_args.args[0] == [
        "pkexec", "pacman", "-y", "-S", "vim", "--noconfirm",
    ]
    assert result.returncode == 0


@mock.patch("subprocess.run")
def test_update_all_runs_system_upgrade(run):
    run.return_value = _completed([])
    result = update_manager.update_all()
    assert run.call_args.args[0] == list(update_manager.UPDATE_ALL_COMMAND)
    assert result.returncode == 0


@mock.patch("subprocess.run", side_effect=OSError("no pkexec"))
def test_check_updates_async_reports_error_text(run):
    results = []
    update_manager.check_updates_async(results.append).join(timeout=5)
    assert results == ["Error"]


@mock.patch("subprocess.run")
def test_check_updates_async_delivers_output(run):
    run.return_value = _completed([], stdout=b"x 1 -> 2\n")
    results = []
    update_manager.check_updates_async(results.append).join(timeout=5)
    assert results == ["x 1 -> 2\n"]


@mock.patch("subprocess.run", side_effect=OSError("no pkexec"))
def test_install_package_async_signals_even_on_failure(run):
    done = []
    update_manager.install_package_async("vim", lambda: done.append(True)).join(timeout=5)
    assert done == [True]


@mock.patch("subprocess.run")
def test_update_all_async_without_callback(run):
    run.return_value = _completed([])
    thread = update_manager.update_all_async()
    thread.join(timeout=5)
    assert thread.is_alive() is False
    assert run.call_count == 1


@mock.patch("subprocess.run")
def test_update_all_async_calls_callback(run):
    run.return_value = _completed([])
    done = []
    update_manager.update_all_async(lambda: done.append(1)).join(timeout=5)
    assert done == [1]