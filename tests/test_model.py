from pacupdater.model import UpdaterState
from pacupdater.update_manager import PendingUpdate


def test_new_state_is_empty():
    state = UpdaterState()
    assert state.rows == []
    assert state.row_labels() == []


def test_begin_check_clears_rows():
    state = UpdaterState(rows=[PendingUpdate("a", "1")])
    state.begin_check()
    assert state.status == "Checking..."
    assert state.rows == []


def test_empty_result_means_up_to_date():
    state = UpdaterState()
    state.begin_check()
    state.handle_update_result("  \n\n")
    assert state.status == "System up to date"
    assert state.rows == []


def test_result_fills_rows():
    state = UpdaterState()
    state.begin_check()
    state.handle_update_result("linux 6.1-1 -> 6.2-1\nvim 9.0 -> 9.1\n")
    assert state.status == "Updates found!"
    assert [row.package for row in state.rows] == ["linux", "vim"]
    assert state.row_labels() == ["linux - 6.2-1", "vim - 9.1"]


def test_error_output_becomes_a_row():
    state = UpdaterState()
    state.handle_update_result("Error")
    assert state.rows == [PendingUpdate("Error", "")]


def test_clear_blanks_status():
    state = UpdaterState()
    state.handle_update_result("a 1 -> 2")
    state.clear()
    assert state.status == " "
    assert state.rows == []


def test_begin_update_all_keeps_rows():
    state = UpdaterState()
    state.handle_update_result("a 1 -> 2")
    state.begin_update_all()
    assert state.status == "Updating All..."
    assert len(state.rows) == 1