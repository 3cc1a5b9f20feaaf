# -*- coding: utf-8 -*-
import copy

import pytest

from customguis.session import (
    ACCEPTED,
    CANCELLED,
    FILTERING,
    GRID,
    IDLE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_SPACE,
    KEY_TAB,
    KEY_UP,
    QUERY,
    ROW_SELECTED,
    GridSession,
)
from customguis.settings import PickerSettings


def names(rows):
    return [r["Name"] for r in rows]


# ==================================================
# Opening
# ==================================================
def test_opens_with_everything_visible(records, columns):
    session = GridSession(records, columns)
    assert session.rows == records
    assert session.selected_rows == []
    assert session.current_row is None
    assert session.state == IDLE
    assert session.focus == QUERY


def test_columns_default_to_keys_of_first_record(records):
    assert GridSession(records).columns == ["Name", "Category"]


def test_initial_selection_highlights_the_row(records, columns):
    session = GridSession(records, columns, initial_selection=[1])
    assert session.selected_rows == [1]
    assert session.current_row == 1
    assert session.state == ROW_SELECTED


@pytest.mark.parametrize("initial", [[-1], [3], [True], ["1"], [None]])
def test_invalid_initial_selection_is_ignored(records, columns, initial):
    session = GridSession(records, columns, initial_selection=initial)
    assert session.selected_rows == []
    assert session.current_row is None
    assert session.state == IDLE


def test_first_valid_initial_index_becomes_current(records, columns):
    session = GridSession(records, columns, initial_selection=[7, 2, 0])
    assert session.selected_rows == [0, 2]
    assert session.current_row == 2


def test_initial_selection_follows_sorted_display():
    rows = [{"Name": "b"}, {"Name": "a"}]
    settings = PickerSettings(sort_by_first_column=True)
    session = GridSession(rows, ["Name"], initial_selection=[0], settings=settings)
    assert names(session.rows) == ["a", "b"]
    assert session.selected_rows == [1]


def test_records_are_not_modified(records, columns):
    before = copy.deepcopy(records)
    session = GridSession(records, columns, initial_selection=[0])
    session.set_query("door")
    session.handle_key(KEY_DOWN)
    session.handle_key(KEY_ENTER)
    assert records == before


# ==================================================
# Filtering
# ==================================================
def test_typing_filters_rows(records, columns):
    session = GridSession(records, columns)
    session.set_query("wall !c")
    assert names(session.rows) == ["Wall-A"]
    assert session.state == FILTERING


def test_filtered_out_rows_leave_the_selection(records, columns):
    session = GridSession(records, columns, initial_selection=[0, 2])
    session.set_query("wall")
    assert session.selected_rows == [0, 1]

    session.set_query("-c")
    assert names(session.rows) == ["Wall-C"]
    assert session.selected_rows == [0]
    assert session.current_row is None

    session.set_query("")
    assert session.selected_rows == [2]


def test_hidden_selection_is_not_restored(records, columns):
    session = GridSession(records, columns, initial_selection=[2])
    session.set_query("door")
    assert session.selected_rows == []
    session.set_query("")
    assert session.selected_rows == []
    assert session.state == IDLE


def test_setting_the_same_query_twice_changes_nothing(records, columns):
    session = GridSession(records, columns, initial_selection=[0, 2])
    session.set_query("wall")
    rows, selected, current = session.rows, session.selected_rows, session.current_row
    session.set_query("wall")
    assert session.rows == rows
    assert session.selected_rows == selected
    assert session.current_row == current


# ==================================================
# Keyboard
# ==================================================
def test_down_without_current_row_selects_first(records, columns):
    session = GridSession(records, columns)
    assert session.handle_key(KEY_DOWN)
    assert session.selected_rows == [0]
    assert session.focus == GRID


def test_down_wraps_from_last_to_first(records, columns):
    session = GridSession(records, columns, initial_selection=[2])
    session.handle_key(KEY_DOWN)
    assert session.selected_rows == [0]
    assert session.current_row == 0


def test_up_wraps_from_first_to_last(records, columns):
    session = GridSession(records, columns, initial_selection=[0])
    session.handle_key(KEY_UP)
    assert session.selected_rows == [2]


def test_arrows_collapse_multi_selection(records, columns):
    session = GridSession(records, columns, initial_selection=[0, 2])
    session.handle_key(KEY_DOWN)
    assert session.selected_rows == [1]


def test_enter_without_selection_returns_first_row(records, columns):
    session = GridSession(records, columns)
    session.set_query("wall")
    assert session.handle_key(KEY_ENTER)
    assert session.state == ACCEPTED
    assert names(session.result) == ["Wall-A"]


def test_enter_returns_selection_in_display_order(records, columns):
    session = GridSession(records, columns)
    session.select_rows([2, 0], current=2)
    session.handle_key(KEY_ENTER)
    assert names(session.result) == ["Wall-A", "Wall-C"]


def test_escape_returns_nothing(records, columns):
    session = GridSession(records, columns, initial_selection=[1])
    assert session.handle_key(KEY_ESCAPE)
    assert session.state == CANCELLED
    assert session.result == []


def test_tab_moves_focus_back_to_search(records, columns):
    session = GridSession(records, columns)
    session.handle_key(KEY_DOWN)
    assert session.focus == GRID
    assert session.handle_key(KEY_TAB)
    assert session.focus == QUERY
    assert session.selected_rows == [0]


def test_space_takes_the_next_row(records, columns):
    session = GridSession(records, columns, initial_selection=[1])
    assert session.handle_key(KEY_SPACE)
    assert names(session.result) == ["Wall-C"]


def test_shift_space_takes_the_previous_row(records, columns):
    session = GridSession(records, columns, initial_selection=[1])
    assert session.handle_key(KEY_SPACE, shift=True)
    assert names(session.result) == ["Wall-A"]


def test_space_wraps_around(records, columns):
    session = GridSession(records, columns, initial_selection=[2])
    session.handle_key(KEY_SPACE)
    assert names(session.result) == ["Wall-A"]


def test_space_without_current_row(records, columns):
    session = GridSession(records, columns)
    session.handle_key(KEY_SPACE)
    assert names(session.result) == ["Wall-A"]

    session = GridSession(records, columns)
    session.handle_key(KEY_SPACE, shift=True)
    assert names(session.result) == ["Wall-C"]


def test_space_is_typed_when_the_search_box_has_text(records, columns):
    session = GridSession(records, columns, initial_selection=[0])
    session.set_query("wall")
    assert not session.handle_key(KEY_SPACE)
    assert not session.is_closed


def test_space_is_left_to_the_grid_when_it_has_focus(records, columns):
    session = GridSession(records, columns)
    session.handle_key(KEY_DOWN)
    assert not session.handle_key(KEY_SPACE)
    assert not session.is_closed


def test_space_after_returning_to_the_search_box(records, columns):
    session = GridSession(records, columns)
    session.handle_key(KEY_DOWN, source=QUERY)
    assert session.focus == GRID
    assert session.handle_key(KEY_SPACE, source=QUERY)
    assert names(session.result) == ["Door-B"]


def test_space_after_focus_query(records, columns):
    session = GridSession(records, columns)
    session.handle_key(KEY_DOWN)
    session.focus_query()
    assert session.handle_key(KEY_SPACE)
    assert names(session.result) == ["Door-B"]


def test_space_from_the_grid_is_not_consumed(records, columns):
    session = GridSession(records, columns)
    assert not session.handle_key(KEY_SPACE, source=GRID)
    assert not session.is_closed


def test_other_keys_are_not_consumed(records, columns):
    session = GridSession(records, columns)
    assert not session.handle_key("A")


# ==================================================
# Mouse
# ==================================================
def test_double_click_returns_only_that_row(records, columns):
    session = GridSession(records, columns, initial_selection=[0, 2])
    assert session.activate(1)
    assert names(session.result) == ["Door-B"]


def test_grid_selection_replaces_previous_one(records, columns):
    session = GridSession(records, columns, initial_selection=[0, 2])
    session.select_rows([1], current=1)
    assert session.selected_rows == [1]
    assert session.current_row == 1


def test_grid_selection_without_current_row(records, columns):
    session = GridSession(records, columns, initial_selection=[0])
    session.select_rows([1, 2])
    assert session.selected_rows == [1, 2]
    assert session.current_row is None


def test_select_rows_mirrors_the_grid(records, columns):
    session = GridSession(records, columns)
    session.select_rows([0, 1, 9], current=1)
    assert session.selected_rows == [0, 1]
    assert session.current_row == 1
    session.clear_selection()
    assert session.selected_rows == []
    assert session.state == IDLE


# ==================================================
# No rows
# ==================================================
def test_no_visible_rows_cannot_be_accepted(records, columns):
    session = GridSession(records, columns)
    session.set_query("zzz")
    assert session.row_count == 0
    assert session.handle_key(KEY_ENTER)
    assert not session.is_closed
    assert not session.activate(0)
    session.set_query("")
    assert session.row_count == 3


def test_empty_record_list():
    session = GridSession([])
    assert session.columns == []
    assert session.rows == []
    assert not session.accept()
    session.handle_key(KEY_ESCAPE)
    assert session.result == []


# ==================================================
# Closed session
# ==================================================
def test_events_after_close_are_ignored(records, columns):
    session = GridSession(records, columns)
    session.handle_key(KEY_ESCAPE)
    assert not session.handle_key(KEY_DOWN)
    session.set_query("door")
    session.select_rows([1])
    assert session.state == CANCELLED
    assert session.result == []
    assert session.row_count == 3


def test_accepted_result_is_kept_after_close(records, columns):
    session = GridSession(records, columns, initial_selection=[1])
    session.handle_key(KEY_ENTER)
    session.cancel()
    assert session.state == ACCEPTED
    assert names(session.result) == ["Door-B"]
