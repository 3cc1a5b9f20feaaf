# -*- coding: utf-8 -*-
"""Selection state of one data grid dialog, independent of any UI toolkit.

The WinForms dialog in ``customguis.datagrid`` forwards search-box edits,
key presses and clicks to a GridSession and redraws from it. Keeping the
state here means the keyboard contract can be exercised without Revit.

Selected rows are tracked by their index in the full record list, so a
filter pass only has to drop the rows that disappeared. Everything the
session reports to the outside (``selected_rows``, ``current_row``) is a
position in the rows currently displayed.
"""
import logging

from customguis.accessors import auto_accessor, columns_from_first
from customguis.query import filter_rows
from customguis.settings import PickerSettings

logger = logging.getLogger(__name__)

# States
IDLE = "idle"
FILTERING = "filtering"
ROW_SELECTED = "row_selected"
ACCEPTED = "accepted"
CANCELLED = "cancelled"

# Focus targets
QUERY = "query"
GRID = "grid"

# Key names understood by GridSession.handle_key
KEY_UP = "Up"
KEY_DOWN = "Down"
KEY_ENTER = "Enter"
KEY_ESCAPE = "Escape"
KEY_TAB = "Tab"
KEY_SPACE = "Space"


class GridSession(object):
    def __init__(
        self, records, columns=None, initial_selection=None, accessor=None, settings=None
    ):
        self.records = records
        self.columns = list(columns) if columns is not None else columns_from_first(records)
        self.accessor = accessor or auto_accessor
        self.settings = settings or PickerSettings()

        self.query_text = ""
        self.visible = []
        self.focus = QUERY
        self.state = IDLE
        self._selected = set()
        self._current = None
        self._result = []

        self._refilter()
        self._apply_initial_selection(initial_selection)
        self._settle()

    # ==================================================
    # Read-only views
    # ==================================================
    @property
    def rows(self):
        return [self.records[i] for i in self.visible]

    @property
    def row_count(self):
        return len(self.visible)

    @property
    def selected_rows(self):
        return [pos for pos, index in enumerate(self.visible) if index in self._selected]

    @property
    def current_row(self):
        if self._current is None:
            return None
        return self.visible.index(self._current)

    @property
    def is_closed(self):
        return self.state in (ACCEPTED, CANCELLED)

    @property
    def result(self):
        return list(self._result)

    def record_at(self, position):
        return self.records[self.visible[position]]

    # ==================================================
    # Filtering
    # ==================================================
    def set_query(self, text):
        if self.is_closed:
            return
        self.query_text = text or ""
        self._refilter()
        self._selected = set(i for i in self._selected if i in self._visible_set)
        if self._current not in self._visible_set:
            self._current = None
        self._settle()

    def _refilter(self):
        self.visible = filter_rows(
            self.records,
            self.columns,
            self.query_text,
            self.accessor,
            self.settings.sort_by_first_column,
            self.settings.separator,
        )
        self._visible_set = set(self.visible)

    def _apply_initial_selection(self, initial_selection):
        for index in initial_selection or []:
            if isinstance(index, bool) or not isinstance(index, int):
                continue
            if 0 <= index < len(self.records) and index in self._visible_set:
                self._selected.add(index)
                if self._current is None:
                    self._current = index
        if initial_selection and not self._selected:
            logger.debug("initial selection %r out of range, ignored", initial_selection)

    def _settle(self):
        if self.is_closed:
            return
        if self._selected:
            self.state = ROW_SELECTED
        elif self.query_text:
            self.state = FILTERING
        else:
            self.state = IDLE

    # ==================================================
    # Selection
    # ==================================================
    def _valid(self, position):
        return (
            position is not None
            and not isinstance(position, bool)
            and 0 <= position < len(self.visible)
        )

    def _select_only(self, position):
        index = self.visible[position]
        self._selected = set([index])
        self._current = index

    def move(self, step):
        """Up/Down: move the highlight by `step` rows, wrapping at both ends."""
        if self.is_closed or not self.visible:
            return
        self.focus = GRID
        current = self.current_row
        if current is None:
            target = 0
        else:
            target = (current + step) % len(self.visible)
        self._select_only(target)
        self._settle()

    def select_rows(self, positions, current=None):
        """Mirror a selection made directly in the grid control."""
        if self.is_closed:
            return
        self._selected = set(self.visible[p] for p in positions if self._valid(p))
        if self._valid(current):
            self._current = self.visible[current]
        elif self._current not in self._selected:
            self._current = None
        self._settle()

    def clear_selection(self):
        if self.is_closed:
            return
        self._selected = set()
        self._current = None
        self._settle()

    def focus_query(self):
        self.focus = QUERY

    # ==================================================
    # Closing
    # ==================================================
    def accept(self):
        """Enter: return the selected rows, or the first row when none is selected."""
        if self.is_closed or not self.visible:
            return False
        if not self._selected:
            self._select_only(0)
        self._close(ACCEPTED, self.selected_rows)
        return True

    def activate(self, position):
        """Double-click on a row."""
        if self.is_closed or not self._valid(position):
            return False
        self._select_only(position)
        return self.accept()

    def accept_adjacent(self, backwards=False):
        """Space on an empty search box: take the row after (or before) the current one."""
        if self.is_closed or self.query_text.strip() or not self.visible:
            return False
        count = len(self.visible)
        current = self.current_row
        if current is None:
            # nothing highlighted: Space takes the first row, Shift+Space the last
            target = count - 1 if backwards else 0
        else:
            target = (current + (-1 if backwards else 1)) % count
        self._select_only(target)
        self._close(ACCEPTED, [target])
        return True

    def cancel(self):
        if self.is_closed:
            return
        self._close(CANCELLED, [])

    def _close(self, state, positions):
        self._result = [self.records[self.visible[p]] for p in positions]
        self.state = state
        logger.debug("session %s with %d row(s)", state, len(self._result))

    # ==================================================
    # Keyboard
    # ==================================================
    def handle_key(self, key, shift=False, source=None):
        """Apply one key press; returns True when the key was consumed.

        `source` is the control that received the key (QUERY or GRID), when
        the caller knows it.
        """
        if self.is_closed:
            return False
        if source in (QUERY, GRID):
            self.focus = source
        if key == KEY_ESCAPE:
            self.cancel()
            return True
        if key == KEY_ENTER:
            self.accept()
            return True
        if key == KEY_DOWN:
            self.move(1)
            return True
        if key == KEY_UP:
            self.move(-1)
            return True
        if key == KEY_TAB:
            self.focus_query()
            return True
        if key == KEY_SPACE and self.focus == QUERY:
            return self.accept_adjacent(backwards=shift)
        return False
