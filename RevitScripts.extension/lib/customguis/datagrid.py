# -*- coding: utf-8 -*-
"""Modal WinForms picker: search box on top, read-only grid below.

    from customguis.datagrid import show_data_grid

    picked = show_data_grid(views, ["Title", "ViewType"], initial_selection=[3])
    if not picked:
        script.exit()

Typing filters live (see ``customguis.query`` for the syntax). Up/Down move
with wrap-around, Enter takes the selected rows (or the first row), Escape
cancels, double-click takes the clicked row, Space on an empty search box
takes the row after the highlighted one (Shift+Space the one before).
Left/Right scroll wide grids sideways, Shift for big jumps.
"""
import logging

import clr

clr.AddReference("System")
clr.AddReference("System.Windows.Forms")
clr.AddReference("System.Drawing")
from System.Windows.Forms import (
    Form,
    DataGridView,
    DataGridViewTextBoxColumn,
    DataGridViewSelectionMode,
    DataGridViewAutoSizeColumnMode,
    DockStyle,
    TextBox,
    Keys,
    DialogResult,
    FormStartPosition,
    Screen,
    SystemInformation,
    TextRenderer,
)
from System.Drawing import Color, Point

from customguis import layout
from customguis.accessors import cell_text, row_texts
from customguis.session import (
    GridSession,
    ACCEPTED,
    QUERY,
    GRID,
    KEY_UP,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_TAB,
    KEY_SPACE,
)
from customguis.settings import PickerSettings

logger = logging.getLogger(__name__)

SESSION_KEYS = {
    Keys.Up: KEY_UP,
    Keys.Down: KEY_DOWN,
    Keys.Enter: KEY_ENTER,
    Keys.Escape: KEY_ESCAPE,
    Keys.Tab: KEY_TAB,
    Keys.Space: KEY_SPACE,
}


def _rect(rectangle):
    return layout.Rect(rectangle.X, rectangle.Y, rectangle.Width, rectangle.Height)


# ==================================================
# UI Class: DataGridForm
# ==================================================
class DataGridForm(Form):
    def __init__(self, session, title=None):
        self.session = session
        self.settings = session.settings
        self.Text = title or "Total Entries: {}".format(len(session.records))
        self.StartPosition = FormStartPosition.CenterScreen
        self.BackColor = Color.White

        # --- 1. Grid
        self.dataGrid = DataGridView()
        self.dataGrid.Dock = DockStyle.Fill
        self.dataGrid.SelectionMode = DataGridViewSelectionMode.FullRowSelect
        self.dataGrid.MultiSelect = True
        self.dataGrid.ReadOnly = True
        self.dataGrid.AllowUserToAddRows = False
        self.dataGrid.AllowUserToDeleteRows = False
        self.dataGrid.AutoGenerateColumns = False
        self.dataGrid.BackgroundColor = Color.White
        self.dataGrid.KeyDown += self.dataGrid_KeyDown
        self.dataGrid.CellDoubleClick += self.dataGrid_CellDoubleClick
        self.dataGrid.SelectionChanged += self.on_row_selected

        for column in session.columns:
            col = DataGridViewTextBoxColumn()
            col.Name = column
            col.HeaderText = column
            col.ReadOnly = True
            col.AutoSizeMode = DataGridViewAutoSizeColumnMode.NotSet
            self.dataGrid.Columns.Add(col)

        # --- 2. Search box
        self.searchBox = TextBox()
        self.searchBox.Dock = DockStyle.Top
        self.searchBox.TextChanged += self.searchBox_TextChanged
        self.searchBox.KeyDown += self.searchBox_KeyDown
        self.searchBox.Enter += self.searchBox_Enter

        # grid first so the docked search box stays on top
        self.Controls.Add(self.dataGrid)
        self.Controls.Add(self.searchBox)

        self.Load += self.form_Load
        self.FormClosing += self.form_Closing

        self.render()
        self.searchBox.Select()

    # ==================================================
    # Rendering
    # ==================================================
    def render(self):
        """Rebuild the rows from the session and restore its selection."""
        self.dataGrid.SelectionChanged -= self.on_row_selected
        try:
            self.dataGrid.Rows.Clear()
            if self.session.columns:
                for record in self.session.rows:
                    row_idx = self.dataGrid.Rows.Add()
                    row = self.dataGrid.Rows[row_idx]
                    for i, column in enumerate(self.session.columns):
                        row.Cells[i].Value = cell_text(
                            self.session.accessor(record, column)
                        )
            self.sync_selection()
        finally:
            self.dataGrid.SelectionChanged += self.on_row_selected

    def sync_selection(self):
        if self.dataGrid.Rows.Count == 0:
            return
        current = self.session.current_row
        # setting CurrentCell also selects that row, so it goes first
        if current is None:
            self.dataGrid.CurrentCell = None
        else:
            self.dataGrid.CurrentCell = self.dataGrid.Rows[current].Cells[0]
        self.dataGrid.ClearSelection()
        for position in self.session.selected_rows:
            self.dataGrid.Rows[position].Selected = True

    def refresh_selection(self, focus_grid=False):
        self.dataGrid.SelectionChanged -= self.on_row_selected
        try:
            if focus_grid:
                self.dataGrid.Focus()
            self.sync_selection()
        finally:
            self.dataGrid.SelectionChanged += self.on_row_selected

    # ==================================================
    # Layout
    # ==================================================
    def form_Load(self, sender, event):
        measure_header = lambda text: TextRenderer.MeasureText(
            text, self.dataGrid.ColumnHeadersDefaultCellStyle.Font
        ).Width
        measure_cell = lambda text: TextRenderer.MeasureText(
            text, self.dataGrid.DefaultCellStyle.Font
        ).Width

        rows = [
            row_texts(r, self.session.columns, self.session.accessor)
            for r in self.session.rows
        ]
        widths = layout.column_widths(
            self.session.columns,
            rows,
            measure_cell,
            self.settings.column_padding,
            measure_header,
        )
        for i, width in enumerate(widths):
            self.dataGrid.Columns[i].Width = width

        required_height = self.searchBox.Height + layout.natural_height(
            self.session.row_count,
            self.dataGrid.RowTemplate.Height,
            self.dataGrid.ColumnHeadersHeight,
            SystemInformation.HorizontalScrollBarHeight,
        )
        work_area = _rect(Screen.PrimaryScreen.WorkingArea)

        if self.settings.span_all_screens:
            screens = [(_rect(s.Bounds), _rect(s.WorkingArea)) for s in Screen.AllScreens]
            placement = layout.span_screens(
                required_height, screens, work_area, self.settings.screen_padding
            )
        else:
            required_width = layout.natural_width(
                widths, SystemInformation.VerticalScrollBarWidth
            )
            placement = layout.place_dialog(
                required_width, required_height, work_area, self.settings.screen_padding
            )

        logger.debug("dialog placement %r", placement)
        self.Width = placement.width
        self.Height = placement.height
        if not placement.centered:
            self.StartPosition = FormStartPosition.Manual
            self.Location = Point(placement.x, placement.y)

    def scroll_horizontally(self, direction, large):
        content = sum(c.Width for c in self.dataGrid.Columns)
        step = self.settings.scroll_step_large if large else self.settings.scroll_step
        self.dataGrid.HorizontalScrollingOffset = layout.scroll_offset(
            self.dataGrid.HorizontalScrollingOffset,
            content,
            self.dataGrid.ClientRectangle.Width,
            direction,
            step,
        )

    # ==================================================
    # Events
    # ==================================================
    def searchBox_TextChanged(self, sender, event):
        self.session.set_query(self.searchBox.Text)
        self.render()

    def searchBox_Enter(self, sender, event):
        self.session.focus_query()

    def searchBox_KeyDown(self, sender, event):
        key = SESSION_KEYS.get(event.KeyCode)
        if key is None:
            return
        if key == KEY_TAB:
            return
        if self.session.handle_key(key, shift=event.Shift, source=QUERY):
            event.Handled = True
            event.SuppressKeyPress = True
            if key in (KEY_UP, KEY_DOWN):
                self.refresh_selection(focus_grid=True)
            self.close_if_done()

    def dataGrid_KeyDown(self, sender, event):
        if event.KeyCode in (Keys.Left, Keys.Right):
            direction = 1 if event.KeyCode == Keys.Right else -1
            self.scroll_horizontally(direction, event.Shift)
            event.Handled = True
            return

        key = SESSION_KEYS.get(event.KeyCode)
        if key is None or key == KEY_SPACE:
            return
        if self.session.handle_key(key, shift=event.Shift, source=GRID):
            event.Handled = True
            if key == KEY_TAB:
                self.searchBox.Focus()
            elif key in (KEY_UP, KEY_DOWN):
                self.refresh_selection()
            self.close_if_done()

    def dataGrid_CellDoubleClick(self, sender, event):
        if event.RowIndex < 0:
            return
        self.session.activate(event.RowIndex)
        self.close_if_done()

    def on_row_selected(self, sender, event):
        """Mouse selection (ctrl/shift clicks) made in the grid itself."""
        positions = [r.Index for r in self.dataGrid.SelectedRows if r.Index >= 0]
        current = self.dataGrid.CurrentRow.Index if self.dataGrid.CurrentRow else None
        self.session.select_rows(positions, current)

    def close_if_done(self):
        if not self.session.is_closed:
            return
        if self.session.state == ACCEPTED:
            self.DialogResult = DialogResult.OK
        else:
            self.DialogResult = DialogResult.Cancel
        self.Close()

    def form_Closing(self, sender, event):
        # closing from the title bar counts as cancel
        if not self.session.is_closed:
            self.session.cancel()


# ==================================================
# Entry point
# ==================================================
def show_data_grid(
    records,
    columns=None,
    initial_selection=None,
    title=None,
    span_all_screens=None,
    sort_by_first_column=None,
    accessor=None,
    settings=None,
):
    """Show the picker modally and return the chosen records ([] on cancel)."""
    settings = settings or PickerSettings()
    overrides = {}
    if span_all_screens is not None:
        overrides["span_all_screens"] = span_all_screens
    if sort_by_first_column is not None:
        overrides["sort_by_first_column"] = sort_by_first_column
    if overrides:
        settings = settings.copy(**overrides)

    session = GridSession(records, columns, initial_selection, accessor, settings)
    form = DataGridForm(session, title)
    form.ShowDialog()
    return session.result
