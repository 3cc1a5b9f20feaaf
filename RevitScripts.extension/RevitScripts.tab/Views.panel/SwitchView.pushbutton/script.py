# -*- coding: utf-8 -*-
__title__ = "Switch\nView"
__doc__ = """Version = 1.0
Date    = 19.10.2026
________________________________________________________________
Description:

Lists every view opened in this session (alphabetical) and activates
the one you pick. The active view, or the sheet it is placed on, is
highlighted when the list opens.
________________________________________________________________
How-To:

1. Type to filter, Up/Down to move, Enter to switch.
2. Space right away jumps to the next view in the list.
________________________________________________________________"""

# ==================================================
# Imports
# ==================================================
from Autodesk.Revit.DB import FilteredElementCollector, View, ViewSheet, Viewport

import clr

clr.AddReference("System.Windows.Forms")
from System.Windows.Forms import MessageBox

from pyrevit import script

from customguis.datagrid import show_data_grid
from customguis.history import ViewHistory

# ==================================================
# Revit Document Setup
# ==================================================
uidoc = __revit__.ActiveUIDocument
doc = uidoc.Document
logger = script.get_logger()

COLUMNS = ["Title", "ViewType"]


# ==================================================
# Helpers
# ==================================================
def containing_sheet_id(view):
    """Sheet id for a view placed on a sheet, the view's own id otherwise."""
    if isinstance(view, ViewSheet):
        return view.Id
    for vp in FilteredElementCollector(doc).OfClass(Viewport):
        if vp.ViewId == view.Id:
            sheet = doc.GetElement(vp.SheetId)
            if isinstance(sheet, ViewSheet):
                return sheet.Id
    return view.Id


def index_of(views, element_id):
    for i, v in enumerate(views):
        if v.Id == element_id:
            return i
    return -1


# ==================================================
# Main
# ==================================================
history = ViewHistory()
project = doc.Title if doc else None

if not history.exists(project):
    MessageBox.Show("Log file does not exist.", "Error")
    script.exit()

titles = set(history.recent_titles(project))
views = sorted(
    [v for v in FilteredElementCollector(doc).OfClass(View) if v.Title in titles],
    key=lambda v: v.Title,
)
logger.debug("{} views in history".format(len(views)))

selected_index = index_of(views, containing_sheet_id(uidoc.ActiveView))
initial = [selected_index] if selected_index >= 0 else []

picked = show_data_grid(views, COLUMNS, initial_selection=initial)
if not picked:
    script.exit()

uidoc.ActiveView = picked[0]
