# -*- coding: utf-8 -*-
__title__ = "Open\nViews"
__doc__ = """Version = 1.0
Date    = 19.10.2026
________________________________________________________________
Description:

Lists all views of the project (templates and browsers left out) and
opens every view you select.
________________________________________________________________
How-To:

1. Ctrl/Shift + click to pick several views.
2. Enter opens them all.
________________________________________________________________"""

# ==================================================
# Imports
# ==================================================
from Autodesk.Revit.DB import FilteredElementCollector, View

from pyrevit import script

from customguis.datagrid import show_data_grid

# ==================================================
# Revit Document Setup
# ==================================================
uidoc = __revit__.ActiveUIDocument
doc = uidoc.Document

COLUMNS = ["Title", "ViewType"]
BROWSERS = ("Project Browser", "System Browser")

# ==================================================
# Main
# ==================================================
views = sorted(
    [
        v
        for v in FilteredElementCollector(doc).OfClass(View)
        if not v.IsTemplate and v.Title not in BROWSERS
    ],
    key=lambda v: v.Title,
)

active_id = uidoc.ActiveView.Id
initial = [i for i, v in enumerate(views) if v.Id == active_id]

picked = show_data_grid(views, COLUMNS, initial_selection=initial)
if not picked:
    script.exit()

for view in picked:
    uidoc.RequestViewChange(view)
