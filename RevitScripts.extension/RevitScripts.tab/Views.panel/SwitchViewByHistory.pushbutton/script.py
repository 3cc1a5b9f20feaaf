# -*- coding: utf-8 -*-
__title__ = "Switch View\nBy History"
__doc__ = """Version = 1.0
Date    = 19.10.2026
________________________________________________________________
Description:

Same as Switch View, but the list keeps the order in which the views
were visited (most recent first) and leaves out the active view.
________________________________________________________________
How-To:

1. Enter switches to the most recently visited view.
2. Type to narrow the list down, Up/Down + Enter to pick another.
________________________________________________________________"""

# ==================================================
# Imports
# ==================================================
from Autodesk.Revit.DB import FilteredElementCollector, View

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

COLUMNS = ["Title", "ViewType"]

# ==================================================
# Main
# ==================================================
history = ViewHistory()
project = doc.Title if doc else None

if not history.exists(project):
    MessageBox.Show("Log file does not exist.", "Error")
    script.exit()

titles = history.recent_titles(project, skip_current=True)
rank = dict((title, i) for i, title in enumerate(titles))

views = sorted(
    [v for v in FilteredElementCollector(doc).OfClass(View) if v.Title in rank],
    key=lambda v: rank[v.Title],
)

active_id = uidoc.ActiveView.Id
initial = [i for i, v in enumerate(views) if v.Id == active_id]

picked = show_data_grid(views, COLUMNS, initial_selection=initial)
if not picked:
    script.exit()

uidoc.ActiveView = picked[0]
