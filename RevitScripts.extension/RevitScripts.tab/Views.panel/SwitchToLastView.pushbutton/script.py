# -*- coding: utf-8 -*-
__title__ = "Last\nView"
__doc__ = """Version = 1.0
Date    = 19.10.2026
________________________________________________________________
Description:

Jumps back to the previously active view (like Alt+Tab for views).
________________________________________________________________"""

# ==================================================
# Imports
# ==================================================
from Autodesk.Revit.DB import ElementId, View

from pyrevit import forms, script

from customguis.history import ViewHistory

# ==================================================
# Revit Document Setup
# ==================================================
uidoc = __revit__.ActiveUIDocument
doc = uidoc.Document
logger = script.get_logger()

# ==================================================
# Main
# ==================================================
history = ViewHistory()
project = doc.Title if doc else None

if not history.exists(project):
    forms.alert("Log file does not exist.", exitscript=True)

if len(history.read(project)) < 2:
    forms.alert("Not enough entries in the log file.", exitscript=True)

for view_id in history.previous_view_ids(project):
    view = doc.GetElement(ElementId(view_id))
    if isinstance(view, View):
        uidoc.ActiveView = view
        break
    logger.debug("View {} no longer exists".format(view_id))
else:
    forms.alert("No valid view found in the log file.", exitscript=True)
