# -*- coding: utf-8 -*-
__title__ = "List\nSheets"
__doc__ = """Version = 1.0
Date    = 19.10.2026
________________________________________________________________
Description:

Lists all sheets with their current revision and opens the ones you
pick. Sorted by sheet number.
________________________________________________________________
How-To:

1. Filter on anything shown, e.g. "A1 !void" or "P01 | P02".
2. Enter opens the selected sheets.
________________________________________________________________"""

# ==================================================
# Imports
# ==================================================
from Autodesk.Revit.DB import BuiltInParameter, FilteredElementCollector, ViewSheet

from pyrevit import script

from customguis.datagrid import show_data_grid

# ==================================================
# Revit Document Setup
# ==================================================
uidoc = __revit__.ActiveUIDocument
doc = uidoc.Document
logger = script.get_logger()

COLUMNS = [
    "Sheet Number",
    "Sheet Name",
    "Current Revision",
    "Current Revision Issued To",
    "Current Revision Description",
]


# ==================================================
# Helpers
# ==================================================
def param_text(sheet, bip):
    p = sheet.get_Parameter(bip)
    if p and p.HasValue:
        return p.AsString() or p.AsValueString() or ""
    return ""


def sheet_entry(sheet):
    return {
        "Sheet Number": sheet.SheetNumber,
        "Sheet Name": sheet.Name,
        "Current Revision": param_text(sheet, BuiltInParameter.SHEET_CURRENT_REVISION),
        "Current Revision Issued To": param_text(
            sheet, BuiltInParameter.SHEET_CURRENT_REVISION_ISSUED_TO
        ),
        "Current Revision Description": param_text(
            sheet, BuiltInParameter.SHEET_CURRENT_REVISION_DESCRIPTION
        ),
        # not a column, carried along for the result
        "sheet": sheet,
    }


# ==================================================
# Main
# ==================================================
entries = [sheet_entry(s) for s in FilteredElementCollector(doc).OfClass(ViewSheet)]
logger.debug("{} sheets collected".format(len(entries)))

picked = show_data_grid(entries, COLUMNS, sort_by_first_column=True)
if not picked:
    script.exit()

for entry in picked:
    uidoc.ActiveView = entry["sheet"]
