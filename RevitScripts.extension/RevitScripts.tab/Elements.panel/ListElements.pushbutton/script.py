# -*- coding: utf-8 -*-
__title__ = "List\nElements"
__doc__ = """Version = 1.0
Date    = 19.10.2026
________________________________________________________________
Description:

Lists the selected elements (or everything visible in the active view
when nothing is selected) and selects the rows you pick in Revit.
________________________________________________________________
How-To:

1. [Hold SHIFT + CLICK] to choose options: include all parameters,
   stretch the list over all screens.
2. Filter, pick rows, Enter.
________________________________________________________________"""

# ==================================================
# Imports
# ==================================================
from Autodesk.Revit.DB import ElementId, FilteredElementCollector, Group, View
from System.Collections.Generic import List

from pyrevit import script

from customguis.datagrid import show_data_grid

# ==================================================
# Revit Document Setup
# ==================================================
uidoc = __revit__.ActiveUIDocument
doc = uidoc.Document
logger = script.get_logger()
cfg = script.get_config()

include_parameters = getattr(cfg, "include_parameters", False)
span_all_screens = getattr(cfg, "span_all_screens", False)


# ==================================================
# Helpers
# ==================================================
def owner_name(elem_id, kind, fallback):
    if elem_id is None or elem_id == ElementId.InvalidElementId:
        return ""
    owner = doc.GetElement(elem_id)
    return owner.Name if isinstance(owner, kind) else fallback


def element_entry(elem):
    entry = {
        "Name": elem.Name,
        "Category": elem.Category.Name if elem.Category else "",
        "Group": owner_name(elem.GroupId, Group, "Unnamed Group"),
        "OwnerView": owner_name(elem.OwnerViewId, View, "Unnamed View"),
        "Id": elem.Id.IntegerValue,
    }
    if include_parameters:
        for p in elem.Parameters:
            entry[p.Definition.Name] = p.AsValueString() or p.AsString() or "None"
    return entry


# ==================================================
# Main
# ==================================================
element_ids = list(uidoc.Selection.GetElementIds())
if not element_ids:
    element_ids = list(FilteredElementCollector(doc, doc.ActiveView.Id).ToElementIds())

entries = []
for eid in element_ids:
    elem = doc.GetElement(eid)
    if elem is None:
        continue
    try:
        entries.append(element_entry(elem))
    except Exception as ex:
        logger.debug("Skipped element {}: {}".format(eid, ex))

picked = show_data_grid(
    entries, sort_by_first_column=True, span_all_screens=span_all_screens
)
if not picked:
    script.exit()

ids = [ElementId(int(e["Id"])) for e in picked]
uidoc.Selection.SetElementIds(List[ElementId](ids))
