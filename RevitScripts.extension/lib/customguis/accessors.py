# -*- coding: utf-8 -*-
"""Field accessors used by the data grid to read a column out of a record.

Records can be plain mappings (``{"Sheet Number": "A101", ...}``) or host
objects such as Revit views, whose columns are attribute names
(``"Title"``, ``"ViewType"``). An accessor is any callable
``accessor(record, column) -> value``.
"""


# ==================================================
# Accessors
# ==================================================
def mapping_accessor(record, column):
    try:
        return record.get(column)
    except AttributeError:
        return None


def attribute_accessor(record, column):
    try:
        return getattr(record, column, None)
    except Exception:
        # .NET properties can throw when read (invalid or deleted elements)
        return None


def auto_accessor(record, column):
    """Mappings are read by key, everything else by attribute."""
    if hasattr(record, "keys") and hasattr(record, "get"):
        return mapping_accessor(record, column)
    return attribute_accessor(record, column)


# ==================================================
# Helpers
# ==================================================
def cell_text(value):
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    return str(value)


def columns_from_first(records):
    """Column list taken from the keys of the first record, in order."""
    if not records:
        return []
    first = records[0]
    if hasattr(first, "keys"):
        return [str(k) for k in first.keys()]
    return []


def row_texts(record, columns, accessor=auto_accessor):
    return [cell_text(accessor(record, c)) for c in columns]
