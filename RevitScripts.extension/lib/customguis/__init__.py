# -*- coding: utf-8 -*-
"""Shared dialogs for the RevitScripts commands.

The picker itself lives in ``customguis.datagrid`` (needs the WinForms
runtime); the modules imported here are plain Python.
"""
from customguis.accessors import (
    auto_accessor,
    attribute_accessor,
    mapping_accessor,
    cell_text,
    columns_from_first,
)
from customguis.history import HistoryEntry, ViewHistory
from customguis.query import Query, QueryGroup, parse_query, filter_rows, filter_records
from customguis.session import GridSession
from customguis.settings import PickerSettings

__version__ = "1.0.0"
