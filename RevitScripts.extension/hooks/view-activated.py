# -*- coding: utf-8 -*-
"""Log every activated view so the view switching buttons can offer history."""
from pyrevit import EXEC_PARAMS, script

from customguis.history import ViewHistory

logger = script.get_logger()

args = EXEC_PARAMS.event_args
doc = args.Document
view = args.CurrentActiveView

if doc and view and not doc.IsFamilyDocument:
    try:
        ViewHistory().record(doc.Title, view.Id.IntegerValue, view.Title)
    except (IOError, OSError) as ex:
        # never block view activation on a log file
        logger.warning("Could not log view change: {}".format(ex))
