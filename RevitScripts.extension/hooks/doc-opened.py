# -*- coding: utf-8 -*-
"""Start a fresh view history for every opened project (old one kept as .last)."""
from pyrevit import EXEC_PARAMS, script

from customguis.history import ViewHistory

logger = script.get_logger()

doc = EXEC_PARAMS.event_args.Document

if doc and not doc.IsFamilyDocument:
    try:
        if ViewHistory().reset(doc.Title):
            logger.debug("View history reset for {}".format(doc.Title))
    except (IOError, OSError) as ex:
        logger.warning("Could not reset view history: {}".format(ex))
