# -*- coding: utf-8 -*-
"""Picker configuration, passed into each data grid session."""
import os

# Defaults
OR_SEPARATOR = "|"
COLUMN_PADDING = 10
SCREEN_PADDING = 20
SCROLL_STEP = 50
SCROLL_STEP_LARGE = 1000
HISTORY_FOLDER = ("revit-scripts", "LogViewChanges")


class PickerSettings(object):
    def __init__(
        self,
        separator=OR_SEPARATOR,
        sort_by_first_column=False,
        span_all_screens=False,
        column_padding=COLUMN_PADDING,
        screen_padding=SCREEN_PADDING,
        scroll_step=SCROLL_STEP,
        scroll_step_large=SCROLL_STEP_LARGE,
    ):
        if not separator or separator.isspace():
            raise ValueError("OR separator must be a non-blank string")
        for name, value in (
            ("column_padding", column_padding),
            ("screen_padding", screen_padding),
            ("scroll_step", scroll_step),
            ("scroll_step_large", scroll_step_large),
        ):
            if value < 0:
                raise ValueError("{} cannot be negative: {}".format(name, value))

        self.separator = separator
        self.sort_by_first_column = bool(sort_by_first_column)
        self.span_all_screens = bool(span_all_screens)
        self.column_padding = column_padding
        self.screen_padding = screen_padding
        self.scroll_step = scroll_step
        self.scroll_step_large = scroll_step_large

    def copy(self, **overrides):
        values = dict(self.__dict__)
        values.update(overrides)
        return PickerSettings(**values)

    def __repr__(self):
        return "PickerSettings({})".format(
            ", ".join("{}={!r}".format(k, v) for k, v in sorted(self.__dict__.items()))
        )


def default_history_dir(environ=None):
    """%APPDATA%/revit-scripts/LogViewChanges (home folder when APPDATA is unset)."""
    environ = os.environ if environ is None else environ
    base = environ.get("APPDATA") or os.path.expanduser("~")
    return os.path.join(base, *HISTORY_FOLDER)
