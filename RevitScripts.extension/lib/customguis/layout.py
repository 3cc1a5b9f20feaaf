# -*- coding: utf-8 -*-
"""Size and placement arithmetic for the data grid dialog.

All values are pixels. Text measuring and screen metrics come from the
caller (TextRenderer / Screen / SystemInformation in the WinForms dialog),
so the rules here stay testable.
"""
from customguis.settings import COLUMN_PADDING, SCREEN_PADDING

FORM_CHROME = 43  # borders and row header of the dialog
TOP_MARGIN = 10
SLACK_ROWS = 2


class Rect(object):
    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def right(self):
        return self.x + self.width

    def __eq__(self, other):
        return isinstance(other, Rect) and (
            (self.x, self.y, self.width, self.height)
            == (other.x, other.y, other.width, other.height)
        )

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "Rect({}, {}, {}, {})".format(self.x, self.y, self.width, self.height)


class Placement(object):
    """Dialog size; `x`/`y` are None when the dialog is simply centered."""

    def __init__(self, width, height, x=None, y=None):
        self.width = width
        self.height = height
        self.x = x
        self.y = y

    @property
    def centered(self):
        return self.x is None and self.y is None

    def __repr__(self):
        return "Placement(width={}, height={}, x={}, y={})".format(
            self.width, self.height, self.x, self.y
        )


# ==================================================
# Columns
# ==================================================
def column_widths(headers, rows, measure, padding=COLUMN_PADDING, measure_header=None):
    """Width per column: widest of header and cell texts, plus padding.

    `rows` is a list of text lists, one entry per column. Headers use
    `measure_header` when given (header font differs from cell font).
    """
    measure_header = measure_header or measure
    widths = []
    for col, header in enumerate(headers):
        widest = measure_header(header)
        for texts in rows:
            if col < len(texts) and texts[col]:
                widest = max(widest, measure(texts[col]))
        widths.append(widest + padding)
    return widths


# ==================================================
# Dialog
# ==================================================
def natural_height(row_count, row_height, header_height, hscroll_height):
    return header_height + (row_count + SLACK_ROWS) * row_height + hscroll_height


def natural_width(widths, vscroll_width):
    return sum(widths) + vscroll_width + FORM_CHROME


def place_dialog(required_width, required_height, work_area, screen_padding=SCREEN_PADDING):
    """Fit the dialog on the primary screen.

    Taller than the working area: pinned to the top and clipped.
    Taller than half of it: pinned to the top. Otherwise centered.
    """
    width = min(required_width, work_area.width - 2 * screen_padding)

    if required_height > work_area.height:
        return Placement(
            width,
            work_area.height - TOP_MARGIN,
            x=_center_x(width, work_area),
            y=work_area.y + TOP_MARGIN,
        )
    if required_height > work_area.height // 2:
        return Placement(
            width, required_height, x=_center_x(width, work_area), y=work_area.y + TOP_MARGIN
        )
    if width != required_width:
        return Placement(
            width,
            required_height,
            x=_center_x(width, work_area),
            y=work_area.y + (work_area.height - required_height) // 2,
        )
    return Placement(width, required_height)


def span_screens(required_height, screens, primary_area, screen_padding=SCREEN_PADDING):
    """Stretch the dialog over every monitor side by side.

    `screens` is a list of (bounds, work_area) Rect pairs.
    """
    height = min(required_height, primary_area.height - 2 * screen_padding)
    width = sum(area.width for _, area in screens)
    left = min(bounds.x for bounds, _ in screens)
    top = primary_area.y + (primary_area.height - height) // 2
    return Placement(width, height, x=left, y=top)


def _center_x(width, work_area):
    return work_area.x + (work_area.width - width) // 2


# ==================================================
# Horizontal scrolling
# ==================================================
def scroll_offset(current, content_width, visible_width, direction, step):
    """New horizontal offset after one Left (-1) or Right (+1) press."""
    if direction > 0:
        if current + visible_width >= content_width:
            return current
        return min(current + step, max(content_width - visible_width, 0))
    return max(current - step, 0)
