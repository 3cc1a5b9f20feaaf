# -*- coding: utf-8 -*-
"""Search-box query language of the data grid.

    wall door       rows containing "wall" AND "door" (any column each)
    wall !curtain   rows containing "wall" and no column containing "curtain"
    doors | walls   rows matching either group ("||" works the same)

Matching is a case-insensitive substring test against the text of every
column. Parsing never fails: anything the user types is a valid query.
"""
import logging

from customguis.accessors import auto_accessor, row_texts
from customguis.settings import OR_SEPARATOR

logger = logging.getLogger(__name__)

NEGATION = "!"


# ==================================================
# Query objects
# ==================================================
class QueryGroup(object):
    """One OR-group: all inclusion terms present, no exclusion term present."""

    def __init__(self, include, exclude):
        self.include = tuple(include)
        self.exclude = tuple(exclude)

    def matches(self, texts):
        for term in self.exclude:
            if any(term in t for t in texts):
                return False
        for term in self.include:
            if not any(term in t for t in texts):
                return False
        return True

    def __eq__(self, other):
        return (
            isinstance(other, QueryGroup)
            and self.include == other.include
            and self.exclude == other.exclude
        )

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "QueryGroup(include={!r}, exclude={!r})".format(
            list(self.include), list(self.exclude)
        )


class Query(object):
    def __init__(self, text, groups):
        self.text = text
        self.groups = tuple(groups)

    @property
    def is_empty(self):
        return not self.groups

    def matches(self, texts):
        """`texts` are the column values of one row, already stringified."""
        if self.is_empty:
            return True
        lowered = [t.lower() for t in texts]
        return any(g.matches(lowered) for g in self.groups)

    def __repr__(self):
        return "Query({!r}, groups={})".format(self.text, list(self.groups))


# ==================================================
# Parsing
# ==================================================
def parse_query(text, separator=OR_SEPARATOR):
    groups = []
    for chunk in (text or "").lower().split(separator):
        include, exclude = [], []
        for term in chunk.split():
            if term.startswith(NEGATION):
                bare = term[len(NEGATION):]
                # a lone "!" is still being typed
                if bare:
                    exclude.append(bare)
            else:
                include.append(term)
        if include or exclude:
            groups.append(QueryGroup(include, exclude))
    return Query(text or "", groups)


# ==================================================
# Filtering
# ==================================================
def _number(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    return None


def first_column_key(value, text):
    """Sort key for the first column: numbers, then text, then empties."""
    number = _number(value)
    if number is not None:
        return (0, number, "")
    if text == "":
        return (2, 0, "")
    return (1, 0, text.lower())


def filter_rows(
    records,
    columns,
    query,
    accessor=auto_accessor,
    sort_by_first_column=False,
    separator=OR_SEPARATOR,
):
    """Backing indices of the records kept by `query`, in display order.

    `query` may be a parsed Query or raw search-box text.
    """
    if not isinstance(query, Query):
        query = parse_query(query, separator)

    kept = []
    for index, record in enumerate(records):
        if query.matches(row_texts(record, columns, accessor)):
            kept.append(index)

    if sort_by_first_column and columns:
        first = columns[0]

        def key(index):
            value = accessor(records[index], first)
            return first_column_key(value, row_texts(records[index], [first], accessor)[0])

        kept.sort(key=key)

    logger.debug("query %r kept %d of %d rows", query.text, len(kept), len(records))
    return kept


def filter_records(
    records,
    columns,
    query,
    accessor=auto_accessor,
    sort_by_first_column=False,
    separator=OR_SEPARATOR,
):
    return [
        records[i]
        for i in filter_rows(
            records, columns, query, accessor, sort_by_first_column, separator
        )
    ]
