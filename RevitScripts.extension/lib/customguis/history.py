# -*- coding: utf-8 -*-
"""Per-project log of activated views, read back by the view switching commands.

One text file per project title, one ``"<view id> <view title>"`` line per
view, oldest first. The view-activated hook appends to it and the
doc-opened hook starts it over (keeping the previous session as ``.last``).
"""
import io
import logging
import os
import shutil

from customguis.settings import default_history_dir

logger = logging.getLogger(__name__)

UNKNOWN_PROJECT = "UnknownProject"
BACKUP_SUFFIX = ".last"


class HistoryEntry(object):
    def __init__(self, view_id, title):
        self.view_id = view_id
        self.title = title

    @property
    def line(self):
        return "{} {}".format(self.view_id, self.title)

    @classmethod
    def parse(cls, line):
        parts = line.rstrip("\r\n").split(" ", 1)
        if len(parts) != 2 or not parts[0]:
            return None
        return cls(parts[0], parts[1])

    def __eq__(self, other):
        return isinstance(other, HistoryEntry) and self.line == other.line

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.line)

    def __repr__(self):
        return "HistoryEntry({!r}, {!r})".format(self.view_id, self.title)


class ViewHistory(object):
    def __init__(self, directory=None):
        self.directory = directory or default_history_dir()

    def path(self, project):
        return os.path.join(self.directory, project or UNKNOWN_PROJECT)

    # ==================================================
    # Writing
    # ==================================================
    def record(self, project, view_id, title):
        """Append a view and drop older copies of the same line."""
        lines = self._read_lines(project)
        lines.append(HistoryEntry(view_id, title).line)

        seen = set()
        kept = []
        for line in reversed(lines):
            if line not in seen:
                seen.add(line)
                kept.append(line)
        kept.reverse()

        self._write_lines(project, kept)
        return kept

    def reset(self, project):
        """Start a fresh log, keeping a copy of the old one next to it."""
        path = self.path(project)
        if not os.path.exists(path):
            return False
        shutil.copyfile(path, path + BACKUP_SUFFIX)
        self._write_lines(project, [])
        return True

    # ==================================================
    # Reading
    # ==================================================
    def read(self, project):
        entries = []
        for line in self._read_lines(project):
            entry = HistoryEntry.parse(line)
            if entry is None:
                logger.warning("Skipping malformed history line: %r", line)
                continue
            entries.append(entry)
        return entries

    def exists(self, project):
        return os.path.exists(self.path(project))

    def recent_titles(self, project, skip_current=False):
        """Titles newest first, each once; `skip_current` drops the active view."""
        titles = []
        seen = set()
        entries = list(reversed(self.read(project)))
        if skip_current:
            entries = entries[1:]
        for entry in entries:
            if entry.title not in seen:
                seen.add(entry.title)
                titles.append(entry.title)
        return titles

    def previous_view_ids(self, project):
        """Integer ids from the second newest entry backwards."""
        ids = []
        for entry in reversed(self.read(project)[:-1]):
            try:
                ids.append(int(entry.view_id))
            except ValueError:
                continue
        return ids

    # ==================================================
    # Files
    # ==================================================
    def _read_lines(self, project):
        path = self.path(project)
        if not os.path.exists(path):
            return []
        with io.open(path, "r", encoding="utf-8") as f:
            return [line.rstrip("\r\n") for line in f if line.strip()]

    def _write_lines(self, project, lines):
        if not os.path.isdir(self.directory):
            os.makedirs(self.directory)
        with io.open(self.path(project), "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
