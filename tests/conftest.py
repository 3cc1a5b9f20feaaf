# -*- coding: utf-8 -*-
import pytest


class FakeView(object):
    """Stand-in for a Revit view: columns are read as attributes."""

    def __init__(self, title, view_type):
        self.Title = title
        self.ViewType = view_type

    def __repr__(self):
        return "FakeView({!r})".format(self.Title)


@pytest.fixture
def records():
    return [
        {"Name": "Wall-A", "Category": "Walls"},
        {"Name": "Door-B", "Category": "Doors"},
        {"Name": "Wall-C", "Category": "Walls"},
    ]


@pytest.fixture
def columns():
    return ["Name", "Category"]


@pytest.fixture
def views():
    return [
        FakeView("Level 1", "FloorPlan"),
        FakeView("Section A", "Section"),
        FakeView("A101 - Plans", "DrawingSheet"),
    ]
