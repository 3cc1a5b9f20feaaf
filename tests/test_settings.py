# -*- coding: utf-8 -*-
import pytest

from customguis.settings import OR_SEPARATOR, PickerSettings


def test_defaults():
    settings = PickerSettings()
    assert settings.separator == OR_SEPARATOR
    assert not settings.sort_by_first_column
    assert not settings.span_all_screens
    assert settings.column_padding == 10
    assert settings.screen_padding == 20
    assert (settings.scroll_step, settings.scroll_step_large) == (50, 1000)


@pytest.mark.parametrize("separator", ["", "  ", None])
def test_blank_separator_is_rejected(separator):
    with pytest.raises(ValueError):
        PickerSettings(separator=separator)


@pytest.mark.parametrize("name", ["column_padding", "screen_padding", "scroll_step"])
def test_negative_numbers_are_rejected(name):
    with pytest.raises(ValueError):
        PickerSettings(**{name: -1})


def test_copy_applies_overrides_only():
    base = PickerSettings(separator="||")
    copy = base.copy(span_all_screens=True)
    assert copy.span_all_screens
    assert copy.separator == "||"
    assert not base.span_all_screens
    assert "span_all_screens=True" in repr(copy)
