# -*- coding: utf-8 -*-
# Shift+Click settings for List Elements
from pyrevit import forms, script

OPT_PARAMETERS = "Include all parameters"
OPT_SPAN = "Span all screens"

cfg = script.get_config()

current = []
if getattr(cfg, "include_parameters", False):
    current.append(OPT_PARAMETERS)
if getattr(cfg, "span_all_screens", False):
    current.append(OPT_SPAN)

picked = forms.SelectFromList.show(
    [OPT_PARAMETERS, OPT_SPAN],
    title="List Elements options (now: {})".format(", ".join(current) or "none"),
    multiselect=True,
    button_name="Save",
)

if picked is not None:
    cfg.include_parameters = OPT_PARAMETERS in picked
    cfg.span_all_screens = OPT_SPAN in picked
    try:
        script.save_config()
    except Exception as e:
        forms.alert("Could not save settings:\n{}".format(e))
