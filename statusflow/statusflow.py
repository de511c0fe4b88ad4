"""
statusflow module: library tools shared by the graph builder and the renderer
Errors, JSON alias and the drawing configuration.
"""
import typing
import json

''' Library tools '''

JSON = typing.Any #dict[str,typing.Any] | list[typing.Any] | str | int

class StatusFlowError(Exception):
    """A wrapper for statusflow-related errors"""

    def __init__(self, message):
        super().__init__(message)
        self.value = message
    def __str__(self):
        if isinstance(self.value, dict):
            return ("\n".join (("", "-"*80, json.dumps(self.value, indent=2), "-"*80)))
        else:
            return ("\n".join (("", "="*80, str (self.value), "="*80)))

class RenderError(StatusFlowError):
    """The external rasterizer could not produce the image"""

_default_config = {
    "rankdir": "LR",
    "shape": "box",
    "style": "rounded",
    "color": "blue",
    "fontname": "Helvetica",
    "dot": "dot",
    "format": "png",
}

config = dict(_default_config)

def set_config(data):
    """
    Change the configuration used by the next drawings
    keys: rankdir, shape, style, color, fontname (DOT output),
    dot (rasterizer executable) and format (image type and extension)
    """
    unknown = set(data) - set(_default_config)
    if unknown:
        raise StatusFlowError({"function": "set_config", "message": f"unknown keys {sorted(unknown)}"})
    config.update(data)
    return dict(config)

def get_config():
    return dict(config)

def reset_config():
    config.clear()
    config.update(_default_config)
