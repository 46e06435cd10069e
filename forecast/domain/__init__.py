"""Enumerated parameter and response tags."""

from .tags import AlertSeverity, ExcludeBlock, ExtendBy, Icon, Lang, PrecipType, Units, WireTag

__all__ = [
    "AlertSeverity",
    "ExcludeBlock",
    "ExtendBy",
    "Icon",
    "Lang",
    "PrecipType",
    "Units",
    "WireTag",
]
