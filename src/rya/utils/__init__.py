"""Utility module.

Small standalone helpers: range scaling, string comparison, PATH lookup and
date formatting.
"""

from .clock import DEFAULT_FORMAT, date_and_time
from .paths import command_path
from .scaling import scale, scale_fixed, scale_values
from .strings import longest_common_substring

__all__ = [
    "DEFAULT_FORMAT",
    "command_path",
    "date_and_time",
    "longest_common_substring",
    "scale",
    "scale_fixed",
    "scale_values",
]
