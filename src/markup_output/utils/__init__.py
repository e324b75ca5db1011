"""Utility modules for markup_output.

Provides:
- text: line splitting and case helpers
- logger: get_logger for logging
"""

from markup_output.utils.logger import get_logger
from markup_output.utils.text import apply_case, is_multiline, split_lines

__all__ = [
    "apply_case",
    "get_logger",
    "is_multiline",
    "split_lines",
]
