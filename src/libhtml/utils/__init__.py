"""Utility modules for libhtml.

Provides:
- text: escape_html for untrusted text
- logger: get_logger for logging
"""

from libhtml.utils.logger import get_logger
from libhtml.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
