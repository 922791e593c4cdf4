"""Text processing utilities for libhtml.

Example:
    >>> from libhtml.utils.text import escape_html
    >>> escape_html("<b>")
    '&lt;b&gt;'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#39;

    The ampersand is replaced first, so existing entities are escaped
    again rather than passed through. Applying this twice is not a no-op.

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text safe for element content and quoted attributes

    Examples:
        >>> escape_html("<script>alert('xss')</script>")
        '&lt;script&gt;alert(&#39;xss&#39;)&lt;/script&gt;'
    """
    if not text:
        return ""

    escaped = html_module.escape(text, quote=True)
    return escaped.replace("&#x27;", "&#39;")
