"""
libhtml: HTML as plain Python function calls

Build markup with ordinary calls, conditionals and loops instead of a
template language. Text is always escaped; raw markup is an explicit opt-in.
Zero runtime dependencies.

Quick Start:
    >>> from libhtml import Document, Map, Text, render
    >>> from libhtml.elements import body, html, li, ul
    >>> page = Document(html(body(ul(Map(["a", "<b>"], lambda s: li(Text(s)))))))
    >>> render(page)
    '<!DOCTYPE html><html><body><ul><li>a</li><li>&lt;b&gt;</li></ul></body></html>'

Streaming:
    >>> import sys
    >>> render_to(page, sys.stdout)

Conditionals:
    >>> from libhtml import IfElseFunc
    >>> greeting = IfElseFunc(
    ...     user is not None,
    ...     lambda: Text(f"Hello {user.name}"),
    ...     lambda: Text("Hello anonymous"),
    ... )
"""

from libhtml.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from libhtml.errors import LibhtmlError, SinkError
from libhtml.nodes import (
    DOCTYPE,
    Document,
    Group,
    If,
    IfElse,
    IfElseFunc,
    IfFunc,
    Map,
    Node,
    Raw,
    Text,
    rawf,
    textf,
)
from libhtml.protocols import Renderable, Sink
from libhtml.renderers.html import HtmlRenderer
from libhtml.renderers.protocol import NodeRenderer
from libhtml.sinks import EncodingSink, as_sink
from libhtml.stringbuilder import StringBuilder
from libhtml.tag import Tag
from libhtml.utils.text import escape_html

__version__ = "0.1.0"


def render(node: Renderable, *, config: RenderConfig | None = None) -> str:
    """Render a node tree to an HTML string.

    Args:
        node: Root of the tree (Document, Tag, or any node)
        config: Render configuration (defaults to RenderConfig())

    Returns:
        HTML string

    Example:
        >>> render(Tag("img", True).src("a.png"))
        '<img src="a.png"/>'
    """
    return HtmlRenderer(config).render(node)


def render_to(node: Renderable, target: object, *, config: RenderConfig | None = None) -> None:
    """Render a node tree into a writable target.

    Output is streamed fragment by fragment. If the target raises, the
    exception propagates unchanged and whatever was written before stays.

    Args:
        node: Root of the tree
        target: Text stream, binary stream, StringBuilder, or any object
            with ``write(str)``
        config: Render configuration (defaults to RenderConfig())

    Raises:
        SinkError: ``target`` has no ``write`` method
    """
    HtmlRenderer(config).render_to(node, target)


__all__ = [
    # Main API
    "render",
    "render_to",
    "escape_html",
    # Nodes
    "Node",
    "Text",
    "Raw",
    "textf",
    "rawf",
    "If",
    "IfElse",
    "IfFunc",
    "IfElseFunc",
    "Map",
    "Group",
    "Document",
    "DOCTYPE",
    "Tag",
    # Rendering
    "HtmlRenderer",
    "NodeRenderer",
    "Renderable",
    "Sink",
    "StringBuilder",
    "EncodingSink",
    "as_sink",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "LibhtmlError",
    "SinkError",
    # Version
    "__version__",
]
