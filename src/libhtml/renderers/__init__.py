"""libhtml renderers.

Renderers drive a single depth-first walk of a node tree into a sink.

Available Renderers:
- HtmlRenderer: Renders nodes to an HTML string or any writable target

Thread Safety:
Renderers hold only an immutable RenderConfig. Per-render state lives in the
sink and the ContextVar config. Safe for concurrent use from multiple threads.

"""

from libhtml.renderers.html import HtmlRenderer
from libhtml.renderers.protocol import NodeRenderer

__all__ = ["HtmlRenderer", "NodeRenderer"]
