"""NodeRenderer protocol: stable interface for node renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``HtmlRenderer`` is the reference implementation.

Example:
    from libhtml.renderers.protocol import NodeRenderer

    def render_page(renderer: NodeRenderer, page: Document) -> str:
        return renderer.render(page)

"""

from typing import Protocol

from libhtml.protocols import Renderable


class NodeRenderer(Protocol):
    """Protocol for node renderers.

    Implementations must accept a node tree and return a rendered string.
    The built-in ``HtmlRenderer`` conforms to this protocol.

    """

    def render(self, node: Renderable) -> str:
        """Render a node tree to a string.

        Args:
            node: Root of the tree to render.

        Returns:
            Rendered string output.

        """
        ...
