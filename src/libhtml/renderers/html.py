"""HTML renderer using StringBuilder pattern.

Drives one synchronous, depth-first walk of a node tree. Each node writes its
own fragment into the sink; the renderer only prepares the sink and the render
config around the walk.

Error Handling:
The first exception raised during the walk (in practice, by the sink's
``write``) aborts it and is re-raised unchanged. Output is streamed, so a
failed render may leave partial markup in the target; nothing is buffered or
rolled back.

Thread Safety:
The renderer's config is installed in a ContextVar for the duration of each
call and restored afterwards. Multiple threads can safely share a single
HtmlRenderer instance and call render() concurrently.
"""

from __future__ import annotations

from libhtml.config import RenderConfig, render_config_context
from libhtml.protocols import Renderable, Sink
from libhtml.sinks import as_sink
from libhtml.stringbuilder import StringBuilder
from libhtml.utils.logger import get_logger

logger = get_logger(__name__)


class HtmlRenderer:
    """Render node trees to HTML.

    Usage:
        >>> from libhtml import Document, Text
        >>> from libhtml.elements import p
        >>> renderer = HtmlRenderer()
        >>> renderer.render(Document(p(Text("Hi"))))
        '<!DOCTYPE html><p>Hi</p>'

        >>> # Stream into a file
        >>> with open("page.html", "w", encoding="utf-8") as f:
        ...     renderer.render_to(page, f)

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render configuration (defaults to RenderConfig())
        """
        self._config = config or RenderConfig()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, node: Renderable) -> str:
        """Render a node tree to an HTML string.

        Args:
            node: Root of the tree

        Returns:
            HTML string
        """
        sb = StringBuilder()
        self._walk(node, sb)
        return sb.build()

    def render_to(self, node: Renderable, target: object) -> None:
        """Render a node tree into a writable target.

        Args:
            node: Root of the tree
            target: Text stream, binary stream (encoded with config.encoding),
                StringBuilder, or any object with ``write(str)``

        Raises:
            SinkError: ``target`` cannot accept output (nothing written)
        """
        sink = as_sink(target, encoding=self._config.encoding)
        self._walk(node, sink)

    def _walk(self, node: Renderable, sink: Sink) -> None:
        with render_config_context(self._config):
            try:
                node.render(sink)
            except Exception:
                logger.debug(
                    "Render of %s aborted; output may be partial",
                    type(node).__name__,
                    exc_info=True,
                )
                raise
