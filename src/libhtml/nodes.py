"""Node model for libhtml.

Every node has exactly one capability: ``render(sink)`` writes its serialized
form into a Sink. Trees are plain data until rendered; one render call walks
the tree depth-first, left to right, writing fragments as it goes.

Node Hierarchy:
Node (base)
├── Text          escaped text
├── Raw           trusted markup, written verbatim
├── If            render a prebuilt node when a condition holds
├── IfElse        render one of two prebuilt nodes
├── IfFunc        build and render a node only when a condition holds
├── IfElseFunc    build and render only the branch taken
├── Map           render transform(item) for each item
├── Group         siblings without a wrapper element
├── Document      doctype preamble + children
└── Tag           generic element (see libhtml.tag)

Children sequences may contain ``None``; it is skipped at render time, so
combinators and helper functions can return "nothing" without special cases.

Errors:
Nodes never catch. The first exception raised by ``sink.write`` aborts the
walk and reaches the caller unchanged, possibly after partial output.

Thread Safety:
Leaf and combinator nodes are frozen. ``Document`` and ``Tag`` are mutable
builders with a single owner; do not mutate them while another thread renders
them.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Self

from libhtml.protocols import Renderable, Sink
from libhtml.stringbuilder import StringBuilder
from libhtml.utils.text import escape_html

type Child = Renderable | None

DOCTYPE = "<!DOCTYPE html>"


def render_children(children: Iterable[Child], sink: Sink) -> None:
    """Render each child in order, skipping ``None``."""
    for child in children:
        if child is None:
            continue
        child.render(sink)


# =============================================================================
# Base Node
# =============================================================================


class Node:
    """Base class for all libhtml nodes.

    Subclasses implement ``render``. ``str(node)`` renders into a fresh
    StringBuilder using the active render config.

    """

    __slots__ = ()

    def render(self, sink: Sink) -> None:
        """Write this node's serialized form into ``sink``."""
        raise NotImplementedError(f"{type(self).__name__} does not implement render()")

    def __str__(self) -> str:
        sb = StringBuilder()
        self.render(sb)
        return sb.build()


# =============================================================================
# Leaf Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content, always HTML-escaped.

    HTML: ``Text("<b>")`` renders ``&lt;b&gt;``

    """

    content: str

    def render(self, sink: Sink) -> None:
        sink.write(escape_html(self.content))


@dataclass(frozen=True, slots=True)
class Raw(Node):
    """Trusted markup, written without escaping.

    The caller asserts ``content`` is already safe: hand-written fragments or
    text escaped elsewhere. Never pass untrusted input here.

    """

    content: str

    def render(self, sink: Sink) -> None:
        sink.write(self.content)


def textf(fmt: str, /, *args: Any, **kwargs: Any) -> Text:
    """Create an escaped Text node from ``fmt.format(*args, **kwargs)``.

    The formatted result is escaped as a whole, so arguments are escaped too.
    """
    return Text(fmt.format(*args, **kwargs))


def rawf(fmt: str, /, *args: Any, **kwargs: Any) -> Raw:
    """Create a Raw node from ``fmt.format(*args, **kwargs)``.

    Nothing is escaped, including the arguments.
    """
    return Raw(fmt.format(*args, **kwargs))


# =============================================================================
# Structural Combinators
# =============================================================================


@dataclass(frozen=True, slots=True)
class If(Node):
    """Render ``then`` when ``condition`` is true, nothing otherwise.

    ``then`` is built by the caller before the combinator exists. Use
    ``IfFunc`` when building it is expensive or has side effects.

    """

    condition: bool
    then: Child

    def render(self, sink: Sink) -> None:
        if self.condition and self.then is not None:
            self.then.render(sink)


@dataclass(frozen=True, slots=True)
class IfElse(Node):
    """Render ``then`` when ``condition`` is true, ``else_`` otherwise.

    Both branches are prebuilt. A ``None`` branch renders nothing.

    """

    condition: bool
    then: Child
    else_: Child

    def render(self, sink: Sink) -> None:
        node = self.then if self.condition else self.else_
        if node is not None:
            node.render(sink)


@dataclass(frozen=True, slots=True)
class IfFunc(Node):
    """Lazy conditional: call ``then_fn`` at render time, only if true.

    The thunk runs on the render call stack, once per render. When the
    condition is false it is never called, so the subtree is never built.
    A thunk returning ``None`` renders nothing.

    """

    condition: bool
    then_fn: Callable[[], Child] | None

    def render(self, sink: Sink) -> None:
        if not self.condition or self.then_fn is None:
            return
        node = self.then_fn()
        if node is not None:
            node.render(sink)


@dataclass(frozen=True, slots=True)
class IfElseFunc(Node):
    """Lazy two-way conditional.

    Only the thunk for the branch taken is called, at render time. A missing
    thunk, or one returning ``None``, renders nothing for that branch; it
    never falls through to the other branch.

    """

    condition: bool
    then_fn: Callable[[], Child] | None
    else_fn: Callable[[], Child] | None

    def render(self, sink: Sink) -> None:
        fn = self.then_fn if self.condition else self.else_fn
        if fn is None:
            return
        node = fn()
        if node is not None:
            node.render(sink)


# Slots declared by hand: ``slots=True`` rebuilds the class, and on 3.12 the
# rebuilt frozen ``__setattr__`` raises TypeError when ``Map[int](...)`` sets
# ``__orig_class__``.
@dataclass(frozen=True)
class Map[T](Node):
    """Render ``transform(item)`` for each item, in iteration order.

    Each item is transformed and rendered before the next one is touched, so
    a failing render stops the walk before later items are transformed.
    ``items`` is iterated once per render: pass a collection, not a
    generator, if the node is rendered more than once.

    Example:
        >>> str(Map(["a", "b"], lambda s: Text(s.upper())))
        'AB'

    """

    __slots__ = ("items", "transform")

    items: Iterable[T]
    transform: Callable[[T], Child]

    def render(self, sink: Sink) -> None:
        for item in self.items:
            node = self.transform(item)
            if node is not None:
                node.render(sink)


class Group(Node):
    """Sibling nodes rendered in order with no wrapping markup.

    Lets a function return several siblings where one node is expected.

    """

    __slots__ = ("nodes",)

    def __init__(self, *children: Child) -> None:
        self.nodes: tuple[Child, ...] = children

    def render(self, sink: Sink) -> None:
        render_children(self.nodes, sink)

    def __repr__(self) -> str:
        return f"Group({', '.join(repr(node) for node in self.nodes)})"


# =============================================================================
# Document
# =============================================================================


class Document(Node):
    """Root of a page: ``<!DOCTYPE html>`` followed by the children.

    The preamble is written exactly once per render, even with no children.
    A Document carries no name and no attributes; put those on an ``html``
    Tag inside it.

    Usage:
        >>> from libhtml.elements import html, body, p
        >>> page = Document().children(html(body(p(Text("Hi")))))
        >>> str(page)
        '<!DOCTYPE html><html><body><p>Hi</p></body></html>'

    """

    __slots__ = ("nodes",)

    def __init__(self, *children: Child) -> None:
        self.nodes: list[Child] = list(children)

    def children(self, *children: Child) -> Self:
        """Replace all children.

        Returns:
            self for method chaining
        """
        self.nodes = list(children)
        return self

    def render(self, sink: Sink) -> None:
        sink.write(DOCTYPE)
        render_children(self.nodes, sink)

    def __repr__(self) -> str:
        return f"Document({', '.join(repr(node) for node in self.nodes)})"


__all__ = [
    "DOCTYPE",
    "Child",
    "Document",
    "Group",
    "If",
    "IfElse",
    "IfElseFunc",
    "IfFunc",
    "Map",
    "Node",
    "Raw",
    "Text",
    "rawf",
    "render_children",
    "textf",
]
