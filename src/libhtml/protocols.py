"""Protocols for libhtml.

Defines the contracts between nodes and the output they write into.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Protocol for render output targets.

    Anything with a ``write(str)`` method qualifies: ``io.StringIO``, an open
    text file, ``sys.stdout``, or the built-in ``StringBuilder``. The return
    value of ``write`` is ignored.

    Errors:
        Whatever ``write`` raises is propagated unchanged to the caller of
        ``render``. Nodes never catch, retry or roll back.

    Thread Safety:
        A sink is owned by a single render call. Sharing one sink between
        concurrent renders interleaves their output.

    """

    def write(self, s: str, /) -> object:
        """Write a fragment of markup."""
        ...


@runtime_checkable
class Renderable(Protocol):
    """Protocol for anything that can serialize itself into a Sink.

    ``libhtml.nodes.Node`` is the reference implementation. Custom node types
    only need to provide ``render``; they can be mixed freely with built-in
    nodes as children.

    """

    def render(self, sink: Sink) -> None:
        """Write this node's serialized form into ``sink``."""
        ...
