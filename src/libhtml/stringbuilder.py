"""StringBuilder: the in-memory Sink behind ``render()`` and ``str(node)``.

Fragments are collected in a list and joined once, so rendering a tree of n
fragments costs O(n) instead of the O(n²) of repeated concatenation.

Thread Safety:
A StringBuilder belongs to one render call. Nothing is shared between
instances.

"""

from __future__ import annotations


class StringBuilder:
    """Collects written fragments; ``build()`` returns their concatenation.

    Usage:
            >>> sb = StringBuilder()
            >>> Text("a < b").render(sb)
            >>> sb.write("<br/>")
            5
            >>> sb.build()
            'a &lt; b<br/>'

    Writing never fails, so a render into a StringBuilder can only raise
    from caller code (thunks, transforms, custom nodes).

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, s: str) -> int:
        """Collect a fragment, file-style.

        Args:
            s: Fragment to collect (empty strings are dropped)

        Returns:
            Number of characters written
        """
        if s:
            self._parts.append(s)
        return len(s)

    def build(self) -> str:
        """Return everything written so far as one string."""
        return "".join(self._parts)

