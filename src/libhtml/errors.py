"""Exception classes for libhtml.

Rendering itself never raises its own errors: a failing ``write`` on the sink
propagates to the caller unchanged. The classes here cover misuse that can be
detected before any output is produced.
"""

from __future__ import annotations


class LibhtmlError(Exception):
    """Base exception for all libhtml errors.

    Subclass this for specific error categories.
    """

    pass


class SinkError(LibhtmlError, TypeError):
    """Render target cannot accept output.

    Raised by ``as_sink`` when the object passed to ``render_to`` has no
    callable ``write`` method. Nothing has been written when this is raised.
    """

    def __init__(self, target: object) -> None:
        """Initialize sink error.

        Args:
            target: The rejected render target
        """
        self.target = target
        super().__init__(
            f"Cannot render into {type(target).__name__!r}: expected an object with a write() method"
        )
