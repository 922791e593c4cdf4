"""Adapters from render targets to Sinks.

``render_to`` accepts more than bare text sinks. ``as_sink`` turns each
supported target into something with ``write(str)``:

- text streams and any object with ``write(str)`` are used as-is;
- binary streams (``io.BytesIO``, files opened with ``"wb"``, sockets wrapped
  with ``makefile("wb")``) are wrapped in an ``EncodingSink``.

Example:
    >>> import io
    >>> buf = io.BytesIO()
    >>> sink = as_sink(buf)
    >>> sink.write("<p>é</p>")
    >>> buf.getvalue()
    b'<p>\\xc3\\xa9</p>'

"""

from __future__ import annotations

import io
from typing import Any

from libhtml.errors import SinkError
from libhtml.protocols import Sink


class EncodingSink:
    """Sink that encodes each fragment before writing it to a binary stream.

    Fragments are encoded independently, so the stream sees complete
    characters only.

    """

    __slots__ = ("_stream", "_encoding")

    def __init__(self, stream: Any, encoding: str = "utf-8") -> None:
        self._stream = stream
        self._encoding = encoding

    @property
    def stream(self) -> Any:
        return self._stream

    @property
    def encoding(self) -> str:
        return self._encoding

    def write(self, s: str) -> None:
        self._stream.write(s.encode(self._encoding))


def _is_binary(target: object) -> bool:
    if isinstance(target, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(target, "mode", None)
    return isinstance(mode, str) and "b" in mode


def as_sink(target: object, *, encoding: str = "utf-8") -> Sink:
    """Adapt a render target into a Sink.

    Args:
        target: Text stream, binary stream, StringBuilder, or any object with
            a ``write`` method
        encoding: Encoding applied when ``target`` is a binary stream

    Returns:
        A Sink writing into ``target``

    Raises:
        SinkError: ``target`` has no callable ``write`` method
    """
    if isinstance(target, EncodingSink):
        return target
    if not callable(getattr(target, "write", None)):
        raise SinkError(target)
    if _is_binary(target):
        return EncodingSink(target, encoding)
    return target  # type: ignore[return-value]


__all__ = [
    "EncodingSink",
    "as_sink",
]
