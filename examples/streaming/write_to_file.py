"""Stream a large page straight into a file without building the string first.

Binary targets are encoded on the fly (UTF-8 by default).
"""

import sys
import tempfile
from pathlib import Path

from libhtml import Document, Map, RenderConfig, Text, render_to
from libhtml.elements import body, html, li, meta, head, title, ul

rows = [f"Row {i} <escaped>" for i in range(10_000)]

page = Document(
    html(
        head(meta().charset("utf-8"), title(Text("Streaming"))),
        body(ul(Map(rows, lambda row: li(Text(row))))),
    ).lang("en")
)

out = Path(tempfile.gettempdir()) / "libhtml-streaming.html"
with out.open("wb") as f:
    render_to(page, f, config=RenderConfig(encoding="utf-8"))

print(f"Wrote {out.stat().st_size} bytes to {out}", file=sys.stderr)
