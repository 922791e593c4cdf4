"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

from libhtml import Document, Map, Text, textf
from libhtml.elements import body, h2, head, html, li, meta, p, section, title, ul


@pytest.fixture
def rows() -> list[dict[str, str]]:
    """Tabular data; names need escaping, slugs are attribute-safe."""
    return [{"name": f"Item <{i}> & \"quoted\"", "slug": f"item-{i}"} for i in range(1000)]


@pytest.fixture
def large_page(rows: list[dict[str, str]]) -> Document:
    """A page with ~5000 nodes."""
    return Document(
        html(
            head(title(Text("Benchmark")), meta().charset("utf-8")),
            body(
                Map(
                    range(100),
                    lambda i: section(
                        h2(textf("Section {}", i)),
                        ul(Map(rows[i * 10 : i * 10 + 10], lambda row: li(Text(row["name"])).title(row["slug"]))),
                        p(Text("Lorem ipsum dolor sit amet, consectetur adipiscing elit.")),
                    ).id(f"s{i}"),
                )
            ),
        ).lang("en")
    )
