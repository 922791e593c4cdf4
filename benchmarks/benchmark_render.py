"""Benchmark libhtml rendering.

Run with:
    pytest benchmarks/benchmark_render.py -v --benchmark-only

Or for quick numbers:
    python benchmarks/benchmark_render.py
"""

import io
import time


def build_page(size: int = 1000):
    from libhtml import Document, Map, Text
    from libhtml.elements import body, html, li, ul

    items = [f"<item {i}> & more" for i in range(size)]
    return Document(html(body(ul(Map(items, lambda s: li(Text(s)).class_("row"))))))


def benchmark_render(iterations: int = 50) -> float:
    """Average seconds per render of a 1000-item list page."""
    from libhtml import render

    page = build_page()

    # Warmup
    render(page)

    start = time.perf_counter()
    for _ in range(iterations):
        render(page)
    return (time.perf_counter() - start) / iterations


def main() -> None:
    """Run benchmarks and print results."""
    elapsed = benchmark_render()
    print(f"render (1000 items): {elapsed * 1000:.2f} ms")


# pytest-benchmark integration
try:
    import pytest

    def test_large_page_attributes_well_formed(large_page):
        """Every attribute value on the benchmark page is a complete quoted string."""
        import re

        from libhtml import render

        titles = re.findall(r' title="([^"]*)"', render(large_page))
        assert len(titles) == 1000
        assert all(re.fullmatch(r"item-\d+", t) for t in titles)

    @pytest.mark.benchmark(group="render")
    def test_benchmark_render_string(benchmark, large_page):
        """Benchmark rendering into a StringBuilder."""
        from libhtml import render

        benchmark(render, large_page)

    @pytest.mark.benchmark(group="render")
    def test_benchmark_render_to_stream(benchmark, large_page):
        """Benchmark streaming into a text buffer."""
        from libhtml import render_to

        def stream():
            render_to(large_page, io.StringIO())

        benchmark(stream)

    @pytest.mark.benchmark(group="render")
    def test_benchmark_render_to_bytes(benchmark, large_page):
        """Benchmark streaming into a binary buffer (UTF-8 encoded per fragment)."""
        from libhtml import render_to

        def stream():
            render_to(large_page, io.BytesIO())

        benchmark(stream)

except ImportError:
    pass


if __name__ == "__main__":
    main()
