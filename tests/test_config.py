"""Tests for ContextVar-based render configuration.

Validates defaults, thread isolation, context manager behavior and the effect
of each option on Tag serialization.
"""

from threading import Thread

import pytest

from libhtml import (
    HtmlRenderer,
    RenderConfig,
    Tag,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)


@pytest.fixture(autouse=True)
def _reset_config():
    reset_render_config()
    yield
    reset_render_config()


class TestRenderConfigDataclass:
    """Test RenderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = RenderConfig()
        assert config.sort_attributes is False
        assert config.escape_attribute_values is False
        assert config.encoding == "utf-8"

    def test_immutability(self) -> None:
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.sort_attributes = True  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = RenderConfig.from_dict({"sort_attributes": True, "encoding": "latin-1"})
        assert config.sort_attributes is True
        assert config.encoding == "latin-1"
        assert config.escape_attribute_values is False

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = RenderConfig.from_dict({"unknown_key": "ignored", "sort_attributes": True})
        assert config == RenderConfig(sort_attributes=True)

    def test_from_empty_dict(self) -> None:
        assert RenderConfig.from_dict({}) == RenderConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default(self) -> None:
        assert get_render_config() == RenderConfig()

    def test_set_and_reset(self) -> None:
        custom = RenderConfig(sort_attributes=True)
        set_render_config(custom)
        assert get_render_config() is custom
        reset_render_config()
        assert get_render_config() == RenderConfig()

    def test_context_manager_restores(self) -> None:
        outer = RenderConfig(escape_attribute_values=True)
        set_render_config(outer)
        with render_config_context(RenderConfig(sort_attributes=True)):
            assert get_render_config().sort_attributes is True
        assert get_render_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with render_config_context(RenderConfig(sort_attributes=True)):
                raise RuntimeError("boom")
        assert get_render_config() == RenderConfig()

    def test_thread_isolation(self) -> None:
        seen: dict[str, bool] = {}

        def worker() -> None:
            seen["thread"] = get_render_config().sort_attributes

        set_render_config(RenderConfig(sort_attributes=True))
        t = Thread(target=worker)
        t.start()
        t.join()

        assert seen["thread"] is False
        assert get_render_config().sort_attributes is True


class TestConfigEffects:
    """Options change attribute serialization only."""

    def tag(self) -> Tag:
        return Tag("a").attribute("z", "1").attribute("title", 'a "b"').attribute("b", "2")

    def test_default_insertion_order_verbatim(self) -> None:
        assert str(self.tag()) == '<a z="1" title="a "b"" b="2"></a>'

    def test_sort_attributes(self) -> None:
        with render_config_context(RenderConfig(sort_attributes=True)):
            assert str(self.tag()) == '<a b="2" title="a "b"" z="1"></a>'

    def test_escape_attribute_values(self) -> None:
        with render_config_context(RenderConfig(escape_attribute_values=True)):
            assert str(self.tag()) == '<a z="1" title="a &quot;b&quot;" b="2"></a>'

    def test_sorting_does_not_mutate_tag(self) -> None:
        tag = self.tag()
        HtmlRenderer(RenderConfig(sort_attributes=True)).render(tag)
        assert list(tag.attributes) == ["z", "title", "b"]

    def test_renderer_restores_previous_config(self) -> None:
        outer = RenderConfig(escape_attribute_values=True)
        set_render_config(outer)
        HtmlRenderer(RenderConfig(sort_attributes=True)).render(self.tag())
        assert get_render_config() is outer

    def test_renderer_config_applies_to_nested_tags(self) -> None:
        tree = Tag("div").children(Tag("span").attribute("y", "1").attribute("x", "2"))
        html = HtmlRenderer(RenderConfig(sort_attributes=True)).render(tree)
        assert html == '<div><span x="2" y="1"></span></div>'

    def test_concurrent_renderers_with_different_configs(self) -> None:
        sorted_renderer = HtmlRenderer(RenderConfig(sort_attributes=True))
        plain_renderer = HtmlRenderer()
        results: dict[str, list[str]] = {"sorted": [], "plain": []}

        def run(name: str, renderer: HtmlRenderer) -> None:
            for _ in range(200):
                results[name].append(renderer.render(self.tag()))

        threads = [
            Thread(target=run, args=("sorted", sorted_renderer)),
            Thread(target=run, args=("plain", plain_renderer)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert set(results["sorted"]) == {'<a b="2" title="a "b"" z="1"></a>'}
        assert set(results["plain"]) == {'<a z="1" title="a "b"" b="2"></a>'}
