"""Tests for per-element constructors."""

import pytest

from libhtml import Tag, Text
from libhtml import elements

KEYWORD_NAMES = {"del": "del_", "input": "input_", "map": "map_", "object": "object_"}


def factory_for(name: str):
    return getattr(elements, KEYWORD_NAMES.get(name, name))


class TestVoidElements:
    @pytest.mark.parametrize("name", sorted(elements.VOID_ELEMENTS))
    def test_void_factories(self, name: str) -> None:
        tag = factory_for(name)()
        assert isinstance(tag, Tag)
        assert tag.name == name
        assert tag.is_void is True
        assert str(tag) == f"<{name}/>"

    def test_void_ignores_children(self) -> None:
        assert str(elements.meta(Text("ignored")).charset("utf-8")) == '<meta charset="utf-8"/>'


class TestContainerElements:
    @pytest.mark.parametrize(
        "name",
        ["html", "head", "body", "div", "p", "span", "a", "ul", "li", "table", "svg", "path"],
    )
    def test_container_factories(self, name: str) -> None:
        tag = factory_for(name)(Text("x"))
        assert tag.name == name
        assert tag.is_void is False
        assert str(tag) == f"<{name}>x</{name}>"

    @pytest.mark.parametrize("name", sorted(KEYWORD_NAMES))
    def test_keyword_clash_names(self, name: str) -> None:
        assert factory_for(name)().name == name

    def test_factories_return_new_tags(self) -> None:
        first = elements.div()
        second = elements.div()
        first.id("a")
        assert second.attributes == {}

    def test_factory_metadata(self) -> None:
        assert elements.div.__name__ == "div"
        assert "<div>" in elements.div.__doc__
        assert "Void" in elements.br.__doc__


class TestElementFactory:
    def test_custom_element(self) -> None:
        widget = elements.element("my-widget")
        assert str(widget(Text("hi"))) == "<my-widget>hi</my-widget>"

    def test_custom_void_flag(self) -> None:
        keygen = elements.element("keygen", is_void=True)
        assert str(keygen(Text("x"))) == "<keygen/>"

    def test_override_known_void(self) -> None:
        assert str(elements.element("img", is_void=False)()) == "<img></img>"


class TestComposition:
    def test_list_of_links(self) -> None:
        nav = elements.ul(
            elements.li(elements.a(Text("Home")).href("/")),
            elements.li(elements.a(Text("About")).href("/about").class_("active")),
        )
        assert str(nav) == (
            '<ul><li><a href="/">Home</a></li>'
            '<li><a href="/about" class="active">About</a></li></ul>'
        )

    def test_form(self) -> None:
        form = elements.form(
            elements.label(Text("Email")).for_("email"),
            elements.input_().type("email").id("email").name_("email").required("required"),
        ).action("/subscribe").method("post")
        assert str(form) == (
            '<form action="/subscribe" method="post">'
            '<label for="email">Email</label>'
            '<input type="email" id="email" name="email" required="required"/>'
            "</form>"
        )

    def test_inline_svg(self) -> None:
        icon = elements.svg(elements.circle().cx("5").cy("5").r("4").fill("red")).viewbox("0 0 10 10")
        assert str(icon) == (
            '<svg viewBox="0 0 10 10"><circle cx="5" cy="5" r="4" fill="red"></circle></svg>'
        )
