"""Generic HTML element for libhtml.

A ``Tag`` is the one element record every concrete element shares: a name, a
void flag, an attribute map and a list of children. The per-element factories
in ``libhtml.elements`` all return plain Tags.

Attribute Rules:
- ``attribute(key, "")`` is a no-op: the attribute is not set at all.
- Setting a key twice keeps the last value.
- ``attribute_if(False, ...)`` is a no-op; the value is still computed by the
  caller, only the assignment is skipped.
- Every typed setter (``href``, ``class_``, ``data``, ...) goes through
  ``attribute`` and keeps these rules.

Rendering:
``<name`` + `` key="value"`` per attribute + either ``/>`` (void, children
ignored) or ``>`` + children + ``</name>``. Values are written verbatim unless
``RenderConfig.escape_attribute_values`` is set; callers supply safe values.

Thread Safety:
Tags are mutable builders with a single owner. Setters mutate the receiver and
return it, so chains alias the same object. Mutating a Tag while another thread
renders it is undefined.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Self

from libhtml.config import get_render_config
from libhtml.nodes import Child, Node, render_children
from libhtml.protocols import Sink
from libhtml.utils.text import escape_html


def _attribute_name(keyword: str) -> str:
    """Map a Python keyword argument to an attribute name.

    ``class_`` -> ``class``, ``http_equiv`` -> ``http-equiv``.
    """
    return keyword.rstrip("_").replace("_", "-")


def _setter(key: str) -> Callable[[Tag, str], Tag]:
    def setter(self: Tag, value: str) -> Tag:
        return self.attribute(key, value)

    setter.__doc__ = f'Set the "{key}" attribute.'
    return setter


def _setter_if(key: str) -> Callable[[Tag, bool, str], Tag]:
    def setter_if(self: Tag, condition: bool, value: str) -> Tag:
        return self.attribute_if(condition, key, value)

    setter_if.__doc__ = f'Set the "{key}" attribute when condition is true.'
    return setter_if


class Tag(Node):
    """Generic HTML element.

    Usage:
        >>> link = Tag("a").href("/docs").class_("nav", "active")
        >>> str(link.children(Text("Docs")))
        '<a href="/docs" class="nav active">Docs</a>'

        >>> str(Tag("img", is_void=True).src("a.png"))
        '<img src="a.png"/>'

    Attributes:
        name: Element name, written as-is
        is_void: Self-closing element; children are never rendered
        attributes: Attribute map in insertion order
        nodes: Children, may contain None

    """

    __slots__ = ("name", "is_void", "attributes", "nodes")

    def __init__(self, name: str, is_void: bool = False, children: Iterable[Child] = ()) -> None:
        self.name = name
        self.is_void = is_void
        self.attributes: dict[str, str] = {}
        self.nodes: list[Child] = list(children)

    def children(self, *children: Child) -> Self:
        """Replace all children.

        Returns:
            self for method chaining
        """
        self.nodes = list(children)
        return self

    def attribute(self, key: str, value: str) -> Self:
        """Set an attribute, overwriting any previous value.

        An empty value leaves the attribute map untouched.

        Returns:
            self for method chaining
        """
        if value == "":
            return self
        self.attributes[key] = value
        return self

    def attribute_if(self, condition: bool, key: str, value: str) -> Self:
        """Set an attribute only when ``condition`` is true.

        Returns:
            self for method chaining
        """
        if condition:
            self.attribute(key, value)
        return self

    def attrs(self, **attributes: str) -> Self:
        """Set several attributes from keyword arguments.

        A trailing underscore is dropped and underscores become dashes, so
        ``attrs(class_="x", http_equiv="refresh")`` sets ``class`` and
        ``http-equiv``. Empty values are skipped like in ``attribute``.

        Returns:
            self for method chaining
        """
        for keyword, value in attributes.items():
            self.attribute(_attribute_name(keyword), value)
        return self

    # -- Rendering -------------------------------------------------------------

    def render(self, sink: Sink) -> None:
        config = get_render_config()

        sink.write(f"<{self.name}")

        items: Iterable[tuple[str, str]] = self.attributes.items()
        if config.sort_attributes:
            items = sorted(items)
        for key, value in items:
            if config.escape_attribute_values:
                value = escape_html(value)
            sink.write(f' {key}="{value}"')

        if self.is_void:
            sink.write("/>")
            return

        sink.write(">")
        render_children(self.nodes, sink)
        sink.write(f"</{self.name}>")

    def __repr__(self) -> str:
        return (
            f"Tag(name={self.name!r}, is_void={self.is_void!r}, "
            f"attributes={self.attributes!r}, nodes={self.nodes!r})"
        )

    # -- Typed setters ---------------------------------------------------------

    def class_(self, *values: str) -> Self:
        """Set the "class" attribute from one or more class names."""
        return self.attribute("class", " ".join(values))

    def class_if(self, condition: bool, *values: str) -> Self:
        """Set the "class" attribute when condition is true."""
        return self.attribute_if(condition, "class", " ".join(values))

    def data(self, key: str, value: str) -> Self:
        """Set a ``data-<key>`` attribute."""
        return self.attribute(f"data-{key}", value)

    def data_if(self, condition: bool, key: str, value: str) -> Self:
        """Set a ``data-<key>`` attribute when condition is true."""
        return self.attribute_if(condition, f"data-{key}", value)

    def aria(self, key: str, value: str) -> Self:
        """Set an ``aria-<key>`` attribute."""
        return self.attribute(f"aria-{key}", value)

    def aria_if(self, condition: bool, key: str, value: str) -> Self:
        """Set an ``aria-<key>`` attribute when condition is true."""
        return self.attribute_if(condition, f"aria-{key}", value)

    # Global attributes
    accesskey = _setter("accesskey")
    accesskey_if = _setter_if("accesskey")
    contenteditable = _setter("contenteditable")
    contenteditable_if = _setter_if("contenteditable")
    dir = _setter("dir")
    dir_if = _setter_if("dir")
    draggable = _setter("draggable")
    draggable_if = _setter_if("draggable")
    hidden = _setter("hidden")
    hidden_if = _setter_if("hidden")
    id = _setter("id")
    id_if = _setter_if("id")
    lang = _setter("lang")
    lang_if = _setter_if("lang")
    role = _setter("role")
    role_if = _setter_if("role")
    spellcheck = _setter("spellcheck")
    spellcheck_if = _setter_if("spellcheck")
    style = _setter("style")
    style_if = _setter_if("style")
    tabindex = _setter("tabindex")
    tabindex_if = _setter_if("tabindex")
    title = _setter("title")
    title_if = _setter_if("title")
    translate = _setter("translate")
    translate_if = _setter_if("translate")

    # Links and resources
    crossorigin = _setter("crossorigin")
    crossorigin_if = _setter_if("crossorigin")
    download = _setter("download")
    download_if = _setter_if("download")
    href = _setter("href")
    href_if = _setter_if("href")
    hreflang = _setter("hreflang")
    hreflang_if = _setter_if("hreflang")
    integrity = _setter("integrity")
    integrity_if = _setter_if("integrity")
    media = _setter("media")
    media_if = _setter_if("media")
    ping = _setter("ping")
    ping_if = _setter_if("ping")
    referrerpolicy = _setter("referrerpolicy")
    referrerpolicy_if = _setter_if("referrerpolicy")
    rel = _setter("rel")
    rel_if = _setter_if("rel")
    target = _setter("target")
    target_if = _setter_if("target")
    type = _setter("type")
    type_if = _setter_if("type")

    # Document metadata and scripts
    async_ = _setter("async")
    async_if = _setter_if("async")
    charset = _setter("charset")
    charset_if = _setter_if("charset")
    content = _setter("content")
    content_if = _setter_if("content")
    defer = _setter("defer")
    defer_if = _setter_if("defer")
    http_equiv = _setter("http-equiv")
    http_equiv_if = _setter_if("http-equiv")
    nomodule = _setter("nomodule")
    nomodule_if = _setter_if("nomodule")

    # Embedded content and media
    allow = _setter("allow")
    allow_if = _setter_if("allow")
    allowfullscreen = _setter("allowfullscreen")
    allowfullscreen_if = _setter_if("allowfullscreen")
    alt = _setter("alt")
    alt_if = _setter_if("alt")
    autoplay = _setter("autoplay")
    autoplay_if = _setter_if("autoplay")
    controls = _setter("controls")
    controls_if = _setter_if("controls")
    coords = _setter("coords")
    coords_if = _setter_if("coords")
    decoding = _setter("decoding")
    decoding_if = _setter_if("decoding")
    height = _setter("height")
    height_if = _setter_if("height")
    ismap = _setter("ismap")
    ismap_if = _setter_if("ismap")
    loading = _setter("loading")
    loading_if = _setter_if("loading")
    loop = _setter("loop")
    loop_if = _setter_if("loop")
    muted = _setter("muted")
    muted_if = _setter_if("muted")
    poster = _setter("poster")
    poster_if = _setter_if("poster")
    preload = _setter("preload")
    preload_if = _setter_if("preload")
    sandbox = _setter("sandbox")
    sandbox_if = _setter_if("sandbox")
    shape = _setter("shape")
    shape_if = _setter_if("shape")
    sizes = _setter("sizes")
    sizes_if = _setter_if("sizes")
    src = _setter("src")
    src_if = _setter_if("src")
    srcdoc = _setter("srcdoc")
    srcdoc_if = _setter_if("srcdoc")
    srcset = _setter("srcset")
    srcset_if = _setter_if("srcset")
    usemap = _setter("usemap")
    usemap_if = _setter_if("usemap")
    width = _setter("width")
    width_if = _setter_if("width")

    # Forms
    action = _setter("action")
    action_if = _setter_if("action")
    autocomplete = _setter("autocomplete")
    autocomplete_if = _setter_if("autocomplete")
    autofocus = _setter("autofocus")
    autofocus_if = _setter_if("autofocus")
    checked = _setter("checked")
    checked_if = _setter_if("checked")
    cols = _setter("cols")
    cols_if = _setter_if("cols")
    disabled = _setter("disabled")
    disabled_if = _setter_if("disabled")
    enctype = _setter("enctype")
    enctype_if = _setter_if("enctype")
    for_ = _setter("for")
    for_if = _setter_if("for")
    form = _setter("form")
    form_if = _setter_if("form")
    formaction = _setter("formaction")
    formaction_if = _setter_if("formaction")
    formenctype = _setter("formenctype")
    formenctype_if = _setter_if("formenctype")
    formmethod = _setter("formmethod")
    formmethod_if = _setter_if("formmethod")
    formnovalidate = _setter("formnovalidate")
    formnovalidate_if = _setter_if("formnovalidate")
    formtarget = _setter("formtarget")
    formtarget_if = _setter_if("formtarget")
    label = _setter("label")
    label_if = _setter_if("label")
    max = _setter("max")
    max_if = _setter_if("max")
    maxlength = _setter("maxlength")
    maxlength_if = _setter_if("maxlength")
    method = _setter("method")
    method_if = _setter_if("method")
    min = _setter("min")
    min_if = _setter_if("min")
    minlength = _setter("minlength")
    minlength_if = _setter_if("minlength")
    multiple = _setter("multiple")
    multiple_if = _setter_if("multiple")
    name_ = _setter("name")
    name_if = _setter_if("name")
    novalidate = _setter("novalidate")
    novalidate_if = _setter_if("novalidate")
    pattern = _setter("pattern")
    pattern_if = _setter_if("pattern")
    placeholder = _setter("placeholder")
    placeholder_if = _setter_if("placeholder")
    readonly = _setter("readonly")
    readonly_if = _setter_if("readonly")
    required = _setter("required")
    required_if = _setter_if("required")
    rows = _setter("rows")
    rows_if = _setter_if("rows")
    selected = _setter("selected")
    selected_if = _setter_if("selected")
    size = _setter("size")
    size_if = _setter_if("size")
    step = _setter("step")
    step_if = _setter_if("step")
    value = _setter("value")
    value_if = _setter_if("value")
    wrap = _setter("wrap")
    wrap_if = _setter_if("wrap")

    # Lists, tables, quotes and interactive elements
    border = _setter("border")
    border_if = _setter_if("border")
    cellpadding = _setter("cellpadding")
    cellpadding_if = _setter_if("cellpadding")
    cellspacing = _setter("cellspacing")
    cellspacing_if = _setter_if("cellspacing")
    cite = _setter("cite")
    cite_if = _setter_if("cite")
    colspan = _setter("colspan")
    colspan_if = _setter_if("colspan")
    datetime = _setter("datetime")
    datetime_if = _setter_if("datetime")
    headers = _setter("headers")
    headers_if = _setter_if("headers")
    high = _setter("high")
    high_if = _setter_if("high")
    low = _setter("low")
    low_if = _setter_if("low")
    open = _setter("open")
    open_if = _setter_if("open")
    optimum = _setter("optimum")
    optimum_if = _setter_if("optimum")
    reversed = _setter("reversed")
    reversed_if = _setter_if("reversed")
    rowspan = _setter("rowspan")
    rowspan_if = _setter_if("rowspan")
    scope = _setter("scope")
    scope_if = _setter_if("scope")
    span = _setter("span")
    span_if = _setter_if("span")
    start = _setter("start")
    start_if = _setter_if("start")

    # SVG
    cx = _setter("cx")
    cx_if = _setter_if("cx")
    cy = _setter("cy")
    cy_if = _setter_if("cy")
    d = _setter("d")
    d_if = _setter_if("d")
    fill = _setter("fill")
    fill_if = _setter_if("fill")
    points = _setter("points")
    points_if = _setter_if("points")
    preserve_aspect_ratio = _setter("preserveAspectRatio")
    preserve_aspect_ratio_if = _setter_if("preserveAspectRatio")
    r = _setter("r")
    r_if = _setter_if("r")
    rx = _setter("rx")
    rx_if = _setter_if("rx")
    ry = _setter("ry")
    ry_if = _setter_if("ry")
    stroke = _setter("stroke")
    stroke_if = _setter_if("stroke")
    stroke_width = _setter("stroke-width")
    stroke_width_if = _setter_if("stroke-width")
    transform = _setter("transform")
    transform_if = _setter_if("transform")
    version = _setter("version")
    version_if = _setter_if("version")
    viewbox = _setter("viewBox")
    viewbox_if = _setter_if("viewBox")
    x = _setter("x")
    x_if = _setter_if("x")
    xmlns = _setter("xmlns")
    xmlns_if = _setter_if("xmlns")
    y = _setter("y")
    y_if = _setter_if("y")


__all__ = [
    "Tag",
]
