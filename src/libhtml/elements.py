"""Element constructors for libhtml.

One factory per HTML (and inline SVG) element. Each is sugar over
``Tag(name, is_void, children)`` and returns a plain ``Tag``, so every typed
setter works on every element.

Example:
    >>> from libhtml import Text
    >>> from libhtml.elements import a, img, li, ul
    >>> str(ul(li(a(Text("Home")).href("/"))))
    '<ul><li><a href="/">Home</a></li></ul>'
    >>> str(img().src("logo.png").alt("Logo"))
    '<img src="logo.png" alt="Logo"/>'

Names that clash with Python keywords or builtins carry a trailing
underscore: ``del_``, ``input_``, ``map_``, ``object_``.
"""

from __future__ import annotations

from collections.abc import Callable

from libhtml.nodes import Child
from libhtml.tag import Tag

VOID_ELEMENTS: frozenset[str] = frozenset(
    (
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    )
)


def element(name: str, is_void: bool | None = None) -> Callable[..., Tag]:
    """Create a factory for elements called ``name``.

    Args:
        name: Element name
        is_void: Void flag; looked up in VOID_ELEMENTS when None

    Returns:
        Function taking children and returning a new Tag
    """
    void = name in VOID_ELEMENTS if is_void is None else is_void

    def factory(*children: Child) -> Tag:
        return Tag(name, void, children)

    factory.__name__ = name
    factory.__qualname__ = name
    factory.__doc__ = f"Create a <{name}> element." + (" Void: children are ignored." if void else "")
    return factory


# Document structure and metadata
html = element("html")
head = element("head")
title = element("title")
base = element("base")
link = element("link")
meta = element("meta")
style = element("style")
script = element("script")
noscript = element("noscript")
template = element("template")
body = element("body")

# Sections
address = element("address")
article = element("article")
aside = element("aside")
footer = element("footer")
header = element("header")
h1 = element("h1")
h2 = element("h2")
h3 = element("h3")
h4 = element("h4")
h5 = element("h5")
h6 = element("h6")
main = element("main")
nav = element("nav")
section = element("section")

# Grouping content
blockquote = element("blockquote")
dd = element("dd")
div = element("div")
dl = element("dl")
dt = element("dt")
figcaption = element("figcaption")
figure = element("figure")
hr = element("hr")
li = element("li")
ol = element("ol")
p = element("p")
pre = element("pre")
ul = element("ul")

# Text-level semantics
a = element("a")
abbr = element("abbr")
b = element("b")
bdi = element("bdi")
bdo = element("bdo")
br = element("br")
cite = element("cite")
code = element("code")
data = element("data")
dfn = element("dfn")
em = element("em")
i = element("i")
kbd = element("kbd")
mark = element("mark")
q = element("q")
rp = element("rp")
rt = element("rt")
ruby = element("ruby")
s = element("s")
samp = element("samp")
small = element("small")
span = element("span")
strong = element("strong")
sub = element("sub")
sup = element("sup")
time = element("time")
u = element("u")
var = element("var")
wbr = element("wbr")

# Edits
del_ = element("del")
ins = element("ins")

# Embedded content
area = element("area")
audio = element("audio")
canvas = element("canvas")
embed = element("embed")
iframe = element("iframe")
img = element("img")
map_ = element("map")
object_ = element("object")
param = element("param")
picture = element("picture")
source = element("source")
track = element("track")
video = element("video")

# Tables
caption = element("caption")
col = element("col")
colgroup = element("colgroup")
table = element("table")
tbody = element("tbody")
td = element("td")
tfoot = element("tfoot")
th = element("th")
thead = element("thead")
tr = element("tr")

# Forms
button = element("button")
datalist = element("datalist")
fieldset = element("fieldset")
form = element("form")
input_ = element("input")
label = element("label")
legend = element("legend")
meter = element("meter")
optgroup = element("optgroup")
option = element("option")
output = element("output")
progress = element("progress")
select = element("select")
textarea = element("textarea")

# Interactive elements
details = element("details")
dialog = element("dialog")
summary = element("summary")

# SVG
svg = element("svg")
g = element("g")
circle = element("circle")
ellipse = element("ellipse")
line = element("line")
path = element("path")
polygon = element("polygon")
polyline = element("polyline")
rect = element("rect")
use = element("use")
