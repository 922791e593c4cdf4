"""Build and render a page in a few lines, zero config, zero deps."""

from libhtml import Document, Text, render
from libhtml.elements import body, h1, html

page = Document(html(body(h1(Text("Hello, <World>")))).lang("en"))
print(render(page))
