"""Components are plain functions returning nodes.

Conditionals and loops are ordinary combinators; lazy branches are only
built when taken.
"""

from dataclasses import dataclass

from libhtml import Document, Group, IfElseFunc, Map, Node, Text, render, textf
from libhtml.elements import a, body, div, footer, head, html, li, meta, nav, p, title, ul


@dataclass
class User:
    id: int
    name: str | None = None


def navbar(links: dict[str, str], current: str) -> Node:
    return nav(
        ul(
            Map(
                list(links.items()),
                lambda item: li(a(Text(item[0])).href(item[1]).class_if(item[1] == current, "active")),
            )
        )
    )


def greeting(user: User) -> Node:
    return IfElseFunc(
        user.name is not None,
        lambda: p(textf("Hello {}", user.name)),
        lambda: p(Text("Hello anonymous")),
    )


def layout(page_title: str, *content: Node) -> Document:
    return Document(
        html(
            head(title(Text(page_title)), meta().charset("utf-8")),
            body(
                navbar({"Home": "/", "About": "/about"}, current="/"),
                div(*content).class_("container"),
                footer(Group(Text("© 2025 "), a(Text("libhtml")).href("/"))),
            ),
        ).lang("en")
    )


users = [User(1), User(2, "Alexis")]
print(render(layout("Users", Map(users, greeting))))
