"""HTML components that make up the site's page."""

from __future__ import annotations

from .styles import (
    StyleTracker,
    class_names,
    col,
    flex,
    footerbox,
    sleeve,
    spacing,
    text_color,
)

_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}
)


def _escape(text: str) -> str:
    return text.translate(_ESCAPES)


def _styled_open(tag: str, classes: list, tracker: StyleTracker) -> str:
    return f'{tracker.render(classes)}<{tag} class="{_escape(class_names(classes))}"'


def greeting(tracker: StyleTracker) -> str:
    """The navigation header."""
    return (
        _styled_open("nav", [flex(), spacing()], tracker)
        + '><header data-testid="headerTemplate"><h1>Docx</h1></header>'
        "<a></a> <a>docs</a> <a>sites</a> <a>tech</a></nav>"
    )


def content(tracker: StyleTracker) -> str:
    """The main content block."""
    return (
        _styled_open("nav", [flex(), col()], tracker)
        + '><header data-testid="headerTemplate"><h1>Specific Docs</h1></header>'
        "<p>Lorem ipsum...</p></nav>"
    )


def footer(tracker: StyleTracker) -> str:
    """The page footer."""
    return (
        _styled_open("footer", [flex(), spacing(), footerbox()], tracker)
        + '><header data-testid="headerTemplate"><h1>Docx</h1></header>'
        "<a>docs</a> <a>sites</a> <a>tech</a></footer>"
    )


def base(title: str, tracker: StyleTracker) -> str:
    """The full HTML document with the given title."""
    parts = [
        '<!doctype html><html lang="en"><head><meta charset="UTF-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">'
        "<title>",
        _escape(title),
        "</title></head>",
        _styled_open("body", [flex(), text_color()], tracker),
        ' style="background-color: rgb(43, 42, 42)">',
        _styled_open("div", [flex(), col(), sleeve()], tracker),
        ">",
        greeting(tracker),
        content(tracker),
        footer(tracker),
        "</div></body></html>",
    ]
    return "".join(parts)


def render_page(title: str) -> str:
    """Render the whole page with a fresh style tracker."""
    return base(title, StyleTracker())