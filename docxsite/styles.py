"""Scoped CSS classes and the tracker that emits each rule once per page."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from dataclasses import dataclass, field


def css_id(name: str, css: str) -> str:
    """Return a class identifier derived from a name and its declarations."""
    digest = hashlib.sha256(css.encode("utf-8")).hexdigest()
    return f"{name}_{digest[:4]}"


@dataclass(frozen=True)
class CSSClass:
    """A named block of CSS declarations with a content-derived identifier."""

    name: str
    declarations: str

    @property
    def id(self) -> str:
        return css_id(self.name, self.declarations)

    @property
    def rule(self) -> str:
        """The complete CSS rule for this class."""
        return f".{self.id}{{{self.declarations}}}"

    def __str__(self) -> str:
        return self.id


def _css(name: str, *declarations: str) -> CSSClass:
    return CSSClass(name, "".join(declarations))


def flex() -> CSSClass:
    return _css("flex", "display:flex;", "justify-content:center;")


def col() -> CSSClass:
    return _css("col", "flex-direction:column;")


def sleeve() -> CSSClass:
    return _css("sleeve", "width:1200px;")


def text_color() -> CSSClass:
    return _css("textColor", "color:white;")


def spacing() -> CSSClass:
    return _css(
        "spacing",
        "gap:1rem;",
        "justify-content:space-between;",
        "align-items:center;",
    )


def footerbox() -> CSSClass:
    return _css(
        "footerbox",
        "padding:1rem 2rem;",
        "border-radius:12px;",
        "background-color:#FFC000;",
        "color:black;",
    )


def class_names(classes: Iterable[CSSClass | str]) -> str:
    """Join the class names for use in an HTML class attribute."""
    names = (c.id if isinstance(c, CSSClass) else c for c in classes)
    return " ".join(name for name in names if name)


@dataclass
class StyleTracker:
    """Remembers which CSS classes a page has already emitted."""

    rendered: set[str] = field(default_factory=set)

    def render(self, classes: Iterable[CSSClass | str]) -> str:
        """Return a style element for classes not yet emitted, or an empty string."""
        rules = []
        for cls in classes:
            if isinstance(cls, CSSClass) and cls.id not in self.rendered:
                self.rendered.add(cls.id)
                rules.append(cls.rule)
        if not rules:
            return ""
        return '<style type="text/css">' + "".join(rules) + "</style>"