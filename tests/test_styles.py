import pytest

from docxsite.styles import (
    CSSClass,
    StyleTracker,
    class_names,
    col,
    css_id,
    flex,
    footerbox,
    sleeve,
    spacing,
    text_color,
)

ALL = [flex, col, sleeve, text_color, spacing, footerbox]


def test_css_id_shape():
    ident = css_id("flex", "display:flex;")
    prefix, separator, digest = ident.partition("_")
    assert prefix == "flex"
    assert separator == "_"
    assert len(digest) == 4
    assert set(digest) <= set("0123456789abcdef")


def test_css_id_deterministic_and_content_sensitive():
    assert css_id("a", "color:red;") == css_id("a", "color:red;")
    assert css_id("a", "color:red;").startswith("a_")
    assert css_id("a", "color:red;")[2:] == css_id("b", "color:red;")[2:]


@pytest.mark.parametrize("factory", ALL)
def test_rule_wraps_declarations(factory):
    cls = factory()
    assert cls.rule == "." + cls.id + "{" + cls.declarations + "}"
    assert cls.id == css_id(cls.name, cls.declarations)


def test_declarations_from_source():
    assert flex().declarations == "display:flex;justify-content:center;"
    assert text_color().name == "textColor"
    assert footerbox().declarations == (
        "padding:1rem 2rem;border-radius:12px;"
        "background-color:#FFC000;color:black;"
    )


def test_class_names_joins_ids():
    assert class_names([flex(), col()]) == f"{flex().id} {col().id}"
    assert class_names([]) == ""
    assert class_names([sleeve(), "extra"]) == f"{sleeve().id} extra"


def test_tracker_emits_once():
    tracker = StyleTracker()
    first = tracker.render([flex(), col()])
    assert first == '<style type="text/css">' + flex().rule + col().rule + "</style>"
    assert tracker.render([flex(), col()]) == ""


def test_tracker_emits_only_new():
    tracker = StyleTracker()
    tracker.render([flex()])
    out = tracker.render([flex(), spacing()])
    assert out == '<style type="text/css">' + spacing().rule + "</style>"
    assert tracker.rendered == {flex().id, spacing().id}


def test_tracker_ignores_plain_names():
    tracker = StyleTracker()
    assert tracker.render(["plain"]) == ""
    assert tracker.render([]) == ""


def test_custom_class_equality():
    assert CSSClass("x", "a:b;") == CSSClass("x", "a:b;")
    assert str(CSSClass("x", "a:b;")) == css_id("x", "a:b;")