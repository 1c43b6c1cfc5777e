import logging

import pytest

from micro_vdom import (
    Attr,
    Config,
    Document,
    Element,
    InvalidAttributeError,
    SELF_CLOSING_TAGS,
)


def test_element_with_attribute_mapping():
    assert Element("div", {"class": "x"}).render() == '<div class="x">\n</div>\n'


def test_element_with_attribute_pairs():
    div = Element("div", [("id", "main"), ("class", "wide")])
    assert div.render() == '<div id="main" class="wide">\n</div>\n'


def test_attributes_render_in_insertion_order():
    div = Element("div")
    div.set_attribute("b", "2")
    div.set_attribute("a", "1")
    div.set_attribute("b", "3")
    assert div.render() == '<div b="3" a="1">\n</div>\n'


def test_set_attribute_twice_keeps_latest_value():
    div = Element("div")
    div.set_attribute("title", "old")
    div.set_attribute("title", "new")
    assert div.render() == '<div title="new">\n</div>\n'
    assert div.get_attribute("title") == "new"


def test_set_attribute_with_attr_object():
    div = Element("div")
    attr = Attr("data-id", "7")
    assert div.set_attribute(attr) is attr
    assert div.get_attribute_node("data-id") is attr
    assert div.render() == '<div data-id="7">\n</div>\n'


def test_set_attribute_default_value_is_empty():
    div = Element("input")
    div.set_attribute("disabled")
    assert div.render() == '<input disabled="">\n'


def test_invalid_attribute_is_dropped_with_warning(caplog):
    div = Element("div")
    with caplog.at_level(logging.WARNING):
        assert div.set_attribute(123, "x") is None
    assert not div.has_attributes()
    assert "int" in caplog.text


def test_invalid_attribute_raises_in_strict_mode(strict_document):
    div = strict_document.create_element("div")
    with pytest.raises(InvalidAttributeError):
        div.set_attribute(["class"], "x")


def test_attribute_accessors():
    div = Element("div", {"id": "a"})
    assert div.has_attribute("id")
    assert div.hasAttribute("id")
    assert div.getAttribute("id") == "a"
    assert div.get_attribute("missing") is None
    div.remove_attribute("id")
    div.removeAttribute("missing")
    assert not div.has_attribute("id")


@pytest.mark.parametrize("tag", sorted(SELF_CLOSING_TAGS))
def test_self_closing_tags_never_render_children(tag):
    element = Element(tag)
    element.append_child(["text", Element("span")])
    assert element.self_closing
    assert element.child_element_count == 2
    assert element.render() == f"<{tag}>\n"
    assert element.inner_html == ""


def test_self_closing_set_includes_legacy_tags():
    assert {"command", "keygen"} <= SELF_CLOSING_TAGS


def test_regular_element_is_not_self_closing():
    assert not Element("div").self_closing


def test_self_closing_is_case_sensitive():
    assert not Element("BR").self_closing


def test_nested_render():
    ul = Element("ul", {"class": "list"})
    for label in ("one", "two"):
        li = Element("li")
        li.append_child(label)
        ul.append_child(li)
    assert ul.render() == (
        '<ul class="list">\n'
        "<li>\none</li>\n"
        "<li>\ntwo</li>\n"
        "</ul>\n"
    )


def test_inner_and_outer_html():
    p = Element("p")
    p.append_child(["a & b", Element("br")])
    assert p.inner_html == "a &amp; b<br>\n"
    assert p.outer_html == p.render() == "<p>\na &amp; b<br>\n</p>\n"


def test_attribute_values_are_not_escaped_by_default():
    div = Element("div", {"title": "<b>"})
    assert div.render() == '<div title="<b>">\n</div>\n'


def test_attribute_values_escaped_when_configured():
    config = Config()
    config.set("render.escape_attribute_values", True)
    document = Document(config=config)
    div = document.create_element("div", {"title": 'a "quoted" <b>'})
    assert div.render() == '<div title="a &quot;quoted&quot; &lt;b&gt;">\n</div>\n'


def test_render_is_repeatable():
    div = Element("div", {"id": "x"})
    div.append_child("hi")
    assert div.render() == div.render()


@pytest.mark.parametrize("attributes", [5, "id", 3.5])
def test_malformed_attribute_source_is_dropped_with_warning(attributes, caplog):
    with caplog.at_level(logging.WARNING):
        div = Element("div", attributes)
    assert not div.has_attributes()
    assert div.render() == "<div>\n</div>\n"
    assert "not a mapping or iterable" in caplog.text


def test_attribute_entries_that_are_not_pairs_are_dropped(caplog):
    with caplog.at_level(logging.WARNING):
        div = Element("div", ["ab", ("id", "main"), ("x", "y", "z"), 7])
    assert div.render() == '<div id="main">\n</div>\n'
    assert caplog.text.count("not a (name, value) pair") == 3


def test_pair_with_non_string_name_is_dropped(caplog):
    with caplog.at_level(logging.WARNING):
        div = Element("div", [(1, "x")])
    assert not div.has_attributes()
    assert "not a string or Attr" in caplog.text


@pytest.mark.parametrize("attributes", [5, "id", ["ab"], [("a", "b", "c")]])
def test_malformed_attribute_source_raises_in_strict_mode(strict_document, attributes):
    with pytest.raises(InvalidAttributeError):
        strict_document.create_element("div", attributes)
