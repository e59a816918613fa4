"""Unit tests for the BeautifulSoup source adapter."""

from bs4 import BeautifulSoup

from hyperscriptify.generator import Fragment, h
from hyperscriptify.source import NodeType, SoupNode
from hyperscriptify.transformer import hyperscriptify

from conftest import WidgetComponent


def _soup(html):
    return BeautifulSoup(html, "html.parser")


def test_node_kinds():
    """Documents are fragments, tags elements, strings text, comments other."""
    soup = _soup("<!DOCTYPE html><div>text<!-- note --></div>")
    root = SoupNode.wrap(soup)
    assert root.node_type == NodeType.DOCUMENT_FRAGMENT
    doctype, div = root.child_nodes
    assert doctype.node_type == NodeType.OTHER
    assert div.node_type == NodeType.ELEMENT
    assert div.node_name == "div"
    text, comment = div.child_nodes
    assert text.node_type == NodeType.TEXT
    assert text.node_value == "text"
    assert comment.node_type == NodeType.OTHER


def test_attributes():
    """Attribute names are lowercase and multi-valued attributes are joined."""
    div = SoupNode.wrap(_soup('<div ID="main" class="a  b" data-x="1"></div>').div)
    assert div.attribute_names() == ["id", "class", "data-x"]
    assert div.get_attribute("class") == "a b"
    assert div.get_attribute("ID") == "main"
    assert div.get_attribute("missing") is None


def test_parent_node():
    """Children point back at the node that produced them."""
    root = SoupNode.wrap(_soup("<ul><li>x</li></ul>"))
    ul = root.child_nodes[0]
    li = ul.child_nodes[0]
    assert li.parent_node is ul
    assert ul.parent_node is root
    assert SoupNode.wrap(_soup("<p>x</p>").p).parent_node.node_type == NodeType.DOCUMENT_FRAGMENT


def test_template_content_as_fragment():
    """A <template> can be converted without its wrapper."""
    soup = _soup('<template id="t"><b>x</b></template>')
    node = SoupNode.fragment(soup.template)
    assert node.node_type == NodeType.DOCUMENT_FRAGMENT
    assert node.parent_node is None
    assert hyperscriptify(node, h, Fragment, {}) == h(Fragment, {}, h("b", {}, "x"))


def test_concrete_widget_scenario_from_html():
    """The adapter drives the same slot routing as in-memory trees."""
    soup = _soup('<my-widget greeting="hello"><span slot="body">hi</span></my-widget><p>bye</p>')
    result = hyperscriptify(SoupNode.wrap(soup), h, Fragment, {"my-widget": WidgetComponent})
    assert result == h(
        Fragment,
        {},
        h(WidgetComponent, {"greeting": "hello", "body": h("span", {}, "hi")}),
        h("p", {}, "bye"),
    )


def test_whitespace_only_text_is_collapsed_by_the_parser():
    """BeautifulSoup keeps whitespace-only strings as a single newline or space."""
    soup = _soup("<div>\n  <i>x</i>   <b>y</b>\n</div>")
    result = hyperscriptify(SoupNode.wrap(soup.div), h, Fragment, {})
    assert result.children == ("\n", h("i", {}, "x"), " ", h("b", {}, "y"), "\n")


def test_text_with_content_is_kept_verbatim():
    """Strings with non-whitespace characters keep their surrounding spaces."""
    soup = _soup("<p>  a  <i>x</i></p>")
    result = hyperscriptify(SoupNode.wrap(soup.p), h, Fragment, {})
    assert result.children == ("  a  ", h("i", {}, "x"))


def test_multi_valued_attributes_kept_when_not_split():
    """Parsing with multi_valued_attributes=None keeps attribute values as written."""
    soup = BeautifulSoup('<div class="a  b"></div>', "html.parser", multi_valued_attributes=None)
    assert SoupNode.wrap(soup.div).get_attribute("class") == "a  b"
