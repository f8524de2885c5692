# tests/analysis/test_traversal.py
import pytest
from pydantic import ValidationError

from snapshot_analyzer.dom.core import SnapshotNode, Rect, walk, has_interactive_descendant, MAX_DEPTH

from conftest import make_node, chain


def test_walk_is_preorder_in_document_order():
    """Test of de walk de node vóór zijn kinderen bezoekt, in documentvolgorde."""
    root = make_node("ul", id="root", children=[
        make_node("li", id="a", children=[make_node("span", id="a1")]),
        make_node("li", id="b"),
    ])
    result = walk(root)
    assert [n.id for n in result.nodes] == ["root", "a", "a1", "b"]
    assert result.truncated is False


def test_walk_none_returns_empty_result():
    """Test of een ontbrekende boom een lege traversal oplevert."""
    result = walk(None)
    assert result.nodes == []
    assert result.truncated is False


def test_walk_truncates_below_max_depth():
    """Test of takken dieper dan max_depth worden afgekapt en dat dit zichtbaar is."""
    root = chain(5)
    result = walk(root, max_depth=3)
    # depths 0..3 visited, node at depth 3 still has a child
    assert len(result.nodes) == 4
    assert result.truncated is True


def test_walk_exact_depth_is_not_truncated():
    """Test dat een boom die precies tot max_depth reikt niet als afgekapt telt."""
    result = walk(chain(3), max_depth=3)
    assert len(result.nodes) == 4
    assert result.truncated is False


def test_walk_default_depth_matches_capture_ceiling():
    """Test de standaard diepte-limiet van de capture (20 niveaus)."""
    result = walk(chain(MAX_DEPTH + 5))
    assert len(result.nodes) == MAX_DEPTH + 1
    assert result.truncated is True


def test_has_interactive_descendant():
    """Test de recursieve detectie van interactieve elementen."""
    deep_link = make_node("div", children=[make_node("div", children=[make_node("a")])])
    assert has_interactive_descendant(deep_link) is True
    assert has_interactive_descendant(make_node("div", children=[make_node("p")])) is False
    assert has_interactive_descendant(make_node("textarea")) is True
    assert has_interactive_descendant(None) is False


def test_snapshot_node_accepts_capture_format():
    """Test of het ruwe capture-formaat (camelCase, 'styles') direct valideert."""
    node = SnapshotNode.model_validate({
        "tag": "BUTTON",
        "id": "",
        "classes": "btn  btn-primary",
        "attributes": {"type": "submit", "disabled": True, "href": None},
        "rect": {"x": -4.6, "y": 10.4, "width": "120", "height": None},
        "styles": {"display": "inline-block", "fontSize": "16px"},
        "isVisible": False,
        "isInteractive": True,
        "html": "<span>ignored</span>",
    })
    assert node.tag == "button"
    assert node.id is None
    assert node.classes == ["btn", "btn-primary"]
    assert node.attributes == {"type": "submit", "disabled": "True"}
    assert node.rect == Rect(x=0, y=10, width=120, height=0)
    assert node.style["display"] == "inline-block"
    assert node.is_visible is False
    assert node.is_interactive is True


def test_snapshot_node_is_immutable():
    """Test dat de pipeline de invoerboom niet kan muteren."""
    node = make_node("div")
    with pytest.raises(ValidationError):
        node.tag = "span"
    assert node.tag == "div"


def test_walk_visits_shared_node_once():
    """Test dat een node-object dat onder meerdere ouders hangt maar één keer wordt bezocht."""
    shared = make_node("div", classes=["card"], children=[make_node("p")])
    root = make_node("section", children=[shared, shared])

    result = walk(root)
    assert [n.tag for n in result.nodes] == ["section", "div", "p"]
    assert result.nodes[1] is shared
    assert result.truncated is False
