# tests/analysis/test_component_classifier.py
import pytest

from snapshot_analyzer.classifiers.component_classifier import (
    analyze_components,
    classify,
    derive_name,
    interactive_index,
    is_component_like,
)
from snapshot_analyzer.classifiers.rules import COMPONENT_RULES, ClassificationRule, first_match, node_facts
from snapshot_analyzer.dom.core import walk
from snapshot_analyzer.model import SEMANTIC_TYPES

from conftest import make_node


@pytest.mark.parametrize("node, expected", [
    (make_node("button"), "button"),
    (make_node("div", classes=["big-button"]), "button"),
    (make_node("a", id="cta-btn"), "button"),
    (make_node("nav"), "navigation"),
    (make_node("ul", classes=["main-menu"]), "navigation"),
    (make_node("form"), "form"),
    (make_node("div", classes=["form-row"]), "form"),
    (make_node("select"), "input"),
    (make_node("textarea"), "input"),
    (make_node("picture"), "image"),
    (make_node("img"), "image"),
    (make_node("article", classes=["product-card"]), "card"),
    (make_node("div", classes=["dialog"]), "modal"),
    (make_node("div", id="page-header"), "header"),
    (make_node("div", id="FOOTER"), "footer"),
    (make_node("aside"), "sidebar"),
    (make_node("div", id="left-sidebar"), "sidebar"),
    (make_node("div", classes=["wrapper"]), "container"),
    (make_node("span"), "container"),
])
def test_classify_rules(node, expected):
    """Test elke regel van de classificatie afzonderlijk."""
    assert classify(node) == expected


def test_classify_rule_priority_button_before_navigation():
    """Test dat regel 1 voor regel 2 gaat: een button met klasse nav blijft een button."""
    assert classify(make_node("button", classes=["nav"])) == "button"


def test_classify_priority_follows_rule_order():
    """Test meer prioriteitsconflicten: eerste match wint."""
    # class "form" (rule 3) vs card (rule 6)
    assert classify(make_node("div", classes=["form", "card"])) == "form"
    # input tag (rule 4) vs modal class (rule 7)
    assert classify(make_node("input", classes=["modal"])) == "input"
    # header id is only rule 8, navigation class wins
    assert classify(make_node("div", id="header", classes=["navbar"])) == "navigation"


def test_classify_is_total():
    """Test dat elke node op precies één van de elf vaste types uitkomt."""
    tags = ["div", "button", "nav", "form", "input", "img", "card", "modal", "header", "footer", "aside", "x-foo"]
    for tag in tags:
        assert classify(make_node(tag)) in SEMANTIC_TYPES
    assert len(SEMANTIC_TYPES) == 11


def test_rules_are_inspectable_data():
    """Test dat de regels een expliciete geordende lijst zijn en los te evalueren."""
    assert [r.result for r in COMPONENT_RULES] == [
        "button", "navigation", "form", "input", "image", "card", "modal", "header", "footer", "sidebar",
    ]
    custom = [ClassificationRule("hero", class_keywords=["hero"])]
    assert first_match(custom, node_facts(make_node("div", classes=["Hero-Banner"])), "other") == "hero"
    assert first_match(custom, node_facts(make_node("div")), "other") == "other"


def test_derive_name():
    """Test de naamafleiding: id, dan eerste klasse zonder speciale tekens, dan <tag>Component."""
    assert derive_name(make_node("div", id="hero", classes=["x"])) == "hero"
    assert derive_name(make_node("div", classes=["product-card__title", "x"])) == "productcardtitle"
    assert derive_name(make_node("section")) == "sectionComponent"


def test_is_component_like_gate():
    """Test de toegangspoort: naam (id/klasse) én (kinderen of interactief)."""
    assert is_component_like(make_node("div", classes=["x"], children=[make_node("p")]), False)
    assert is_component_like(make_node("a", classes=["link"]), True)
    assert not is_component_like(make_node("div", classes=["x"]), False)
    assert not is_component_like(make_node("div", children=[make_node("button")]), True)


def test_interactive_index_propagates_upwards():
    """Test dat de interactieve vlag van kind naar voorouders doorwerkt."""
    link = make_node("a")
    middle = make_node("div", children=[link])
    root = make_node("div", children=[middle, make_node("p")])
    index = interactive_index(walk(root).nodes)
    assert index[id(root)] and index[id(middle)] and index[id(link)]
    assert index[id(root.children[1])] is False


def test_analyze_components_button_row(button_row):
    """Test het eind-tot-eind scenario: drie buttons in een container."""
    components = analyze_components(button_row)
    buttons = [c for c in components if c.estimated_type == "button"]
    assert len(buttons) == 3
    assert all(b.signature == "button:btn.btn-primary:0" for b in buttons)
    assert all(b.name == "btn" and b.has_interactive_elements for b in buttons)

    container = components[0]
    assert container.estimated_type == "container"
    assert container.child_count == 3
    assert container.has_interactive_elements is True


def test_analyze_components_excludes_anonymous_nodes(landing_page):
    """Test dat nodes zonder id of klasse niet als component verschijnen."""
    components = analyze_components(landing_page)
    assert all(c.id or c.classes for c in components)
    assert [c.estimated_type for c in components] == [
        "header", "navigation", "card", "card", "card", "form", "input", "button", "footer",
    ]


def test_analyze_components_empty_tree():
    """Test dat een ontbrekende boom een lege lijst geeft."""
    assert analyze_components(None) == []


def test_rule_repr_shows_every_criterion():
    """Test dat de repr alle criteria toont, zodat regels onderscheidbaar blijven."""
    text = repr(ClassificationRule("footer", tags=["footer"], id_keywords=["footer"], roles=["contentinfo"]))
    assert "ids=('footer',)" in text
    assert "roles=('contentinfo',)" in text
    assert repr(ClassificationRule("a", roles=["main"])) != repr(ClassificationRule("a", id_keywords=["main"]))
