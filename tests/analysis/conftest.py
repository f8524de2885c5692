# tests/analysis/conftest.py
import pytest

from snapshot_analyzer.dom.core import SnapshotNode
from snapshot_analyzer.model import AnalyzerSettings


def make_node(tag, classes=None, id=None, children=None, style=None, attributes=None, **kwargs):
    """Compacte helper om snapshot-nodes in tests op te bouwen."""
    return SnapshotNode(
        tag=tag,
        id=id,
        classes=classes or [],
        children=children or [],
        style=style or {},
        attributes=attributes or {},
        **kwargs
    )


def chain(depth, tag="div"):
    """Een lineaire boom van `depth + 1` nodes (root op diepte 0)."""
    node = make_node(tag, classes=[f"level-{depth}"])
    for level in range(depth - 1, -1, -1):
        node = make_node(tag, classes=[f"level-{level}"], children=[node])
    return node


@pytest.fixture
def button_row():
    """div.container met drie identieke button.btn.btn-primary kinderen."""
    return make_node("div", classes=["container"], children=[
        make_node("button", classes=["btn", "btn-primary"]) for _ in range(3)
    ])


@pytest.fixture
def landing_page():
    """Een kleine maar realistische pagina met header, nav, cards, form en footer."""
    return make_node("body", children=[
        make_node("header", id="site-header", style={"display": "flex", "backgroundColor": "rgb(255, 255, 255)"},
                  children=[
                      make_node("nav", classes=["navbar", "flex"], style={"display": "flex", "gap": "16px"},
                                children=[
                                    make_node("a", attributes={"href": "/"}),
                                    make_node("a", attributes={"href": "/pricing"}),
                                ]),
                  ]),
        make_node("main", children=[
            make_node("div", classes=["cards"], style={"display": "grid", "gridTemplateColumns": "1fr 1fr"},
                      children=[
                          make_node("div", classes=["card"], style={
                              "padding": "16px", "borderRadius": "8px",
                              "boxShadow": "0 1px 2px rgba(0, 0, 0, 0.05)",
                          }, children=[make_node("img"), make_node("h3"), make_node("p")])
                          for _ in range(2)
                      ]),
            make_node("form", id="signup", children=[
                make_node("input", classes=["input-email"], attributes={"type": "email"}),
                make_node("button", classes=["btn", "btn-secondary", "btn-lg"], style={
                    "backgroundColor": "rgb(59, 130, 246)", "color": "rgb(255, 255, 255)",
                    "fontSize": "16px", "fontWeight": "600", "padding": "8px 16px",
                }),
            ]),
        ]),
        make_node("footer", id="page-footer", style={"color": "#6b7280", "fontSize": "14px"},
                  children=[make_node("p")]),
    ])


@pytest.fixture
def settings():
    return AnalyzerSettings()
