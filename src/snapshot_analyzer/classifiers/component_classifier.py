# src/snapshot_analyzer/classifiers/component_classifier.py
import logging
import re
from typing import Dict, List, Optional, Sequence

from snapshot_analyzer.classifiers.rules import (
    COMPONENT_FALLBACK,
    COMPONENT_RULES,
    ClassificationRule,
    first_match,
    node_facts,
)
from snapshot_analyzer.dom.core import SnapshotNode, INTERACTIVE_TAGS, MAX_DEPTH, walk
from snapshot_analyzer.dom.signature import signature
from snapshot_analyzer.model import ComponentRecord

logger = logging.getLogger(__name__)


def classify(node: SnapshotNode, rules: Sequence[ClassificationRule] = COMPONENT_RULES) -> str:
    """Returns the semantic type of a node; `container` when no rule matches."""
    return first_match(rules, node_facts(node), COMPONENT_FALLBACK)


def derive_name(node: SnapshotNode) -> str:
    """id, else the first class stripped to alphanumerics, else `<tag>Component`."""
    if node.id:
        return node.id
    if node.classes:
        return re.sub(r'[^a-zA-Z0-9]', '', node.classes[0])
    return f"{node.tag}Component"


def interactive_index(nodes: List[SnapshotNode]) -> Dict[int, bool]:
    """
    Maps id(node) -> "this node or a descendant is interactive".

    `nodes` must be a pre-order listing, so walking it backwards sees every
    child before its parent and each flag is computed once.
    """
    index: Dict[int, bool] = {}
    for node in reversed(nodes):
        index[id(node)] = node.tag in INTERACTIVE_TAGS or any(
            index.get(id(child), False) for child in node.children
        )
    return index


def is_component_like(node: SnapshotNode, has_interactive: bool) -> bool:
    """Named (id or classes) and either has children or holds something interactive."""
    named = bool(node.id) or bool(node.classes)
    return named and (bool(node.children) or has_interactive)


def analyze_components(root: Optional[SnapshotNode], max_depth: int = MAX_DEPTH) -> List[ComponentRecord]:
    """
    Classifies every component-like node of the tree, in pre-order.

    Nodes failing the eligibility gate are skipped here; they may still show
    up as layouts or sections.
    """
    nodes = walk(root, max_depth).nodes
    interactive = interactive_index(nodes)

    components = []
    for node in nodes:
        has_interactive = interactive[id(node)]
        if not is_component_like(node, has_interactive):
            continue
        components.append(ComponentRecord(
            name=derive_name(node),
            tag=node.tag,
            id=node.id,
            classes=list(node.classes),
            signature=signature(node),
            child_count=len(node.children),
            has_interactive_elements=has_interactive,
            estimated_type=classify(node),
        ))

    logger.debug("Classified %d of %d nodes as components.", len(components), len(nodes))
    return components
