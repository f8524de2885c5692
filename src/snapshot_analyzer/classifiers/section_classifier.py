# src/snapshot_analyzer/classifiers/section_classifier.py
import logging
from typing import List, NamedTuple, Optional

from snapshot_analyzer.classifiers.rules import (
    SECTION_FALLBACK,
    SECTION_ROLES,
    SECTION_RULES,
    SECTION_TAGS,
    first_match,
    node_facts,
)
from snapshot_analyzer.dom.core import SnapshotNode, walk
from snapshot_analyzer.model import SectionRecord

logger = logging.getLogger(__name__)

# Landmarks sit near the top of a page; the capture depth is not needed here.
SECTION_MAX_DEPTH = 10


def is_section(node: SnapshotNode) -> bool:
    """Landmark by tag, or by an equivalent ARIA role."""
    if node.tag in SECTION_TAGS:
        return True
    return node.attributes.get('role', '').lower() in SECTION_ROLES


def section_purpose(node: SnapshotNode) -> str:
    return first_match(SECTION_RULES, node_facts(node), SECTION_FALLBACK)


class SectionScan(NamedTuple):
    sections: List[SectionRecord]
    truncated: bool


def scan_sections(root: Optional[SnapshotNode], max_depth: int = SECTION_MAX_DEPTH) -> SectionScan:
    """Section records plus whether the section ceiling cut off part of the tree."""
    traversal = walk(root, max_depth)
    sections = []
    for node in traversal.nodes:
        if not is_section(node):
            continue
        sections.append(SectionRecord(
            tag=node.tag,
            id=node.id,
            classes=list(node.classes),
            rect=node.rect,
            child_count=len(node.children),
            purpose=section_purpose(node),
        ))

    logger.debug("Identified %d page sections.", len(sections))
    return SectionScan(sections, traversal.truncated)


def identify_sections(root: Optional[SnapshotNode], max_depth: int = SECTION_MAX_DEPTH) -> List[SectionRecord]:
    return scan_sections(root, max_depth).sections
