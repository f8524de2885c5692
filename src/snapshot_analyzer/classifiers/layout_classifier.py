# src/snapshot_analyzer/classifiers/layout_classifier.py
import logging
from typing import List, Optional

from snapshot_analyzer.dom.core import SnapshotNode, MAX_DEPTH, walk
from snapshot_analyzer.model import LayoutDescriptor, LayoutRecord

logger = logging.getLogger(__name__)


def classify_layout(node: Optional[SnapshotNode]) -> Optional[LayoutDescriptor]:
    """
    Reads `display` from the computed style and describes the layout.

    flex, grid and block/inline-block produce a descriptor; anything else
    (none, inline, contents, missing) returns None.
    """
    if node is None:
        return None

    style = node.style
    display = style.get('display')

    if display == 'flex':
        return LayoutDescriptor(
            type='flex',
            direction=style.get('flexDirection') or 'row',
            justify=style.get('justifyContent'),
            align=style.get('alignItems'),
            gap=style.get('gap'),
        )

    if display == 'grid':
        return LayoutDescriptor(
            type='grid',
            columns=style.get('gridTemplateColumns'),
            rows=style.get('gridTemplateRows'),
            gap=style.get('gap'),
        )

    if display in ('block', 'inline-block'):
        return LayoutDescriptor(
            type='block',
            width=style.get('width'),
            height=style.get('height'),
        )

    return None


def analyze_layouts(root: Optional[SnapshotNode], max_depth: int = MAX_DEPTH) -> List[LayoutRecord]:
    """Collects a LayoutRecord for every node with a recognised display mode."""
    layouts = []
    for node in walk(root, max_depth).nodes:
        layout = classify_layout(node)
        if layout is None:
            continue
        layouts.append(LayoutRecord(
            tag=node.tag,
            id=node.id,
            classes=list(node.classes),
            layout=layout,
            child_count=len(node.children),
        ))

    logger.debug("Detected %d layout containers.", len(layouts))
    return layouts
