# src/snapshot_analyzer/dom/signature.py
import logging
from typing import Dict, List, Optional

from snapshot_analyzer.dom.core import SnapshotNode, walk, MAX_DEPTH
from snapshot_analyzer.model import NodeRef, PatternGroup

logger = logging.getLogger(__name__)


def signature(node: Optional[SnapshotNode]) -> str:
    """
    Coarse structural fingerprint: `tag:class.list:childCount`.

    Only the tag, the class list (order as given) and the immediate child count
    take part, so repeated cards with different text share one signature.
    """
    if node is None:
        return ""
    return f"{node.tag}:{'.'.join(node.classes)}:{len(node.children)}"


def detect_patterns(
        root: Optional[SnapshotNode],
        max_examples: int = 3,
        max_depth: int = MAX_DEPTH
) -> Dict[str, PatternGroup]:
    """
    Groups every node of the tree by signature and keeps the groups seen more than once.

    Args:
        root: Snapshot tree to scan.
        max_examples: How many occurrences to keep per group (first in pre-order).
        max_depth: Depth ceiling for the walk.

    Returns:
        Dict[str, PatternGroup]: Repeated signatures in order of first occurrence.
    """
    groups: Dict[str, List[SnapshotNode]] = {}
    for node in walk(root, max_depth).nodes:
        groups.setdefault(signature(node), []).append(node)

    patterns = {}
    for sig, nodes in groups.items():
        if len(nodes) < 2:
            continue
        patterns[sig] = PatternGroup(
            count=len(nodes),
            examples=[NodeRef(tag=n.tag, id=n.id, classes=list(n.classes)) for n in nodes[:max_examples]]
        )

    logger.debug("Found %d repeated patterns across %d signatures.", len(patterns), len(groups))
    return patterns
