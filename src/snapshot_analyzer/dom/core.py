# src/snapshot_analyzer/dom/core.py
import logging
from typing import Dict, Any, List, Optional, NamedTuple, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

# Same ceiling the capture collaborator applies when it serialises the page.
MAX_DEPTH = 20

INTERACTIVE_TAGS = ('button', 'a', 'input', 'select', 'textarea')


class Rect(BaseModel):
    """Rounded bounding box of a captured element."""
    model_config = ConfigDict(frozen=True)

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0

    @field_validator('*', mode='before')
    @classmethod
    def clamp_non_negative(cls, v: Any) -> int:
        """Coerces geometry to non-negative integers; unparsable values become 0."""
        try:
            value = int(round(float(v)))
        except (TypeError, ValueError, OverflowError):
            return 0
        return max(value, 0)


class SnapshotNode(BaseModel):
    """
    Immutable data model for one element of a captured page snapshot.

    Accepts the capture format directly (camelCase keys, `styles` instead of
    `style`), so a raw JSON snapshot can be validated without remapping.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')

    tag: str
    id: Optional[str] = None
    classes: List[str] = Field(default_factory=list)
    attributes: Dict[str, str] = Field(default_factory=dict)
    text: Optional[str] = None
    rect: Rect = Field(default_factory=Rect)
    style: Dict[str, str] = Field(default_factory=dict, alias='styles')
    is_visible: bool = Field(default=True, alias='isVisible')
    is_interactive: bool = Field(default=False, alias='isInteractive')
    children: List['SnapshotNode'] = Field(default_factory=list)

    @field_validator('tag', mode='before')
    @classmethod
    def lower_tag(cls, v: Any) -> str:
        return str(v or '').lower()

    @field_validator('id', mode='before')
    @classmethod
    def empty_id_is_none(cls, v: Any) -> Optional[str]:
        return str(v) if v else None

    @field_validator('classes', mode='before')
    @classmethod
    def split_classes(cls, v: Any) -> List[str]:
        """Accepts a class list or the raw `class` attribute string."""
        if not v:
            return []
        if isinstance(v, str):
            return v.split()
        return [str(c) for c in v if c]

    @field_validator('attributes', 'style', mode='before')
    @classmethod
    def stringify_values(cls, v: Any) -> Dict[str, str]:
        # The capture emits booleans (disabled, readonly) and undefined entries.
        if not isinstance(v, dict):
            return {}
        return {str(k): str(val) for k, val in v.items() if val is not None}

    @property
    def child_count(self) -> int:
        return len(self.children)


class TraversalResult(NamedTuple):
    """Nodes visited by a walk, in pre-order, and whether any branch was cut."""
    nodes: List[SnapshotNode]
    truncated: bool


def walk(root: Optional[SnapshotNode], max_depth: int = MAX_DEPTH) -> TraversalResult:
    """
    Visits every node of the tree exactly once in pre-order.

    Uses an explicit stack instead of recursion. A node at `max_depth` is still
    visited, but its children are not; `truncated` reports whether that happened.
    Nodes are tracked by identity, so a node object placed under several parents
    is visited at its first position only.
    """
    if root is None:
        return TraversalResult([], False)

    nodes: List[SnapshotNode] = []
    seen: Set[int] = set()
    truncated = False
    stack = [(root, 0)]

    while stack:
        node, depth = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        nodes.append(node)

        if not node.children:
            continue
        if depth >= max_depth:
            truncated = True
            continue

        # Reverse push keeps siblings in document order.
        for child in reversed(node.children):
            stack.append((child, depth + 1))

    logger.debug("Walk visited %d nodes (truncated=%s).", len(nodes), truncated)
    return TraversalResult(nodes, truncated)


def has_interactive_descendant(node: Optional[SnapshotNode], max_depth: int = MAX_DEPTH) -> bool:
    """True if the node itself or anything below it is an interactive tag."""
    return any(n.tag in INTERACTIVE_TAGS for n in walk(node, max_depth).nodes)
