# src/snapshot_analyzer/dom/builder.py
import logging
import re
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError

from snapshot_analyzer.dom.core import SnapshotNode, MAX_DEPTH

logger = logging.getLogger(__name__)

# The capture keeps at most this many children per element.
MAX_CHILDREN = 50

# Tags the capture marks as interactive (labels included, unlike the classifier's set).
CAPTURE_INTERACTIVE_TAGS = ('button', 'a', 'input', 'select', 'textarea', 'label')

_HTML_ATTRIBUTES = ('href', 'src', 'alt', 'title', 'type', 'placeholder', 'name', 'value', 'role')


class SnapshotError(ValueError):
    """Raised when the input cannot be read as a snapshot at all."""


def _camel_case(prop: str) -> str:
    """CSS property name to computed-style key: 'background-color' -> 'backgroundColor'."""
    return re.sub(r'-([a-z])', lambda m: m.group(1).upper(), prop.strip().lower())


def parse_inline_style(raw: Optional[str]) -> Dict[str, str]:
    """Splits a `style` attribute into a camelCase property map; later declarations win."""
    style: Dict[str, str] = {}
    if not raw:
        return style
    for declaration in raw.split(';'):
        if ':' not in declaration:
            continue
        prop, value = declaration.split(':', 1)
        prop, value = prop.strip(), value.replace('!important', '').strip()
        if prop and value:
            style[_camel_case(prop)] = value
    return style


class SnapshotBuilder:
    """
    Builds SnapshotNode trees from the two inputs this package understands:
    the JSON snapshot written by the capture step, and plain static HTML.
    """

    def __init__(self, max_depth: int = MAX_DEPTH, max_children: int = MAX_CHILDREN):
        self.max_depth = max_depth
        self.max_children = max_children

    def from_dict(self, data: Any) -> Optional[SnapshotNode]:
        """
        Validates a captured snapshot dict into a SnapshotNode tree.

        Children past `max_children` and levels past `max_depth` are dropped
        before validation, the same limits the capture applies.

        Raises:
            SnapshotError: if `data` is not a mapping or fails validation.
        """
        if data is None:
            return None
        if not isinstance(data, dict):
            raise SnapshotError(f"Snapshot root must be an object, got {type(data).__name__}")

        pruned = self._prune(data, depth=0)
        try:
            return SnapshotNode.model_validate(pruned)
        except ValidationError as e:
            raise SnapshotError(f"Invalid snapshot: {e.error_count()} validation errors") from e

    def _prune(self, data: Dict[str, Any], depth: int) -> Dict[str, Any]:
        children = data.get('children') or []
        if not isinstance(children, list):
            children = []

        if depth >= self.max_depth:
            kept = []
            if children:
                logger.debug("Dropping %d children below depth %d.", len(children), depth)
        else:
            kept = [
                self._prune(child, depth + 1)
                for child in children[:self.max_children]
                if isinstance(child, dict)
            ]
        return {**data, 'children': kept}

    def from_html(self, html: str) -> Optional[SnapshotNode]:
        """
        Builds a snapshot from static HTML.

        Without a browser there is no layout, so geometry stays zero and the
        style map only holds what inline `style` attributes declare.
        """
        if not html or not html.strip():
            return None

        clean_html = html.replace('\ufeff', '').strip()
        soup = BeautifulSoup(clean_html, 'html.parser')

        root = soup.find('html') or soup.find(True)
        if root is None:
            return None
        return self._build_tree(root, depth=0)

    def _build_tree(self, tag: Tag, depth: int) -> SnapshotNode:
        children: List[SnapshotNode] = []
        if depth < self.max_depth:
            element_children = [c for c in tag.children if isinstance(c, Tag)]
            for child in element_children[:self.max_children]:
                children.append(self._build_tree(child, depth + 1))

        classes = tag.get('class') or []
        if isinstance(classes, str):
            classes = classes.split()

        attributes = {}
        for name in _HTML_ATTRIBUTES:
            value = tag.get(name)
            if value:
                attributes[name] = " ".join(value) if isinstance(value, list) else value
        if tag.has_attr('disabled'):
            attributes['disabled'] = 'true'

        return SnapshotNode(
            tag=tag.name,
            id=tag.get('id'),
            classes=classes,
            attributes=attributes,
            text=tag.get_text(" ", strip=True)[:500] or None,
            style=parse_inline_style(tag.get('style')),
            is_interactive=tag.name.lower() in CAPTURE_INTERACTIVE_TAGS,
            children=children,
        )
