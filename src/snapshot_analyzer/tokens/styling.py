# src/snapshot_analyzer/tokens/styling.py
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from snapshot_analyzer.dom.core import SnapshotNode, MAX_DEPTH, walk
from snapshot_analyzer.model import DesignTokenPalette, StyleRecord
from snapshot_analyzer.tokens.quantizer import (
    map_border_radius,
    map_color,
    map_font_size,
    map_spacing,
)
from snapshot_analyzer.tokens.scales import FONT_WEIGHT_CLASSES

logger = logging.getLogger(__name__)

# Literal (property, value) -> utility class, in emission order.
_DISPLAY_CLASSES = {
    'flex': 'flex',
    'grid': 'grid',
    'block': 'block',
    'inline-block': 'inline-block',
    'none': 'hidden',
}
_FLEX_DIRECTION_CLASSES = {'column': 'flex-col', 'row': 'flex-row'}
_JUSTIFY_CLASSES = {
    'center': 'justify-center',
    'space-between': 'justify-between',
    'flex-start': 'justify-start',
    'flex-end': 'justify-end',
}
_ALIGN_CLASSES = {'center': 'items-center', 'flex-start': 'items-start', 'flex-end': 'items-end'}
_POSITION_CLASSES = {'absolute': 'absolute', 'relative': 'relative', 'fixed': 'fixed'}
_OPACITY_CLASSES = {'0.5': 'opacity-50', '0.75': 'opacity-75'}


def convert_to_utility_classes(style: Optional[Mapping[str, str]]) -> List[str]:
    """
    Translates one node's computed style into utility classes.

    Every lookup is optional: a property that is missing or has no named
    equivalent simply contributes nothing.
    """
    classes: List[str] = []
    if not style:
        return classes

    def add_literal(table: Dict[str, str], prop: str) -> None:
        name = table.get(style.get(prop, ''))
        if name:
            classes.append(name)

    def add_mapped(prefix: str, mapper: Callable[[Optional[str]], Optional[str]], prop: str) -> None:
        name = mapper(style.get(prop))
        if name:
            classes.append(f"{prefix}-{name}")

    add_literal(_DISPLAY_CLASSES, 'display')
    add_literal(_FLEX_DIRECTION_CLASSES, 'flexDirection')
    add_literal(_JUSTIFY_CLASSES, 'justifyContent')
    add_literal(_ALIGN_CLASSES, 'alignItems')

    add_mapped('gap', map_spacing, 'gap')
    add_mapped('p', map_spacing, 'padding')
    add_mapped('m', map_spacing, 'margin')

    if style.get('width') == '100%':
        classes.append('w-full')
    if style.get('height') == '100%':
        classes.append('h-full')

    add_mapped('bg', map_color, 'backgroundColor')
    add_mapped('text', map_color, 'color')
    add_mapped('text', map_font_size, 'fontSize')
    add_literal(FONT_WEIGHT_CLASSES, 'fontWeight')
    add_mapped('rounded', map_border_radius, 'borderRadius')

    if style.get('boxShadow') and style['boxShadow'] != 'none':
        classes.append('shadow-md')

    add_literal(_POSITION_CLASSES, 'position')
    add_literal(_OPACITY_CLASSES, 'opacity')
    return classes


def selector_for(node: SnapshotNode) -> str:
    if node.id:
        return f"#{node.id}"
    if node.classes:
        return f".{node.classes[0]}"
    return node.tag


def extract_styles(root: Optional[SnapshotNode], max_depth: int = MAX_DEPTH) -> List[StyleRecord]:
    """One StyleRecord per node that carries computed style, in pre-order."""
    return [
        StyleRecord(
            selector=selector_for(node),
            style=dict(node.style),
            utility_classes=convert_to_utility_classes(node.style),
        )
        for node in walk(root, max_depth).nodes
        if node.style
    ]


def build_styling_config(palette: Optional[DesignTokenPalette]) -> Dict[str, Any]:
    """
    Name -> raw value tables for the utility-class theme configuration.

    When several raw values quantize to the same name, the first one in the
    palette keeps it.
    """
    tables: Dict[str, Dict[str, str]] = {
        'colors': {},
        'fontSize': {},
        'spacing': {},
        'borderRadius': {},
    }
    if palette is None:
        return {'theme': {'extend': tables}}

    sources = (
        ('colors', palette.colors, map_color),
        ('fontSize', palette.font_sizes, map_font_size),
        ('spacing', palette.spacing, map_spacing),
        ('borderRadius', palette.border_radii, map_border_radius),
    )
    for table, values, mapper in sources:
        for raw in values:
            name = mapper(raw)
            if name and name not in tables[table]:
                tables[table][name] = raw

    logger.debug("Styling config built with %d colors.", len(tables['colors']))
    return {'theme': {'extend': tables}}
