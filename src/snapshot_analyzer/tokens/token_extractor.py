# src/snapshot_analyzer/tokens/token_extractor.py
import logging
from typing import Dict, Optional

from snapshot_analyzer.dom.core import SnapshotNode, MAX_DEPTH, walk
from snapshot_analyzer.model import DesignTokenPalette
from snapshot_analyzer.tokens.scales import TRANSPARENT

logger = logging.getLogger(__name__)


def extract_tokens(root: Optional[SnapshotNode], max_depth: int = MAX_DEPTH) -> DesignTokenPalette:
    """
    Collects the distinct raw style values of the tree into a palette.

    Each category is an insertion-ordered set (a dict with None values), so
    duplicates collapse and first-seen order is kept. Transparent backgrounds,
    `0px` radii and `none` shadows carry no design intent and are skipped.
    """
    colors: Dict[str, None] = {}
    font_sizes: Dict[str, None] = {}
    font_weights: Dict[str, None] = {}
    spacing: Dict[str, None] = {}
    radii: Dict[str, None] = {}
    shadows: Dict[str, None] = {}

    for node in walk(root, max_depth).nodes:
        style = node.style
        if not style:
            continue

        background = style.get('backgroundColor')
        if background and background != TRANSPARENT:
            colors[background] = None
        if style.get('color'):
            colors[style['color']] = None

        if style.get('fontSize'):
            font_sizes[style['fontSize']] = None
        if style.get('fontWeight'):
            font_weights[style['fontWeight']] = None

        for prop in ('padding', 'margin'):
            if style.get(prop):
                spacing[style[prop]] = None

        radius = style.get('borderRadius')
        if radius and radius != '0px':
            radii[radius] = None

        shadow = style.get('boxShadow')
        if shadow and shadow != 'none':
            shadows[shadow] = None

    palette = DesignTokenPalette(
        colors=list(colors),
        font_sizes=list(font_sizes),
        font_weights=list(font_weights),
        spacing=list(spacing),
        border_radii=list(radii),
        shadows=list(shadows),
    )
    logger.debug(
        "Extracted tokens: %d colors, %d font sizes, %d spacing values.",
        len(palette.colors), len(palette.font_sizes), len(palette.spacing)
    )
    return palette
