# src/snapshot_analyzer/tokens/quantizer.py
import logging
import re
from typing import Dict, Optional

from snapshot_analyzer.tokens.scales import (
    COLOR_SCALE,
    FONT_SIZE_SCALE,
    RADIUS_DEFAULT,
    RADIUS_SCALE,
    SPACING_SCALE,
)

logger = logging.getLogger(__name__)

_PX_PATTERN = re.compile(r'^\s*(\d+)(?:\.\d+)?px', re.IGNORECASE)
_RGB_PATTERN = re.compile(r'rgb\((\d+),\s*(\d+),\s*(\d+)\)')


def parse_px(value: Optional[str]) -> Optional[int]:
    """
    Leading integer pixel magnitude of a CSS length ("16px" -> 16, "8px 16px" -> 8).

    Fractions are truncated. Anything without a leading non-negative px number
    (auto, percentages, negative or non-finite values) returns None.
    """
    if not value:
        return None
    match = _PX_PATTERN.match(value)
    if not match:
        return None
    return int(match.group(1))


def nearest(scale: Dict[str, str], value: Optional[str]) -> Optional[str]:
    """
    Exact lookup first, then the scale entry closest in pixels.

    On equal distance the entry declared first wins, so with the ascending
    scales "10px" (between 8px and 12px) resolves to the 8px entry.
    """
    if not value:
        return None
    if value in scale:
        return scale[value]

    px = parse_px(value)
    if px is None:
        return None

    best_name = None
    best_distance = None
    for key, name in scale.items():
        key_px = parse_px(key)
        if key_px is None:
            continue
        distance = abs(key_px - px)
        if best_distance is None or distance < best_distance:
            best_name, best_distance = name, distance
    return best_name


def normalize_color(color: Optional[str]) -> str:
    """`rgb(r, g, b)` becomes lowercase `#rrggbb`; anything else is just lowercased."""
    if not color:
        return ''
    match = _RGB_PATTERN.search(color)
    if match:
        r, g, b = (min(int(c), 255) for c in match.groups())
        return f'#{r:02x}{g:02x}{b:02x}'
    return color.lower()


def map_color(color: Optional[str]) -> Optional[str]:
    """
    Named color for a raw value, or None.

    There is deliberately no nearest-color fallback: a color outside the
    scale yields no token.
    """
    if not color:
        return None
    if color in COLOR_SCALE:
        return COLOR_SCALE[color]
    return COLOR_SCALE.get(normalize_color(color))


def map_spacing(value: Optional[str]) -> Optional[str]:
    return nearest(SPACING_SCALE, value)


def map_font_size(size: Optional[str]) -> Optional[str]:
    return nearest(FONT_SIZE_SCALE, size)


def map_border_radius(radius: Optional[str]) -> Optional[str]:
    """Banded radius name; `0px` and missing values have none."""
    if not radius or radius == '0px':
        return None
    return RADIUS_SCALE.get(radius, RADIUS_DEFAULT)
