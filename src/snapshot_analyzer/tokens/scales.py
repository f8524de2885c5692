# src/snapshot_analyzer/tokens/scales.py
"""
Fixed named scales used to turn raw computed-style values into token names.

The names follow the utility-first CSS vocabulary the styling emitter writes
out (`bg-blue-500`, `p-4`, `text-lg`, `rounded-md`). Pixel scales are declared
in ascending order; that order is also the tie-break order for nearest-value
matching, so do not reorder them.
"""
from typing import Dict

COLOR_SCALE: Dict[str, str] = {
    '#000000': 'black',
    '#ffffff': 'white',
    '#f3f4f6': 'gray-100',
    '#e5e7eb': 'gray-200',
    '#d1d5db': 'gray-300',
    '#9ca3af': 'gray-400',
    '#6b7280': 'gray-500',
    '#4b5563': 'gray-600',
    '#374151': 'gray-700',
    '#1f2937': 'gray-800',
    '#111827': 'gray-900',
    '#3b82f6': 'blue-500',
    '#2563eb': 'blue-600',
    '#1d4ed8': 'blue-700',
    '#ef4444': 'red-500',
    '#dc2626': 'red-600',
    '#b91c1c': 'red-700',
    '#10b981': 'green-500',
    '#059669': 'green-600',
    '#047857': 'green-700',
    '#f59e0b': 'amber-500',
    '#d97706': 'amber-600',
    '#b45309': 'amber-700',
}

SPACING_SCALE: Dict[str, str] = {
    '0px': '0',
    '4px': '1',
    '8px': '2',
    '12px': '3',
    '16px': '4',
    '20px': '5',
    '24px': '6',
    '28px': '7',
    '32px': '8',
    '36px': '9',
    '40px': '10',
    '44px': '11',
    '48px': '12',
    '64px': '16',
    '80px': '20',
    '96px': '24',
}

FONT_SIZE_SCALE: Dict[str, str] = {
    '12px': 'xs',
    '14px': 'sm',
    '16px': 'base',
    '18px': 'lg',
    '20px': 'xl',
    '24px': '2xl',
    '30px': '3xl',
    '36px': '4xl',
    '48px': '5xl',
}

# Exact values only; any other non-zero radius falls back to RADIUS_DEFAULT.
RADIUS_SCALE: Dict[str, str] = {
    '4px': 'sm',
    '6px': 'md',
    '8px': 'md',
    '12px': 'lg',
    '16px': 'xl',
    '9999px': 'full',
}
RADIUS_DEFAULT = 'md'

FONT_WEIGHT_CLASSES: Dict[str, str] = {
    'bold': 'font-bold',
    '700': 'font-bold',
    '600': 'font-semibold',
    '500': 'font-medium',
}

# Computed-style value for a fully transparent background.
TRANSPARENT = 'rgba(0, 0, 0, 0)'
