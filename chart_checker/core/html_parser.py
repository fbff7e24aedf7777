"""Regex-based scanner for chart images in index.html.

Finds every <figure> whose first child is an <img class="chart"> and reads
the handful of attributes the validator cares about.
Does NOT attempt to fully parse HTML — the page is generated locally and
regex is sufficient.
"""

import re
from pathlib import Path

from chart_checker.core.types import ChartTag

CHART_TAG_PATTERN = re.compile(r'<figure>\s*<img[^>]*class="chart"[^>]*>', re.IGNORECASE)

# Attribute name -> ChartTag field
_ATTRIBUTES = {
    'alt': 'alt',
    'src': 'src',
    'data-chart-src': 'data_chart_src',
    'loading': 'loading',
    'decoding': 'decoding',
    'width': 'width',
    'height': 'height',
}


def read_chart_tags(path: Path) -> list[ChartTag]:
    """Scan an HTML file from disk."""
    return find_chart_tags(path.read_text(encoding='utf-8'))


def find_chart_tags(html: str) -> list[ChartTag]:
    """Return one ChartTag per chart fragment, in document order."""
    return [parse_chart_tag(m.group(0)) for m in CHART_TAG_PATTERN.finditer(html)]


def parse_chart_tag(markup: str) -> ChartTag:
    tag = ChartTag(raw=markup)
    for name, attr in _ATTRIBUTES.items():
        setattr(tag, attr, attribute_value(markup, name))
    return tag


def attribute_value(markup: str, name: str) -> str | None:
    """Return the first name="value" or name='value' in markup, or None.

    The name is matched case-insensitively and must start the attribute, so
    `src` is never read out of `data-chart-src`. Empty values count as absent.
    """
    m = re.search(rf'(?<![\w-]){re.escape(name)}=["\']([^"\']+)["\']', markup, re.IGNORECASE)
    return m.group(1) if m else None
