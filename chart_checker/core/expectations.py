"""Fixed expectations for the three charts embedded in index.html.

The table is keyed by the lower-cased alt text of each chart image. It is
read-only; nothing in the tool is allowed to add or change entries.
"""

from types import MappingProxyType

from chart_checker.core.types import ExpectedChart

# 1x1 transparent GIF shown until the lazy loader swaps in the real chart
PLACEHOLDER_SRC = 'data:image/gif;base64,R0lGODlhAQABAIAAAAAAAP///ywAAAAAAQABAAACAUwAOw=='

PNG_SIGNATURE = bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A])

_CHARTS = [
    ExpectedChart(
        caption='net per deal vs commission',
        data_path='assets/net-per-deal.b64',
        width='1832',
        height='990',
    ),
    ExpectedChart(
        caption='break even deals per month',
        data_path='assets/break-even.b64',
        width='1497',
        height='1036',
    ),
    ExpectedChart(
        caption='required commission to net 20%',
        data_path='assets/required-commission.b64',
        width='1517',
        height='990',
    ),
]

EXPECTED_CHARTS: MappingProxyType[str, ExpectedChart] = MappingProxyType({c.caption: c for c in _CHARTS})

