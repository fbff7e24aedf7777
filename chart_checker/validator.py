"""Validate the chart images embedded in a project's index.html.

Two tiers of errors:
  - Fatal: index.html missing, or not exactly one chart tag per expected
    chart. Raised as ChartCheckError before any per-image check runs.
  - Accumulated: everything else. Each violation is appended to the Report
    and validation carries on, so one run lists every defect.

Per chart tag, in order: alt, duplicate, known caption, src placeholder,
data-chart-src and its base64 PNG asset, loading, decoding, width, height.
A completeness check at the end names any expected chart never seen.
"""

from pathlib import Path

from chart_checker.core.assets import check_asset
from chart_checker.core.expectations import EXPECTED_CHARTS, PLACEHOLDER_SRC
from chart_checker.core.html_parser import read_chart_tags
from chart_checker.core.types import ChartCheckError, ChartTag, ExpectedChart, Report

INDEX_FILE = 'index.html'


def validate_project(root: Path) -> Report:
    """Run every check against root/index.html and return the Report."""
    html_path = root / INDEX_FILE
    if not html_path.is_file():
        raise ChartCheckError(f'{INDEX_FILE} not found at project root')

    try:
        tags = read_chart_tags(html_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ChartCheckError(f'{INDEX_FILE} could not be read: {exc}') from exc

    if len(tags) != len(EXPECTED_CHARTS):
        raise ChartCheckError(f'Expected {len(EXPECTED_CHARTS)} chart <img> tags, found {len(tags)}')

    report = Report(root=str(root), tag_count=len(tags))
    for tag in tags:
        _check_tag(tag, root, report)
    _check_complete(report)
    return report


def _check_tag(tag: ChartTag, root: Path, report: Report) -> None:
    alt = tag.alt
    if not alt:
        report.fail('Missing alt attribute on chart image.')
        return

    caption = alt.lower()
    if caption in report.seen:
        report.fail(f'Duplicate chart found for alt text "{alt}".')
        return

    expected = EXPECTED_CHARTS.get(caption)
    if expected is None:
        report.fail(f'Unexpected alt text "{alt}".')
        return

    # Seen even when its attribute checks fail
    report.add_chart(caption)
    failures = _check_attributes(tag, alt, expected, root)
    for message in failures:
        report.fail(message, caption)
    if failures:
        report.record_fail(caption)
    else:
        report.record_pass(caption)


def _check_attributes(tag: ChartTag, alt: str, expected: ExpectedChart, root: Path) -> list[str]:
    failures: list[str] = []
    label = f'Image with alt "{alt}"'

    if not tag.src:
        failures.append(f'{label} is missing src attribute.')
    elif tag.src != PLACEHOLDER_SRC:
        failures.append(f'{label} should use the transparent GIF placeholder as src.')

    if not tag.data_chart_src:
        failures.append(f'{label} should provide data-chart-src attribute.')
    else:
        data_path = tag.data_chart_src.removeprefix('./')
        if data_path != expected.data_path:
            failures.append(
                f'{label} should reference {expected.data_path} via data-chart-src '
                f'but points to {tag.data_chart_src}.'
            )
        else:
            failures.extend(check_asset(root, data_path))

    if tag.loading != 'lazy':
        failures.append(f'{label} should use loading="lazy".')

    if not tag.decoding:
        failures.append(f'{label} should set decoding="async".')
    elif tag.decoding.lower() != 'async':
        failures.append(f'{label} should set decoding="async" (found "{tag.decoding}").')

    if tag.width != expected.width:
        failures.append(f'{label} should declare width="{expected.width}" (found {_found(tag.width)}).')
    if tag.height != expected.height:
        failures.append(f'{label} should declare height="{expected.height}" (found {_found(tag.height)}).')

    return failures


def _found(value: str | None) -> str:
    return f'"{value}"' if value is not None else 'no attribute'


def _check_complete(report: Report) -> None:
    if len(report.seen) >= len(EXPECTED_CHARTS):
        return
    missing = [caption for caption in EXPECTED_CHARTS if caption not in report.seen]
    if missing:
        report.fail(f'Missing chart entries for: {", ".join(missing)}')
