"""Report builder — text and JSON output for chart-checker results."""

import json
from typing import Any

from chart_checker.core.types import Report

FAIL_MARK = '✖'
PASS_MARK = '✔'


def format_failure(message: str) -> str:
    return f'{FAIL_MARK} {message}'


def format_text(report: Report) -> str:
    """Format the verdict as the lines printed on the console."""
    if report.ok:
        return f'{PASS_MARK} Chart assets verified successfully.'
    lines = [format_failure('Chart asset verification failed:')]
    for failure in report.failures:
        lines.append(f'  - {failure}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'root': report.root,
        'charts_found': report.tag_count,
    }

    obj['charts'] = []
    for caption, failures in report.charts.items():
        obj['charts'].append(
            {
                'caption': caption,
                'pass': not failures,
                'failures': failures,
            }
        )

    obj['failures'] = report.failures
    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
        'ok': report.ok,
    }
    return json.dumps(obj, indent=2, ensure_ascii=False)
