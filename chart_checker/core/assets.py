"""Base64 chart asset checks.

Each chart's real PNG lives next to index.html as whitespace-tolerant base64
text. Only the 8-byte PNG signature of the decoded bytes is verified.
"""

import base64
import re
from pathlib import Path

from chart_checker.core.expectations import PNG_SIGNATURE

_WHITESPACE = re.compile(r'\s+')


def check_asset(root: Path, rel_path: str) -> list[str]:
    """Validate one base64 asset and return its failures (empty when fine)."""
    path = root / rel_path
    if not path.is_file():
        return [f'Referenced base64 asset missing on disk: {rel_path}']

    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        return [f'Base64 asset {rel_path} could not be read: {exc}']

    raw = _WHITESPACE.sub('', text)
    if not raw:
        return [f'Base64 asset {rel_path} is empty.']

    try:
        data = base64.b64decode(raw, validate=True)
    except ValueError as exc:  # binascii.Error, or non-ASCII input
        return [f'Base64 asset {rel_path} is not valid base64: {exc}']

    if len(data) < len(PNG_SIGNATURE):
        return [f'Decoded asset {rel_path} is unexpectedly small.']
    if not is_png(data):
        return [f'Decoded asset {rel_path} does not appear to be a PNG.']
    return []


def is_png(data: bytes) -> bool:
    return data[: len(PNG_SIGNATURE)] == PNG_SIGNATURE
