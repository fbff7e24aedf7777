"""Fixtures that lay out a project root with index.html and base64 chart assets."""

import base64
import io
import os
from collections.abc import Callable
from pathlib import Path

import pytest
from chart_checker.core.expectations import EXPECTED_CHARTS, PLACEHOLDER_SRC
from PIL import Image

CAPTIONS = {
    'net per deal vs commission': 'Net per deal vs commission',
    'break even deals per month': 'Break even deals per month',
    'required commission to net 20%': 'Required commission to net 20%',
}


def png_bytes(width: int = 4, height: int = 3) -> bytes:
    """Encode a small real PNG."""
    buf = io.BytesIO()
    Image.new('RGB', (width, height), (37, 99, 235)).save(buf, format='PNG')
    return buf.getvalue()


def png_b64(width: int = 4, height: int = 3) -> str:
    """Base64 text wrapped at 76 columns, the way the build writes it."""
    encoded = base64.b64encode(png_bytes(width, height)).decode('ascii')
    return '\n'.join(encoded[i : i + 76] for i in range(0, len(encoded), 76)) + '\n'


# Empty attribute values read as absent, so rendering skips them
DROP = ''


def chart_img(
    alt: str,
    *,
    src: str | None = PLACEHOLDER_SRC,
    data_chart_src: str | None = None,
    loading: str | None = 'lazy',
    decoding: str | None = 'async',
    width: str | None = None,
    height: str | None = None,
) -> str:
    """Render one <figure><img class="chart"></figure>.

    src, loading and decoding are dropped when None. data_chart_src, width and
    height default to the expected values for alt when None; pass DROP to
    leave them out.
    """
    expected = EXPECTED_CHARTS.get(alt.lower())
    if expected is not None:
        data_chart_src = data_chart_src if data_chart_src is not None else expected.data_path
        width = width if width is not None else expected.width
        height = height if height is not None else expected.height
    attrs = [
        ('class', 'chart'),
        ('src', src),
        ('data-chart-src', data_chart_src),
        ('alt', alt),
        ('loading', loading),
        ('decoding', decoding),
        ('width', width),
        ('height', height),
    ]
    rendered = ' '.join(f'{k}="{v}"' for k, v in attrs if v)
    return f'<figure>\n  <img {rendered} />\n  <figcaption>{alt}</figcaption>\n</figure>'


def page(*figures: str) -> str:
    body = '\n'.join(figures)
    return f'<!doctype html>\n<html>\n<head><meta charset="utf-8"></head>\n<body>\n{body}\n</body>\n</html>\n'


def valid_figures() -> list[str]:
    return [chart_img(alt) for alt in CAPTIONS.values()]


@pytest.fixture(autouse=True)
def _environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep variables set by load_env inside the test that set them."""
    monkeypatch.setattr(os, 'environ', os.environ.copy())


@pytest.fixture
def write_assets() -> Callable[[Path], None]:
    def _write(root: Path) -> None:
        for chart in EXPECTED_CHARTS.values():
            path = root / chart.data_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(png_b64(), encoding='utf-8')

    return _write


@pytest.fixture
def project(tmp_path: Path, write_assets: Callable[[Path], None]) -> Path:
    """A project root that passes every check."""
    write_assets(tmp_path)
    (tmp_path / 'index.html').write_text(page(*valid_figures()), encoding='utf-8')
    return tmp_path
