"""Shared types for chart-checker: ExpectedChart, ChartTag, Report, ChartCheckError."""

from __future__ import annotations

from dataclasses import dataclass, field


class ChartCheckError(Exception):
    """Structural failure that makes per-image checks meaningless.

    Raised for a missing index.html or a wrong number of chart tags.
    """


@dataclass(frozen=True)
class ExpectedChart:
    """One row of the fixed expectation table."""

    caption: str  # normalized (lower-case) alt text
    data_path: str  # relative path of the base64 asset
    width: str
    height: str


@dataclass
class ChartTag:
    """A <figure><img class="chart" ...> fragment found in index.html."""

    raw: str
    alt: str | None = None
    src: str | None = None
    data_chart_src: str | None = None
    loading: str | None = None
    decoding: str | None = None
    width: str | None = None
    height: str | None = None


@dataclass
class Report:
    """Accumulates diagnostics from one validation pass."""

    root: str = ''
    tag_count: int = 0
    failures: list[str] = field(default_factory=list)
    seen: set[str] = field(default_factory=set)
    charts: dict[str, list[str]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures

    def fail(self, message: str, caption: str | None = None) -> None:
        """Append a failure, attributing it to a chart when the caption is known."""
        self.failures.append(message)
        if caption is not None:
            self.charts.setdefault(caption, []).append(message)

    def add_chart(self, caption: str) -> None:
        """Register a recognized caption so per-chart results can be reported."""
        self.seen.add(caption)
        self.charts.setdefault(caption, [])

    def record_pass(self, caption: str) -> None:
        self.pass_count += 1

    def record_fail(self, caption: str) -> None:
        self.fail_count += 1
