"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from statengine.core.result import Result
from statengine.core.sample import validate_axis

if TYPE_CHECKING:
    from statengine.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class AxisSummary:
    """Univariate statistics of one coordinate."""
    mean: float
    median: float
    sd: float
    variance: float
    minimum: float
    maximum: float
    skewness: float
    kurtosis: float


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    sd and variance are Bessel-corrected (n - 1); skewness and kurtosis are
    the population-moment forms (kurtosis is excess kurtosis).
    """
    n: int
    x: AxisSummary
    y: AxisSummary
    correlation: float


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._result.params.n

    @property
    def x(self) -> AxisSummary:
        """Statistics of the x coordinate."""
        return self._result.params.x

    @property
    def y(self) -> AxisSummary:
        """Statistics of the y coordinate."""
        return self._result.params.y

    def axis(self, axis: str) -> AxisSummary:
        """Statistics of the named coordinate ('x' or 'y')."""
        return self.x if validate_axis(axis) == 'x' else self.y

    @property
    def correlation(self) -> float:
        """Pearson correlation between x and y."""
        return self._result.params.correlation

    @property
    def correlation_strength(self) -> str:
        """Verbal label for the correlation, e.g. 'Strong positive correlation'."""
        return self._result.info['correlation_strength']

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Two-column table of the per-axis statistics plus the correlation."""
        rows = [
            ("Count", float(self.n), float(self.n)),
            ("Mean", self.x.mean, self.y.mean),
            ("Median", self.x.median, self.y.median),
            ("Std. Dev.", self.x.sd, self.y.sd),
            ("Min.", self.x.minimum, self.y.minimum),
            ("Max.", self.x.maximum, self.y.maximum),
            ("Skewness", self.x.skewness, self.y.skewness),
            ("Kurtosis", self.x.kurtosis, self.y.kurtosis),
        ]
        label_width = max(len(r[0]) for r in rows)
        lines = [" " * (label_width + 2) + f"{'x':>12s}  {'y':>12s}"]
        for label, xv, yv in rows:
            lines.append(f"{label.ljust(label_width)}  {xv:12.6g}  {yv:12.6g}")
        lines.append("")
        lines.append(
            f"Correlation: {self.correlation:.4f} ({self.correlation_strength})"
        )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescriptiveSolution(n={self.n}, "
            f"correlation={self.correlation:.4g})"
        )
