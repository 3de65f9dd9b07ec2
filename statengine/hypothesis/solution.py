"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and renders an htest-style report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from statengine.core.result import Result
from statengine.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from statengine.hypothesis.design import HypothesisDesign


@dataclass
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams]. The common fields are properties here; the
    per-kind variant fields live on `params` (ZTestParams, TTestParams,
    TwoSampleTTestParams, ChiSquareGOFParams or NormalityParams), selected
    by `test_type`.
    """
    _result: Result[HTestParams]
    _design: 'HypothesisDesign | None'

    @property
    def params(self) -> HTestParams:
        """The tagged per-kind payload."""
        return self._result.params

    @property
    def test_type(self) -> str:
        return self._result.params.test_type

    @property
    def method(self) -> str:
        return self._result.params.method

    # --- Common fields ---

    @property
    def statistic(self) -> float:
        return self._result.params.statistic

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def critical_value(self) -> float:
        return self._result.params.critical_value

    @property
    def df(self) -> float | None:
        return self._result.params.df

    @property
    def sample_size(self) -> int:
        return self._result.params.sample_size

    @property
    def sample_mean(self) -> float | None:
        return self._result.params.sample_mean

    @property
    def sample_sd(self) -> float | None:
        return self._result.params.sample_sd

    @property
    def confidence_interval(self) -> tuple[float, float] | None:
        return self._result.params.confidence_interval

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def significant(self) -> bool:
        """True when p_value < alpha."""
        return self._result.params.significant

    @property
    def conclusion(self) -> str:
        return self._result.params.conclusion

    @property
    def interpretation(self) -> str:
        return self._result.params.interpretation

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

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as an htest-style report.

        Produces output like:
            One Sample t-test

        data:  sample (y)
        t = 2.2345, df = 9, p-value = 0.05221
        critical value = 2.2622 (alpha = 0.05)
        95 percent confidence interval:
         4.978  7.022
        conclusion: accept null hypothesis
        """
        p = self._result.params
        lines = [f"\t{p.method}", ""]
        if self._design is not None:
            lines.append(f"data:  {self._design.data_name}")

        parts = [f"{_STATISTIC_NAMES[p.test_type]} = {p.statistic:.5g}"]
        if p.df is not None:
            parts.append(f"df = {p.df:.5g}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))
        lines.append(f"critical value = {p.critical_value:.5g} (alpha = {p.alpha:g})")

        if p.confidence_interval is not None:
            pct = (1.0 - p.alpha) * 100.0
            lines.append(f"{pct:g} percent confidence interval:")
            lo, hi = p.confidence_interval
            lines.append(f" {lo:.7g}  {hi:.7g}")

        lines.append(f"conclusion: {p.conclusion}")
        lines.append(p.interpretation)
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(test_type={p.test_type!r}, "
            f"statistic={p.statistic:.4g}, p_value={p.p_value:.4g})"
        )


_STATISTIC_NAMES = {
    "z_test": "z",
    "t_test": "t",
    "two_sample_t_test": "t",
    "chisq_gof": "X-squared",
    "normality": "|z_skew| + |z_kurt|",
}


def _format_pvalue(p: float) -> str:
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
