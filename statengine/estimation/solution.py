"""
Parameter estimation solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from statengine.core.result import Result

if TYPE_CHECKING:
    from statengine.estimation.design import EstimationDesign


@dataclass(frozen=True)
class EstimationParams:
    """
    Parameter payload for closed-form estimation.

    mle and mom map parameter name to estimate, in the family's parameter
    order. log_likelihood is evaluated at the MLE.
    """
    distribution: str
    mle: dict[str, float]
    mom: dict[str, float]
    comparison: str
    log_likelihood: float
    n: int


@dataclass
class EstimationSolution:
    """
    User-facing estimation results.

    Wraps Result[EstimationParams] and provides convenient accessors.
    """
    _result: Result[EstimationParams]
    _design: 'EstimationDesign'

    @property
    def distribution(self) -> str:
        return self._result.params.distribution

    @property
    def mle(self) -> dict[str, float]:
        """Maximum-likelihood estimates (copy)."""
        return dict(self._result.params.mle)

    @property
    def mom(self) -> dict[str, float]:
        """Method-of-moments estimates (copy)."""
        return dict(self._result.params.mom)

    @property
    def comparison(self) -> str:
        return self._result.params.comparison

    @property
    def log_likelihood(self) -> float:
        return self._result.params.log_likelihood

    @property
    def n(self) -> int:
        return self._result.params.n

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
        lines = [
            "",
            f"\tParameter estimates: {self.distribution} distribution",
            "",
            f"n = {self.n}, axis = {self._design.axis}",
            "",
            f"{'':<10s}{'MLE':>14s}{'MoM':>14s}",
        ]
        mom = self._result.params.mom
        for name, value in self._result.params.mle.items():
            lines.append(f"{name:<10s}{value:14.6g}{mom[name]:14.6g}")
        lines.append("")
        lines.append(f"log-likelihood at MLE: {self.log_likelihood:.6g}")
        lines.append(self.comparison)
        return "\n".join(lines)

    def __repr__(self) -> str:
        est = ", ".join(f"{k}={v:.4g}" for k, v in self._result.params.mle.items())
        return f"EstimationSolution(distribution={self.distribution!r}, {est})"
