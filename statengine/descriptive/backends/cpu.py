"""
CPU reference backend for descriptive statistics.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.descriptive import _moments
from statengine.descriptive.design import DescriptiveDesign
from statengine.descriptive.solution import AxisSummary, DescriptiveParams


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: DescriptiveDesign) -> Result[DescriptiveParams]:
        """Compute per-axis summaries and the x/y correlation."""
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        x = design.x
        y = design.y

        with timer.section('x'):
            x_summary = self._summarize(x)
        with timer.section('y'):
            y_summary = self._summarize(y)
        with timer.section('correlation'):
            r = _moments.pearson_correlation(x, y)

        if design.n == 1:
            warnings_list.append(
                "standard deviation is undefined for a single observation; reported as 0"
            )
        for axis, summary in (('x', x_summary), ('y', y_summary)):
            if summary.variance == 0.0 and design.n > 1:
                warnings_list.append(
                    f"{axis} values are constant; skewness and kurtosis are undefined"
                )

        timer.stop()

        params = DescriptiveParams(
            n=design.n,
            x=x_summary,
            y=y_summary,
            correlation=r,
        )

        return Result(
            params=params,
            info={'correlation_strength': _moments.correlation_strength(r)},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _summarize(self, values: NDArray[np.floating[Any]]) -> AxisSummary:
        return AxisSummary(
            mean=_moments.mean(values),
            median=_moments.median(values),
            sd=_moments.sample_sd(values),
            variance=_moments.sample_variance(values),
            minimum=_moments.minimum(values),
            maximum=_moments.maximum(values),
            skewness=_moments.skewness(values),
            kurtosis=_moments.excess_kurtosis(values),
        )
