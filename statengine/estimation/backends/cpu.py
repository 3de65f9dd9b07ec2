"""
CPU reference backend for parameter estimation.
"""

from __future__ import annotations

import math

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.estimation.design import EstimationDesign
from statengine.estimation.solution import EstimationParams


class CPUEstimationBackend:
    """CPU reference backend for closed-form estimation."""

    @property
    def name(self) -> str:
        return 'cpu_estimation'

    def solve(self, design: EstimationDesign) -> Result[EstimationParams]:
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        family = design.family
        values = design.values

        with timer.section('mle'):
            mle = family.mle(values)
        with timer.section('mom'):
            mom = family.mom(values)
        with timer.section('log_likelihood'):
            loglik = family.log_likelihood(values, mle)

        if family.name == 'normal' and mle['sigma'] == 0.0:
            warnings_list.append(
                "values are constant; sigma estimate is 0 and the likelihood is degenerate"
            )
        if design.n == 1:
            warnings_list.append("estimates are based on a single observation")

        timer.stop()

        params = EstimationParams(
            distribution=family.name,
            mle=mle,
            mom=mom,
            comparison=family.comparison,
            log_likelihood=loglik,
            n=design.n,
        )

        return Result(
            params=params,
            info={
                'parameters': family.parameter_names,
                'estimates_agree': all(
                    math.isclose(mle[k], mom[k], rel_tol=1e-9, abs_tol=1e-12)
                    for k in family.parameter_names
                ),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
