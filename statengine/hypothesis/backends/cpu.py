"""
CPU reference backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.hypothesis._common import HTestParams
from statengine.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU reference backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "z_test":
                from statengine.hypothesis.backends._z_test import z_test
                params, warnings_list = z_test(design)
            elif test_type == "t_test":
                from statengine.hypothesis.backends._t_test import t_one_sample
                params, warnings_list = t_one_sample(design)
            elif test_type == "two_sample_t_test":
                from statengine.hypothesis.backends._t_test import t_two_sample
                params, warnings_list = t_two_sample(design)
            elif test_type == "chisq_gof":
                from statengine.hypothesis.backends._chisq_test import chisq_gof
                params, warnings_list = chisq_gof(design)
            elif test_type == "normality":
                from statengine.hypothesis.backends._normality_test import normality
                params, warnings_list = normality(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type, 'axis': design.axis},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
