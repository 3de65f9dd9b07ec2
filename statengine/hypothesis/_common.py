"""
Common types for hypothesis testing.

Defines the HTestParams core shared by every test and one frozen variant
per test kind. The variant class is the tag: `test_type` is a class-level
constant, so a payload can never claim one kind while carrying another
kind's fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar
import numpy as np
from numpy.typing import NDArray


REJECT = "reject null hypothesis"
ACCEPT = "accept null hypothesis"


@dataclass(frozen=True)
class HTestParams:
    """
    Fields common to every hypothesis test.

    Attributes
    ----------
    statistic : float
        Test statistic value.
    p_value : float
        p-value for the configured alternative.
    critical_value : float
        Rejection boundary at alpha. Upper-tail for two.sided and greater,
        negative lower-tail for 'less' on z and t statistics.
    df : float or None
        Degrees of freedom, None where the null distribution has none.
    sample_size : int
        Total number of observations (sum of counts for chi-square).
    sample_mean, sample_sd : float or None
        None where not meaningful (chi-square, normality).
    confidence_interval : (float, float) or None
        None for tests without an interval.
    alpha : float
    alternative : str
        "two.sided", "less" or "greater".
    conclusion : str
        "reject null hypothesis" or "accept null hypothesis".
    interpretation : str
        English sentence describing the decision.
    """
    test_type: ClassVar[str] = ""
    method: ClassVar[str] = ""

    statistic: float
    p_value: float
    critical_value: float
    df: float | None
    sample_size: int
    sample_mean: float | None
    sample_sd: float | None
    confidence_interval: tuple[float, float] | None
    alpha: float
    alternative: str
    conclusion: str
    interpretation: str

    @property
    def significant(self) -> bool:
        return self.p_value < self.alpha


@dataclass(frozen=True)
class ZTestParams(HTestParams):
    test_type: ClassVar[str] = "z_test"
    method: ClassVar[str] = "One Sample z-test"

    null_mean: float
    population_sd: float


@dataclass(frozen=True)
class TTestParams(HTestParams):
    test_type: ClassVar[str] = "t_test"
    method: ClassVar[str] = "One Sample t-test"

    null_mean: float


@dataclass(frozen=True)
class TwoSampleTTestParams(HTestParams):
    """
    Pooled-variance two-sample t-test.

    sample_mean and sample_sd of the common core carry the mean
    difference and the pooled standard deviation.
    """
    test_type: ClassVar[str] = "two_sample_t_test"
    method: ClassVar[str] = "Two Sample t-test (pooled variance)"

    mean_difference: float
    pooled_sd: float
    group_means: tuple[float, float]
    sample_sizes: tuple[int, int]


@dataclass(frozen=True)
class ChiSquareGOFParams(HTestParams):
    test_type: ClassVar[str] = "chisq_gof"
    method: ClassVar[str] = "Chi-squared goodness-of-fit test"

    observed_counts: NDArray[np.floating[Any]]
    expected_counts: NDArray[np.floating[Any]]


@dataclass(frozen=True)
class NormalityParams(HTestParams):
    test_type: ClassVar[str] = "normality"
    method: ClassVar[str] = "Skewness/kurtosis normality test"

    skewness: float
    kurtosis: float
    skewness_z: float
    kurtosis_z: float
    skewness_p_value: float
    kurtosis_p_value: float


def conclusion_for(significant: bool) -> str:
    return REJECT if significant else ACCEPT
