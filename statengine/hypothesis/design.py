"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Every precondition is checked here, before
any statistic is computed; backends trust a constructed design.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.exceptions import InvalidParameterError
from statengine.core.sample import Axis, Sample, validate_axis
from statengine.core.validation import (
    check_alpha,
    check_all_positive,
    check_array,
    check_finite,
    check_finite_scalar,
    check_min_samples,
    check_non_negative,
    check_positive,
)
from statengine.descriptive import _moments
from statengine.distributions import normalize_alternative


def _axis_values(data: Any, axis: str) -> NDArray[np.floating[Any]]:
    """Read-only copy of one coordinate of a sample."""
    values = Sample.coerce(data).values(axis)
    values.flags.writeable = False
    return values


def _counts(counts: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    arr = check_array(counts, name)
    check_finite(arr, name)
    arr.flags.writeable = False
    return arr


def _check_spread(values: NDArray[np.floating[Any]], name: str) -> None:
    """Reject constant data; the standard error would be zero."""
    if len(values) > 1 and _moments.is_constant(values):
        raise InvalidParameterError(
            f"{name}: sample standard deviation is 0; "
            f"the test statistic is undefined for constant data",
            parameter=name,
            value=0.0,
        )


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # Sample coordinates
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None

    # Count vectors
    _observed: NDArray[np.floating[Any]] | None = None
    _expected: NDArray[np.floating[Any]] | None = None

    # Test configuration
    _mu: float = 0.0
    _sigma: float | None = None
    _alpha: float = 0.05
    _alternative: str = "two.sided"
    _axis: str = 'y'

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        """Values under test (first group for two-sample tests)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        """Second group for two-sample tests."""
        return self._y

    @property
    def observed(self) -> NDArray[np.floating[Any]] | None:
        return self._observed

    @property
    def expected(self) -> NDArray[np.floating[Any]] | None:
        return self._expected

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def sigma(self) -> float | None:
        return self._sigma

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def axis(self) -> str:
        return self._axis

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory methods ---

    @classmethod
    def for_z_test(
        cls,
        data: Any,
        mu: float,
        sigma: float,
        *,
        alpha: float = 0.05,
        alternative: str = "two.sided",
        axis: Axis = 'y',
    ) -> HypothesisDesign:
        """
        Build design for z_test().

        Raises
        ------
        InvalidParameterError
            If sigma <= 0, mu is not finite or alpha is outside (0, 1).
        SampleTooSmallError
            If the sample is empty.
        """
        alpha = check_alpha(alpha)
        alternative = normalize_alternative(alternative)
        axis = validate_axis(axis)
        sigma = check_positive(sigma, "sigma")
        mu = check_finite_scalar(mu, "mu")

        x = _axis_values(data, axis)
        check_min_samples(len(x), 1, "sample")

        return cls(
            test_type="z_test",
            _x=x,
            _mu=mu,
            _sigma=sigma,
            _alpha=alpha,
            _alternative=alternative,
            _axis=axis,
            _data_name=f"sample ({axis})",
        )

    @classmethod
    def for_t_test(
        cls,
        data: Any,
        mu: float = 0.0,
        *,
        alpha: float = 0.05,
        alternative: str = "two.sided",
        axis: Axis = 'y',
    ) -> HypothesisDesign:
        """
        Build design for t_test().

        Raises
        ------
        SampleTooSmallError
            If n < 2.
        InvalidParameterError
            If the sample standard deviation is 0.
        """
        alpha = check_alpha(alpha)
        alternative = normalize_alternative(alternative)
        axis = validate_axis(axis)
        mu = check_finite_scalar(mu, "mu")

        x = _axis_values(data, axis)
        check_min_samples(len(x), 2, "sample")
        _check_spread(x, "sample")

        return cls(
            test_type="t_test",
            _x=x,
            _mu=mu,
            _alpha=alpha,
            _alternative=alternative,
            _axis=axis,
            _data_name=f"sample ({axis})",
        )

    @classmethod
    def for_two_sample_t_test(
        cls,
        sample_a: Any,
        sample_b: Any,
        *,
        alpha: float = 0.05,
        alternative: str = "two.sided",
        axis: Axis = 'y',
    ) -> HypothesisDesign:
        """
        Build design for two_sample_t_test().

        Raises
        ------
        SampleTooSmallError
            If either sample has fewer than 2 observations.
        InvalidParameterError
            If both samples are constant (pooled standard deviation 0).
        """
        alpha = check_alpha(alpha)
        alternative = normalize_alternative(alternative)
        axis = validate_axis(axis)

        a = _axis_values(sample_a, axis)
        b = _axis_values(sample_b, axis)
        check_min_samples(len(a), 2, "sample_a")
        check_min_samples(len(b), 2, "sample_b")
        if _moments.is_constant(a) and _moments.is_constant(b):
            raise InvalidParameterError(
                "pooled standard deviation is 0; both samples are constant",
                parameter="pooled_sd",
                value=0.0,
            )

        return cls(
            test_type="two_sample_t_test",
            _x=a,
            _y=b,
            _alpha=alpha,
            _alternative=alternative,
            _axis=axis,
            _data_name=f"sample_a ({axis}) and sample_b ({axis})",
        )

    @classmethod
    def for_chisq_gof(
        cls,
        observed: ArrayLike,
        expected: ArrayLike,
        *,
        alpha: float = 0.05,
    ) -> HypothesisDesign:
        """
        Build design for chisq_gof().

        Raises
        ------
        InvalidParameterError
            If lengths differ, any expected count is <= 0 or any observed
            count is negative.
        SampleTooSmallError
            If there are fewer than 2 bins (df would be 0).
        """
        alpha = check_alpha(alpha)
        obs = _counts(observed, "observed")
        exp = _counts(expected, "expected")

        if len(obs) != len(exp):
            raise InvalidParameterError(
                f"observed and expected must have the same length: "
                f"len(observed)={len(obs)}, len(expected)={len(exp)}",
                parameter="expected",
                value=len(exp),
            )
        check_min_samples(len(obs), 2, "observed")
        check_all_positive(exp, "expected")
        check_non_negative(obs, "observed")

        return cls(
            test_type="chisq_gof",
            _observed=obs,
            _expected=exp,
            _alpha=alpha,
            _alternative="greater",
            _data_name="observed and expected",
        )

    @classmethod
    def for_normality(
        cls,
        data: Any,
        *,
        alpha: float = 0.05,
        axis: Axis = 'y',
    ) -> HypothesisDesign:
        """
        Build design for normality_test().

        Raises
        ------
        SampleTooSmallError
            If n < 3.
        InvalidParameterError
            If the values are constant (skewness undefined).
        """
        alpha = check_alpha(alpha)
        axis = validate_axis(axis)

        x = _axis_values(data, axis)
        check_min_samples(len(x), 3, "sample")
        _check_spread(x, "sample")

        return cls(
            test_type="normality",
            _x=x,
            _alpha=alpha,
            _axis=axis,
            _data_name=f"sample ({axis})",
        )

    def __repr__(self) -> str:
        return (
            f"HypothesisDesign(test_type={self.test_type!r}, "
            f"data={self._data_name!r}, alpha={self._alpha:g})"
        )
