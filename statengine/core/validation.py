"""
Input validation utilities for statengine.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from statengine.core.exceptions import (
    ValidationError,
    DimensionError,
    SampleTooSmallError,
    InvalidParameterError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a 1D float64 numpy array.

    Always returns a copy, so the caller's data is never aliased.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
        DimensionError: If input is not one-dimensional
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {result.ndim}D with shape {result.shape}"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length.

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(n: int, min_samples: int, name: str) -> None:
    """
    Verify a sample has at least the minimum number of observations.

    Raises:
        SampleTooSmallError: If n < min_samples
    """
    if n < min_samples:
        raise SampleTooSmallError(
            f"{name}: requires at least {min_samples} observations, got {n}",
            n=n,
            minimum=min_samples,
            name=name,
        )


def check_alpha(alpha: float, name: str = "alpha") -> float:
    """
    Verify a significance level lies strictly inside (0, 1).

    Raises:
        InvalidParameterError: If alpha is outside (0, 1) or not finite
    """
    alpha = float(alpha)
    if not (0.0 < alpha < 1.0):
        raise InvalidParameterError(
            f"{name} must be in (0, 1), got {alpha}",
            parameter=name,
            value=alpha,
        )
    return alpha


def check_positive(value: float, name: str) -> float:
    """
    Verify a scalar is finite and strictly positive.

    Raises:
        InvalidParameterError: If value <= 0 or not finite
    """
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameterError(
            f"{name} must be positive and finite, got {value}",
            parameter=name,
            value=value,
        )
    return value


def check_finite_scalar(value: float, name: str) -> float:
    """
    Verify a scalar is finite.

    Raises:
        InvalidParameterError: If value is NaN or infinite
    """
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(
            f"{name} must be finite, got {value}",
            parameter=name,
            value=value,
        )
    return value


def check_all_positive(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every element of an array is strictly positive.

    Raises:
        InvalidParameterError: If any element is <= 0
    """
    bad = np.where(array <= 0)[0]
    if len(bad) > 0:
        raise InvalidParameterError(
            f"{name}: all entries must be positive, "
            f"got {array[bad[0]]} at index {int(bad[0])}",
            parameter=name,
            value=float(array[bad[0]]),
        )


def check_non_negative(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify no element of an array is negative.

    Raises:
        InvalidParameterError: If any element is < 0
    """
    bad = np.where(array < 0)[0]
    if len(bad) > 0:
        raise InvalidParameterError(
            f"{name}: entries must be non-negative, "
            f"got {array[bad[0]]} at index {int(bad[0])}",
            parameter=name,
            value=float(array[bad[0]]),
        )
