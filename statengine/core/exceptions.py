"""
Exception hierarchy for statengine.

All exceptions inherit from StatEngineError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Raised at the start of the responsible function, before any computation
    - Never catch and re-raise with less information
"""

from __future__ import annotations


class StatEngineError(Exception):
    """Base exception for all statengine errors."""
    pass


class ValidationError(StatEngineError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent lengths.
    """
    pass


class SampleTooSmallError(ValidationError):
    """
    Sample has fewer observations than the computation requires.

    Attributes:
        n: Number of observations supplied
        minimum: Minimum number of observations required
        name: Parameter name of the offending sample
    """

    def __init__(
        self,
        message: str,
        n: int | None = None,
        minimum: int | None = None,
        name: str | None = None,
    ):
        super().__init__(message)
        self.n = n
        self.minimum = minimum
        self.name = name


class InvalidParameterError(ValidationError):
    """
    A scalar parameter or derived quantity is outside its valid domain.

    Covers non-positive standard deviations, alpha outside (0, 1),
    non-positive expected counts and degenerate (zero-variance) samples.

    Attributes:
        parameter: Name of the offending parameter
        value: The rejected value, if meaningful
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: object | None = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class UnsupportedDistributionError(ValidationError):
    """
    Distribution tag not recognised by the estimator.

    Attributes:
        distribution: The rejected tag
        supported: Tags that would have been accepted
    """

    def __init__(
        self,
        message: str,
        distribution: str | None = None,
        supported: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.distribution = distribution
        self.supported = supported


class NumericalError(StatEngineError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class ConvergenceError(NumericalError):
    """
    Iterative algorithm failed to converge.

    Raised when a bracketing search cannot enclose its root within the
    allowed number of bracket expansions.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final bracket width or term size
        reason: Why convergence failed (e.g., 'max_iterations', 'no_bracket')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
