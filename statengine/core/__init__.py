"""
Core infrastructure for statengine.

This module provides shared abstractions and utilities used by all
domain-specific submodules (descriptive, estimation, hypothesis).

Key components:
    sample: Sample container of paired (x, y) observations
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities and tolerance tiers
"""

from statengine.core.protocols import Backend
from statengine.core.result import Result
from statengine.core.sample import Sample, Axis
from statengine.core.exceptions import (
    StatEngineError,
    ValidationError,
    DimensionError,
    SampleTooSmallError,
    InvalidParameterError,
    UnsupportedDistributionError,
    NumericalError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Backend",
    # Data
    "Sample",
    "Axis",
    # Result
    "Result",
    # Exceptions
    "StatEngineError",
    "ValidationError",
    "DimensionError",
    "SampleTooSmallError",
    "InvalidParameterError",
    "UnsupportedDistributionError",
    "NumericalError",
    "ConvergenceError",
]
