"""
Generic result container for all statengine computations.

The Result class provides a standardized envelope that all domain-specific
results use. This enables shared tooling for timing, diagnostics and
reproducibility while allowing domains to define their own parameter
structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (test kind, axis, distribution)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (test statistics, estimates, etc.)
        info: Structured metadata (test kind, axis, distribution)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=ZTestParams(...),
        ...     info={'test_type': 'z_test', 'axis': 'y'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_hypothesis'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
