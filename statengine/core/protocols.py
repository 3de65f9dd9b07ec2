"""
Core protocols for statengine.

These define structural interfaces that domain-specific implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) to allow
flexibility while maintaining type safety.
"""

from typing import Protocol, TypeVar, runtime_checkable

from statengine.core.result import Result

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific design and produce
    a domain-specific parameter payload wrapped in a Result.

    Backends are stateless: all configuration travels in the design.
    This makes them easy to test and trivially safe to call concurrently.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{domain}'
        Examples: 'cpu_hypothesis', 'cpu_descriptive', 'cpu_estimation'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the statistical computation.

        Args:
            design: Domain-specific, already validated input container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            ValidationError: If design is invalid for this backend
        """
        ...
