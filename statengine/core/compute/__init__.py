"""
Shared compute infrastructure for statengine.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and iteration caps for the numerical engine
"""

from statengine.core.compute.timing import Timer

__all__ = [
    "Timer",
]
