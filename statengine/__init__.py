"""
statengine: a small statistics engine over paired (x, y) samples.

Descriptive statistics, closed-form parameter estimation and classical
hypothesis tests, built on self-contained special functions and
distribution CDFs.

Submodules:
    special: erf, gamma, incomplete beta/gamma, combinatorics
    distributions: CDFs, densities, critical values, p-values
    descriptive: Moments, median, correlation, describe()
    estimation: MLE and method of moments for normal/exponential/poisson
    hypothesis: z, t, two-sample t, chi-squared GOF, normality
"""

__version__ = "0.1.0"

from statengine.core import Sample
from statengine import special
from statengine import distributions
from statengine import descriptive
from statengine import estimation
from statengine import hypothesis

__all__ = [
    "__version__",
    "Sample",
    "special",
    "distributions",
    "descriptive",
    "estimation",
    "hypothesis",
]
