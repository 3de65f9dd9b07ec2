"""
Distribution families for closed-form parameter estimation.

Each Family defines:
- the names of its parameters
- the maximum-likelihood estimator
- the method-of-moments estimator
- the log-likelihood at given parameters
- a note comparing the two estimators

For the three families here the MLE and MoM estimators coincide:

    normal       mu = mean,  sigma = sqrt(population variance)
    exponential  lambda = 1 / mean
    poisson      lambda = mean

This is a property of these particular families (their sufficient
statistics are the first two raw moments), not a general law; a gamma or
beta family would give different estimators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import math
from typing import Any
import numpy as np
from numpy.typing import NDArray

from statengine.core.exceptions import UnsupportedDistributionError
from statengine.core.validation import check_non_negative, check_positive
from statengine.descriptive import _moments
from statengine.special import log_gamma


class Family(ABC):
    """Abstract distribution family with closed-form estimators."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def parameter_names(self) -> tuple[str, ...]:
        ...

    def validate(self, values: NDArray[np.floating[Any]]) -> None:
        """Raise if the values cannot come from this family."""

    @abstractmethod
    def mle(self, values: NDArray[np.floating[Any]]) -> dict[str, float]:
        """Maximum-likelihood estimates."""
        ...

    @abstractmethod
    def mom(self, values: NDArray[np.floating[Any]]) -> dict[str, float]:
        """Method-of-moments estimates."""
        ...

    @abstractmethod
    def log_likelihood(
        self, values: NDArray[np.floating[Any]], params: dict[str, float]
    ) -> float:
        ...

    @property
    def comparison(self) -> str:
        return (
            f"For the {self.name} distribution, MLE and MoM estimates coincide"
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Normal(Family):
    """Normal N(mu, sigma^2)."""

    @property
    def name(self) -> str:
        return 'normal'

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ('mu', 'sigma')

    def mle(self, values):
        return {
            'mu': _moments.mean(values),
            'sigma': math.sqrt(_moments.population_variance(values)),
        }

    def mom(self, values):
        # E[X] = mu, E[(X - mu)^2] = sigma^2
        m1 = _moments.mean(values)
        m2 = float(np.mean(_moments.deviations(values) ** 2))
        return {'mu': m1, 'sigma': math.sqrt(m2)}

    def log_likelihood(self, values, params):
        n = len(values)
        sigma = params['sigma']
        if sigma == 0.0:
            return math.inf
        resid = values - params['mu']
        return float(
            -0.5 * n * math.log(2.0 * math.pi * sigma ** 2)
            - np.sum(resid ** 2) / (2.0 * sigma ** 2)
        )


class Exponential(Family):
    """Exponential with rate lambda."""

    @property
    def name(self) -> str:
        return 'exponential'

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ('lambda',)

    def validate(self, values):
        check_non_negative(values, "values")
        check_positive(_moments.mean(values), "mean of values")

    def mle(self, values):
        return {'lambda': 1.0 / _moments.mean(values)}

    def mom(self, values):
        # E[X] = 1 / lambda
        return {'lambda': 1.0 / float(np.mean(values))}

    def log_likelihood(self, values, params):
        lam = params['lambda']
        return float(len(values) * math.log(lam) - lam * np.sum(values))


class Poisson(Family):
    """Poisson with rate lambda."""

    @property
    def name(self) -> str:
        return 'poisson'

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return ('lambda',)

    def validate(self, values):
        check_non_negative(values, "values")

    def mle(self, values):
        return {'lambda': _moments.mean(values)}

    def mom(self, values):
        # E[X] = lambda
        return {'lambda': float(np.mean(values))}

    def log_likelihood(self, values, params):
        lam = params['lambda']
        log_fact = sum(log_gamma(v + 1.0) for v in values)
        if lam == 0.0:
            # Only all-zero data reaches here; each term is log(1) = 0
            return 0.0
        return float(
            np.sum(values) * math.log(lam) - len(values) * lam - log_fact
        )


# Family name -> class mapping + resolver

_FAMILY_CLASSES: dict[str, type[Family]] = {
    'normal': Normal,
    'gaussian': Normal,
    'exponential': Exponential,
    'poisson': Poisson,
}

SUPPORTED_DISTRIBUTIONS = ('normal', 'exponential', 'poisson')


def resolve_family(family: str | Family) -> Family:
    """Resolve a distribution tag to a Family instance.

    Args:
        family: Either a string name ('normal', 'exponential', 'poisson')
                or a Family instance (passed through).

    Raises:
        UnsupportedDistributionError: If the tag is not recognized.
    """
    if isinstance(family, Family):
        return family
    if isinstance(family, str):
        cls = _FAMILY_CLASSES.get(family.lower())
        if cls is not None:
            return cls()
    raise UnsupportedDistributionError(
        f"Unknown distribution: {family!r}. "
        f"Valid distributions: {', '.join(SUPPORTED_DISTRIBUTIONS)}",
        distribution=str(family),
        supported=SUPPORTED_DISTRIBUTIONS,
    )
