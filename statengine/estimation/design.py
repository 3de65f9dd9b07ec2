"""
EstimationDesign: data wrapper for closed-form parameter estimation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from statengine.core.sample import Axis, Sample, validate_axis
from statengine.core.validation import check_min_samples
from statengine.estimation.families import Family, resolve_family


@dataclass(frozen=True)
class EstimationDesign:
    """
    Design for parameter estimation.

    Holds the selected coordinate values and the resolved family.
    Immutable after construction.

    Construction:
        EstimationDesign.for_distribution(sample, 'normal', axis='y')
    """
    _values: NDArray
    _family: Family
    _axis: str

    @classmethod
    def for_distribution(
        cls,
        data: Any,
        distribution: str | Family,
        *,
        axis: Axis = 'y',
    ) -> EstimationDesign:
        """
        Build an EstimationDesign.

        The distribution tag is resolved before the sample is inspected so
        that an unknown tag is reported even for empty input.

        Raises
        ------
        UnsupportedDistributionError
            If the distribution tag is unknown.
        SampleTooSmallError
            If the sample is empty.
        InvalidParameterError
            If the values are outside the family's support.
        """
        family = resolve_family(distribution)
        axis = validate_axis(axis)
        sample = Sample.coerce(data)
        check_min_samples(sample.n, 1, "sample")
        values = sample.values(axis)
        family.validate(values)
        values.flags.writeable = False
        return cls(_values=values, _family=family, _axis=axis)

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        return self._values

    @property
    def family(self) -> Family:
        return self._family

    @property
    def axis(self) -> str:
        return self._axis

    @property
    def n(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return (
            f"EstimationDesign(distribution={self._family.name!r}, "
            f"n={self.n}, axis={self._axis!r})"
        )
