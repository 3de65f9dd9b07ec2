"""
DescriptiveDesign: data wrapper for descriptive statistics.

Wraps a Sample and provides validation and metadata for the descriptive
statistics pipeline. Follows the statengine Design pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from statengine.core.sample import Sample
from statengine.core.validation import check_min_samples


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Holds the paired sample. Immutable after construction.

    Construction:
        DescriptiveDesign.from_sample(sample)
    """
    _sample: Sample

    @classmethod
    def from_sample(cls, data: Any) -> DescriptiveDesign:
        """
        Build DescriptiveDesign from anything Sample.coerce() accepts.

        Raises
        ------
        SampleTooSmallError
            If the sample is empty.
        """
        sample = Sample.coerce(data)
        check_min_samples(sample.n, 1, "sample")
        return cls(_sample=sample)

    @property
    def sample(self) -> Sample:
        return self._sample

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Copy of the x coordinates."""
        return self._sample.x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Copy of the y coordinates."""
        return self._sample.y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._sample.n

    def __repr__(self) -> str:
        return f"DescriptiveDesign(n={self.n})"
