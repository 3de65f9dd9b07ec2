"""
Sample: the paired-observation container consumed by every statengine module.

A Sample is an ordered sequence of (x, y) pairs. It doesn't know which
statistic will be computed from it; it only provides axis-selected copies
of its values.

Usage:
    from statengine import Sample

    s = Sample.from_pairs([(1, 2.0), (2, 2.5), (3, 4.1)])
    s = Sample.from_points([{'x': 1, 'y': 2.0}, {'x': 2, 'y': 2.5}])
    s = Sample.from_values([2.0, 2.5, 4.1])      # plain values, x = index
    s = Sample.coerce(anything_above)

    s.values('y')  # float64 copy of the y coordinates
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Literal, Mapping
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statengine.core.exceptions import ValidationError, DimensionError


Axis = Literal['x', 'y']
VALID_AXES = ('x', 'y')


def validate_axis(axis: str) -> str:
    """Validate and return an axis selector."""
    if axis not in VALID_AXES:
        raise ValidationError(f"axis must be one of {VALID_AXES}, got {axis!r}")
    return axis


@dataclass(frozen=True)
class Sample:
    """
    Immutable ordered collection of (x, y) observations.

    Construct via factory classmethods, not directly. The underlying
    (n, 2) array is never handed out; accessors return copies so callers
    and computations can't mutate each other's data.
    """
    _pairs: NDArray[np.floating[Any]]

    # === Factory Methods ===

    @classmethod
    def from_pairs(cls, pairs: ArrayLike) -> Sample:
        """Construct from a sequence of (x, y) tuples or an (n, 2) array."""
        arr = np.array(pairs, dtype=np.float64)
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise DimensionError(
                f"pairs: expected shape (n, 2), got {arr.shape}"
            )
        return cls._build(arr)

    @classmethod
    def from_points(cls, points: Iterable[Mapping[str, float]]) -> Sample:
        """Construct from mappings carrying 'x' and 'y' keys."""
        rows = []
        for i, point in enumerate(points):
            try:
                rows.append((float(point['x']), float(point['y'])))
            except KeyError as e:
                raise ValidationError(
                    f"points[{i}]: missing key {e.args[0]!r}"
                ) from e
        return cls.from_pairs(np.array(rows, dtype=np.float64).reshape(-1, 2))

    @classmethod
    def from_values(cls, values: ArrayLike) -> Sample:
        """
        Construct from a plain 1-D sequence of numbers.

        The values become the y coordinates and x is the observation index,
        which is how plain arrays were fed to the mean tests historically.
        """
        y = np.array(values, dtype=np.float64).ravel()
        x = np.arange(len(y), dtype=np.float64)
        return cls._build(np.column_stack([x, y]))

    @classmethod
    def coerce(cls, data: Any) -> Sample:
        """
        Build a Sample from any supported input.

        Accepts a Sample (returned as is), a sequence of mappings with
        'x'/'y' keys, an (n, 2) array-like of pairs, or a 1-D array-like of
        plain values.
        """
        if isinstance(data, Sample):
            return data
        if isinstance(data, Mapping):
            raise ValidationError(
                "sample: got a single mapping, expected a sequence of points"
            )
        if isinstance(data, (list, tuple)) and data and isinstance(data[0], Mapping):
            return cls.from_points(data)

        try:
            arr = np.asarray(data, dtype=np.float64)
        except (ValueError, TypeError) as e:
            raise ValidationError(f"sample: cannot convert to array: {e}") from e

        if arr.ndim == 2:
            return cls.from_pairs(arr)
        if arr.ndim <= 1:
            return cls.from_values(arr.reshape(-1))
        raise DimensionError(
            f"sample: expected 1D values or (n, 2) pairs, got {arr.ndim}D"
        )

    @classmethod
    def _build(cls, arr: NDArray) -> Sample:
        """Internal builder with validation."""
        if not np.all(np.isfinite(arr)):
            n_nan = int(np.sum(np.isnan(arr)))
            n_inf = int(np.sum(np.isinf(arr)))
            raise ValidationError(
                f"sample: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
            )
        arr = arr.copy()
        arr.setflags(write=False)
        return cls(_pairs=arr)

    # === Access ===

    def values(self, axis: Axis = 'y') -> NDArray[np.floating[Any]]:
        """Return a writable float64 copy of one coordinate."""
        axis = validate_axis(axis)
        col = 0 if axis == 'x' else 1
        return self._pairs[:, col].copy()

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self.values('x')

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self.values('y')

    @property
    def pairs(self) -> NDArray[np.floating[Any]]:
        """Copy of the (n, 2) pair matrix."""
        return self._pairs.copy()

    @property
    def n(self) -> int:
        return int(self._pairs.shape[0])

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"Sample(n={self.n})"
