"""
Tests for the Sample container and its constructors.
"""

import numpy as np
import pytest

from statengine.core.exceptions import DimensionError, ValidationError
from statengine.core.sample import Sample, validate_axis


class TestConstruction:

    def test_from_pairs(self):
        s = Sample.from_pairs([(1, 10), (2, 20), (3, 30)])
        assert s.n == 3
        np.testing.assert_array_equal(s.x, [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(s.y, [10.0, 20.0, 30.0])

    def test_from_points(self):
        s = Sample.from_points([{"x": 1, "y": 2}, {"x": 3, "y": 4}])
        np.testing.assert_array_equal(s.pairs, [[1.0, 2.0], [3.0, 4.0]])

    def test_from_points_missing_key(self):
        with pytest.raises(ValidationError, match="points\\[1\\]"):
            Sample.from_points([{"x": 1, "y": 2}, {"x": 3}])

    def test_from_values_uses_index_for_x(self):
        s = Sample.from_values([5.0, 6.0, 7.0])
        np.testing.assert_array_equal(s.x, [0.0, 1.0, 2.0])
        np.testing.assert_array_equal(s.y, [5.0, 6.0, 7.0])

    def test_bad_pair_shape(self):
        with pytest.raises(DimensionError):
            Sample.from_pairs([(1, 2, 3)])

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            Sample.from_values([1.0, np.nan])

    def test_empty_is_allowed(self):
        assert Sample.from_values([]).n == 0


class TestCoerce:

    def test_sample_passthrough(self):
        s = Sample.from_values([1.0, 2.0])
        assert Sample.coerce(s) is s

    def test_points(self):
        s = Sample.coerce([{"x": 0, "y": 1}])
        assert s.n == 1

    def test_plain_values(self):
        s = Sample.coerce([1, 2, 3])
        np.testing.assert_array_equal(s.y, [1.0, 2.0, 3.0])

    def test_pair_array(self):
        s = Sample.coerce(np.array([[1.0, 2.0], [3.0, 4.0]]))
        np.testing.assert_array_equal(s.x, [1.0, 3.0])

    def test_single_mapping_rejected(self):
        with pytest.raises(ValidationError):
            Sample.coerce({"x": 1, "y": 2})


class TestImmutability:

    def test_caller_array_not_aliased(self):
        data = np.array([[1.0, 2.0], [3.0, 4.0]])
        s = Sample.from_pairs(data)
        data[0, 1] = 99.0
        assert s.y[0] == 2.0

    def test_accessors_return_copies(self):
        s = Sample.from_values([3.0, 1.0, 2.0])
        y = s.values('y')
        y.sort()
        np.testing.assert_array_equal(s.y, [3.0, 1.0, 2.0])


class TestAxis:

    @pytest.mark.parametrize("axis", ["x", "y"])
    def test_valid(self, axis):
        assert validate_axis(axis) == axis

    def test_invalid(self):
        with pytest.raises(ValidationError, match="axis"):
            validate_axis("z")
