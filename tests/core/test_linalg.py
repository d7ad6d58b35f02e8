"""
Tests for vector and matrix primitives.
"""

import numpy as np
import pytest

from pymahalanobis.core.exceptions import (
    DimensionMismatchError,
    InvalidDatasetSizeError,
    NonSquareMatrixError,
    UnequalLengthError,
    ValidationError,
)
from pymahalanobis.core.compute.linalg import (
    assert_rectangular,
    assert_square,
    dot,
    identity,
    multiply,
    subtract,
    transpose,
    transpose_to_column,
)


# ═══════════════════════════════════════════════════════════════════════
# Vectors
# ═══════════════════════════════════════════════════════════════════════


class TestDot:

    def test_value(self):
        assert dot([1, 2, 3], [4, 5, 6]) == 32.0

    def test_returns_float(self):
        assert isinstance(dot([1, 2], [3, 4]), float)

    def test_empty_is_zero(self):
        assert dot([], []) == 0.0

    def test_unequal_length(self):
        with pytest.raises(UnequalLengthError):
            dot([1, 2, 3], [1, 2])


class TestSubtract:

    def test_elementwise(self):
        np.testing.assert_array_equal(subtract([4, 5], [4.0, 5.2]), [0.0, 5 - 5.2])

    def test_unequal_length(self):
        with pytest.raises(UnequalLengthError):
            subtract([1, 2], [1, 2, 3])

    def test_inputs_not_mutated(self):
        a = np.array([1.0, 2.0])
        b = np.array([0.5, 0.5])
        subtract(a, b)
        np.testing.assert_array_equal(a, [1.0, 2.0])
        np.testing.assert_array_equal(b, [0.5, 0.5])


class TestTransposeToColumn:

    def test_shape(self):
        col = transpose_to_column([1, 2, 3])
        assert col.shape == (3, 1)
        np.testing.assert_array_equal(col, [[1.0], [2.0], [3.0]])


# ═══════════════════════════════════════════════════════════════════════
# Matrices
# ═══════════════════════════════════════════════════════════════════════


class TestIdentity:

    def test_matches_numpy(self):
        np.testing.assert_array_equal(identity(4), np.eye(4))

    def test_zero_size(self):
        assert identity(0).shape == (0, 0)

    @pytest.mark.parametrize("n", [-1, 2.5, "3", True])
    def test_invalid_size(self, n):
        with pytest.raises(ValidationError):
            identity(n)


class TestMultiply:

    def test_matches_numpy(self, rng):
        A = rng.standard_normal((3, 4))
        B = rng.standard_normal((4, 2))
        np.testing.assert_allclose(multiply(A, B), A @ B, rtol=1e-12)

    def test_identity_is_neutral(self):
        A = [[1.0, 2.0], [3.0, 4.0]]
        np.testing.assert_array_equal(multiply(A, identity(2)), A)
        np.testing.assert_array_equal(multiply(identity(2), A), A)

    def test_vector_rhs_returns_vector(self):
        result = multiply([[1, 2], [3, 4]], [1, 1])
        assert result.shape == (2,)
        np.testing.assert_array_equal(result, [3.0, 7.0])

    def test_column_rhs(self):
        result = multiply([[1, 2], [3, 4]], transpose_to_column([1, 1]))
        assert result.shape == (2, 1)

    def test_inner_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            multiply([[1, 2, 3]], [[1, 2]])
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 1

    def test_ragged_operand(self):
        with pytest.raises(InvalidDatasetSizeError):
            multiply([[1, 2], [3]], [[1], [2]])


class TestTranspose:

    def test_values(self):
        np.testing.assert_array_equal(
            transpose([[1, 2, 3], [4, 5, 6]]),
            [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]],
        )

    def test_not_a_view(self):
        A = np.array([[1.0, 2.0], [3.0, 4.0]])
        T = transpose(A)
        T[0, 1] = 99.0
        assert A[1, 0] == 3.0


class TestShapeAssertions:

    def test_square_passes(self):
        assert_square([[1, 2], [3, 4]])

    def test_non_square(self):
        with pytest.raises(NonSquareMatrixError):
            assert_square([[1, 2, 3], [4, 5, 6]])

    def test_rectangular_passes(self):
        assert_rectangular([[1, 2, 3], [4, 5, 6]])

    def test_ragged(self):
        with pytest.raises(InvalidDatasetSizeError):
            assert_rectangular([[1, 2, 3], [4, 5]])
