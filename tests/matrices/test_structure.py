"""
Tests for structural queries: rows, columns, trace, shape predicates,
transpose, rounding and conversions.
"""

import numpy as np
import pytest

from densematrix import (
    IndexOutOfRangeError,
    Matrix,
    NonFiniteWarning,
    NotSquareError,
    identity_matrix,
    row_matrix,
)


# ═══════════════════════════════════════════════════════════════════════
# get_row / get_column
# ═══════════════════════════════════════════════════════════════════════


class TestGetRow:

    def test_each_row(self, rect_matrix):
        np.testing.assert_array_equal(rect_matrix.get_row(1), [1.0, 2.0])
        np.testing.assert_array_equal(rect_matrix.get_row(2), [3.0, 4.0])
        np.testing.assert_array_equal(rect_matrix.get_row(3), [5.0, 6.0])

    def test_length_is_cols(self, tall_matrix):
        assert len(tall_matrix.get_row(4)) == tall_matrix.cols

    @pytest.mark.parametrize("i", [0, 4, -1])
    def test_out_of_range(self, rect_matrix, i):
        with pytest.raises(IndexOutOfRangeError):
            rect_matrix.get_row(i)

    def test_returns_copy(self, rect_matrix):
        row = rect_matrix.get_row(1)
        row[0] = 100.0
        assert rect_matrix[1, 1] == 1.0


class TestGetColumn:

    def test_each_column(self, rect_matrix):
        np.testing.assert_array_equal(rect_matrix.get_column(1), [1.0, 3.0, 5.0])
        np.testing.assert_array_equal(rect_matrix.get_column(2), [2.0, 4.0, 6.0])

    def test_generated(self, tall_matrix):
        np.testing.assert_array_equal(tall_matrix.get_column(3), [13, 23, 33, 43, 53])

    @pytest.mark.parametrize("j", [0, 3])
    def test_out_of_range(self, rect_matrix, j):
        with pytest.raises(IndexOutOfRangeError):
            rect_matrix.get_column(j)

    def test_returns_copy(self, rect_matrix):
        column = rect_matrix.get_column(2)
        column[:] = 0.0
        assert rect_matrix[3, 2] == 6.0

    def test_row_matrix_columns_are_single_items(self):
        m = row_matrix([4, 5, 6])
        np.testing.assert_array_equal(m.get_column(2), [5.0])


# ═══════════════════════════════════════════════════════════════════════
# trace
# ═══════════════════════════════════════════════════════════════════════


class TestTrace:

    def test_4x4(self, square_4x4):
        np.testing.assert_array_equal(square_4x4.trace(), [6.0, 89.0, 45.0, 9.0])

    def test_1x1(self):
        np.testing.assert_array_equal(Matrix([3], (1, 1)).trace(), [3.0])

    def test_identity(self):
        np.testing.assert_array_equal(identity_matrix(3).trace(), np.ones(3))

    def test_non_square_fails(self, tall_matrix):
        with pytest.raises(NotSquareError) as exc_info:
            tall_matrix.trace()
        assert exc_info.value.order == (5, 3)

    def test_horizontal_fails(self):
        with pytest.raises(NotSquareError):
            row_matrix([1, 2]).trace()


# ═══════════════════════════════════════════════════════════════════════
# Shape predicates
# ═══════════════════════════════════════════════════════════════════════


class TestShapePredicates:

    @pytest.mark.parametrize("order, square, horizontal, vertical", [
        ((2, 2), True, False, False),
        ((1, 3), False, True, False),
        ((3, 1), False, False, True),
        ((5, 3), False, False, True),
    ])
    def test_predicates(self, order, square, horizontal, vertical):
        m = Matrix(np.zeros(order[0] * order[1]), order)
        assert m.is_square() is square
        assert m.is_horizontal() is horizontal
        assert m.is_vertical() is vertical


# ═══════════════════════════════════════════════════════════════════════
# Derived matrices
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    def test_order_swapped(self, rect_matrix):
        assert rect_matrix.transpose().order == (2, 3)

    def test_elements(self, tall_matrix):
        t = tall_matrix.transpose()
        for i in range(1, 6):
            for j in range(1, 4):
                assert t[j, i] == tall_matrix[i, j]

    def test_twice_is_identity(self, square_4x4):
        assert square_4x4.transpose().transpose() == square_4x4

    def test_does_not_alias(self, rect_matrix):
        t = rect_matrix.transpose()
        t.set(1, 1, 0)
        assert rect_matrix[1, 1] == 1.0


class TestRound:

    def test_halves_away_from_zero(self):
        m = Matrix([0.5, 1.5, 2.5, -0.5, -2.5, 2.4], (2, 3))
        np.testing.assert_array_equal(
            m.round().items, [1.0, 2.0, 3.0, -1.0, -3.0, 2.0]
        )

    def test_returns_new_matrix(self):
        m = Matrix([1.2, 3.7], (1, 2))
        rounded = m.round()
        assert m[1, 1] == 1.2
        assert rounded[1, 1] == 1.0

    def test_round_inplace(self):
        m = Matrix([1.2, 3.7, -0.6, 8.0], (2, 2))
        m.round_inplace()
        np.testing.assert_array_equal(m.items, [1.0, 4.0, -1.0, 8.0])
        assert m.order == (2, 2)

    def test_whole_numbers_past_2_pow_52_unchanged(self):
        m = Matrix([4503599627370497.0, -4503599627370497.0], (1, 2))
        np.testing.assert_array_equal(
            m.round().items, [4503599627370497.0, -4503599627370497.0]
        )

    def test_largest_double_below_half(self):
        m = Matrix([0.49999999999999994, -0.49999999999999994], (1, 2))
        np.testing.assert_array_equal(m.round().items, [0.0, 0.0])

    def test_non_finite_pass_through(self):
        with pytest.warns(NonFiniteWarning):
            m = Matrix([np.inf, -np.inf, np.nan], (1, 3))
        with pytest.warns(NonFiniteWarning):
            rounded = m.round()
        assert rounded[1, 1] == np.inf
        assert rounded[1, 2] == -np.inf
        assert np.isnan(rounded[1, 3])


class TestConversions:

    def test_to_numpy_shape(self, rect_matrix):
        array = rect_matrix.to_numpy()
        assert array.shape == (3, 2)
        np.testing.assert_array_equal(array, [[1, 2], [3, 4], [5, 6]])

    def test_to_numpy_is_copy(self, rect_matrix):
        rect_matrix.to_numpy()[0, 0] = 100.0
        assert rect_matrix[1, 1] == 1.0

    def test_copy_is_independent(self, rect_matrix):
        clone = rect_matrix.copy()
        assert clone == rect_matrix
        clone.set(1, 1, 0)
        assert clone != rect_matrix
