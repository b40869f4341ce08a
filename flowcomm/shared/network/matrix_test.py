import numpy as np
import pytest
import scipy.sparse as sp

from flowcomm.shared.errors import ArgumentError, ErrorKind
from flowcomm.shared.network.matrix import (
    MatrixShape,
    MatrixView,
    classify_matrix,
    count_triangle_halves,
    detect_shape,
    sparse_to_triplets,
)

PATH_BOTH_DIRECTIONS = [
    [1, 2, 0.5],
    [2, 3, 0.5],
    [2, 1, 0.5],
    [3, 2, 0.5],
]


def assert_invalid_matrix(raw):
    with pytest.raises(ArgumentError) as exc_info:
        MatrixView.from_input(raw)
    assert exc_info.value.kind is ErrorKind.INVALID_MATRIX
    assert exc_info.value.position == 0


class TestMatrixValidation:
    def test_dense_square(self):
        view = MatrixView.from_input(np.eye(3))
        assert not view.is_triplet
        assert (view.n_rows, view.n_cols) == (3, 3)

    def test_nested_lists(self):
        view = MatrixView.from_input([[0, 1], [1, 0]])
        assert view.values.dtype == np.float64

    def test_view_is_read_only(self):
        view = MatrixView.from_input(np.eye(3))
        with pytest.raises(ValueError):
            view.values[0, 0] = 5

    def test_input_not_modified(self):
        raw = np.eye(3)
        MatrixView.from_input(raw)
        assert raw.flags.writeable

    def test_triplet_detected(self):
        view = MatrixView.from_input(PATH_BOTH_DIRECTIONS)
        assert view.is_triplet
        assert view.n_rows == 4

    def test_three_by_three_is_dense(self):
        view = MatrixView.from_input([[1, 2, 0.5], [2, 3, 0.5], [3, 1, 0.5]])
        assert not view.is_triplet

    def test_non_square(self):
        assert_invalid_matrix(np.ones((2, 4)))

    def test_complex(self):
        assert_invalid_matrix(np.eye(3, dtype=complex))

    def test_empty(self):
        assert_invalid_matrix(np.zeros((0, 0)))

    def test_strings(self):
        assert_invalid_matrix([["a", "b"], ["c", "d"]])

    def test_ragged(self):
        assert_invalid_matrix([[1, 2], [3]])

    def test_object_container(self):
        assert_invalid_matrix(np.array([[{}, {}], [{}, {}]], dtype=object))

    def test_boolean(self):
        assert_invalid_matrix(np.eye(3, dtype=bool))

    def test_one_dimensional(self):
        assert_invalid_matrix(np.ones(4))

    def test_fractional_triplet_index(self):
        assert_invalid_matrix([[1, 2.5, 1], [2, 1, 1], [1, 3, 1], [3, 1, 1]])

    def test_zero_triplet_index(self):
        assert_invalid_matrix([[0, 2, 1], [2, 1, 1], [1, 3, 1], [3, 1, 1]])

    def test_triplet_accessor(self):
        view = MatrixView.from_input(PATH_BOTH_DIRECTIONS)
        assert view.triplet(1) == (2, 3, 0.5)
        with pytest.raises(IndexError):
            view.triplet(4)

    def test_triplet_accessors_need_triplets(self):
        view = MatrixView.from_input(np.eye(3))
        with pytest.raises(ValueError):
            view.triplet_rows


class TestClassification:
    def test_dense(self):
        view = MatrixView.from_input(np.ones((5, 5)))
        assert classify_matrix(view) is MatrixShape.DENSE

    def test_symmetric(self):
        view = MatrixView.from_input(PATH_BOTH_DIRECTIONS)
        assert count_triangle_halves(view) == (2, 2)
        assert classify_matrix(view) is MatrixShape.SPARSE_SYMMETRIC

    def test_upper_triangular(self):
        view = MatrixView.from_input([[1, 2, 1], [1, 3, 1], [2, 3, 1], [3, 4, 1]])
        assert classify_matrix(view) is MatrixShape.SPARSE_UPPER_TRIANGULAR

    def test_lower_triangular(self):
        view = MatrixView.from_input([[2, 1, 1], [3, 1, 1], [3, 2, 1], [4, 3, 1]])
        assert classify_matrix(view) is MatrixShape.SPARSE_LOWER_TRIANGULAR

    def test_diagonal_counts_as_lower(self):
        view = MatrixView.from_input([[1, 1, 1], [2, 2, 1], [3, 1, 1], [4, 2, 1]])
        assert classify_matrix(view) is MatrixShape.SPARSE_LOWER_TRIANGULAR

    def test_unbalanced_is_invalid(self):
        view = MatrixView.from_input([[1, 2, 1], [1, 3, 1], [2, 3, 1], [3, 1, 1]])
        assert detect_shape(view) is MatrixShape.SPARSE_INVALID
        with pytest.raises(ArgumentError) as exc_info:
            classify_matrix(view)
        assert exc_info.value.kind is ErrorKind.INVALID_MATRIX
        assert exc_info.value.position == 0

    def test_balanced_counts_with_asymmetric_weights(self):
        # Only index halves are counted, weights are never compared
        view = MatrixView.from_input([[1, 2, 1.0], [3, 1, 9.0], [1, 4, 2.0], [4, 2, 7.0]])
        assert classify_matrix(view) is MatrixShape.SPARSE_SYMMETRIC


class TestSparseInput:
    def test_sparse_to_column_major_triplets(self):
        dense = np.array(
            [
                [0, 1, 0],
                [1, 0, 2],
                [0, 2, 0],
            ],
            dtype=float,
        )
        triplets = sparse_to_triplets(sp.csr_matrix(dense))
        np.testing.assert_array_equal(
            triplets,
            [
                [2, 1, 1],
                [1, 2, 1],
                [3, 2, 2],
                [2, 3, 2],
            ],
        )

    def test_sparse_input_classified(self):
        dense = np.array([[0, 1, 0], [1, 0, 2], [0, 2, 0]], dtype=float)
        view = MatrixView.from_input(sp.csr_matrix(dense))
        assert classify_matrix(view) is MatrixShape.SPARSE_SYMMETRIC

    def test_few_entries_stay_dense(self):
        dense = np.array([[0, 1], [1, 0]], dtype=float)
        view = MatrixView.from_input(sp.csr_matrix(dense))
        assert classify_matrix(view) is MatrixShape.DENSE

    def test_non_square_sparse(self):
        assert_invalid_matrix(sp.csr_matrix(np.ones((2, 3))))
