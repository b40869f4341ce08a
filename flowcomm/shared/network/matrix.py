"""
Validation and structural classification of network matrices

A network is given either as a dense N x N adjacency matrix or as an M x 3
triplet list ``(row, column, weight)`` with 1-based indices, as produced by
``[i, j, w] = find(A)`` on a sparse adjacency matrix. Triplet lists are told
apart from dense matrices by their shape: exactly 3 columns and more than 3 rows.
"""

import logging
from enum import Enum
from typing import Any, Tuple

import numpy as np
import scipy.sparse as sp
from pydantic import ConfigDict
from pydantic.dataclasses import dataclass

from flowcomm.shared.errors import ArgumentError, ErrorKind

logger = logging.getLogger(__name__)

TRIPLET_COLUMNS = 3

# Numeric dtype kinds accepted as real input: signed, unsigned, floating
_REAL_KINDS = "iuf"


class MatrixShape(str, Enum):
    DENSE = "dense"
    SPARSE_SYMMETRIC = "sparse-symmetric"
    SPARSE_UPPER_TRIANGULAR = "sparse-upper-triangular"
    SPARSE_LOWER_TRIANGULAR = "sparse-lower-triangular"
    SPARSE_INVALID = "sparse-invalid"


def is_triplet_shape(n_rows: int, n_cols: int) -> bool:
    """Whether an array of this shape is read as a triplet list"""
    return n_cols == TRIPLET_COLUMNS and n_rows > TRIPLET_COLUMNS


def _invalid(detail: str) -> ArgumentError:
    return ArgumentError(ErrorKind.INVALID_MATRIX, 0, detail=detail)


def sparse_to_triplets(matrix: sp.spmatrix) -> np.ndarray:
    """
    Convert a scipy sparse matrix to its 1-based triplet list

    Entries are listed in column-major order, skipping explicit zeros. Matrices
    with at most 3 stored entries come back dense, since a triplet list needs
    more than 3 rows to be recognized as one.
    """
    if matrix.shape[0] != matrix.shape[1]:
        raise _invalid(f"sparse matrix must be square, got shape {matrix.shape}")

    rows, cols, weights = sp.find(matrix)
    if len(weights) <= TRIPLET_COLUMNS:
        return matrix.toarray()

    order = np.lexsort((rows, cols))
    return np.column_stack((rows[order] + 1, cols[order] + 1, weights[order]))


@dataclass(frozen=True, config=ConfigDict(arbitrary_types_allowed=True))
class MatrixView:
    """
    Read-only, validated view over a network matrix

    Build instances with ``from_input``; the constructor does not validate.
    """

    values: np.ndarray
    is_triplet: bool

    @property
    def n_rows(self) -> int:
        return self.values.shape[0]

    @property
    def n_cols(self) -> int:
        return self.values.shape[1]

    @classmethod
    def from_input(cls, raw: Any) -> "MatrixView":
        """
        Validate raw caller input and wrap it

        Args:
            raw: Dense matrix, triplet array, nested lists or scipy sparse matrix

        Returns:
            Validated view

        Raises:
            ArgumentError: INVALID_MATRIX at position 0 on any violation
        """
        if sp.issparse(raw):
            raw = sparse_to_triplets(raw)

        try:
            array = np.asarray(raw)
        except ValueError as e:
            # Ragged nested sequences
            raise _invalid(str(e)) from e

        if array.dtype.kind == "c":
            raise _invalid("complex values are not supported")
        if array.dtype.kind not in _REAL_KINDS:
            raise _invalid(f"non numeric dtype {array.dtype}")
        if array.size == 0:
            raise _invalid("matrix is empty")
        if array.ndim != 2:
            raise _invalid(f"expected a 2D array, got {array.ndim}D")

        n_rows, n_cols = array.shape
        is_triplet = is_triplet_shape(n_rows, n_cols)
        if not is_triplet and n_rows != n_cols:
            raise _invalid(f"dense matrix must be square, got shape {array.shape}")

        values = np.array(array, dtype=np.float64)
        if is_triplet:
            indices = values[:, :2]
            if not np.all(np.isfinite(indices)) or np.any(indices != np.floor(indices)):
                raise _invalid("triplet indices must be integers")
            if np.any(indices < 1):
                raise _invalid("triplet indices are 1-based")
        values.setflags(write=False)

        logger.debug(f"Validated {'triplet' if is_triplet else 'dense'} matrix of shape {values.shape}")
        return cls(values=values, is_triplet=is_triplet)

    def _require_triplet(self) -> None:
        if not self.is_triplet:
            raise ValueError("Matrix is not a triplet list")

    @property
    def triplet_rows(self) -> np.ndarray:
        """1-based row indices of a triplet list"""
        self._require_triplet()
        return self.values[:, 0]

    @property
    def triplet_cols(self) -> np.ndarray:
        """1-based column indices of a triplet list"""
        self._require_triplet()
        return self.values[:, 1]

    @property
    def triplet_weights(self) -> np.ndarray:
        self._require_triplet()
        return self.values[:, 2]

    def triplet(self, index: int) -> Tuple[int, int, float]:
        """The ``index``-th triplet as ``(row, column, weight)``"""
        self._require_triplet()
        if not 0 <= index < self.n_rows:
            raise IndexError(f"Triplet index {index} out of range for {self.n_rows} triplets")
        row, col, weight = self.values[index]
        return int(row), int(col), float(weight)


def count_triangle_halves(view: MatrixView) -> Tuple[int, int]:
    """
    Count triplets on each side of the diagonal

    Returns:
        ``(sum1, sum2)`` with sum1 the triplets where row >= column (lower
        half, diagonal included) and sum2 those where row < column
    """
    rows, cols = view.triplet_rows, view.triplet_cols
    sum1 = int(np.count_nonzero(rows >= cols))
    sum2 = int(np.count_nonzero(rows < cols))
    return sum1, sum2


def detect_shape(view: MatrixView) -> MatrixShape:
    """
    Classify a validated matrix without raising on invalid triplet lists

    Only counts which half of the index plane every triplet falls in; mirrored
    weights are never compared.
    """
    if not view.is_triplet:
        return MatrixShape.DENSE

    n_triplets = view.n_rows
    sum1, sum2 = count_triangle_halves(view)
    logger.debug(f"Triplet halves: sum1={sum1} sum2={sum2} of {n_triplets}")

    if sum1 == sum2:
        return MatrixShape.SPARSE_SYMMETRIC
    if sum1 == 0 and sum2 == n_triplets:
        return MatrixShape.SPARSE_UPPER_TRIANGULAR
    if sum1 == n_triplets and sum2 == 0:
        return MatrixShape.SPARSE_LOWER_TRIANGULAR
    return MatrixShape.SPARSE_INVALID


def classify_matrix(view: MatrixView) -> MatrixShape:
    """
    Classify a validated matrix

    Raises:
        ArgumentError: INVALID_MATRIX when a triplet list is neither balanced
            between both halves nor entirely in one of them
    """
    shape = detect_shape(view)
    if shape is MatrixShape.SPARSE_INVALID:
        raise _invalid("matrix is not symmetric nor purely upper/lower triangular")
    return shape
