import logging
from typing import Iterator, List, Tuple, Union

import numpy as np
from pydantic import ConfigDict
from pydantic.dataclasses import dataclass

from .matrix import MatrixShape, MatrixView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge between zero-based node indices"""

    source: int
    target: int
    weight: float


@dataclass(frozen=True)
class EdgeList:
    """Edges in insertion order, over nodes ``0 .. n_nodes - 1``"""

    edges: Tuple[Edge, ...]
    n_nodes: int

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def as_tuples(self) -> List[Tuple[int, int, float]]:
        return [(edge.source, edge.target, edge.weight) for edge in self.edges]


@dataclass(frozen=True, config=ConfigDict(arbitrary_types_allowed=True))
class DenseNetwork:
    """Dense adjacency matrix handed unchanged to the engine"""

    matrix: np.ndarray

    @property
    def n_nodes(self) -> int:
        return self.matrix.shape[0]


Network = Union[DenseNetwork, EdgeList]


def _edge_from_triplet(row: float, col: float, weight: float) -> Edge:
    # Emitted as (column, row) whatever the triangular form
    return Edge(source=int(col) - 1, target=int(row) - 1, weight=float(weight))


def build_edge_list(view: MatrixView, shape: MatrixShape) -> EdgeList:
    """
    Turn a classified triplet list into undirected edges

    Triangular lists keep every triplet. Symmetric lists keep only triplets with
    row < column so the mirrored half is not counted twice. Weights are passed
    through and duplicate pairs are not merged.

    Args:
        view: Validated triplet list
        shape: Its classification

    Returns:
        Edge list whose node count is the largest endpoint plus one
    """
    if shape in (MatrixShape.SPARSE_UPPER_TRIANGULAR, MatrixShape.SPARSE_LOWER_TRIANGULAR):
        keep = np.ones(view.n_rows, dtype=bool)
    elif shape is MatrixShape.SPARSE_SYMMETRIC:
        keep = view.triplet_rows < view.triplet_cols
    else:
        raise ValueError(f"Cannot build an edge list from a {shape.value} matrix")

    edges = tuple(
        _edge_from_triplet(row, col, weight)
        for row, col, weight in zip(view.triplet_rows[keep], view.triplet_cols[keep], view.triplet_weights[keep])
    )
    n_nodes = max((max(edge.source, edge.target) + 1 for edge in edges), default=0)

    logger.debug(f"Built {len(edges)} edges over {n_nodes} nodes from {view.n_rows} triplets ({shape.value})")
    return EdgeList(edges=edges, n_nodes=n_nodes)


def build_network(view: MatrixView, shape: MatrixShape) -> Network:
    """Dense matrices pass through; triplet lists become edge lists"""
    if shape is MatrixShape.DENSE:
        return DenseNetwork(matrix=view.values)
    return build_edge_list(view, shape)
