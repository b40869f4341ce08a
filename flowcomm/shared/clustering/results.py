from typing import Iterable, NamedTuple

import numpy as np


class Leaf(NamedTuple):
    """A leaf of the engine's hierarchy: an original node and its top-level cluster"""

    original_index: int
    cluster_index: int


class PartitionResult(NamedTuple):
    membership: np.ndarray
    codelength: float


def map_membership(leaves: Iterable[Leaf], n_nodes: int, codelength: float) -> PartitionResult:
    """
    Flatten the engine's leaf traversal into a membership vector

    Args:
        leaves: Leaves in traversal order
        n_nodes: Number of nodes of the network handed to the engine
        codelength: Codelength reported by the engine, copied as is

    Returns:
        Cluster id per original node, in original node order

    Raises:
        IndexError: If a leaf refers to a node outside ``0 .. n_nodes - 1``,
            meaning the engine and the edge list disagree on the node count
    """
    membership = np.zeros(n_nodes, dtype=np.int64)
    for leaf in leaves:
        if not 0 <= leaf.original_index < n_nodes:
            raise IndexError(f"Leaf node {leaf.original_index} outside of network with {n_nodes} nodes")
        membership[leaf.original_index] = leaf.cluster_index
    return PartitionResult(membership=membership, codelength=codelength)
