"""
Network ingestion

Validates dense or triplet-list network matrices, classifies their structure
and canonicalizes them into undirected weighted edges.
"""

from .matrix import MatrixShape, MatrixView, classify_matrix, detect_shape, sparse_to_triplets
from .edges import DenseNetwork, Edge, EdgeList, Network, build_edge_list, build_network

__all__ = [
    "MatrixShape",
    "MatrixView",
    "classify_matrix",
    "detect_shape",
    "sparse_to_triplets",
    "DenseNetwork",
    "Edge",
    "EdgeList",
    "Network",
    "build_edge_list",
    "build_network",
]
