"""
Graph clustering module

Provides a generic interface for partitioning networks, the two-level Infomap
implementation and the caller-facing ``infomap_partition`` entry point.
"""

from .factory import ClusteringFactory
from .base import ClusteringAlgorithm, ClusteringConfig
from .evaluation import PartitionEvaluator
from .results import Leaf, PartitionResult, map_membership
from .partition import infomap_partition, partition_network

# Algorithm imports
from .algorithms.infomap import InfomapClustering, InfomapConfig

__all__ = [
    # Factory and base classes
    "ClusteringFactory",
    "ClusteringAlgorithm",
    "ClusteringConfig",
    # Evaluation
    "PartitionEvaluator",
    # Results
    "Leaf",
    "PartitionResult",
    "map_membership",
    # Entry points
    "infomap_partition",
    "partition_network",
    # Specific algorithms
    "InfomapClustering",
    "InfomapConfig",
]
