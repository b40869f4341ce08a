from abc import ABC, abstractmethod
from typing import Optional
import numpy as np
from pydantic.dataclasses import dataclass
from pydantic import Field

from flowcomm.shared.network import Network
from .results import PartitionResult


@dataclass
class ClusteringConfig:
    """Base configuration for graph clustering algorithms"""
    random_state: Optional[int] = Field(None, description="Random seed, engine default when None")


class ClusteringAlgorithm(ABC):
    """Abstract base class for graph clustering algorithms"""

    def __init__(self, config: ClusteringConfig):
        self.config = config
        self._is_fitted = False
        self._result: Optional[PartitionResult] = None

    @abstractmethod
    def fit(self, network: Network) -> 'ClusteringAlgorithm':
        """
        Partition the network

        Args:
            network: Dense adjacency matrix or canonical edge list

        Returns:
            Self for method chaining
        """
        pass

    def fit_predict(self, network: Network) -> np.ndarray:
        """
        Partition the network and return the membership vector

        Args:
            network: Dense adjacency matrix or canonical edge list

        Returns:
            Cluster id per node, shape (n_nodes,)
        """
        return self.fit(network).get_labels()

    @property
    def is_fitted(self) -> bool:
        """Check if the algorithm has been fitted"""
        return self._is_fitted

    @property
    def result(self) -> PartitionResult:
        if not self._is_fitted:
            raise ValueError("Model must be fitted before reading the partition")
        return self._result

    def get_labels(self) -> Optional[np.ndarray]:
        """
        Get the membership vector if fitted

        Returns:
            Membership vector or None if not fitted
        """
        if self._result is None:
            return None
        return self._result.membership

    def get_codelength(self) -> Optional[float]:
        if self._result is None:
            return None
        return self._result.codelength
