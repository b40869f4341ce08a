import logging
from typing import List

import numpy as np
from infomap import Infomap
from pydantic.dataclasses import dataclass
from pydantic import Field

from flowcomm.shared.errors import EngineError
from flowcomm.shared.network import DenseNetwork, EdgeList, Network
from flowcomm.shared.options import InfomapOptions
from ..base import ClusteringAlgorithm, ClusteringConfig
from ..results import Leaf, map_membership

logger = logging.getLogger(__name__)


@dataclass
class InfomapConfig(ClusteringConfig):
    """Configuration for two-level Infomap clustering"""
    options: InfomapOptions = Field(default_factory=InfomapOptions, description="Validated engine options")
    silent: bool = Field(True, description="Suppress the engine's console output")

    def to_args(self) -> str:
        """Full engine argument string"""
        args = self.options.to_args()
        if self.random_state is not None:
            args += f" --seed {self.random_state}"
        if self.silent:
            args += " --silent"
        return args


def dense_links(matrix: np.ndarray) -> List[tuple]:
    """Non-zero entries of the strict upper triangle as (source, target, weight)"""
    rows, cols = np.nonzero(np.triu(matrix, k=1))
    return [(int(i), int(j), float(matrix[i, j])) for i, j in zip(rows, cols)]


class InfomapClustering(ClusteringAlgorithm):
    """Two-level Infomap partitioning of undirected weighted networks"""

    def __init__(self, config: InfomapConfig):
        super().__init__(config)

    def _build_engine(self, network: Network) -> Infomap:
        if isinstance(network, DenseNetwork):
            links = dense_links(network.matrix)
        elif isinstance(network, EdgeList):
            links = network.as_tuples()
        else:
            raise ValueError(f"Unsupported network type: {type(network).__name__}")

        try:
            engine = Infomap(self.config.to_args())

            # Register every node so isolated ones still get a module
            for node in range(network.n_nodes):
                engine.add_node(node)
            for source, target, weight in links:
                engine.add_link(source, target, weight)
        except Exception as e:
            # Includes options the engine cannot parse
            raise EngineError(str(e)) from e

        logger.debug(f"Engine network: {network.n_nodes} nodes, {len(links)} links")
        return engine

    def fit(self, network: Network) -> "InfomapClustering":
        """Run Infomap and collect the top-level module of every node"""
        engine = self._build_engine(network)
        logger.debug(f"Running Infomap with arguments: {self.config.to_args()}")

        try:
            engine.run()
            # Engine module ids are 1-based
            leaves = [Leaf(node_id, module_id - 1) for node_id, module_id in engine.get_modules(depth_level=1).items()]
            codelength = float(engine.codelength)
            n_modules = engine.num_top_modules
        except Exception as e:
            raise EngineError(str(e)) from e

        self._result = map_membership(leaves, network.n_nodes, codelength)
        self._is_fitted = True

        logger.info(f"Infomap found {n_modules} modules, codelength {codelength:.6f}")
        return self
