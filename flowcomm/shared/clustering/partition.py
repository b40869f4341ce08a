"""
Caller-facing entry point

``infomap_partition(matrix, name1, value1, ...)`` validates the matrix and the
name/value pairs, canonicalizes the network, runs two-level Infomap and returns
the membership vector and codelength. Validation is all-or-nothing: any
``ArgumentError`` is raised before the engine runs.

Example:

    membership, codelength = infomap_partition(adjacency, "N", 10, "markov-time", 0.8)
"""

import logging
from typing import Any, Optional

from flowcomm.shared.network import MatrixView, build_network, classify_matrix
from flowcomm.shared.options import check_argument_counts, parse_options
from .factory import ClusteringFactory
from .results import PartitionResult

logger = logging.getLogger(__name__)


def partition_network(
    matrix: Any, *pairs: Any, silent: bool = True, random_state: Optional[int] = None, algorithm: str = "infomap"
) -> PartitionResult:
    """
    Validate, canonicalize and partition a network

    Args:
        matrix: Dense N x N matrix, M x 3 triplet list or scipy sparse matrix
        *pairs: Flat ``name, value`` option pairs
        silent: Suppress the engine's console output
        random_state: Engine seed, engine default when None
        algorithm: Name registered in ClusteringFactory

    Returns:
        Membership vector and codelength

    Raises:
        ArgumentError: On invalid matrix or options
        EngineError: If the engine fails
    """
    view = MatrixView.from_input(matrix)
    options = parse_options(pairs, offset=1)

    shape = classify_matrix(view)
    network = build_network(view, shape)
    logger.debug(f"Classified input as {shape.value}, {network.n_nodes} nodes")

    model = ClusteringFactory.create_with_defaults(algorithm, options=options, silent=silent, random_state=random_state)
    return model.fit(network).result


def infomap_partition(matrix: Any = None, *pairs: Any, nargout: int = 2, **kwargs: Any):
    """
    Partition a network with two-level Infomap

    Args:
        matrix: Dense N x N matrix, M x 3 triplet list or scipy sparse matrix
        *pairs: Flat ``name, value`` pairs; recognized names are N, p, y and
            markov-time (case-insensitive)
        nargout: Number of requested outputs, at most 2
        **kwargs: Forwarded to ``partition_network``

    Returns:
        ``membership`` when nargout is 1, ``(membership, codelength)`` otherwise
    """
    n_args = 0 if matrix is None else 1 + len(pairs)
    check_argument_counts(n_args, nargout)

    result = partition_network(matrix, *pairs, **kwargs)
    if nargout == 1:
        return result.membership
    return result.membership, result.codelength
