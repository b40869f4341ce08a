#!/usr/bin/env python3
"""
Network Partitioning Script

Partitions a network stored on disk with two-level Infomap and writes the
membership of every node to CSV.

The script processes the network through the following phases:
1. Load and validate configuration
2. Load the matrix (dense N x N, M x 3 triplet list or scipy sparse .npz)
3. Validate the Infomap options and the matrix, then run the engine
4. Write the membership CSV and, optionally, partition metrics as JSON

Example config:

    matrix_file: "data/network.csv"
    output_file: "results/membership.csv"
    metrics_file: "results/metrics.json"   # optional
    true_labels_file: "data/labels.txt"    # optional, one label per node
    options:                               # optional, validated like the call arguments
      N: 10
      "markov-time": 0.8

Output CSV columns:
    - node: zero-based node index
    - cluster: zero-based cluster id
"""

import json
import logging
import sys
from typing import Any

import click
import numpy as np
import pandas as pd
import scipy.sparse as sp

from flowcomm.shared.clustering import PartitionEvaluator, partition_network
from flowcomm.shared.utils.numpy_helpers import convert_to_primitives_nested
from flowcomm.scripts.partition_network.config import Config


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the script."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")


def load_matrix(matrix_file: str) -> Any:
    """
    Load a network matrix from disk.

    Args:
        matrix_file: .npy dense or triplet array, .npz scipy sparse matrix, or
            .csv/.txt numeric table without header

    Returns:
        numpy array or scipy sparse matrix
    """
    logging.info(f"Loading matrix from: {matrix_file}")
    lower = matrix_file.lower()
    if lower.endswith(".npy"):
        return np.load(matrix_file)
    if lower.endswith(".npz"):
        return sp.load_npz(matrix_file)
    table = pd.read_csv(matrix_file, header=None, sep=r"[,\s]+", engine="python")
    return table.to_numpy()


def load_true_labels(labels_file: str) -> np.ndarray:
    """Load one reference label per line."""
    logging.info(f"Loading reference labels from: {labels_file}")
    return pd.read_csv(labels_file, header=None).iloc[:, 0].to_numpy()


def save_membership(membership: np.ndarray, output_file: str) -> None:
    """Write node/cluster pairs to CSV."""
    df = pd.DataFrame({"node": np.arange(len(membership)), "cluster": membership})
    df.to_csv(output_file, index=False)
    logging.info(f"Wrote membership of {len(df)} nodes to {output_file}")


def run(config_obj: Config) -> dict:
    """Partition the configured network and return its metrics."""
    matrix = load_matrix(config_obj.matrix_file)
    result = partition_network(
        matrix,
        *config_obj.option_pairs(),
        silent=config_obj.silent,
        random_state=config_obj.random_state,
    )

    true_labels = load_true_labels(config_obj.true_labels_file) if config_obj.true_labels_file else None
    metrics = PartitionEvaluator.evaluate(result.membership, true_labels)
    metrics["codelength"] = result.codelength

    logging.info(f"Codelength: {result.codelength:.6f}")
    logging.info(f"Clusters: {metrics['n_clusters']} over {metrics['n_nodes']} nodes")

    save_membership(result.membership, config_obj.output_file)
    if config_obj.metrics_file:
        with open(config_obj.metrics_file, "w") as f:
            json.dump(convert_to_primitives_nested(metrics), f, indent=2)
        logging.info(f"Wrote metrics to {config_obj.metrics_file}")

    return metrics


@click.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, readable=True),
    required=True,
    help="Path to YAML configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(config: str, verbose: bool):
    """
    Partition a network with two-level Infomap.

    Examples:

        python run.py --config config.yaml

        python run.py --config config.yaml --verbose
    """
    setup_logging(verbose)

    try:
        logging.info(f"Loading configuration from: {config}")
        config_obj = Config.from_yaml(config)

        run(config_obj)

        logging.info("Network partitioning completed successfully")

    except Exception as e:
        logging.error(f"Script failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
