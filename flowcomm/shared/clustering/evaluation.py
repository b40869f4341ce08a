import numpy as np
import pandas as pd
from sklearn.metrics import (
    adjusted_rand_score,
    adjusted_mutual_info_score,
    normalized_mutual_info_score,
)
from typing import Dict, Any, Optional
import warnings


class PartitionEvaluator:
    """Summarizes network partitions and compares them against reference labels"""

    @staticmethod
    def evaluate(membership: np.ndarray, true_labels: Optional[np.ndarray] = None) -> Dict[str, Any]:
        """
        Compute partition statistics

        Args:
            membership: Cluster id per node
            true_labels: Reference labels per node (optional, for comparison metrics)

        Returns:
            Dictionary containing evaluation metrics
        """
        membership = np.asarray(membership)
        sizes = PartitionEvaluator.get_cluster_sizes(membership)

        result = {
            "n_nodes": len(membership),
            "n_clusters": len(sizes),
            "n_singletons": int((sizes == 1).sum()),
            "largest_cluster_size": int(sizes.max()) if len(sizes) else 0,
            "mean_cluster_size": float(sizes.mean()) if len(sizes) else 0.0,
        }

        if true_labels is not None:
            true_labels = np.asarray(true_labels)
            if len(true_labels) != len(membership):
                raise ValueError(
                    f"Reference labels have {len(true_labels)} entries, partition has {len(membership)} nodes"
                )
            try:
                result.update(
                    {
                        "adjusted_rand_score": adjusted_rand_score(true_labels, membership),
                        "adjusted_mutual_info_score": adjusted_mutual_info_score(true_labels, membership),
                        "normalized_mutual_info_score": normalized_mutual_info_score(true_labels, membership),
                    }
                )
            except Exception as e:
                warnings.warn(f"Error computing comparison metrics: {e}")
                result["comparison_metrics_error"] = str(e)

        return result

    @staticmethod
    def get_cluster_sizes(membership: np.ndarray) -> pd.Series:
        """Number of nodes per cluster id, largest first"""
        return pd.Series(np.asarray(membership)).value_counts()
