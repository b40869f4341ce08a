"""Clustering algorithm implementations"""

from .infomap import InfomapClustering, InfomapConfig

__all__ = [
    "InfomapClustering",
    "InfomapConfig",
]
