"""Packaged cluster configuration."""

from cnft_read_api.data.loader import (
    get_all_clusters,
    get_cluster_config,
    get_cluster_url,
    get_default_cluster,
    load_clusters,
)

__all__ = [
    "get_all_clusters",
    "get_cluster_config",
    "get_cluster_url",
    "get_default_cluster",
    "load_clusters",
]
