"""Cluster endpoint configuration loader."""

from pathlib import Path
from typing import Any

import yaml


def load_clusters() -> dict[str, Any]:
    """
    Load cluster endpoints from the packaged clusters.yaml.

    Returns
    -------
    dict[str, Any]
        Configuration with ``default_cluster`` and a ``clusters`` mapping

    """
    path = Path(__file__).parent / "clusters.yaml"
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def get_cluster_config(cluster: str) -> dict[str, Any]:
    """
    Get configuration for a specific cluster.

    Parameters
    ----------
    cluster : str
        Cluster name (e.g., 'devnet', 'mainnet-beta')

    Returns
    -------
    dict[str, Any]
        Cluster configuration including the RPC URL

    Raises
    ------
    KeyError
        If cluster is not found in configuration

    """
    return load_clusters()["clusters"][cluster]


def get_cluster_url(cluster: str) -> str:
    """Get the default RPC URL of a cluster."""
    return get_cluster_config(cluster)["rpc_url"]


def get_default_cluster() -> str:
    """Get the cluster used when none is configured."""
    return load_clusters()["default_cluster"]


def get_all_clusters() -> list[str]:
    """
    Get list of all known cluster names.

    Returns
    -------
    list[str]
        List of cluster names

    """
    return list(load_clusters()["clusters"].keys())
