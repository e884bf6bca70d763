"""Runtime settings resolved from environment variables and cluster defaults."""

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field

from cnft_read_api.data import get_cluster_url, get_default_cluster
from cnft_read_api.rpc.client import DEFAULT_REQUEST_ID, ReadApiClient
from cnft_read_api.storage.keys import DEFAULT_KEY_DIR


class ReadApiSettings(BaseModel):
    """
    Settings for building a read-API client and locating local key files.

    Attributes
    ----------
    rpc_url : str
        Read-API endpoint
    cluster : str
        Cluster name used for explorer links and the default endpoint
    payer_keypair_path : Path | None
        Path to the payer's secret-key JSON array
    key_dir : Path
        Directory holding generated keypairs and the public-key registry
    request_id : str
        Default JSON-RPC id
    timeout : float
        Request timeout in seconds

    """

    rpc_url: str
    cluster: str = "devnet"
    payer_keypair_path: Path | None = None
    key_dir: Path = DEFAULT_KEY_DIR
    request_id: str = DEFAULT_REQUEST_ID
    timeout: float = Field(default=30.0, gt=0)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> "ReadApiSettings":
        """
        Resolve settings from environment variables.

        Recognized variables are ``RPC_URL``, ``SOLANA_CLUSTER``,
        ``LOCAL_PAYER_JSON_ABSPATH``, ``LOCAL_KEY_DIR``, ``READ_API_REQUEST_ID``
        and ``READ_API_TIMEOUT``. Keyword overrides that are not None win over
        the environment. Without an RPC URL the cluster's default endpoint is
        used.

        Parameters
        ----------
        environ : Mapping[str, str] | None
            Variables to read; defaults to ``os.environ``
        **overrides : object
            Explicit field values

        Returns
        -------
        ReadApiSettings
            Resolved settings

        Raises
        ------
        KeyError
            If the cluster is unknown and no RPC URL is given

        """
        env = os.environ if environ is None else environ

        values: dict[str, object] = {
            "rpc_url": env.get("RPC_URL"),
            "cluster": env.get("SOLANA_CLUSTER"),
            "payer_keypair_path": env.get("LOCAL_PAYER_JSON_ABSPATH"),
            "key_dir": env.get("LOCAL_KEY_DIR"),
            "request_id": env.get("READ_API_REQUEST_ID"),
            "timeout": env.get("READ_API_TIMEOUT"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        values = {k: v for k, v in values.items() if v not in (None, "")}

        values.setdefault("cluster", get_default_cluster())
        if "rpc_url" not in values:
            values["rpc_url"] = get_cluster_url(str(values["cluster"]))

        return cls.model_validate(values)

    def create_client(self) -> ReadApiClient:
        """Build a ``ReadApiClient`` for these settings."""
        return ReadApiClient(self.rpc_url, request_id=self.request_id, timeout=self.timeout)
