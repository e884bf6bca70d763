"""Read-API JSON-RPC client, its capability interface, and an optional retry layer."""

from cnft_read_api.rpc.client import DEFAULT_REQUEST_ID, ReadApiClient, build_list_params, validate_pagination
from cnft_read_api.rpc.interface import ReadApiInterface
from cnft_read_api.rpc.retry import RetryConfig, RetryingReadApiClient

__all__ = [
    "DEFAULT_REQUEST_ID",
    "ReadApiClient",
    "ReadApiInterface",
    "RetryConfig",
    "RetryingReadApiClient",
    "build_list_params",
    "validate_pagination",
]
