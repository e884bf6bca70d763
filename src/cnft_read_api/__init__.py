"""Read-API client and response transformers for compressed NFTs."""

from cnft_read_api.core import (
    Metadata,
    Mint,
    NftOriginalEdition,
    ReadApiAsset,
    ReadApiAssetList,
    find_leaf_asset_address,
    to_edition_view,
    to_metadata_view,
    to_mint_view,
)
from cnft_read_api.errors import (
    AssetMappingError,
    PaginationError,
    ReadApiError,
    ReadApiResponseError,
    ReadApiTransportError,
)
from cnft_read_api.rpc import ReadApiClient, ReadApiInterface, RetryConfig, RetryingReadApiClient

__version__ = "0.1.0"

__all__ = [
    "AssetMappingError",
    "Metadata",
    "Mint",
    "NftOriginalEdition",
    "PaginationError",
    "ReadApiAsset",
    "ReadApiAssetList",
    "ReadApiClient",
    "ReadApiError",
    "ReadApiInterface",
    "ReadApiResponseError",
    "ReadApiTransportError",
    "RetryConfig",
    "RetryingReadApiClient",
    "find_leaf_asset_address",
    "to_edition_view",
    "to_metadata_view",
    "to_mint_view",
]
