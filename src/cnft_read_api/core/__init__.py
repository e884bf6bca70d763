"""Core functionality including models, address derivation, and transformers."""

from cnft_read_api.core.addresses import BUBBLEGUM_PROGRAM_ID, find_leaf_asset_address
from cnft_read_api.core.models import (
    AssetProof,
    AssetSortBy,
    AssetSortField,
    CollectionReference,
    Metadata,
    Mint,
    NftOriginalEdition,
    ReadApiAsset,
    ReadApiAssetList,
    SortDirection,
    TokenStandard,
)
from cnft_read_api.core.transformers import to_edition_view, to_metadata_view, to_mint_view

__all__ = [
    "BUBBLEGUM_PROGRAM_ID",
    "AssetProof",
    "AssetSortBy",
    "AssetSortField",
    "CollectionReference",
    "Metadata",
    "Mint",
    "NftOriginalEdition",
    "ReadApiAsset",
    "ReadApiAssetList",
    "SortDirection",
    "TokenStandard",
    "find_leaf_asset_address",
    "to_edition_view",
    "to_metadata_view",
    "to_mint_view",
]
