"""Map read-API assets into the edition, mint and metadata views."""

from cnft_read_api.core.addresses import find_leaf_asset_address
from cnft_read_api.core.models import (
    AssetSupply,
    CollectionReference,
    Metadata,
    Mint,
    NftOriginalEdition,
    ReadApiAsset,
    SplTokenAmount,
    SplTokenCurrency,
    TokenStandard,
)
from cnft_read_api.errors import AssetMappingError

FULL_SCOPE = "full"
COLLECTION_GROUP_KEY = "collection"


def _require_supply(asset: ReadApiAsset) -> AssetSupply:
    if asset.supply is None:
        msg = f"Asset {asset.id} has no supply information."
        raise AssetMappingError(msg)
    return asset.supply


def to_edition_view(asset: ReadApiAsset) -> NftOriginalEdition:
    """
    Build the edition view of a compressed asset.

    Parameters
    ----------
    asset : ReadApiAsset
        Asset returned by ``getAsset``

    Returns
    -------
    NftOriginalEdition
        Original edition with the print supply counters copied verbatim

    Raises
    ------
    AssetMappingError
        If the asset carries no supply block

    """
    supply = _require_supply(asset)
    return NftOriginalEdition(
        address=asset.id,
        supply=supply.print_current_supply,
        max_supply=supply.print_max_supply,
    )


def to_mint_view(asset: ReadApiAsset) -> Mint:
    """
    Build a synthetic mint view of a compressed asset.

    Compressed assets have no mint account, so the asset id stands in for the
    mint, mint authority and freeze authority addresses.

    Parameters
    ----------
    asset : ReadApiAsset
        Asset returned by ``getAsset``

    Returns
    -------
    Mint
        Zero-decimal mint with a supply of one unit

    """
    currency = SplTokenCurrency(symbol="Token", decimals=0, namespace="spl-token")

    return Mint(
        address=asset.id,
        mint_authority_address=asset.id,
        freeze_authority_address=asset.id,
        decimals=0,
        supply=SplTokenAmount(basis_points=1, currency=currency),
        is_wrapped_sol=False,
        currency=currency,
    )


def to_metadata_view(asset: ReadApiAsset) -> Metadata:
    """
    Build the metadata view of a compressed asset.

    Parameters
    ----------
    asset : ReadApiAsset
        Asset returned by ``getAsset``

    Returns
    -------
    Metadata
        Metadata whose address is the leaf asset PDA, whose update authority
        is the first authority with 'full' scope, and whose collection (if
        any) is reported unverified

    Raises
    ------
    AssetMappingError
        If no authority has 'full' scope, the supply block is missing, or the
        tree address cannot be decoded

    """
    update_authority = next((a for a in asset.authorities if FULL_SCOPE in a.scopes), None)
    if update_authority is None:
        msg = "No update authority with full scope found."
        raise AssetMappingError(msg)

    supply = _require_supply(asset)

    collection = next((g for g in asset.grouping if g.group_key == COLLECTION_GROUP_KEY), None)

    json_metadata = asset.content.metadata
    metadata_fields = json_metadata or {}

    return Metadata(
        address=find_leaf_asset_address(asset.compression.tree, asset.compression.leaf_id),
        mint_address=asset.id,
        update_authority_address=update_authority.address,
        name=metadata_fields.get("name") or "",
        symbol=metadata_fields.get("symbol") or "",
        json_metadata=json_metadata,
        json_loaded=True,
        uri=asset.content.json_uri,
        is_mutable=asset.mutable,
        primary_sale_happened=asset.royalty.primary_sale_happened,
        seller_fee_basis_points=asset.royalty.basis_points,
        creators=asset.creators,
        edition_nonce=supply.edition_nonce,
        token_standard=TokenStandard.NON_FUNGIBLE,
        # Verification state is not exposed by the read API.
        collection=CollectionReference(address=collection.group_value, verified=False) if collection else None,
        compression=asset.compression,
    )
