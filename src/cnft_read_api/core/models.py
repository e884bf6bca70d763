"""Data models for read-API responses and the domain views derived from them."""

from enum import IntEnum, StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Merkle proof bundles are passed through untouched.
AssetProof = dict[str, Any]


class ReadApiModel(BaseModel):
    """Base for shapes returned by the read API; unknown keys are kept."""

    model_config = ConfigDict(extra="allow")


class ViewModel(BaseModel):
    """Base for immutable domain views, serialized with camelCase names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class AssetSortField(StrEnum):
    """Sort keys accepted by the asset-list methods."""

    CREATED = "created"
    UPDATED = "updated"
    RECENT_ACTION = "recent_action"
    NONE = "none"


class SortDirection(StrEnum):
    """Sort direction for asset-list queries."""

    ASC = "asc"
    DESC = "desc"


class TokenStandard(IntEnum):
    """Token standard discriminator used by token metadata."""

    NON_FUNGIBLE = 0
    FUNGIBLE_ASSET = 1
    FUNGIBLE = 2
    NON_FUNGIBLE_EDITION = 3
    PROGRAMMABLE_NON_FUNGIBLE = 4


class AssetAuthority(ReadApiModel):
    """
    Authority entry attached to an asset.

    Attributes
    ----------
    address : str
        Base-58 authority address
    scopes : list[str]
        Granted scopes (e.g., 'full', 'metadata')

    """

    address: str
    scopes: list[str] = Field(default_factory=list)


class AssetGrouping(ReadApiModel):
    """Grouping entry, e.g. ``{"group_key": "collection", "group_value": <mint>}``."""

    group_key: str
    group_value: str


class AssetCompression(ReadApiModel):
    """
    Compression details locating the asset's leaf in its Merkle tree.

    Attributes
    ----------
    tree : str
        Base-58 address of the Merkle tree account
    leaf_id : int
        Leaf index (nonce) inside the tree

    """

    tree: str
    leaf_id: int
    eligible: bool | None = None
    compressed: bool | None = None
    data_hash: str | None = None
    creator_hash: str | None = None
    asset_hash: str | None = None
    seq: int | None = None


class AssetSupply(ReadApiModel):
    """Print supply counters and edition nonce."""

    print_max_supply: int | None = None
    print_current_supply: int | None = None
    edition_nonce: int | None = None


class AssetRoyalty(ReadApiModel):
    """Royalty configuration."""

    basis_points: int
    primary_sale_happened: bool
    royalty_model: str | None = None
    target: str | None = None
    percent: float | None = None
    locked: bool | None = None


class AssetCreator(ReadApiModel):
    """Creator entry with its royalty share."""

    address: str
    share: int
    verified: bool


class AssetOwnership(ReadApiModel):
    """Ownership and delegation state."""

    owner: str
    frozen: bool | None = None
    delegated: bool | None = None
    delegate: str | None = None
    ownership_model: str | None = None


class AssetContent(ReadApiModel):
    """
    Off-chain content pointer and the decoded JSON metadata.

    Attributes
    ----------
    json_uri : str
        URI of the off-chain JSON document
    metadata : dict[str, Any] | None
        Decoded metadata (name, symbol, attributes, ...)

    """

    json_uri: str
    metadata: dict[str, Any] | None = None
    schema_url: str | None = Field(default=None, alias="$schema")
    files: list[dict[str, Any]] | None = None
    links: dict[str, Any] | None = None


class ReadApiAsset(ReadApiModel):
    """
    Compressed asset as returned by ``getAsset``.

    Attributes
    ----------
    id : str
        Base-58 asset id
    content : AssetContent
        Metadata URI and decoded JSON
    authorities : list[AssetAuthority]
        Authorities with their scopes
    compression : AssetCompression
        Tree address and leaf index
    grouping : list[AssetGrouping]
        Group memberships (collections)
    royalty : AssetRoyalty
        Royalty basis points and primary-sale flag
    creators : list[AssetCreator]
        Creator list
    mutable : bool
        Whether metadata may still change
    supply : AssetSupply | None
        Print supply counters

    """

    id: str
    content: AssetContent
    authorities: list[AssetAuthority]
    compression: AssetCompression
    grouping: list[AssetGrouping]
    royalty: AssetRoyalty
    creators: list[AssetCreator]
    mutable: bool
    interface: str | None = None
    ownership: AssetOwnership | None = None
    supply: AssetSupply | None = None
    burnt: bool | None = None


class ReadApiAssetList(ReadApiModel):
    """Page of assets returned by the list methods."""

    total: int
    limit: int
    items: list[ReadApiAsset] = Field(default_factory=list)
    page: int | None = None
    before: str | None = None
    after: str | None = None
    cursor: str | None = None


class AssetSortBy(BaseModel):
    """Sort criteria, serialized as ``{"sortBy": ..., "sortDirection": ...}``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    sort_by: AssetSortField
    sort_direction: SortDirection = SortDirection.DESC


class NftOriginalEdition(ViewModel):
    """Edition view of a compressed asset; always an original edition."""

    model: Literal["nftEdition"] = "nftEdition"
    is_original: Literal[True] = True
    address: str
    supply: int | None
    max_supply: int | None


class SplTokenCurrency(ViewModel):
    """Currency descriptor for a token amount."""

    symbol: str = "Token"
    decimals: int = 0
    namespace: Literal["spl-token"] = "spl-token"


class SplTokenAmount(ViewModel):
    """Amount expressed in the currency's smallest unit."""

    basis_points: int
    currency: SplTokenCurrency


class Mint(ViewModel):
    """Synthetic mint view of a compressed asset."""

    model: Literal["mint"] = "mint"
    address: str
    mint_authority_address: str
    freeze_authority_address: str
    decimals: int
    supply: SplTokenAmount
    is_wrapped_sol: bool
    currency: SplTokenCurrency


class CollectionReference(ViewModel):
    """Collection membership; ``verified`` is never inferred from the read API."""

    address: str
    verified: bool


class Metadata(ViewModel):
    """
    Metadata view of a compressed asset.

    Attributes
    ----------
    address : str
        Leaf asset address derived from tree and leaf index
    mint_address : str
        Asset id
    update_authority_address : str
        Authority holding the 'full' scope
    json_metadata : dict[str, Any] | None
        Decoded off-chain JSON, serialized as ``json``
    collection : CollectionReference | None
        Collection reference, or None when the asset is ungrouped
    compression : AssetCompression
        Raw compression block, attached unchanged

    """

    model: Literal["metadata"] = "metadata"
    address: str
    mint_address: str
    update_authority_address: str
    name: str
    symbol: str
    json_metadata: dict[str, Any] | None = Field(alias="json")
    json_loaded: bool
    uri: str
    is_mutable: bool
    primary_sale_happened: bool
    seller_fee_basis_points: int
    creators: list[AssetCreator]
    edition_nonce: int | None
    token_standard: TokenStandard
    collection: CollectionReference | None
    compression: AssetCompression
    collection_details: None = None
    uses: None = None
    programmable_config: None = None
