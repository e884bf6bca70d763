"""Capability interface shared by read-API clients."""

from typing import Protocol

from solders.pubkey import Pubkey

from cnft_read_api.core.models import AssetProof, AssetSortBy, ReadApiAsset, ReadApiAssetList


class ReadApiInterface(Protocol):
    """
    Interface that every read-API client must implement.

    The CLI and the retry layer depend on this interface rather than on
    ``ReadApiClient`` so that tests can substitute an in-memory fake.

    Methods
    -------
    get_asset(asset_address)
        Fetch a single compressed asset
    get_asset_proof(asset_address)
        Fetch the Merkle proof bundle for an asset
    get_assets_by_owner(owner_address, ...)
        List assets held by an owner
    get_assets_by_group(group_key, group_value, ...)
        List assets in a group (e.g., a collection)

    """

    def get_asset(self, asset_address: str | Pubkey, *, request_id: str | None = None) -> ReadApiAsset: ...

    def get_asset_proof(self, asset_address: str | Pubkey, *, request_id: str | None = None) -> AssetProof: ...

    def get_assets_by_owner(
        self,
        owner_address: str | Pubkey,
        *,
        page: int | None = None,
        before: str | None = None,
        after: str | None = None,
        limit: int | None = None,
        sort_by: AssetSortBy | None = None,
        request_id: str | None = None,
    ) -> ReadApiAssetList: ...

    def get_assets_by_group(
        self,
        group_key: str,
        group_value: str,
        *,
        page: int | None = None,
        before: str | None = None,
        after: str | None = None,
        limit: int | None = None,
        sort_by: AssetSortBy | None = None,
        request_id: str | None = None,
    ) -> ReadApiAssetList: ...
