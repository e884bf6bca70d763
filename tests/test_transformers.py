"""Tests for the edition, mint and metadata transformers."""

import httpx
import pytest

from cnft_read_api.core import find_leaf_asset_address
from cnft_read_api.core.models import ReadApiAsset, TokenStandard
from cnft_read_api.core.transformers import to_edition_view, to_metadata_view, to_mint_view
from cnft_read_api.errors import AssetMappingError

from conftest import ASSET_ID, AUTHORITY, COLLECTION, CREATOR, TREE_ADDRESS, rpc_response


@pytest.fixture
def asset(asset_payload) -> ReadApiAsset:
    return ReadApiAsset.model_validate(asset_payload)


class TestEditionView:
    def test_original_edition(self, asset_payload):
        """Test edition view of an original edition."""
        asset_payload["supply"] = {"print_max_supply": 10, "print_current_supply": 4, "edition_nonce": 1}

        edition = to_edition_view(ReadApiAsset.model_validate(asset_payload))

        assert edition.model == "nftEdition"
        assert edition.is_original is True
        assert edition.address == ASSET_ID
        assert edition.supply == 4
        assert edition.max_supply == 10

    def test_missing_supply(self, asset_payload):
        """Test edition view without supply."""
        asset_payload["supply"] = None

        with pytest.raises(AssetMappingError, match="no supply"):
            to_edition_view(ReadApiAsset.model_validate(asset_payload))


class TestMintView:
    def test_asset_id_fills_every_address(self, asset):
        """Test the asset id fills every mint address."""
        mint = to_mint_view(asset)

        assert mint.model == "mint"
        assert mint.address == ASSET_ID
        assert mint.mint_authority_address == ASSET_ID
        assert mint.freeze_authority_address == ASSET_ID

    def test_single_zero_decimal_unit(self, asset):
        """Test the mint is a single zero-decimal unit."""
        mint = to_mint_view(asset)

        assert mint.decimals == 0
        assert mint.supply.basis_points == 1
        assert mint.supply.currency == mint.currency
        assert mint.currency.symbol == "Token"
        assert mint.currency.namespace == "spl-token"
        assert mint.is_wrapped_sol is False

    def test_idempotent(self, asset):
        """Test the mint view is idempotent."""
        first = to_mint_view(asset)
        second = to_mint_view(asset)

        assert first == second
        assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)

    def test_camel_case_dump(self, asset):
        """Test mint view dumps with camelCase keys."""
        dumped = to_mint_view(asset).model_dump(mode="json", by_alias=True)

        assert dumped["mintAuthorityAddress"] == ASSET_ID
        assert dumped["freezeAuthorityAddress"] == ASSET_ID
        assert dumped["isWrappedSol"] is False
        assert dumped["supply"] == {
            "basisPoints": 1,
            "currency": {"symbol": "Token", "decimals": 0, "namespace": "spl-token"},
        }


class TestMetadataView:
    def test_fields_copied(self, asset):
        """Test metadata view fields."""
        metadata = to_metadata_view(asset)

        assert metadata.model == "metadata"
        assert metadata.mint_address == ASSET_ID
        assert metadata.update_authority_address == AUTHORITY
        assert metadata.name == "NFT Name"
        assert metadata.symbol == "SSNC"
        assert metadata.uri == "https://supersweetcollection.notarealurl/token.json"
        assert metadata.json_metadata == asset.content.metadata
        assert metadata.json_loaded is True
        assert metadata.is_mutable is True
        assert metadata.primary_sale_happened is False
        assert metadata.seller_fee_basis_points == 500
        assert metadata.creators[0].address == CREATOR
        assert metadata.edition_nonce == 254
        assert metadata.token_standard == TokenStandard.NON_FUNGIBLE
        assert metadata.collection_details is None
        assert metadata.uses is None
        assert metadata.programmable_config is None

    def test_address_is_leaf_asset_pda(self, asset):
        """Test metadata address is the leaf asset PDA."""
        metadata = to_metadata_view(asset)

        assert metadata.address == find_leaf_asset_address(TREE_ADDRESS, 2)

    def test_compression_attached_unchanged(self, asset):
        """Test compression info is attached unchanged."""
        metadata = to_metadata_view(asset)

        assert metadata.compression == asset.compression
        assert metadata.compression.model_dump() == asset.compression.model_dump()

    def test_collection_never_verified(self, asset):
        """Test the collection is never marked verified."""
        metadata = to_metadata_view(asset)

        assert metadata.collection.address == COLLECTION
        assert metadata.collection.verified is False

    def test_no_collection_grouping(self, asset_payload):
        """Test assets without a collection grouping."""
        asset_payload["grouping"] = [{"group_key": "other", "group_value": COLLECTION}]

        metadata = to_metadata_view(ReadApiAsset.model_validate(asset_payload))

        assert metadata.collection is None

    def test_no_full_scope_authority(self, asset_payload):
        """Test assets without a full-scope authority."""
        asset_payload["authorities"] = [{"address": AUTHORITY, "scopes": ["metadata"]}]

        with pytest.raises(AssetMappingError, match="No update authority with full scope found."):
            to_metadata_view(ReadApiAsset.model_validate(asset_payload))

    def test_no_authorities(self, asset_payload):
        """Test assets without authorities."""
        asset_payload["authorities"] = []

        with pytest.raises(AssetMappingError):
            to_metadata_view(ReadApiAsset.model_validate(asset_payload))

    def test_first_full_scope_authority_wins(self, asset_payload):
        """Test the first full-scope authority is used."""
        asset_payload["authorities"] = [
            {"address": "Meta1", "scopes": ["metadata"]},
            {"address": "Full1", "scopes": ["full"]},
            {"address": "Full2", "scopes": ["full"]},
        ]

        metadata = to_metadata_view(ReadApiAsset.model_validate(asset_payload))

        assert metadata.update_authority_address == "Full1"

    def test_missing_json_metadata(self, asset_payload):
        """Test missing JSON metadata gives empty name and symbol."""
        asset_payload["content"]["metadata"] = None

        metadata = to_metadata_view(ReadApiAsset.model_validate(asset_payload))

        assert metadata.name == ""
        assert metadata.symbol == ""
        assert metadata.json_metadata is None

    def test_invalid_tree_address(self, asset_payload):
        """Test a malformed tree address."""
        asset_payload["compression"]["tree"] = "not-a-tree"

        with pytest.raises(AssetMappingError, match="Invalid tree address"):
            to_metadata_view(ReadApiAsset.model_validate(asset_payload))

    def test_deterministic(self, asset):
        """Test the metadata view is deterministic."""
        assert to_metadata_view(asset) == to_metadata_view(asset)

    def test_camel_case_dump(self, asset):
        """Test metadata view dumps with camelCase keys."""
        dumped = to_metadata_view(asset).model_dump(mode="json", by_alias=True)

        assert dumped["updateAuthorityAddress"] == AUTHORITY
        assert dumped["sellerFeeBasisPoints"] == 500
        assert dumped["json"] == {"name": "NFT Name", "symbol": "SSNC", "attributes": []}
        assert dumped["collection"] == {"address": COLLECTION, "verified": False}
        assert dumped["compression"]["leaf_id"] == 2


def test_metadata_from_fetched_asset(mock_read_api, asset_payload):
    """End to end: fetch 'Addr1' from a mocked read API and build its metadata view."""
    asset_payload["id"] = "Addr1"
    asset_payload["authorities"] = [{"address": "Auth1", "scopes": ["full"]}]
    asset_payload["grouping"] = [{"group_key": "collection", "group_value": "Coll1"}]

    def responder(payload):
        if payload["params"]["id"] == "Addr1":
            return rpc_response(asset_payload)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": payload["id"]})

    client = mock_read_api(responder).client()

    metadata = to_metadata_view(client.get_asset("Addr1"))

    assert metadata.update_authority_address == "Auth1"
    assert metadata.collection.address == "Coll1"
    assert metadata.collection.verified is False
    assert metadata.model_dump(by_alias=True)["updateAuthorityAddress"] == "Auth1"
