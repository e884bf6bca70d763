"""Pytest configuration and shared fixtures for cnft-read-api tests."""

import copy
import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from solders.pubkey import Pubkey

from cnft_read_api.rpc import ReadApiClient

ENDPOINT = "https://read-api.test"

ASSET_ID = str(Pubkey(bytes([1] * 32)))
TREE_ADDRESS = str(Pubkey(bytes([2] * 32)))
AUTHORITY = str(Pubkey(bytes([3] * 32)))
COLLECTION = str(Pubkey(bytes([4] * 32)))
OWNER = str(Pubkey(bytes([5] * 32)))
CREATOR = str(Pubkey(bytes([6] * 32)))

ASSET_PAYLOAD: dict[str, Any] = {
    "interface": "V1_NFT",
    "id": ASSET_ID,
    "content": {
        "$schema": "https://schema.metaplex.com/nft1.0.json",
        "json_uri": "https://supersweetcollection.notarealurl/token.json",
        "files": [],
        "metadata": {"name": "NFT Name", "symbol": "SSNC", "attributes": []},
        "links": {},
    },
    "authorities": [{"address": AUTHORITY, "scopes": ["full"]}],
    "compression": {
        "eligible": False,
        "compressed": True,
        "data_hash": "7dPo2Bm6xqWb6ehL7nkhzC6mBrLMCTYr8yKc8eYTgVEM",
        "creator_hash": "GK9ACFF4oUVCNFvTc8YyWRvbgeWMwE7NhKyKxpxEhDnZ",
        "asset_hash": "4C4CYYhEWXU8Sxf1Mu5Uf5XtPAzRTFBFiqmKT5PNcSri",
        "tree": TREE_ADDRESS,
        "seq": 3,
        "leaf_id": 2,
    },
    "grouping": [{"group_key": "collection", "group_value": COLLECTION}],
    "royalty": {
        "royalty_model": "creators",
        "target": None,
        "percent": 0.05,
        "basis_points": 500,
        "primary_sale_happened": False,
        "locked": False,
    },
    "creators": [{"address": CREATOR, "share": 100, "verified": True}],
    "ownership": {
        "frozen": False,
        "delegated": False,
        "delegate": None,
        "ownership_model": "single",
        "owner": OWNER,
    },
    "supply": {"print_max_supply": 0, "print_current_supply": 0, "edition_nonce": 254},
    "mutable": True,
    "burnt": False,
}

PROOF_PAYLOAD: dict[str, Any] = {
    "root": "5yHGHGvTPNbtBB6Qu5EXWB2i4YuBhrsDCxbgTRykNfXf",
    "proof": [
        "EmJXiXEAhEN3FfNQtBa5hwR8LC5kHvdLsaGCoERosZjK",
        "7NEfhcNPAwbw3L87fjsPqTz2fQdd1CjoLE138SD58FDQ",
    ],
    "node_index": 16386,
    "leaf": "7JBh4rKQRfeKHuAbrNyptzJ1gXpQ6ZYGnKojWVwpuDXP",
    "tree_id": TREE_ADDRESS,
}


Responder = Callable[[dict[str, Any]], httpx.Response]


def rpc_response(result: Any, request_id: str = "rpd-op-123") -> httpx.Response:
    """Wrap a result in a JSON-RPC 2.0 response envelope."""
    return httpx.Response(200, json={"jsonrpc": "2.0", "id": request_id, "result": result})


class MockReadApi:
    """
    In-memory read API served through ``httpx.MockTransport``.

    Every decoded request body is recorded so tests can assert on the wire
    payload and on how many calls reached the network.

    """

    def __init__(self, responder: Responder) -> None:
        self.responder = responder
        self.requests: list[dict[str, Any]] = []
        self.http_requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.http_requests.append(request)
        payload = json.loads(request.content)
        self.requests.append(payload)
        return self.responder(payload)

    def client(self, **kwargs: Any) -> ReadApiClient:
        return ReadApiClient(ENDPOINT, transport=httpx.MockTransport(self.handler), **kwargs)


@pytest.fixture
def asset_payload() -> dict[str, Any]:
    """Fresh copy of the asset fixture, safe to mutate."""
    return copy.deepcopy(ASSET_PAYLOAD)


@pytest.fixture
def mock_read_api() -> Callable[[Responder], MockReadApi]:
    """Factory building a ``MockReadApi`` around a responder function."""

    def _make(responder: Responder) -> MockReadApi:
        return MockReadApi(responder)

    return _make


@pytest.fixture
def asset_api(mock_read_api, asset_payload) -> MockReadApi:
    """Read API that answers every call with the asset fixture."""
    return mock_read_api(lambda payload: rpc_response(asset_payload, payload["id"]))
