"""JSON-RPC client for the compressed-asset read API."""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from solders.pubkey import Pubkey

from cnft_read_api.core.models import AssetProof, AssetSortBy, ReadApiAsset, ReadApiAssetList
from cnft_read_api.errors import PaginationError, ReadApiResponseError, ReadApiTransportError

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_ID = "rpd-op-123"

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_pagination(page: int | None, before: str | None, after: str | None) -> None:
    """
    Reject mutually exclusive pagination parameters.

    Parameters
    ----------
    page : int | None
        1-based page number
    before : str | None
        Cursor to page backwards from
    after : str | None
        Cursor to page forwards from

    Raises
    ------
    PaginationError
        If a page number is combined with a cursor, or the page is not positive

    """
    if page is not None and (before or after):
        raise PaginationError
    if page is not None and page < 1:
        msg = f"Pagination Error. Page must be a positive integer, got {page}."
        raise PaginationError(msg)


def build_list_params(
    page: int | None = None,
    before: str | None = None,
    after: str | None = None,
    limit: int | None = None,
    sort_by: AssetSortBy | None = None,
) -> dict[str, Any]:
    """
    Build the pagination part of an asset-list request.

    Every key is always present so the wire payload does not depend on which
    optional arguments the caller passed. ``page`` defaults to 1, also when a
    cursor is given.

    Returns
    -------
    dict[str, Any]
        ``{"page", "before", "after", "limit", "sortBy"}``

    Raises
    ------
    PaginationError
        If the pagination arguments are invalid

    """
    validate_pagination(page, before, after)
    if limit is not None and limit < 1:
        msg = f"Pagination Error. Limit must be a positive integer, got {limit}."
        raise PaginationError(msg)

    return {
        "page": 1 if page is None else page,
        "before": before or None,
        "after": after or None,
        "limit": limit,
        "sortBy": sort_by.model_dump(mode="json", by_alias=True) if sort_by else None,
    }


class ReadApiClient:
    """
    Client for the read API (``getAsset``, ``getAssetProof``, ``getAssetsByOwner``,
    ``getAssetsByGroup``).

    The client holds only its endpoint and a pooled HTTP client, so one
    instance can be shared by concurrent callers. It never retries; wrap it in
    ``RetryingReadApiClient`` for that.

    Parameters
    ----------
    endpoint : str
        JSON-RPC endpoint URL
    request_id : str
        JSON-RPC ``id`` used when a call does not supply its own
    timeout : float
        Request timeout in seconds
    headers : dict[str, str] | None
        Extra HTTP headers (e.g., provider API keys)
    transport : httpx.BaseTransport | None
        Custom transport, mainly for tests

    """

    def __init__(
        self,
        endpoint: str,
        *,
        request_id: str = DEFAULT_REQUEST_ID,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.request_id = request_id
        self.client = httpx.Client(
            timeout=timeout,
            headers={"Content-Type": "application/json", **(headers or {})},
            transport=transport,
        )

    def get_asset(self, asset_address: str | Pubkey, *, request_id: str | None = None) -> ReadApiAsset:
        """
        Fetch a compressed asset by id.

        Parameters
        ----------
        asset_address : str | Pubkey
            Asset id
        request_id : str | None
            JSON-RPC id override

        Returns
        -------
        ReadApiAsset
            Fully validated asset

        Raises
        ------
        ReadApiTransportError
            If the request fails
        ReadApiResponseError
            If no asset is returned or the result is malformed

        """
        result = self._call_read_api("getAsset", {"id": str(asset_address)}, request_id, "No asset returned")
        return self._parse(ReadApiAsset, result, "getAsset")

    def get_asset_proof(self, asset_address: str | Pubkey, *, request_id: str | None = None) -> AssetProof:
        """
        Fetch the Merkle proof bundle for an asset, unmodified.

        Raises
        ------
        ReadApiTransportError
            If the request fails
        ReadApiResponseError
            If no proof is returned

        """
        result = self._call_read_api(
            "getAssetProof", {"id": str(asset_address)}, request_id, "No asset proof returned"
        )
        if not isinstance(result, dict):
            msg = "Malformed getAssetProof result: expected an object"
            raise ReadApiResponseError(msg)
        return result

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
    ) -> ReadApiAssetList:
        """
        List assets held by an owner.

        Parameters
        ----------
        owner_address : str | Pubkey
            Owner wallet address
        page : int | None
            1-based page number; cannot be combined with a cursor
        before : str | None
            Return assets before this cursor
        after : str | None
            Return assets after this cursor
        limit : int | None
            Maximum number of assets per page
        sort_by : AssetSortBy | None
            Sort criteria
        request_id : str | None
            JSON-RPC id override

        Returns
        -------
        ReadApiAssetList
            One page of assets

        Raises
        ------
        PaginationError
            If pagination arguments conflict (raised before any request)
        ReadApiTransportError
            If the request fails
        ReadApiResponseError
            If no results are returned or they are malformed

        """
        params = {
            "ownerAddress": str(owner_address),
            **build_list_params(page, before, after, limit, sort_by),
        }
        result = self._call_read_api("getAssetsByOwner", params, request_id, "No results returned")
        return self._parse(ReadApiAssetList, result, "getAssetsByOwner")

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
    ) -> ReadApiAssetList:
        """
        List assets in a group, e.g. ``("collection", <collection mint>)``.

        Same pagination contract and errors as ``get_assets_by_owner``.

        """
        params = {
            "groupKey": group_key,
            "groupValue": str(group_value),
            **build_list_params(page, before, after, limit, sort_by),
        }
        result = self._call_read_api("getAssetsByGroup", params, request_id, "No results returned")
        return self._parse(ReadApiAssetList, result, "getAssetsByGroup")

    def _call_read_api(
        self,
        method: str,
        params: dict[str, Any],
        request_id: str | None,
        missing_message: str,
    ) -> Any:
        """
        Send one JSON-RPC request and return its ``result``.

        Raises
        ------
        ReadApiTransportError
            On network failure, non-2xx status, or an undecodable body
        ReadApiResponseError
            If the body has no ``result``

        """
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "id": request_id or self.request_id,
            "params": params,
        }
        logger.debug("Read API call %s (id=%s)", method, payload["id"])

        try:
            response = self.client.post(self.endpoint, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.TimeoutException as e:
            msg = f"Failed to call ReadAPI: request timeout: {e}"
            raise ReadApiTransportError(msg, e) from e
        except httpx.HTTPStatusError as e:
            msg = f"Failed to call ReadAPI: HTTP {e.response.status_code}"
            raise ReadApiTransportError(msg, e) from e
        except httpx.HTTPError as e:
            msg = f"Failed to call ReadAPI: {e}"
            raise ReadApiTransportError(msg, e) from e
        except ValueError as e:
            msg = "Failed to call ReadAPI: response is not valid JSON"
            raise ReadApiTransportError(msg, e) from e

        result = body.get("result") if isinstance(body, dict) else None
        if result is None:
            error = body.get("error") if isinstance(body, dict) else None
            if isinstance(error, dict) and error.get("message"):
                missing_message = f"{missing_message}: {error['message']}"
            logger.debug("Read API call %s returned no result", method)
            raise ReadApiResponseError(missing_message)

        return result

    @staticmethod
    def _parse(model: type[ModelT], result: Any, method: str) -> ModelT:
        try:
            return model.model_validate(result)
        except ValidationError as e:
            msg = f"Malformed {method} result: {e.error_count()} validation error(s)"
            raise ReadApiResponseError(msg, e) from e

    def close(self) -> None:
        """Close HTTP client."""
        self.client.close()

    def __enter__(self) -> "ReadApiClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
