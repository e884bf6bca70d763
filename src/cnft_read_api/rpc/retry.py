"""Retry logic with exponential backoff layered over a read-API client."""

import logging
import time
from collections.abc import Callable
from typing import TypeVar

from solders.pubkey import Pubkey

from cnft_read_api.core.models import AssetProof, AssetSortBy, ReadApiAsset, ReadApiAssetList
from cnft_read_api.errors import ReadApiTransportError
from cnft_read_api.rpc.interface import ReadApiInterface

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryConfig:
    """
    Configuration for retry behavior.

    Parameters
    ----------
    max_retries : int
        Maximum number of retry attempts
    base_delay : float
        Initial delay in seconds before first retry
    max_delay : float
        Maximum delay between retries
    exponential_base : float
        Base for exponential backoff calculation

    """

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        exponential_base: float = 2.0,
    ) -> None:
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.exponential_base = exponential_base

    def get_delay(self, attempt: int) -> float:
        """
        Calculate delay for a given retry attempt using exponential backoff.

        Parameters
        ----------
        attempt : int
            Current attempt number (0-indexed)

        Returns
        -------
        float
            Delay in seconds

        """
        delay = self.base_delay * (self.exponential_base**attempt)
        return min(delay, self.max_delay)


class RetryingReadApiClient:
    """
    Read-API client wrapper that retries transport failures.

    Only ``ReadApiTransportError`` is retried. Pagination, response and
    mapping errors are deterministic and propagate on the first attempt.

    Parameters
    ----------
    client : ReadApiInterface
        Client to delegate to
    config : RetryConfig | None
        Retry configuration

    """

    def __init__(
        self,
        client: ReadApiInterface,
        config: RetryConfig | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.client = client
        self.config = config or RetryConfig()
        self._sleep = sleep or time.sleep

    def _execute(self, label: str, call: Callable[[], T]) -> T:
        last_exception: ReadApiTransportError | None = None

        for attempt in range(self.config.max_retries + 1):
            try:
                return call()
            except ReadApiTransportError as e:
                last_exception = e

                # Don't retry on last attempt
                if attempt == self.config.max_retries:
                    break

                delay = self.config.get_delay(attempt)
                logger.debug(
                    "Read API call %s failed (attempt %d/%d), retrying in %.1fs...",
                    label,
                    attempt + 1,
                    self.config.max_retries + 1,
                    delay,
                )
                self._sleep(delay)

        logger.debug("Read API call %s failed after %d attempts", label, self.config.max_retries + 1)
        raise last_exception  # type: ignore[misc]

    def get_asset(self, asset_address: str | Pubkey, *, request_id: str | None = None) -> ReadApiAsset:
        """Fetch an asset, retrying transport failures."""
        return self._execute("getAsset", lambda: self.client.get_asset(asset_address, request_id=request_id))

    def get_asset_proof(self, asset_address: str | Pubkey, *, request_id: str | None = None) -> AssetProof:
        """Fetch an asset proof, retrying transport failures."""
        return self._execute(
            "getAssetProof", lambda: self.client.get_asset_proof(asset_address, request_id=request_id)
        )

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
        """List assets by owner, retrying transport failures."""
        return self._execute(
            "getAssetsByOwner",
            lambda: self.client.get_assets_by_owner(
                owner_address,
                page=page,
                before=before,
                after=after,
                limit=limit,
                sort_by=sort_by,
                request_id=request_id,
            ),
        )

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
        """List assets by group, retrying transport failures."""
        return self._execute(
            "getAssetsByGroup",
            lambda: self.client.get_assets_by_group(
                group_key,
                group_value,
                page=page,
                before=before,
                after=after,
                limit=limit,
                sort_by=sort_by,
                request_id=request_id,
            ),
        )
