"""GoldRush (Covalent) client for paginated transaction history for an address."""

import logging

import httpx
from pydantic import ValidationError

from taikowallet.domain.models import ChainConfig, TransactionRecord
from taikowallet.exceptions import ConfigurationError, ExternalServiceError
from taikowallet.infra.http.rate_limited_client import RateLimitedClient

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 1000


class GoldRushClient:
    """fetch_history returns parsed records, or None when any part of the fetch fails."""

    def __init__(
        self,
        api_key: str,
        http_client: RateLimitedClient,
        base_url: str = "https://api.covalenthq.com",
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = 1,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Goldrush API key is required")
        self._api_key = api_key
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._page_size = page_size
        self._max_pages = max(1, max_pages)

    async def fetch_history(
        self, chain: ChainConfig, contract_address: str
    ) -> list[TransactionRecord] | None:
        try:
            return await self._fetch_all(chain, contract_address)
        except (ExternalServiceError, httpx.HTTPError, ValidationError, ValueError):
            logger.exception(
                "Error fetching %s transactions for %s", chain.indexer_slug, contract_address,
            )
            return None

    async def _fetch_all(self, chain: ChainConfig, contract_address: str) -> list[TransactionRecord]:
        url = f"{self._base_url}/v1/{chain.indexer_slug}/address/{contract_address}/transactions_v2/"
        headers = {"Authorization": f"Bearer {self._api_key}"}
        records: list[TransactionRecord] = []

        for page in range(self._max_pages):
            params = {"page-size": self._page_size, "page-number": page}
            response = await self._http.get(url, params=params, headers=headers)
            if response.status_code < 200 or response.status_code >= 300:
                raise ExternalServiceError(
                    f"API request failed: {response.status_code} {response.reason_phrase}"
                )

            body = response.json()
            if not isinstance(body, dict):
                raise ExternalServiceError("Malformed GoldRush response")
            if body.get("error"):
                raise ExternalServiceError(f"GoldRush error: {body.get('error_message')}")

            data = body.get("data") or {}
            if not isinstance(data, dict):
                raise ExternalServiceError("Malformed GoldRush response data")
            items = data.get("items") or []
            pagination = data.get("pagination") or {}
            if not isinstance(items, list) or not isinstance(pagination, dict):
                raise ExternalServiceError("Malformed GoldRush response data")
            records.extend(TransactionRecord.model_validate(item) for item in items)

            if not pagination.get("has_more"):
                break
        else:
            logger.warning(
                "Stopped after %d pages for %s on %s; history is truncated",
                self._max_pages, contract_address, chain.indexer_slug,
            )

        logger.info("Fetched %d transactions for %s on %s", len(records), contract_address, chain.indexer_slug)
        return records
