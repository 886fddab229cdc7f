"""LI.FI token lookup. Resolves a ticker symbol to a contract on a given chain id."""

import logging

import httpx
from pydantic import ValidationError

from taikowallet.domain.models import TokenInfo
from taikowallet.exceptions import ExternalServiceError
from taikowallet.infra.http.rate_limited_client import RateLimitedClient

logger = logging.getLogger(__name__)


class LiFiTokenClient:
    def __init__(self, http_client: RateLimitedClient, base_url: str = "https://li.quest") -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    async def find_token(self, chain_id: int, symbol: str) -> TokenInfo:
        """GET /v1/token?chain=<id>&token=<symbol>. Raises ExternalServiceError when unresolved."""
        url = f"{self._base_url}/v1/token"
        try:
            response = await self._http.get(url, params={"chain": chain_id, "token": symbol})
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Token lookup failed for {symbol}: {e}") from e

        if response.status_code != 200:
            detail = _error_message(response)
            logger.warning("LI.FI returned %d for %s on chain %d", response.status_code, symbol, chain_id)
            raise ExternalServiceError(f"Token lookup failed for {symbol}: {detail}")

        data = response.json()
        try:
            return TokenInfo(
                address=data["address"],
                symbol=data.get("symbol"),
                decimals=data.get("decimals"),
                chain_id=data.get("chainId"),
            )
        except (KeyError, TypeError, ValidationError) as e:
            raise ExternalServiceError(f"Malformed token entry for {symbol}") from e


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {response.status_code}"
