"""Native currency vs ERC20, and symbol -> contract address."""

import logging
from typing import Protocol

from taikowallet.domain.models import (
    AssetDescriptor,
    ChainConfig,
    NativeAsset,
    TokenAsset,
    TokenInfo,
    is_hex_address,
)
from taikowallet.exceptions import TokenNotFound

logger = logging.getLogger(__name__)

# The extraction layer emits the string "null" when no token was mentioned
_NULL_TOKENS = {"", "null"}


class TokenLookup(Protocol):
    async def find_token(self, chain_id: int, symbol: str) -> TokenInfo: ...


def is_native(asset_identifier: str | None, native_symbol: str) -> bool:
    if asset_identifier is None:
        return True
    value = asset_identifier.strip()
    return value in _NULL_TOKENS or value == native_symbol


class AssetResolver:
    def __init__(self, token_lookup: TokenLookup) -> None:
        self._tokens = token_lookup

    async def resolve(
        self,
        chain: ChainConfig,
        asset_identifier: str | None,
        native_symbol: str | None = None,
    ) -> AssetDescriptor:
        native = native_symbol or chain.native_symbol
        if is_native(asset_identifier, native):
            return NativeAsset(symbol=native)

        identifier = asset_identifier.strip()  # type: ignore[union-attr]
        if is_hex_address(identifier):
            return TokenAsset(address=identifier, symbol=identifier)

        try:
            token = await self._tokens.find_token(chain.id, identifier)
        except Exception as e:
            raise TokenNotFound(str(e) or f"Token {identifier} not found on {chain.name}") from e
        if not is_hex_address(token.address):
            raise TokenNotFound(f"Token {identifier} has no usable address on {chain.name}")

        logger.debug("Token %s on chain %d -> %s", identifier, chain.id, token.address)
        return TokenAsset(address=token.address, symbol=identifier)
