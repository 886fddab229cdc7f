"""BalanceService — native or ERC20 balance of any address, in display units."""

import asyncio
import logging

from taikowallet.domain.models import BalanceResult, NativeAsset, TokenAmount
from taikowallet.domain.units import format_units
from taikowallet.exceptions import BalanceQueryFailed, MissingAddress
from taikowallet.infra.blockchain.wallet import WalletProvider
from taikowallet.services.address_resolver import AddressResolver
from taikowallet.services.asset_resolver import AssetResolver

logger = logging.getLogger(__name__)


class BalanceService:
    def __init__(
        self,
        wallet: WalletProvider,
        addresses: AddressResolver,
        assets: AssetResolver,
    ) -> None:
        self._wallet = wallet
        self._addresses = addresses
        self._assets = assets

    @property
    def wallet(self) -> WalletProvider:
        return self._wallet

    async def query(
        self,
        chain: str | None,
        address_identifier: str | None,
        asset_identifier: str | None = None,
    ) -> BalanceResult:
        if not address_identifier:
            raise MissingAddress()

        try:
            return await self._query(chain, address_identifier, asset_identifier)
        except Exception as e:
            logger.warning("Balance query on %s for %s failed: %s", chain, address_identifier, e)
            raise BalanceQueryFailed(str(e) or type(e).__name__) from e

    async def _query(
        self, chain_name: str | None, address_identifier: str, asset_identifier: str | None
    ) -> BalanceResult:
        target = await self._addresses.resolve(address_identifier)
        chain = self._wallet.switch_chain(chain_name or self._wallet.current_chain.key)
        asset = await self._assets.resolve(chain, asset_identifier, chain.native_symbol)
        client = self._wallet.get_client(chain.key)

        if isinstance(asset, NativeAsset):
            wei = await client.get_balance(target)
            amount = format_units(wei, chain.native_decimals)
        else:
            # Independent reads; decimals are fetched fresh on every query
            balance, decimals = await asyncio.gather(
                client.read_balance_of(asset.address, target),
                client.read_decimals(asset.address),
            )
            amount = format_units(balance, decimals)

        return BalanceResult(
            chain=chain.key,
            address=target,
            balance=TokenAmount(token=asset.symbol, amount=amount),
        )
