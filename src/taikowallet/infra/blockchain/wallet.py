"""WalletProvider — signing account + chain registry + per-chain RPC clients."""

import logging
from typing import Callable

from eth_account import Account
from eth_account.signers.local import LocalAccount

from taikowallet.domain.enums import SupportedChain
from taikowallet.domain.models import ChainConfig
from taikowallet.domain.units import format_units
from taikowallet.infra.blockchain.rpc_client import EvmRpcClient
from taikowallet.services.chain_registry import ChainRegistry

logger = logging.getLogger(__name__)

ClientFactory = Callable[[ChainConfig, LocalAccount], EvmRpcClient]


class WalletProvider:
    """One agent wallet session. Owns its registry; clients are built per call."""

    def __init__(
        self,
        private_key: str,
        registry: ChainRegistry,
        client_factory: ClientFactory = EvmRpcClient,
    ) -> None:
        self._account: LocalAccount = Account.from_key(private_key)
        self._registry = registry
        self._client_factory = client_factory

    @property
    def address(self) -> str:
        return self._account.address

    @property
    def registry(self) -> ChainRegistry:
        return self._registry

    @property
    def current_chain(self) -> ChainConfig:
        return self._registry.active

    def switch_chain(
        self, chain: str | SupportedChain, custom_rpc_url: str | None = None
    ) -> ChainConfig:
        return self._registry.set_active(chain, custom_rpc_url)

    def get_client(self, chain: str | SupportedChain | None = None) -> EvmRpcClient:
        config = self._registry.resolve(chain) if chain is not None else self._registry.active
        return self._client_factory(config, self._account)

    async def get_balance(self) -> str:
        """Own native balance on the current chain, in display units."""
        config = self.current_chain
        wei = await self.get_client().get_balance(self.address)
        return format_units(wei, config.native_decimals)

    async def describe(self) -> str | None:
        """Wallet summary handed to the agent as context. None when the RPC is unreachable."""
        try:
            balance = await self.get_balance()
        except Exception:
            logger.exception("Failed to read wallet balance on %s", self.current_chain.key.value)
            return None
        chain = self.current_chain
        return (
            f"Taiko chain Wallet Address: {self.address}\n"
            f"Balance: {balance} {chain.native_symbol}\n"
            f"Chain ID: {chain.id}, Name: {chain.name}"
        )
