from unittest.mock import AsyncMock

import pytest
from eth_account import Account

from taikowallet.infra.blockchain.rpc_client import EvmRpcClient
from taikowallet.infra.blockchain.wallet import WalletProvider
from taikowallet.services.address_resolver import AddressResolver
from taikowallet.services.asset_resolver import AssetResolver
from taikowallet.services.chain_registry import ChainRegistry

# Throwaway key; never funded
TEST_PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
SENDER = Account.from_key(TEST_PRIVATE_KEY).address

RECIPIENT = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"
USDC = "0x07d83526730c7438048D55A4fc0b850e2aaB6f0b"
TX_HASH = "0x" + "ab" * 32


@pytest.fixture()
def registry() -> ChainRegistry:
    return ChainRegistry()


@pytest.fixture()
def rpc():
    client = AsyncMock(spec=EvmRpcClient)
    client.get_balance.return_value = 0
    client.read_decimals.return_value = 6
    client.read_balance_of.return_value = 0
    client.send_native.return_value = TX_HASH
    client.send_token.return_value = TX_HASH
    return client


@pytest.fixture()
def client_factory(rpc):
    calls = []

    def factory(config, account):
        calls.append(config)
        return rpc

    factory.calls = calls
    return factory


@pytest.fixture()
def wallet(registry, client_factory) -> WalletProvider:
    return WalletProvider(TEST_PRIVATE_KEY, registry, client_factory=client_factory)


@pytest.fixture()
def name_resolver():
    resolver = AsyncMock()
    resolver.lookup.return_value = None
    return resolver


@pytest.fixture()
def token_lookup():
    return AsyncMock()


@pytest.fixture()
def address_resolver(name_resolver) -> AddressResolver:
    return AddressResolver(name_resolver)


@pytest.fixture()
def asset_resolver(token_lookup) -> AssetResolver:
    return AssetResolver(token_lookup)
