"""EVM JSON-RPC client for one chain: balance reads, ERC20 reads, signed sends."""

import logging

from eth_account.signers.local import LocalAccount
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3

from taikowallet.domain.models import ChainConfig

logger = logging.getLogger(__name__)

ERC20_ABI: list[dict] = [
    {
        "type": "function",
        "name": "balanceOf",
        "stateMutability": "view",
        "inputs": [{"name": "account", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "decimals",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint8"}],
    },
    {
        "type": "function",
        "name": "transfer",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
]


def _checksum(address: str) -> str:
    return Web3.to_checksum_address(address)


class EvmRpcClient:
    """Thin async wrapper over web3.py bound to a chain config and an optional signer."""

    def __init__(self, chain: ChainConfig, account: LocalAccount | None = None) -> None:
        self._chain = chain
        self._account = account
        self._w3 = AsyncWeb3(AsyncHTTPProvider(chain.rpc_url))

    @property
    def chain(self) -> ChainConfig:
        return self._chain

    async def get_balance(self, address: str) -> int:
        """Native balance in wei."""
        return await self._w3.eth.get_balance(_checksum(address))

    async def read_decimals(self, token: str) -> int:
        contract = self._w3.eth.contract(address=_checksum(token), abi=ERC20_ABI)
        return int(await contract.functions.decimals().call())

    async def read_balance_of(self, token: str, owner: str) -> int:
        contract = self._w3.eth.contract(address=_checksum(token), abi=ERC20_ABI)
        return int(await contract.functions.balanceOf(_checksum(owner)).call())

    async def send_native(self, to: str, value: int, data: str | None = None) -> str:
        """Sign and broadcast a value transfer. Returns the 0x tx hash."""
        sender = self._require_account().address
        tx: dict = {
            "from": sender,
            "to": _checksum(to),
            "value": value,
            "chainId": self._chain.id,
            "nonce": await self._w3.eth.get_transaction_count(sender),
        }
        if data:
            tx["data"] = data
        tx["gas"] = await self._w3.eth.estimate_gas(tx)
        tx["gasPrice"] = await self._w3.eth.gas_price
        return await self._sign_and_send(tx)

    async def send_token(self, token: str, to: str, amount: int) -> str:
        """Simulate ERC20 transfer(to, amount) from the signer, then broadcast it."""
        sender = self._require_account().address
        contract = self._w3.eth.contract(address=_checksum(token), abi=ERC20_ABI)
        call = contract.functions.transfer(_checksum(to), amount)

        # Reverts surface here as ContractLogicError before anything is signed
        await call.call({"from": sender})

        tx = await call.build_transaction({
            "from": sender,
            "chainId": self._chain.id,
            "nonce": await self._w3.eth.get_transaction_count(sender),
        })
        return await self._sign_and_send(tx)

    async def _sign_and_send(self, tx: dict) -> str:
        signed = self._require_account().sign_transaction(tx)
        tx_hash = await self._w3.eth.send_raw_transaction(signed.raw_transaction)
        hex_hash = Web3.to_hex(tx_hash)
        logger.info("Broadcast tx %s on %s", hex_hash, self._chain.key.value)
        return hex_hash

    def _require_account(self) -> LocalAccount:
        if self._account is None:
            raise RuntimeError("No signing account configured for this client")
        return self._account
