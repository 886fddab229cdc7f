"""TransferService — native and ERC20 transfers from the agent wallet."""

import logging

from taikowallet.domain.models import (
    ChainConfig,
    NativeAsset,
    TokenAsset,
    TransferRequest,
    TransferResult,
    is_placeholder_hash,
)
from taikowallet.domain.units import format_units, parse_amount, parse_units
from taikowallet.exceptions import (
    InvalidAmount,
    MissingAmount,
    MissingChain,
    MissingRecipient,
    TransferFailed,
    TransferNotConfirmed,
    WalletError,
)
from taikowallet.infra.blockchain.rpc_client import EvmRpcClient
from taikowallet.infra.blockchain.wallet import WalletProvider
from taikowallet.services.address_resolver import AddressResolver
from taikowallet.services.asset_resolver import AssetResolver

logger = logging.getLogger(__name__)


def _validate(request: TransferRequest) -> None:
    """Checks that need no network access, in the order callers rely on."""
    if not request.to_address:
        raise MissingRecipient()
    if not request.chain:
        raise MissingChain()
    if request.amount:
        try:
            amount = parse_amount(request.amount)
            parse_units(request.amount, 0)  # magnitude must fit the working precision
        except ValueError as e:
            raise InvalidAmount(f"Invalid amount provided: {e}") from e
        if amount < 0:
            raise InvalidAmount()


def _to_base_units(amount: str, decimals: int) -> int:
    try:
        return parse_units(amount, decimals)
    except ValueError as e:
        raise InvalidAmount(f"Invalid amount provided: {e}") from e


class TransferService:
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

    async def execute(self, request: TransferRequest) -> TransferResult:
        logger.info(
            "Initiating a transfer on %s: %s %s to %s",
            request.chain, request.amount or "<full balance>", request.token or "<native>", request.to_address,
        )
        _validate(request)

        try:
            recipient = await self._addresses.resolve(request.to_address)
            chain = self._wallet.switch_chain(request.chain)  # type: ignore[arg-type]
            asset = await self._assets.resolve(chain, request.token)
            client = self._wallet.get_client(chain.key)

            if isinstance(asset, NativeAsset):
                result = await self._transfer_native(client, chain, asset, recipient, request)
            else:
                result = await self._transfer_token(client, chain, asset, recipient, request)
        except WalletError:
            raise
        except Exception as e:
            logger.warning("Transfer on %s failed: %s", request.chain, e)
            raise TransferFailed(str(e) or type(e).__name__) from e

        if is_placeholder_hash(result.tx_hash):
            raise TransferNotConfirmed()

        logger.info("Transferred %s %s to %s: %s", result.amount, result.token, recipient, result.tx_hash)
        return result

    async def _transfer_native(
        self,
        client: EvmRpcClient,
        chain: ChainConfig,
        asset: NativeAsset,
        recipient: str,
        request: TransferRequest,
    ) -> TransferResult:
        if not request.amount:
            raise MissingAmount()
        value = _to_base_units(request.amount, chain.native_decimals)
        tx_hash = await client.send_native(recipient, value, data=request.data)
        return TransferResult(
            chain=chain.key,
            tx_hash=tx_hash,
            recipient=recipient,
            amount=format_units(value, chain.native_decimals),
            token=asset.symbol,
            data=request.data,
        )

    async def _transfer_token(
        self,
        client: EvmRpcClient,
        chain: ChainConfig,
        asset: TokenAsset,
        recipient: str,
        request: TransferRequest,
    ) -> TransferResult:
        decimals = await client.read_decimals(asset.address)
        if request.amount:
            value = _to_base_units(request.amount, decimals)
        else:
            # Whole balance as of this read; it may change before the transfer lands
            value = await client.read_balance_of(asset.address, self._wallet.address)

        tx_hash = await client.send_token(asset.address, recipient, value)
        return TransferResult(
            chain=chain.key,
            tx_hash=tx_hash,
            recipient=recipient,
            amount=format_units(value, decimals),
            token=asset.symbol,
        )
