from taikowallet.domain.models.address import ResolvedAddress, is_hex_address, is_placeholder_hash
from taikowallet.domain.models.analytics import AnalyticsSummary, TransactionRecord
from taikowallet.domain.models.asset import AssetDescriptor, NativeAsset, TokenAsset, TokenInfo
from taikowallet.domain.models.balance import BalanceRequest, BalanceResult, TokenAmount
from taikowallet.domain.models.chain import BUILTIN_CHAINS, ChainConfig
from taikowallet.domain.models.transfer import TransferRequest, TransferResult

__all__ = [
    "AnalyticsSummary",
    "AssetDescriptor",
    "BUILTIN_CHAINS",
    "BalanceRequest",
    "BalanceResult",
    "ChainConfig",
    "NativeAsset",
    "ResolvedAddress",
    "TokenAmount",
    "TokenAsset",
    "TokenInfo",
    "TransactionRecord",
    "TransferRequest",
    "TransferResult",
    "is_hex_address",
    "is_placeholder_hash",
]
