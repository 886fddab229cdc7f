from taikowallet.actions.analytics import AnalyticsAction
from taikowallet.actions.balance import BalanceAction
from taikowallet.actions.base import ActionResponse
from taikowallet.actions.transfer import TransferAction

__all__ = [
    "ActionResponse",
    "AnalyticsAction",
    "BalanceAction",
    "TransferAction",
]
