from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from taikowallet.actions import AnalyticsAction, BalanceAction, TransferAction
from taikowallet.container import Container
from taikowallet.infra.blockchain.wallet import WalletProvider


@inject
async def get_transfer_action(
    action: TransferAction = Depends(Provide[Container.transfer_action]),
) -> TransferAction:
    return action


@inject
async def get_balance_action(
    action: BalanceAction = Depends(Provide[Container.balance_action]),
) -> BalanceAction:
    return action


@inject
async def get_analytics_action(
    action: AnalyticsAction = Depends(Provide[Container.analytics_action]),
) -> AnalyticsAction:
    return action


@inject
async def get_wallet(
    wallet: WalletProvider = Depends(Provide[Container.wallet]),
) -> WalletProvider:
    return wallet
