"""Action endpoints consumed by the agent runtime."""

from typing import Annotated

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from taikowallet.actions import ActionResponse, AnalyticsAction, BalanceAction, TransferAction
from taikowallet.api.deps import get_analytics_action, get_balance_action, get_transfer_action, get_wallet
from taikowallet.api.schemas.actions import AnalyticsBody, TransferBody, WalletInfoResponse
from taikowallet.domain.models import BalanceRequest
from taikowallet.infra.blockchain.wallet import WalletProvider

router = APIRouter(prefix="/api", tags=["actions"])


def _respond(resp: ActionResponse) -> JSONResponse:
    return JSONResponse(status_code=200 if resp.success else 400, content=resp.model_dump(mode="json"))


@router.post("/actions/transfer", response_model=ActionResponse)
async def transfer(
    body: TransferBody,
    action: Annotated[TransferAction, Depends(get_transfer_action)],
) -> JSONResponse:
    return _respond(await action.handle(body, source=body.source))


@router.post("/actions/balance", response_model=ActionResponse)
async def balance(
    body: BalanceRequest,
    action: Annotated[BalanceAction, Depends(get_balance_action)],
) -> JSONResponse:
    return _respond(await action.handle(body))


@router.post("/actions/analytics", response_model=ActionResponse)
async def analytics(
    body: AnalyticsBody,
    action: Annotated[AnalyticsAction, Depends(get_analytics_action)],
) -> JSONResponse:
    return _respond(await action.handle(body.chain, body.contract_address, body.reference_time))


@router.get("/wallet", response_model=WalletInfoResponse)
async def wallet_info(
    wallet: Annotated[WalletProvider, Depends(get_wallet)],
) -> WalletInfoResponse:
    """Wallet context for the agent prompt; summary is null when the chain is unreachable."""
    return WalletInfoResponse(
        address=wallet.address,
        chain=wallet.current_chain.key.value,
        summary=await wallet.describe(),
    )
