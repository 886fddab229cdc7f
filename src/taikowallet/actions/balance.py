import logging

from taikowallet.actions.base import ActionResponse
from taikowallet.domain.models import BalanceRequest
from taikowallet.services.balance import BalanceService

logger = logging.getLogger(__name__)


class BalanceAction:
    name = "balance"
    description = "retrieve balance of a token for a given address."

    def __init__(self, service: BalanceService) -> None:
        self._service = service

    async def handle(self, request: BalanceRequest) -> ActionResponse:
        logger.info("Starting balance action...")
        try:
            result = await self._service.query(request.chain, request.address, request.token)
        except Exception as e:
            logger.error("Error during fetching balance: %s", e)
            return ActionResponse.failure(f"Fetching failed: {e}", str(e))

        chain_name = self._service.wallet.registry.resolve(result.chain).name
        text = f"{result.address} has {result.balance.amount} {result.balance.token} in {chain_name}."
        return ActionResponse.ok(text, result.model_dump(mode="json"))
