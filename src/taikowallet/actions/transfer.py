import logging

from taikowallet.actions.base import ActionResponse
from taikowallet.domain.models import TransferRequest
from taikowallet.services.transfer import TransferService

logger = logging.getLogger(__name__)

# Only messages typed by the user may move funds
ALLOWED_SOURCE = "direct"


class TransferAction:
    name = "transfer"
    description = "Transfer Native tokens and ERC20 tokens between addresses on Taiko"

    def __init__(self, service: TransferService) -> None:
        self._service = service

    async def handle(self, request: TransferRequest, source: str | None = ALLOWED_SOURCE) -> ActionResponse:
        logger.info("Starting transfer action...")
        if source != ALLOWED_SOURCE:
            return ActionResponse.failure("I can't do that for you.", "Transfer not allowed")

        try:
            result = await self._service.execute(request)
        except Exception as e:
            logger.error("Error during transfer: %s", e)
            return ActionResponse.failure(f"Transfer failed: {e}", str(e))

        explorer_url = self._service.wallet.current_chain.explorer_url
        text = (
            f"Successfully transferred {result.amount} {result.token} to {result.recipient}\n\n"
            f"Link to explorer: {explorer_url}/tx/{result.tx_hash}"
        )
        return ActionResponse.ok(text, result.model_dump(mode="json", by_alias=True, exclude_none=True))
