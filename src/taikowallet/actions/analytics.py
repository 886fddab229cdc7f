import logging
from datetime import datetime

from taikowallet.actions.base import ActionResponse
from taikowallet.actions.formatting import format_analysis
from taikowallet.services.analytics import OnchainAnalyticsService

logger = logging.getLogger(__name__)


class AnalyticsAction:
    name = "onchainAnalytics"
    description = "Gives an overview of a given address in terms onchain activity."

    def __init__(self, service: OnchainAnalyticsService) -> None:
        self._service = service

    async def handle(
        self,
        chain: str,
        contract_address: str | None,
        reference_time: datetime | None = None,
    ) -> ActionResponse:
        logger.info("Starting a onchain analytics research action")
        try:
            summary = await self._service.get_analytics(chain, contract_address, reference_time)
        except Exception as e:
            logger.error("Error during fetching analytics: %s", e)
            return ActionResponse.failure(f"Analytics Process failed: {e}", str(e))

        text = f"Here you go,\n {format_analysis(summary)}"
        return ActionResponse.ok(text, summary.model_dump(mode="json", by_alias=True))
