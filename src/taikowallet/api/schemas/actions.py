from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from taikowallet.domain.models import TransferRequest


class TransferBody(TransferRequest):
    source: Optional[str] = "direct"  # origin of the chat message that asked for it


class AnalyticsBody(BaseModel):
    chain: str = "taiko"
    contract_address: Optional[str] = Field(default=None, alias="contractAddress")
    reference_time: Optional[datetime] = Field(default=None, alias="referenceTime")

    model_config = {"populate_by_name": True}


class WalletInfoResponse(BaseModel):
    address: str
    chain: str
    summary: Optional[str] = None
