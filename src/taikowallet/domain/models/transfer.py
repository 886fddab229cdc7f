from typing import Optional

from pydantic import BaseModel, Field

from taikowallet.domain.enums import SupportedChain


class TransferRequest(BaseModel):
    chain: Optional[str] = None
    token: Optional[str] = None  # symbol, contract address, or None for native
    amount: Optional[str] = None  # display units, e.g. "0.1"
    to_address: Optional[str] = Field(default=None, alias="toAddress")
    data: Optional[str] = None  # 0x-prefixed calldata for native transfers

    model_config = {"populate_by_name": True}


class TransferResult(BaseModel):
    chain: SupportedChain
    tx_hash: str = Field(serialization_alias="txHash")
    recipient: str
    amount: str
    token: str
    data: Optional[str] = None
