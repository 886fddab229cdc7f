from typing import Optional

from pydantic import BaseModel

from taikowallet.domain.enums import SupportedChain


class BalanceRequest(BaseModel):
    chain: Optional[str] = None
    address: Optional[str] = None  # hex address or web3 name
    token: Optional[str] = None


class TokenAmount(BaseModel):
    token: str
    amount: str  # display units


class BalanceResult(BaseModel):
    chain: SupportedChain
    address: str
    balance: TokenAmount
