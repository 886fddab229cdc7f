"""Asset descriptors: the tagged native-or-token variant."""

from typing import Literal, Union

from pydantic import BaseModel


class NativeAsset(BaseModel):
    """The chain's base currency, moved with a value-bearing transaction."""

    model_config = {"frozen": True}

    kind: Literal["native"] = "native"
    symbol: str


class TokenAsset(BaseModel):
    """An ERC20 contract. Decimals are read per operation, never stored here."""

    model_config = {"frozen": True}

    kind: Literal["token"] = "token"
    address: str
    symbol: str  # what the caller asked for: a ticker or the contract address


AssetDescriptor = Union[NativeAsset, TokenAsset]


class TokenInfo(BaseModel):
    """Subset of a token-list entry returned by the symbol lookup."""

    address: str
    symbol: str | None = None
    decimals: int | None = None
    chain_id: int | None = None
