"""Indexer transaction records and the windowed analytics summary."""

from typing import Optional

from pydantic import AwareDatetime, BaseModel, Field, NonNegativeInt
from pydantic.alias_generators import to_camel

from taikowallet.domain.enums import AnalyticsWindow


class TransactionRecord(BaseModel):
    """One indexer transaction item. Only the fields the aggregator reads are validated."""

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    timestamp: AwareDatetime = Field(alias="block_signed_at")
    gas_spent: NonNegativeInt
    from_address: str
    to_address: Optional[str] = None  # None for contract creation


def _per_window(value) -> dict[str, object]:
    return {w.value: value() if callable(value) else value for w in AnalyticsWindow}


class AnalyticsSummary(BaseModel):
    """Parallel 1d/7d/30d buckets, keyed by window label."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    gas_spent: dict[str, str]
    tx_count: dict[str, int]
    unique_addresses: dict[str, int]
    top_addresses: dict[str, list[str]]

    @classmethod
    def empty(cls) -> "AnalyticsSummary":
        return cls(
            gas_spent=_per_window("0 gwei"),
            tx_count=_per_window(0),
            unique_addresses=_per_window(0),
            top_addresses=_per_window(list),
        )

