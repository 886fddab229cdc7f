"""On-chain activity analytics: pure 1d/7d/30d aggregation plus the fetch wrapper.

The aggregator does no I/O. Windows overlap: a record from two hours ago
counts toward all three buckets.
"""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Iterable, Protocol

from taikowallet.domain.enums import AnalyticsWindow
from taikowallet.domain.models import AnalyticsSummary, ChainConfig, TransactionRecord
from taikowallet.exceptions import HistoryFetchFailed, InvalidContractAddress
from taikowallet.services.chain_registry import ChainRegistry

logger = logging.getLogger(__name__)

TOP_N = 3


@dataclass
class WindowStats:
    """Running totals for one window. Dict order records first-seen order."""

    gas_spent: int = 0
    tx_count: int = 0
    interactions: dict[str, int] = field(default_factory=dict)

    def add(self, record: TransactionRecord) -> None:
        self.gas_spent += record.gas_spent
        self.tx_count += 1
        for address in (record.from_address, record.to_address):
            if address is None:
                continue
            self.interactions[address] = self.interactions.get(address, 0) + 1

    @property
    def unique_addresses(self) -> int:
        return len(self.interactions)

    def top_addresses(self, n: int = TOP_N) -> list[str]:
        # sorted() is stable, so equal counts keep first-seen order
        ranked = sorted(self.interactions.items(), key=lambda kv: kv[1], reverse=True)
        return [address for address, _ in ranked[:n]]


def window_bounds(reference_time: datetime) -> dict[AnalyticsWindow, datetime]:
    """Inclusive lower bound of each trailing window."""
    return {w: reference_time - timedelta(days=w.days) for w in AnalyticsWindow}


def analyze(
    records: Iterable[TransactionRecord] | None,
    reference_time: datetime | None = None,
) -> AnalyticsSummary:
    """Aggregate gas, tx count, unique and top counterparties per window.

    A record is counted in a window when lower_bound <= timestamp <= reference_time.
    """
    records = list(records or [])
    if not records:
        return AnalyticsSummary.empty()

    reference_time = reference_time or datetime.now(UTC)
    if reference_time.tzinfo is None:
        reference_time = reference_time.replace(tzinfo=UTC)
    bounds = window_bounds(reference_time)
    stats = {w: WindowStats() for w in AnalyticsWindow}

    for record in records:
        if record.timestamp > reference_time:
            continue
        for window, lower in bounds.items():
            if record.timestamp >= lower:
                stats[window].add(record)

    return AnalyticsSummary(
        gas_spent={w.value: f"{s.gas_spent} gwei" for w, s in stats.items()},
        tx_count={w.value: s.tx_count for w, s in stats.items()},
        unique_addresses={w.value: s.unique_addresses for w, s in stats.items()},
        top_addresses={w.value: s.top_addresses() for w, s in stats.items()},
    )


class HistorySource(Protocol):
    async def fetch_history(
        self, chain: ChainConfig, contract_address: str
    ) -> list[TransactionRecord] | None: ...


class OnchainAnalyticsService:
    """Fetch a contract's history from the indexer and summarise it."""

    def __init__(self, history: HistorySource, registry: ChainRegistry) -> None:
        self._history = history
        self._registry = registry

    async def get_analytics(
        self,
        chain: str,
        contract_address: str | None,
        reference_time: datetime | None = None,
    ) -> AnalyticsSummary:
        if not contract_address or not contract_address.startswith("0x"):
            raise InvalidContractAddress()
        config = self._registry.resolve(chain)

        records = await self._history.fetch_history(config, contract_address)
        if records is None:
            raise HistoryFetchFailed()

        logger.info("Analysing %d transactions for %s on %s", len(records), contract_address, config.key.value)
        return analyze(records, reference_time)
