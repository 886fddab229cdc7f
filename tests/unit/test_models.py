from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from taikowallet.domain.enums import SupportedChain
from taikowallet.domain.models import (
    BUILTIN_CHAINS,
    AnalyticsSummary,
    ResolvedAddress,
    TransactionRecord,
    TransferRequest,
    TransferResult,
    is_hex_address,
    is_placeholder_hash,
)


class TestAddressHelpers:
    @pytest.mark.parametrize("value,expected", [
        ("0x742d35Cc6634C0532925a3b844Bc454e4438f44e", True),
        ("0x742d35cc6634c0532925a3b844bc454e4438f44e", True),
        ("742d35Cc6634C0532925a3b844Bc454e4438f44e", False),
        ("0x742d35Cc6634C0532925a3b844Bc454e4438f4", False),
        ("0x742d35Cc6634C0532925a3b844Bc454e4438f44g", False),
        ("vitalik.eth", False),
    ])
    def test_is_hex_address(self, value, expected):
        assert is_hex_address(value) is expected

    @pytest.mark.parametrize("value,expected", [
        (None, True),
        ("", True),
        ("0x", True),
        ("0x" + "0" * 64, True),
        ("0x" + "ab" * 32, False),
    ])
    def test_is_placeholder_hash(self, value, expected):
        assert is_placeholder_hash(value) is expected

    def test_resolved_address_rejects_names(self):
        with pytest.raises(ValueError):
            ResolvedAddress("vitalik.eth")


class TestBuiltinChains:
    def test_ids(self):
        assert BUILTIN_CHAINS[SupportedChain.TAIKO].id == 167000
        assert BUILTIN_CHAINS[SupportedChain.TAIKO_HEKLA].id == 167009

    def test_frozen(self):
        with pytest.raises(ValidationError):
            BUILTIN_CHAINS[SupportedChain.TAIKO].id = 1


class TestTransactionRecord:
    def test_parses_indexer_item(self):
        record = TransactionRecord.model_validate({
            "block_signed_at": "2025-01-15T10:00:00Z",
            "gas_spent": 21000,
            "from_address": "0xaaa",
            "to_address": "0xbbb",
            "gas_price": 1000000000,
        })
        assert record.timestamp == datetime(2025, 1, 15, 10, 0, tzinfo=UTC)
        assert record.gas_spent == 21000

    def test_contract_creation(self):
        record = TransactionRecord.model_validate({
            "block_signed_at": "2025-01-15T10:00:00Z",
            "gas_spent": 0,
            "from_address": "0xaaa",
            "to_address": None,
        })
        assert record.to_address is None


class TestSerialization:
    def test_transfer_request_accepts_alias(self):
        request = TransferRequest.model_validate({"toAddress": "0xabc", "chain": "taiko"})
        assert request.to_address == "0xabc"

    def test_transfer_result_camel_hash(self):
        result = TransferResult(
            chain=SupportedChain.TAIKO, tx_hash="0x01", recipient="0xabc", amount="1", token="ETH",
        )
        dumped = result.model_dump(mode="json", by_alias=True, exclude_none=True)
        assert dumped["txHash"] == "0x01"
        assert "data" not in dumped

    def test_summary_camel_case(self):
        dumped = AnalyticsSummary.empty().model_dump(by_alias=True)
        assert set(dumped) == {"gasSpent", "txCount", "uniqueAddresses", "topAddresses"}

    def test_empty_lists_not_shared(self):
        summary = AnalyticsSummary.empty()
        summary.top_addresses["1d"].append("0xaaa")
        assert summary.top_addresses["7d"] == []
