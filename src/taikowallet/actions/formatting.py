"""Plain-text rendering of action results for the chat reply."""

from taikowallet.domain.enums import AnalyticsWindow
from taikowallet.domain.models import AnalyticsSummary

_WINDOW_LABELS: dict[AnalyticsWindow, tuple[str, str]] = {
    AnalyticsWindow.ONE_DAY: ("Last 1 Day", "1 Day"),
    AnalyticsWindow.SEVEN_DAYS: ("Last 7 Days", "7 Days"),
    AnalyticsWindow.THIRTY_DAYS: ("Last 30 Days", "30 Days"),
}


def format_top_addresses(addresses: list[str]) -> str:
    if not addresses:
        return "None"
    return "\n".join(f"{i}. {address}" for i, address in enumerate(addresses, start=1))


def _metric_block(title: str, values: dict[str, object]) -> list[str]:
    lines = [f"**{title}:**"]
    for window, (label, _) in _WINDOW_LABELS.items():
        lines.append(f"  - {label}: {values[window.value]}")
    return lines


def format_analysis(summary: AnalyticsSummary) -> str:
    lines = ["**Contract Analytics:**", ""]
    lines += _metric_block("Gas Spent", summary.gas_spent)
    lines.append("")
    lines += _metric_block("Transaction Count", summary.tx_count)
    lines.append("")
    lines += _metric_block("Unique Addresses", summary.unique_addresses)
    lines.append("")
    lines.append("**Top Addresses by Interactions:**")
    for window, (_, short_label) in _WINDOW_LABELS.items():
        lines.append(f"- {short_label}:")
        lines.append(format_top_addresses(summary.top_addresses[window.value]))
    return "\n".join(lines)
