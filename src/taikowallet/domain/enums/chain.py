from enum import Enum


class SupportedChain(str, Enum):
    """Supported networks. Values match the chain keys used in action parameters."""

    TAIKO = "taiko"
    TAIKO_HEKLA = "taikoHekla"


class AnalyticsWindow(str, Enum):
    """Trailing windows reported by the analytics summary."""

    ONE_DAY = "1d"
    SEVEN_DAYS = "7d"
    THIRTY_DAYS = "30d"

    @property
    def days(self) -> int:
        return int(self.value[:-1])
