from taikowallet.domain.enums.chain import AnalyticsWindow, SupportedChain

__all__ = [
    "AnalyticsWindow",
    "SupportedChain",
]
