from taikowallet.domain.enums import AnalyticsWindow, SupportedChain


class TestEnumsAreStringMixin:
    def test_chain_is_str(self):
        assert isinstance(SupportedChain.TAIKO, str)
        assert SupportedChain.TAIKO == "taiko"
        assert SupportedChain("taikoHekla") is SupportedChain.TAIKO_HEKLA

    def test_window_labels(self):
        assert [w.value for w in AnalyticsWindow] == ["1d", "7d", "30d"]

    def test_window_days(self):
        assert [w.days for w in AnalyticsWindow] == [1, 7, 30]
