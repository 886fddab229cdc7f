import pytest

from taikowallet.domain.enums import SupportedChain
from taikowallet.domain.models import BUILTIN_CHAINS
from taikowallet.exceptions import UnknownChain
from taikowallet.services.chain_registry import ChainRegistry, build_chain_registry


class TestResolve:
    def test_builtins_always_present(self):
        registry = ChainRegistry()
        assert set(registry.chains) == {SupportedChain.TAIKO, SupportedChain.TAIKO_HEKLA}

    def test_resolve_by_string(self):
        config = ChainRegistry().resolve("taikoHekla")
        assert config.id == 167009
        assert config.native_symbol == "ETH"

    def test_unknown_chain(self):
        with pytest.raises(UnknownChain):
            ChainRegistry().resolve("ethereum")

    def test_default_active_is_mainnet(self):
        assert ChainRegistry().active.key == SupportedChain.TAIKO


class TestOverride:
    def test_override_keeps_template_fields(self):
        registry = ChainRegistry()
        config = registry.override("taiko", "https://my-node.example/rpc")

        template = BUILTIN_CHAINS[SupportedChain.TAIKO]
        assert config.rpc_url == "https://my-node.example/rpc"
        assert config.default_rpc_url == template.default_rpc_url
        assert config.id == template.id
        assert config.explorer_url == template.explorer_url
        assert registry.resolve("taiko") == config

    def test_override_does_not_touch_builtin_template(self):
        ChainRegistry().override("taiko", "https://my-node.example/rpc")
        assert BUILTIN_CHAINS[SupportedChain.TAIKO].custom_rpc_url is None

    def test_override_unknown_chain(self):
        with pytest.raises(UnknownChain):
            ChainRegistry().override("mainnet", "https://x.example")

    def test_registries_are_independent(self):
        first, second = ChainRegistry(), ChainRegistry()
        first.override("taiko", "https://a.example")
        assert second.resolve("taiko").custom_rpc_url is None


class TestSetActive:
    def test_switch(self):
        registry = ChainRegistry()
        config = registry.set_active("taikoHekla")
        assert config.key == SupportedChain.TAIKO_HEKLA
        assert registry.active.key == SupportedChain.TAIKO_HEKLA

    def test_switch_with_rpc_override(self):
        registry = ChainRegistry()
        registry.set_active("taikoHekla", "https://hekla.example")
        assert registry.active.rpc_url == "https://hekla.example"

    def test_unknown_chain_leaves_pointer(self):
        registry = ChainRegistry()
        with pytest.raises(UnknownChain):
            registry.set_active("solana", "https://x.example")
        assert registry.active.key == SupportedChain.TAIKO


class TestBuildFromSettings:
    def test_provider_urls_applied(self):
        registry = build_chain_registry("https://main.example", "")
        assert registry.resolve("taiko").rpc_url == "https://main.example"
        assert registry.resolve("taikoHekla").custom_rpc_url is None

    def test_no_overrides(self):
        registry = build_chain_registry()
        assert registry.resolve("taiko").rpc_url == "https://rpc.mainnet.taiko.xyz"
