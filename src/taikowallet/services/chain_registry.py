"""ChainRegistry — named chain configs plus the "current chain" pointer."""

import logging
from collections.abc import Mapping

from taikowallet.domain.enums import SupportedChain
from taikowallet.domain.models import BUILTIN_CHAINS, ChainConfig
from taikowallet.exceptions import UnknownChain

logger = logging.getLogger(__name__)


def _to_key(chain_name: str | SupportedChain) -> SupportedChain:
    try:
        return SupportedChain(chain_name)
    except ValueError as e:
        raise UnknownChain(f"Invalid chain name: {chain_name}") from e


class ChainRegistry:
    """In-memory chain map owned by one wallet session. Not shared across sessions."""

    def __init__(
        self,
        chains: Mapping[SupportedChain, ChainConfig] | None = None,
        active: SupportedChain | str = SupportedChain.TAIKO,
    ) -> None:
        self._chains: dict[SupportedChain, ChainConfig] = dict(BUILTIN_CHAINS)
        for config in (chains or {}).values():
            self.add(config)
        self._active = _to_key(active)

    @property
    def active(self) -> ChainConfig:
        return self._chains[self._active]

    @property
    def chains(self) -> Mapping[SupportedChain, ChainConfig]:
        return dict(self._chains)

    def add(self, config: ChainConfig) -> None:
        self._chains[config.key] = config

    def resolve(self, chain_name: str | SupportedChain) -> ChainConfig:
        return self._chains[_to_key(chain_name)]

    def override(self, chain_name: str | SupportedChain, custom_rpc_url: str) -> ChainConfig:
        """Point a chain at a custom RPC, keeping every other field of its template."""
        key = _to_key(chain_name)
        base = self._chains.get(key) or BUILTIN_CHAINS[key]
        config = base.with_rpc(custom_rpc_url)
        self._chains[key] = config
        logger.debug("Chain %s now uses RPC %s", key.value, custom_rpc_url)
        return config

    def set_active(
        self,
        chain_name: str | SupportedChain,
        custom_rpc_url: str | None = None,
    ) -> ChainConfig:
        """Switch the current chain, applying an RPC override in the same step when given.

        An unknown name raises before anything changes.
        """
        key = _to_key(chain_name)
        if custom_rpc_url:
            self.override(key, custom_rpc_url)
        self._active = key
        return self._chains[key]


def build_chain_registry(taiko_rpc_url: str = "", taiko_hekla_rpc_url: str = "") -> ChainRegistry:
    """Fresh registry with the provider URL settings applied as overrides."""
    registry = ChainRegistry()
    if taiko_rpc_url:
        registry.override(SupportedChain.TAIKO, taiko_rpc_url)
    if taiko_hekla_rpc_url:
        registry.override(SupportedChain.TAIKO_HEKLA, taiko_hekla_rpc_url)
    return registry
