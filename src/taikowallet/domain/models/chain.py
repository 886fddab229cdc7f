"""Chain configuration and the built-in network templates."""

from pydantic import BaseModel

from taikowallet.domain.enums import SupportedChain


class ChainConfig(BaseModel):
    """Connection and display settings for one network."""

    model_config = {"frozen": True}

    key: SupportedChain
    id: int
    name: str
    native_symbol: str = "ETH"
    native_decimals: int = 18
    default_rpc_url: str
    custom_rpc_url: str | None = None
    explorer_url: str
    indexer_slug: str  # GoldRush chain name

    @property
    def rpc_url(self) -> str:
        return self.custom_rpc_url or self.default_rpc_url

    def with_rpc(self, custom_rpc_url: str | None) -> "ChainConfig":
        return self.model_copy(update={"custom_rpc_url": custom_rpc_url})


BUILTIN_CHAINS: dict[SupportedChain, ChainConfig] = {
    SupportedChain.TAIKO: ChainConfig(
        key=SupportedChain.TAIKO,
        id=167000,
        name="Taiko",
        default_rpc_url="https://rpc.mainnet.taiko.xyz",
        explorer_url="https://taikoscan.io",
        indexer_slug="taiko-mainnet",
    ),
    SupportedChain.TAIKO_HEKLA: ChainConfig(
        key=SupportedChain.TAIKO_HEKLA,
        id=167009,
        name="Taiko Hekla",
        default_rpc_url="https://rpc.hekla.taiko.xyz",
        explorer_url="https://hekla.taikoscan.network",
        indexer_slug="taiko-hekla-testnet",
    ),
}
