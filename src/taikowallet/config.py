from pydantic_settings import BaseSettings

from taikowallet.exceptions import ConfigurationError


class Settings(BaseSettings):
    goldrush_api_key: str = ""
    goldrush_base_url: str = "https://api.covalenthq.com"
    goldrush_page_size: int = 1000
    goldrush_max_pages: int = 1
    taiko_private_key: str = ""
    taiko_provider_url: str = ""  # Custom RPC for Taiko mainnet
    taiko_hekla_provider_url: str = ""
    ens_rpc_url: str = "https://ethereum-rpc.publicnode.com"
    lifi_base_url: str = "https://li.quest"
    http_rate_per_second: float = 5.0
    http_timeout: float = 30.0
    log_level: str = "INFO"

    class Config:
        env_file = ".env"

    def require_private_key(self) -> str:
        if not self.taiko_private_key:
            raise ConfigurationError("TAIKO_PRIVATE_KEY is missing")
        return self.taiko_private_key

    def require_goldrush_key(self) -> str:
        if not self.goldrush_api_key:
            raise ConfigurationError("Goldrush API key is required")
        return self.goldrush_api_key


settings = Settings()
