from dependency_injector import containers, providers

from taikowallet.actions import AnalyticsAction, BalanceAction, TransferAction
from taikowallet.config import Settings
from taikowallet.infra.blockchain.wallet import WalletProvider
from taikowallet.infra.http.rate_limited_client import RateLimitedClient
from taikowallet.infra.indexer.goldrush import GoldRushClient
from taikowallet.infra.names.ens_resolver import EnsNameResolver
from taikowallet.infra.tokens.lifi import LiFiTokenClient
from taikowallet.services.address_resolver import AddressResolver
from taikowallet.services.analytics import OnchainAnalyticsService
from taikowallet.services.asset_resolver import AssetResolver
from taikowallet.services.balance import BalanceService
from taikowallet.services.chain_registry import build_chain_registry
from taikowallet.services.transfer import TransferService


class Container(containers.DeclarativeContainer):
    """Stateless collaborators are singletons; every wallet session gets its own registry."""

    wiring_config = containers.WiringConfiguration(modules=["taikowallet.api.deps"])

    settings = providers.Singleton(Settings)

    http_client = providers.Singleton(
        RateLimitedClient,
        rate_per_second=settings.provided.http_rate_per_second,
        timeout=settings.provided.http_timeout,
    )

    name_resolver = providers.Singleton(
        EnsNameResolver,
        rpc_url=settings.provided.ens_rpc_url,
    )

    token_lookup = providers.Singleton(
        LiFiTokenClient,
        http_client=http_client,
        base_url=settings.provided.lifi_base_url,
    )

    history = providers.Singleton(
        GoldRushClient,
        api_key=settings.provided.require_goldrush_key.call(),
        http_client=http_client,
        base_url=settings.provided.goldrush_base_url,
        page_size=settings.provided.goldrush_page_size,
        max_pages=settings.provided.goldrush_max_pages,
    )

    chain_registry = providers.Factory(
        build_chain_registry,
        taiko_rpc_url=settings.provided.taiko_provider_url,
        taiko_hekla_rpc_url=settings.provided.taiko_hekla_provider_url,
    )

    wallet = providers.Factory(
        WalletProvider,
        private_key=settings.provided.require_private_key.call(),
        registry=chain_registry,
    )

    address_resolver = providers.Factory(AddressResolver, name_resolver=name_resolver)
    asset_resolver = providers.Factory(AssetResolver, token_lookup=token_lookup)

    transfer_service = providers.Factory(
        TransferService,
        wallet=wallet,
        addresses=address_resolver,
        assets=asset_resolver,
    )
    balance_service = providers.Factory(
        BalanceService,
        wallet=wallet,
        addresses=address_resolver,
        assets=asset_resolver,
    )
    analytics_service = providers.Factory(
        OnchainAnalyticsService,
        history=history,
        registry=chain_registry,
    )

    transfer_action = providers.Factory(TransferAction, service=transfer_service)
    balance_action = providers.Factory(BalanceAction, service=balance_service)
    analytics_action = providers.Factory(AnalyticsAction, service=analytics_service)
