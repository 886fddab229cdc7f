"""Web3 name resolution through ENS on an Ethereum mainnet RPC."""

import logging

from ens import AsyncENS
from ens.exceptions import ENSException
from web3 import AsyncHTTPProvider, AsyncWeb3

logger = logging.getLogger(__name__)


class EnsNameResolver:
    """lookup(name) -> address or None. Each call queries the resolver again."""

    def __init__(self, rpc_url: str) -> None:
        self._ns = AsyncENS.from_web3(AsyncWeb3(AsyncHTTPProvider(rpc_url)))

    async def lookup(self, name: str) -> str | None:
        try:
            address = await self._ns.address(name)
        except ENSException as e:
            # Malformed or unsupported names resolve to nothing
            logger.info("ENS lookup rejected %r: %s", name, e)
            return None
        return str(address) if address else None
