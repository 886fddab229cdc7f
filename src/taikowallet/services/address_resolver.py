"""Resolve recipients: literal hex passes through, anything else is a web3 name."""

import logging
from typing import Protocol

from taikowallet.domain.models import ResolvedAddress, is_hex_address
from taikowallet.exceptions import EmptyIdentifier, UnresolvedName

logger = logging.getLogger(__name__)


class NameResolver(Protocol):
    async def lookup(self, name: str) -> str | None: ...


class AddressResolver:
    def __init__(self, name_resolver: NameResolver) -> None:
        self._names = name_resolver

    async def resolve(self, identifier: str | None) -> ResolvedAddress:
        """Return a canonical address for a hex string or a human-readable name.

        Hex input keeps its case and is not checksum-validated. Names are looked
        up on every call.
        """
        if identifier is None or not identifier.strip():
            raise EmptyIdentifier()
        identifier = identifier.strip()

        if is_hex_address(identifier):
            return ResolvedAddress(identifier)

        address = await self._names.lookup(identifier)
        if not address or not is_hex_address(address):
            raise UnresolvedName(f"Invalid address: could not resolve {identifier}")
        logger.debug("Resolved %s -> %s", identifier, address)
        return ResolvedAddress(address)
