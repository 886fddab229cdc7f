import pytest

from taikowallet.domain.models import ResolvedAddress
from taikowallet.exceptions import EmptyIdentifier, UnresolvedName

CHECKSUMMED = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"


class TestHexPassthrough:
    @pytest.mark.parametrize("address", [
        CHECKSUMMED,
        CHECKSUMMED.lower(),
        CHECKSUMMED.upper().replace("0X", "0x"),
        "0x" + "0" * 40,
    ])
    async def test_returned_unchanged(self, address_resolver, name_resolver, address):
        resolved = await address_resolver.resolve(address)
        assert resolved == address
        assert isinstance(resolved, ResolvedAddress)
        name_resolver.lookup.assert_not_called()

    async def test_bad_checksum_is_accepted(self, address_resolver):
        mangled = "0x742D35cc6634C0532925a3b844Bc454e4438f44e"
        assert await address_resolver.resolve(mangled) == mangled


class TestEmpty:
    @pytest.mark.parametrize("identifier", ["", "   ", None])
    async def test_empty_identifier(self, address_resolver, name_resolver, identifier):
        with pytest.raises(EmptyIdentifier):
            await address_resolver.resolve(identifier)
        name_resolver.lookup.assert_not_called()


class TestNameLookup:
    async def test_resolves_name(self, address_resolver, name_resolver):
        name_resolver.lookup.return_value = CHECKSUMMED
        assert await address_resolver.resolve("siddesh.eth") == CHECKSUMMED
        name_resolver.lookup.assert_awaited_once_with("siddesh.eth")

    async def test_unresolved_name(self, address_resolver, name_resolver):
        name_resolver.lookup.return_value = None
        with pytest.raises(UnresolvedName):
            await address_resolver.resolve("nobody.eth")

    async def test_short_hex_goes_to_lookup(self, address_resolver, name_resolver):
        with pytest.raises(UnresolvedName):
            await address_resolver.resolve("0x1234")
        name_resolver.lookup.assert_awaited_once_with("0x1234")

    async def test_no_caching(self, address_resolver, name_resolver):
        name_resolver.lookup.return_value = CHECKSUMMED
        await address_resolver.resolve("siddesh.eth")
        await address_resolver.resolve("siddesh.eth")
        assert name_resolver.lookup.await_count == 2
