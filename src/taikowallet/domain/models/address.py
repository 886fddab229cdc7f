import re

ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
ZERO_HASH_RE = re.compile(r"^0x0*$")


def is_hex_address(value: str) -> bool:
    """True for 0x-prefixed 20-byte hex. Case is not checked against EIP-55."""
    return bool(ADDRESS_RE.fullmatch(value))


def is_placeholder_hash(tx_hash: str | None) -> bool:
    """True for a missing, bare "0x" or all-zero transaction hash."""
    if not tx_hash:
        return True
    return bool(ZERO_HASH_RE.fullmatch(tx_hash.lower()))


class ResolvedAddress(str):
    """Canonical address produced by AddressResolver. Immutable like any str."""

    def __new__(cls, value: str) -> "ResolvedAddress":
        if not is_hex_address(value):
            raise ValueError(f"Not a canonical address: {value!r}")
        return super().__new__(cls, value)
