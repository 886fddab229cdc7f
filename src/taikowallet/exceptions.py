"""Error taxonomy. Every WalletError is terminal for the current request."""


class WalletError(Exception):
    """Base class for domain failures surfaced to the action layer."""

    default_message = "Wallet operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class UnknownChain(WalletError):
    default_message = "Invalid chain name"


class EmptyIdentifier(WalletError):
    default_message = "Empty address"


class MissingAddress(WalletError):
    default_message = "No address provided."


class MissingRecipient(WalletError):
    default_message = "Recipient address is missing"


class MissingChain(WalletError):
    default_message = "Chain parameter is missing"


class MissingAmount(WalletError):
    default_message = "Amount is required for native token transfer"


class InvalidAmount(WalletError):
    default_message = "Invalid amount provided"


class UnresolvedName(WalletError):
    default_message = "Invalid address"


class TokenNotFound(WalletError):
    default_message = "Token not found"


class InvalidContractAddress(WalletError):
    default_message = "Contract address must start with '0x'"


class TransferNotConfirmed(WalletError):
    default_message = "Transaction hash is invalid"


class TransferFailed(WalletError):
    """Downstream transfer failure. Message is the original cause, verbatim."""

    default_message = "Transfer failed"


class BalanceQueryFailed(WalletError):
    """Downstream balance failure. Message is the original cause, verbatim."""

    default_message = "Failed to fetch balance"


class HistoryFetchFailed(WalletError):
    default_message = "Failed to fetch transaction data"


class ExternalServiceError(Exception):
    """A collaborator HTTP API answered with an error or not at all."""


class ConfigurationError(Exception):
    """A setting required by the requested action is missing."""
