"""Exceptions raised by the SDK itself.

Transport and contract failures (reverts, timeouts, provider errors) are not
wrapped; they reach the caller as raised by web3.py.
"""


class ElitraError(Exception):
    """Base class for SDK errors."""


class WalletRequiredError(ElitraError, RuntimeError):
    """A write operation was attempted without a wallet configured."""

    def __init__(self, message: str = "Wallet is required for write operations") -> None:
        super().__init__(message)


class AccountRequiredError(ElitraError, RuntimeError):
    """The configured wallet carries no signing account."""

    def __init__(self, message: str = "Wallet must have an account") -> None:
        super().__init__(message)


class RedeemEventMissingError(ElitraError):
    """The requestRedeem receipt did not contain a RedeemRequest event."""

    def __init__(self, tx_hash: str) -> None:
        super().__init__(f"No RedeemRequest event found in receipt of {tx_hash}")
        self.tx_hash = tx_hash
