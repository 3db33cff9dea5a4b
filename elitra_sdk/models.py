"""Data models for the Elitra vault SDK."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PendingRedeem:
    """Queued redemption of a user that has not been fulfilled yet."""

    assets: int
    shares: int


@dataclass(frozen=True)
class VaultState:
    """Snapshot of the vault assembled from independent reads."""

    total_assets: int
    total_supply: int
    # Recomputed client-side from `total_assets` / `total_supply` (1e18 scale).
    price_per_share: int
    # Assets deployed into external protocols, as last reported via `updateBalance`.
    aggregated_underlying_balances: int
    total_pending_assets: int
    # Liquidity excluding amounts reserved for pending redemptions.
    available_balance: int
    is_paused: bool
    last_block_updated: int
    # Price per share recorded on-chain at the last balance update.
    last_price_per_share: int


@dataclass(frozen=True)
class UserPosition:
    """A single account's position in the vault."""

    shares: int
    assets: int
    pending_redeem: PendingRedeem
    max_withdraw: int
    max_redeem: int


@dataclass(frozen=True)
class DepositResult:
    """Result of `deposit` / `mint`."""

    hash: str
    # Pre-submission preview for `deposit`; the requested amount for `mint`.
    shares: int


@dataclass(frozen=True)
class RedeemResult:
    """Result of `request_redeem`."""

    hash: str
    # Assets paid out for an instant redemption, 0 for a queued one.
    value: int
    is_instant: bool
    # False when no RedeemRequest event was found and `value` is a preview estimate.
    from_event: bool = True


@dataclass(frozen=True)
class ManageResult:
    hash: str
    data: str


@dataclass(frozen=True)
class ManageBatchResult:
    hash: str


@dataclass(frozen=True)
class DepositOptions:
    receiver: str | None = None
    # Slippage bound; not checked client-side.
    max_assets: int | None = None


@dataclass(frozen=True)
class MintOptions:
    receiver: str | None = None
    # Slippage bound; not checked client-side.
    max_shares: int | None = None


@dataclass(frozen=True)
class RedeemOptions:
    receiver: str | None = None
    owner: str | None = None
    # Slippage bound; not checked client-side.
    min_assets: int | None = None
    # Raise instead of falling back to a preview when the receipt has no RedeemRequest event.
    require_event: bool = False


@dataclass(frozen=True)
class ManageOptions:
    value: int = 0
    gas_limit: int | None = None


@dataclass(frozen=True)
class ManageBatchOptions:
    gas_limit: int | None = None
