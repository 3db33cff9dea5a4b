"""Read-only access to an ElitraVault."""

import asyncio
from typing import Any

from elitra_sdk.analytics import price_per_share
from elitra_sdk.contracts import checksum_address, get_vault_contract
from elitra_sdk.formatters import as_int
from elitra_sdk.models import PendingRedeem, UserPosition, VaultState
from elitra_sdk.parsing import parse_pending_redeem


class VaultReader:
    """
    Typed read calls against one vault.

    Aggregate reads (`get_vault_state`, `get_user_position`) issue their
    independent calls concurrently. They only observe a single block when
    `block_identifier` pins one; with the default "latest" each call may land
    on a different block.
    """

    def __init__(self, w3: Any, vault_address: str, *, block_identifier: int | str = "latest") -> None:
        self.w3 = w3
        self.vault_address = checksum_address(vault_address)
        self.contract = get_vault_contract(w3, self.vault_address)
        self.block_identifier = block_identifier

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vault_address={self.vault_address})"

    async def _call(self, fn_name: str, *args: Any) -> Any:
        function = getattr(self.contract.functions, fn_name)
        return await function(*args).call(block_identifier=self.block_identifier)

    def get_vault_address(self) -> str:
        return self.vault_address

    async def get_asset(self) -> str:
        """Address of the underlying token."""
        return checksum_address(await self._call("asset"))

    async def get_total_assets(self) -> int:
        return as_int(await self._call("totalAssets"))

    async def get_total_supply(self) -> int:
        return as_int(await self._call("totalSupply"))

    async def get_price_per_share(self) -> int:
        """Assets per share at 1e18 scale; 1e18 while the vault has no shares."""
        total_assets, total_supply = await asyncio.gather(self.get_total_assets(), self.get_total_supply())
        return price_per_share(total_assets, total_supply)

    async def preview_deposit(self, assets: int) -> int:
        """Shares the vault would mint for `assets`. Reverts (e.g. over the deposit cap) propagate."""
        return as_int(await self._call("previewDeposit", assets))

    async def preview_mint(self, shares: int) -> int:
        """Assets required to mint `shares`."""
        return as_int(await self._call("previewMint", shares))

    async def preview_redeem(self, shares: int) -> int:
        """Assets received for redeeming `shares`."""
        return as_int(await self._call("previewRedeem", shares))

    async def get_available_balance(self) -> int:
        """Liquidity available for withdrawals, excluding assets reserved for pending redemptions."""
        return as_int(await self._call("getAvailableBalance"))

    async def get_pending_redeem(self, user: str) -> PendingRedeem:
        """Queued redemption for `user`; zeros mean no pending request."""
        return parse_pending_redeem(await self._call("pendingRedeemRequest", checksum_address(user)))

    async def get_vault_state(self) -> VaultState:
        (
            total_assets,
            total_supply,
            aggregated_underlying_balances,
            total_pending_assets,
            available_balance,
            is_paused,
            last_block_updated,
            last_price_per_share,
        ) = await asyncio.gather(
            self.get_total_assets(),
            self.get_total_supply(),
            self._call("aggregatedUnderlyingBalances"),
            self._call("totalPendingAssets"),
            self.get_available_balance(),
            self._call("paused"),
            self._call("lastBlockUpdated"),
            self._call("lastPricePerShare"),
        )

        return VaultState(
            total_assets=total_assets,
            total_supply=total_supply,
            price_per_share=price_per_share(total_assets, total_supply),
            aggregated_underlying_balances=as_int(aggregated_underlying_balances),
            total_pending_assets=as_int(total_pending_assets),
            available_balance=available_balance,
            is_paused=bool(is_paused),
            last_block_updated=as_int(last_block_updated),
            last_price_per_share=as_int(last_price_per_share),
        )

    async def get_user_position(self, user: str) -> UserPosition:
        """
        Position of `user`, fetched in two phases.

        Phase 1 reads balance, pending redemption and withdraw/redeem limits
        concurrently. Phase 2 converts the share balance to assets with
        `previewRedeem`, and is skipped entirely for a zero balance.
        """
        user = checksum_address(user)
        shares, pending_redeem, max_withdraw, max_redeem = await asyncio.gather(
            self._call("balanceOf", user),
            self.get_pending_redeem(user),
            self._call("maxWithdraw", user),
            self._call("maxRedeem", user),
        )
        shares = as_int(shares)

        if shares == 0:
            assets = 0
        else:
            assets = await self.preview_redeem(shares)

        return UserPosition(
            shares=shares,
            assets=assets,
            pending_redeem=pending_redeem,
            max_withdraw=as_int(max_withdraw),
            max_redeem=as_int(max_redeem),
        )
