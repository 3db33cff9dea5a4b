"""Read-write client for an ElitraVault."""

import logging
from typing import Any

from elitra_sdk.contracts import checksum_address, get_vault_contract
from elitra_sdk.errors import AccountRequiredError, RedeemEventMissingError, WalletRequiredError
from elitra_sdk.formatters import normalize_hex_str
from elitra_sdk.models import (
    DepositOptions,
    DepositResult,
    ManageBatchOptions,
    ManageBatchResult,
    ManageOptions,
    ManageResult,
    MintOptions,
    RedeemOptions,
    RedeemResult,
)
from elitra_sdk.onchain import VaultReader
from elitra_sdk.parsing import parse_redeem_request
from elitra_sdk.wallet import Wallet

logger = logging.getLogger(__name__)


class ElitraClient(VaultReader):
    """
    Vault reads plus signed writes.

    Example:

        w3 = connect("https://evm-rpc.sei-apis.com")
        wallet = Wallet.from_private_key(w3, private_key)
        client = ElitraClient(w3, vault_address, wallet)
        result = await client.deposit(parse_amount("100", 6))

    Every write checks for a wallet and an account before any network call.
    Only `request_redeem` waits for the transaction to be mined; the other
    writes return the hash once the node accepts the transaction.
    """

    def __init__(
        self,
        w3: Any,
        vault_address: str,
        wallet: Wallet | None = None,
        *,
        block_identifier: int | str = "latest",
    ) -> None:
        super().__init__(w3, vault_address, block_identifier=block_identifier)
        self._wallet = wallet

    @property
    def wallet(self) -> Wallet | None:
        return self._wallet

    def set_wallet(self, wallet: Wallet) -> None:
        """Swap the signing handle. Writes already in flight keep the wallet they started with."""
        self._wallet = wallet

    def _require_signer(self) -> tuple[Wallet, str]:
        wallet = self._wallet
        if wallet is None:
            raise WalletRequiredError()
        if wallet.account is None:
            raise AccountRequiredError()
        return wallet, wallet.account.address

    async def _send(self, wallet: Wallet, fn_name: str, *args: Any, gas: int | None = None) -> str:
        contract = get_vault_contract(wallet.w3, self.vault_address)
        function = getattr(contract.functions, fn_name)(*args)
        return await wallet.send(function, gas=gas)

    async def deposit(self, assets: int, options: DepositOptions | None = None) -> DepositResult:
        """
        Deposit `assets` and return the hash with the previewed share amount.

        The preview runs before submission, so the shares actually minted may
        differ if the vault changes in between.
        """
        wallet, signer = self._require_signer()
        options = options or DepositOptions()
        receiver = checksum_address(options.receiver) if options.receiver else signer

        expected_shares = await self.preview_deposit(assets)
        tx_hash = await self._send(wallet, "deposit", assets, receiver)
        return DepositResult(hash=tx_hash, shares=expected_shares)

    async def mint(self, shares: int, options: MintOptions | None = None) -> DepositResult:
        """Mint exactly `shares`; the vault pulls whatever assets that costs."""
        wallet, signer = self._require_signer()
        options = options or MintOptions()
        receiver = checksum_address(options.receiver) if options.receiver else signer

        tx_hash = await self._send(wallet, "mint", shares, receiver)
        return DepositResult(hash=tx_hash, shares=shares)

    async def request_redeem(self, shares: int, options: RedeemOptions | None = None) -> RedeemResult:
        """
        Request redemption of `shares` and wait for the receipt.

        The RedeemRequest event tells whether the vault paid out instantly
        (`value` = assets) or queued the request (`value` = 0). When the event
        is missing the result falls back to a `previewRedeem` estimate marked
        `from_event=False`, or raises `RedeemEventMissingError` if
        `options.require_event` is set.
        """
        wallet, signer = self._require_signer()
        options = options or RedeemOptions()
        receiver = checksum_address(options.receiver) if options.receiver else signer
        owner = checksum_address(options.owner) if options.owner else signer

        tx_hash = await self._send(wallet, "requestRedeem", shares, receiver, owner)
        receipt = await self.w3.eth.wait_for_transaction_receipt(tx_hash)
        logger.debug("requestRedeem %s mined in block %s", tx_hash, receipt.get("blockNumber"))

        event = parse_redeem_request(self.contract, receipt)
        if event is not None:
            is_instant = event["instant"]
            return RedeemResult(hash=tx_hash, value=event["assets"] if is_instant else 0, is_instant=is_instant)

        if options.require_event:
            raise RedeemEventMissingError(tx_hash)
        logger.warning("No RedeemRequest event in %s; reporting previewRedeem estimate as instant", tx_hash)
        expected_assets = await self.preview_redeem(shares)
        return RedeemResult(hash=tx_hash, value=expected_assets, is_instant=True, from_event=False)

    async def manage(self, target: str, data: str, options: ManageOptions | None = None) -> ManageResult:
        """
        Execute `data` against `target` from the vault.

        Needs the manager role and an on-chain allow-listed target method;
        otherwise the call reverts.
        """
        wallet, _ = self._require_signer()
        options = options or ManageOptions()

        tx_hash = await self._send(
            wallet, "manage", checksum_address(target), data, options.value, gas=options.gas_limit
        )
        return ManageResult(hash=tx_hash, data=normalize_hex_str(data))

    async def manage_batch(
        self,
        targets: list[str],
        data: list[str],
        values: list[int],
        options: ManageBatchOptions | None = None,
    ) -> ManageBatchResult:
        """Execute several manage calls in one transaction, in order."""
        wallet, _ = self._require_signer()
        options = options or ManageBatchOptions()

        tx_hash = await self._send(
            wallet,
            "manageBatch",
            [checksum_address(t) for t in targets],
            list(data),
            list(values),
            gas=options.gas_limit,
        )
        return ManageBatchResult(hash=tx_hash)

    async def update_balance(self, new_aggregated_balance: int) -> str:
        """Report the vault's balance across external protocols. Requires authorization."""
        wallet, _ = self._require_signer()
        return await self._send(wallet, "updateBalance", new_aggregated_balance)

    async def pause(self) -> str:
        wallet, _ = self._require_signer()
        return await self._send(wallet, "pause")

    async def unpause(self) -> str:
        wallet, _ = self._require_signer()
        return await self._send(wallet, "unpause")

    async def fulfill_redeem(self, receiver: str, shares: int, assets: int) -> str:
        """Settle a queued redemption for `receiver`. Requires authorization."""
        wallet, _ = self._require_signer()
        return await self._send(wallet, "fulfillRedeem", checksum_address(receiver), shares, assets)
