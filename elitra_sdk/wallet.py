"""Write-capable signing handle: an account plus the connection it broadcasts through."""

import logging
from typing import Any

from eth_account import Account
from eth_account.signers.local import LocalAccount

from elitra_sdk.errors import AccountRequiredError
from elitra_sdk.formatters import normalize_hex_str

logger = logging.getLogger(__name__)


def load_account(private_key: str) -> LocalAccount:
    """Build a local account from a hex private key. The key never appears in errors."""
    raw = private_key[2:] if private_key.startswith("0x") else private_key
    if len(raw) != 64 or any(c not in "0123456789abcdefABCDEF" for c in raw):
        raise ValueError("Invalid private key")
    try:
        return Account.from_key(f"0x{raw}")
    except Exception as exc:
        raise ValueError("Invalid private key") from exc


class Wallet:
    """
    Signs and broadcasts contract calls.

    `account` may be None (e.g. a wallet created before the user picked an
    account); every write through the client then fails with
    `AccountRequiredError` before touching the network.
    """

    def __init__(self, w3: Any, account: LocalAccount | None = None, *, chain_id: int | None = None) -> None:
        self.w3 = w3
        self.account = account
        self.chain_id = chain_id

    @classmethod
    def from_private_key(cls, w3: Any, private_key: str, *, chain_id: int | None = None) -> "Wallet":
        return cls(w3, load_account(private_key), chain_id=chain_id)

    @property
    def address(self) -> str | None:
        return self.account.address if self.account is not None else None

    def __repr__(self) -> str:
        return f"Wallet(address={self.address}, chain_id={self.chain_id})"

    async def send(self, function: Any, *, gas: int | None = None) -> str:
        """
        Build, sign and broadcast `function` (a bound contract function).

        Returns the 0x-prefixed transaction hash as soon as the node accepts
        the raw transaction; inclusion is not awaited.
        """
        account = self.account
        if account is None:
            raise AccountRequiredError()

        tx_params: dict[str, Any] = {"from": account.address}
        if gas is not None:
            tx_params["gas"] = int(gas)
        if self.chain_id is not None:
            tx_params["chainId"] = self.chain_id
        tx_params["nonce"] = await self.w3.eth.get_transaction_count(account.address, "pending")

        tx = await function.build_transaction(tx_params)
        signed = account.sign_transaction(tx)
        raw_tx = getattr(signed, "raw_transaction", None) or getattr(signed, "rawTransaction", None)
        tx_hash = normalize_hex_str(await self.w3.eth.send_raw_transaction(raw_tx))
        logger.debug("Sent %s nonce=%s: %s", getattr(function, "fn_name", "call"), tx_params["nonce"], tx_hash)
        return tx_hash
