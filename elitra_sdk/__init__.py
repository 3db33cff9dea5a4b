"""Async Python SDK for Elitra vaults."""

from elitra_sdk.analytics import calculate_apy, convert_to_assets, convert_to_shares, price_per_share
from elitra_sdk.client import ElitraClient
from elitra_sdk.config import VaultConfig, create_client, load_config_from_env
from elitra_sdk.contracts import connect
from elitra_sdk.encoding import (
    encode_approve,
    encode_erc4626_deposit,
    encode_erc4626_withdraw,
    encode_manage_call,
    encode_transfer,
)
from elitra_sdk.errors import AccountRequiredError, ElitraError, RedeemEventMissingError, WalletRequiredError
from elitra_sdk.formatters import format_shares, parse_amount
from elitra_sdk.models import (
    DepositOptions,
    DepositResult,
    ManageBatchOptions,
    ManageBatchResult,
    ManageOptions,
    ManageResult,
    MintOptions,
    PendingRedeem,
    RedeemOptions,
    RedeemResult,
    UserPosition,
    VaultState,
)
from elitra_sdk.onchain import VaultReader
from elitra_sdk.wallet import Wallet

__version__ = "0.1.0"

__all__ = [
    "AccountRequiredError",
    "DepositOptions",
    "DepositResult",
    "ElitraClient",
    "ElitraError",
    "ManageBatchOptions",
    "ManageBatchResult",
    "ManageOptions",
    "ManageResult",
    "MintOptions",
    "PendingRedeem",
    "RedeemEventMissingError",
    "RedeemOptions",
    "RedeemResult",
    "UserPosition",
    "VaultConfig",
    "VaultReader",
    "VaultState",
    "Wallet",
    "WalletRequiredError",
    "calculate_apy",
    "connect",
    "convert_to_assets",
    "convert_to_shares",
    "create_client",
    "encode_approve",
    "encode_erc4626_deposit",
    "encode_erc4626_withdraw",
    "encode_manage_call",
    "encode_transfer",
    "format_shares",
    "load_config_from_env",
    "parse_amount",
    "price_per_share",
]
