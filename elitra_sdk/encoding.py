"""Calldata encoding for `manage` / `manageBatch` payloads."""

from collections.abc import Sequence
from typing import Any

from eth_abi import encode as abi_encode
from eth_utils import function_signature_to_4byte_selector

from elitra_sdk.constants import (
    ERC20_APPROVE_SIGNATURE,
    ERC20_TRANSFER_SIGNATURE,
    ERC4626_DEPOSIT_SIGNATURE,
    ERC4626_WITHDRAW_SIGNATURE,
)
from elitra_sdk.formatters import normalize_hex_str
from elitra_sdk.parsing import parse_function_signature


def encode_manage_call(signatures: Sequence[str], function_name: str, args: Sequence[Any]) -> str:
    """
    Encode a function call for use with `ElitraClient.manage`.

    `signatures` is a list of human-readable signatures; the first one named
    `function_name` that takes `len(args)` arguments is used:

        data = encode_manage_call(
            ["function approve(address spender, uint256 amount) returns (bool)"],
            "approve",
            [spender, 100 * 10**6],
        )
    """
    for signature in signatures:
        name, types = parse_function_signature(signature)
        if name != function_name or len(types) != len(args):
            continue
        selector = function_signature_to_4byte_selector(f"{name}({','.join(types)})")
        return normalize_hex_str(selector + abi_encode(types, list(args)))
    raise ValueError(f"Function {function_name!r} with {len(args)} argument(s) not found in signatures")


def encode_approve(spender: str, amount: int) -> str:
    """Encode an ERC20 approve call."""
    return encode_manage_call([ERC20_APPROVE_SIGNATURE], "approve", [spender, amount])


def encode_transfer(to: str, amount: int) -> str:
    """Encode an ERC20 transfer call."""
    return encode_manage_call([ERC20_TRANSFER_SIGNATURE], "transfer", [to, amount])


def encode_erc4626_deposit(assets: int, receiver: str) -> str:
    """Encode an ERC4626 deposit call."""
    return encode_manage_call([ERC4626_DEPOSIT_SIGNATURE], "deposit", [assets, receiver])


def encode_erc4626_withdraw(assets: int, receiver: str, owner: str) -> str:
    """Encode an ERC4626 withdraw call."""
    return encode_manage_call([ERC4626_WITHDRAW_SIGNATURE], "withdraw", [assets, receiver, owner])
