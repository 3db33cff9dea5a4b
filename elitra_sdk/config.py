"""Configuration loading and client construction."""

import os
from dataclasses import dataclass, field

from elitra_sdk.client import ElitraClient
from elitra_sdk.constants import (
    CHAIN_ID_ENV,
    DEFAULT_TIMEOUT,
    PRIVATE_KEY_ENV,
    RPC_URL_ENV,
    VAULT_ADDRESS_ENV,
)
from elitra_sdk.contracts import checksum_address, connect
from elitra_sdk.onchain import VaultReader
from elitra_sdk.wallet import Wallet, load_account


@dataclass(frozen=True)
class VaultConfig:
    """Everything needed to reach one vault. `private_key` is optional and kept out of repr."""

    vault_address: str
    rpc_url: str
    private_key: str | None = field(default=None, repr=False)
    chain_id: int | None = None
    request_timeout: int = DEFAULT_TIMEOUT


def load_config_from_env(
    *,
    vault_address: str | None = None,
    rpc_url: str | None = None,
    private_key: str | None = None,
) -> VaultConfig:
    """
    Build a VaultConfig from explicit values, falling back to the environment.

    Reads ELITRA_VAULT_ADDRESS, ETH_RPC_URL, PRIVATE_KEY and CHAIN_ID.
    """
    vault_address = vault_address or os.getenv(VAULT_ADDRESS_ENV)
    if not vault_address:
        raise ValueError(f"Vault address is required. Pass it explicitly or set {VAULT_ADDRESS_ENV}.")
    rpc_url = rpc_url or os.getenv(RPC_URL_ENV)
    if not rpc_url:
        raise ValueError(f"RPC URL is required. Pass it explicitly or set {RPC_URL_ENV}.")
    private_key = private_key or os.getenv(PRIVATE_KEY_ENV) or None

    chain_id_raw = os.getenv(CHAIN_ID_ENV, "").strip()
    try:
        chain_id = int(chain_id_raw, 0) if chain_id_raw else None
    except ValueError as ex:
        raise ValueError(f"Invalid {CHAIN_ID_ENV}: {chain_id_raw!r}") from ex

    return VaultConfig(
        vault_address=checksum_address(vault_address),
        rpc_url=rpc_url,
        private_key=private_key,
        chain_id=chain_id,
    )


def create_client(config: VaultConfig) -> VaultReader:
    """
    Connect according to `config`.

    Returns an `ElitraClient` when a private key is configured, otherwise a
    read-only `VaultReader`.
    """
    w3 = connect(config.rpc_url, timeout=config.request_timeout)
    if not config.private_key:
        return VaultReader(w3, config.vault_address)
    wallet = Wallet(w3, load_account(config.private_key), chain_id=config.chain_id)
    return ElitraClient(w3, config.vault_address, wallet)
