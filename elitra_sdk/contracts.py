"""Contract handles and node connections."""

from typing import Any

from aiohttp import ClientTimeout
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3

from elitra_sdk.constants import DEFAULT_TIMEOUT, ELITRA_VAULT_ABI


def checksum_address(address: str) -> str:
    """Checksum `address`, raising ValueError for anything that is not a 20-byte address."""
    if not isinstance(address, str) or not Web3.is_address(address):
        raise ValueError(f"Invalid address: {address}")
    return Web3.to_checksum_address(address)


def connect(rpc_url: str, *, timeout: int = DEFAULT_TIMEOUT) -> AsyncWeb3:
    """Open an async JSON-RPC connection. Timeouts are enforced by the provider only."""
    provider = AsyncHTTPProvider(rpc_url, request_kwargs={"timeout": ClientTimeout(total=timeout)})
    return AsyncWeb3(provider)


def get_vault_contract(w3: Any, vault_address: str) -> Any:
    """Bind the ElitraVault ABI to `vault_address` on connection `w3`."""
    return w3.eth.contract(address=checksum_address(vault_address), abi=ELITRA_VAULT_ABI)
