import json

import pytest

from elitra_sdk.errors import AccountRequiredError
from elitra_sdk.wallet import Wallet, load_account

TEST_KEY = "0x" + "b" * 64


def test_load_account_accepts_key_without_prefix():
    assert load_account("b" * 64).address == load_account(TEST_KEY).address


@pytest.mark.parametrize("key", ["bad-key", "0x" + "g" * 64, "0x" + "a" * 63, ""])
def test_load_account_rejects_invalid_key_without_leaking_it(key):
    with pytest.raises(ValueError) as excinfo:
        load_account(key)
    assert str(excinfo.value) == "Invalid private key"


def test_private_key_not_in_repr(chain):
    wallet = Wallet.from_private_key(chain, TEST_KEY, chain_id=1329)
    assert "b" * 10 not in repr(wallet)
    assert wallet.address in repr(wallet)


def test_private_key_not_serializable(chain):
    wallet = Wallet.from_private_key(chain, TEST_KEY)
    with pytest.raises(TypeError):
        json.dumps(wallet.__dict__)


def test_wallet_without_account_has_no_address(chain):
    assert Wallet(chain).address is None


@pytest.mark.asyncio
async def test_send_signs_and_broadcasts(chain):
    wallet = Wallet.from_private_key(chain, TEST_KEY, chain_id=1329)
    function = chain.eth.contract().functions.pause()

    tx_hash = await wallet.send(function, gas=90_000)

    assert tx_hash == "0x" + "12" * 32
    nonce, build, send = chain.log
    assert nonce == ("nonce", wallet.address, "pending")
    assert build[3] == {"from": wallet.address, "gas": 90_000, "chainId": 1329, "nonce": 7}
    assert send[0] == "send"
    assert isinstance(send[1], bytes) and len(send[1]) > 0


@pytest.mark.asyncio
async def test_send_lets_node_fill_chain_id_and_gas(chain):
    wallet = Wallet.from_private_key(chain, TEST_KEY)
    await wallet.send(chain.eth.contract().functions.unpause())
    [build] = chain.builds()
    assert build[3] == {"from": wallet.address, "nonce": 7}


@pytest.mark.asyncio
async def test_send_without_account(chain):
    with pytest.raises(AccountRequiredError):
        await Wallet(chain).send(chain.eth.contract().functions.pause())
    assert chain.log == []
