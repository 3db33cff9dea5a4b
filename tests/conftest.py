import pytest

# Digits only, so the address is its own checksum form.
BUILD_TO = "0x0000000000000000000000000000000000001111"
TX_HASH_BYTES = b"\x12" * 32


class DummyCall:
    def __init__(self, chain, name, args):
        self._chain = chain
        self.fn_name = name
        self.args = args

    async def call(self, block_identifier=None):
        self._chain.log.append(("call", self.fn_name, self.args, block_identifier))
        value = self._chain.returns[self.fn_name]
        if isinstance(value, Exception):
            raise value
        return value(*self.args) if callable(value) else value

    async def build_transaction(self, params):
        self._chain.log.append(("build", self.fn_name, self.args, dict(params)))
        return {
            "to": BUILD_TO,
            "data": "0x",
            "value": 0,
            "gas": params.get("gas", 200_000),
            "gasPrice": 10**9,
            "nonce": params["nonce"],
            "chainId": params.get("chainId", 1329),
        }


class DummyFunctions:
    def __init__(self, chain):
        self._chain = chain

    def __getattr__(self, name):
        return lambda *args: DummyCall(self._chain, name, args)


class DummyEvent:
    def __init__(self, chain):
        self._chain = chain

    def process_receipt(self, receipt, errors=None):
        return receipt.get("events", [])


class DummyEvents:
    def __init__(self, chain):
        self._chain = chain

    def RedeemRequest(self):
        return DummyEvent(self._chain)


class DummyContract:
    def __init__(self, chain, address):
        self.address = address
        self.functions = DummyFunctions(chain)
        self.events = DummyEvents(chain)


class DummyEth:
    def __init__(self, chain):
        self._chain = chain

    def contract(self, address=None, abi=None):
        return DummyContract(self._chain, address)

    async def get_transaction_count(self, address, block_identifier="latest"):
        self._chain.log.append(("nonce", address, block_identifier))
        return self._chain.nonce

    async def send_raw_transaction(self, raw_tx):
        self._chain.log.append(("send", raw_tx))
        return TX_HASH_BYTES

    async def wait_for_transaction_receipt(self, tx_hash):
        self._chain.log.append(("receipt", tx_hash))
        return self._chain.receipt


class DummyChain:
    """In-memory stand-in for an AsyncWeb3 connection; records every RPC-shaped call."""

    def __init__(self):
        self.returns = {
            "asset": "0x00000000000000000000000000000000000000c3",
            "totalAssets": 1_000 * 10**18,
            "totalSupply": 500 * 10**18,
            "previewDeposit": lambda assets: assets // 2,
            "previewMint": lambda shares: shares * 2,
            "previewRedeem": lambda shares: shares * 2,
            "getAvailableBalance": 300 * 10**18,
            "pendingRedeemRequest": lambda user: (7, 3),
            "aggregatedUnderlyingBalances": 600 * 10**18,
            "totalPendingAssets": 100 * 10**18,
            "paused": False,
            "lastBlockUpdated": 12_345,
            "lastPricePerShare": 2 * 10**18,
            "balanceOf": lambda user: 0,
            "maxWithdraw": lambda user: 0,
            "maxRedeem": lambda user: 0,
        }
        self.receipt = {"blockNumber": 99, "status": 1, "events": []}
        self.nonce = 7
        self.log = []
        self.eth = DummyEth(self)

    def calls(self, name=None):
        return [entry for entry in self.log if entry[0] == "call" and (name is None or entry[1] == name)]

    def builds(self):
        return [entry for entry in self.log if entry[0] == "build"]


@pytest.fixture
def chain():
    return DummyChain()
