"""Constants and ABI fragments for the Elitra vault SDK."""

# Minimal ABI for ElitraVault - only the functions and events the client touches.
# Source: ElitraVault.json shipped with the vault deployment artifacts.
ELITRA_VAULT_ABI: list[dict] = [
    {
        "type": "function",
        "name": "asset",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "type": "function",
        "name": "totalAssets",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "totalSupply",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "previewDeposit",
        "stateMutability": "view",
        "inputs": [{"name": "assets", "type": "uint256"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "previewMint",
        "stateMutability": "view",
        "inputs": [{"name": "shares", "type": "uint256"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "previewRedeem",
        "stateMutability": "view",
        "inputs": [{"name": "shares", "type": "uint256"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "getAvailableBalance",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "pendingRedeemRequest",
        "stateMutability": "view",
        "inputs": [{"name": "user", "type": "address"}],
        "outputs": [
            {"name": "assets", "type": "uint256"},
            {"name": "pendingShares", "type": "uint256"},
        ],
    },
    {
        "type": "function",
        "name": "aggregatedUnderlyingBalances",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "totalPendingAssets",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "paused",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "type": "function",
        "name": "lastBlockUpdated",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "lastPricePerShare",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "balanceOf",
        "stateMutability": "view",
        "inputs": [{"name": "account", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "maxWithdraw",
        "stateMutability": "view",
        "inputs": [{"name": "owner", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "maxRedeem",
        "stateMutability": "view",
        "inputs": [{"name": "owner", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "deposit",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "assets", "type": "uint256"},
            {"name": "receiver", "type": "address"},
        ],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "mint",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "shares", "type": "uint256"},
            {"name": "receiver", "type": "address"},
        ],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "requestRedeem",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "shares", "type": "uint256"},
            {"name": "receiver", "type": "address"},
            {"name": "owner", "type": "address"},
        ],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "manage",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "target", "type": "address"},
            {"name": "data", "type": "bytes"},
            {"name": "value", "type": "uint256"},
        ],
        "outputs": [{"name": "result", "type": "bytes"}],
    },
    {
        "type": "function",
        "name": "manageBatch",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "targets", "type": "address[]"},
            {"name": "data", "type": "bytes[]"},
            {"name": "values", "type": "uint256[]"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "updateBalance",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "newAggregatedBalance", "type": "uint256"}],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "pause",
        "stateMutability": "nonpayable",
        "inputs": [],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "unpause",
        "stateMutability": "nonpayable",
        "inputs": [],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "fulfillRedeem",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "receiver", "type": "address"},
            {"name": "shares", "type": "uint256"},
            {"name": "assets", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "type": "event",
        "name": "RedeemRequest",
        "anonymous": False,
        "inputs": [
            {"name": "receiver", "type": "address", "indexed": True},
            {"name": "owner", "type": "address", "indexed": True},
            {"name": "assets", "type": "uint256", "indexed": False},
            {"name": "shares", "type": "uint256", "indexed": False},
            {"name": "instant", "type": "bool", "indexed": False},
        ],
    },
]

REDEEM_REQUEST_EVENT = "RedeemRequest"

# Human-readable signatures for the calls most often routed through `manage`.
ERC20_APPROVE_SIGNATURE = "function approve(address spender, uint256 amount) returns (bool)"
ERC20_TRANSFER_SIGNATURE = "function transfer(address to, uint256 amount) returns (bool)"
ERC4626_DEPOSIT_SIGNATURE = "function deposit(uint256 assets, address receiver) returns (uint256)"
ERC4626_WITHDRAW_SIGNATURE = "function withdraw(uint256 assets, address receiver, address owner) returns (uint256)"

PRICE_PER_SHARE_SCALE = 10**18  # pricePerShare is 1e18 fixed point
DEFAULT_DECIMALS = 18
DEFAULT_DISPLAY_PRECISION = 4
SECONDS_PER_YEAR = 365.25 * 24 * 60 * 60  # Julian year, used for APY annualization

# Environment variables read by `config.load_config_from_env`.
VAULT_ADDRESS_ENV = "ELITRA_VAULT_ADDRESS"
RPC_URL_ENV = "ETH_RPC_URL"
PRIVATE_KEY_ENV = "PRIVATE_KEY"
CHAIN_ID_ENV = "CHAIN_ID"

DEFAULT_TIMEOUT = 30
