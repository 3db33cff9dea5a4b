"""Share pricing and yield math.

Everything here mirrors the vault's ERC-4626 accounting on plain integers,
except `calculate_apy`, which is a float display figure.
"""

import math

from elitra_sdk.constants import PRICE_PER_SHARE_SCALE, SECONDS_PER_YEAR


def price_per_share(total_assets: int, total_supply: int) -> int:
    """Assets per share at 1e18 scale; an empty vault prices shares 1:1."""
    if total_supply == 0:
        return PRICE_PER_SHARE_SCALE
    return total_assets * PRICE_PER_SHARE_SCALE // total_supply


def convert_to_shares(assets: int, total_assets: int, total_supply: int) -> int:
    """Shares minted for `assets` at the given totals (1:1 while supply is zero)."""
    if total_supply == 0:
        return assets
    if total_assets == 0:
        raise ZeroDivisionError("total_assets must be > 0 when total_supply > 0")
    return assets * total_supply // total_assets


def convert_to_assets(shares: int, total_assets: int, total_supply: int) -> int:
    """Assets redeemable for `shares` at the given totals (0 while supply is zero)."""
    if total_supply == 0:
        return 0
    return shares * total_assets // total_supply


def calculate_apy(old_pps: int, new_pps: int, time_delta: int) -> float:
    """
    Annualize the change between two price-per-share readings.

    Returns a percentage (5.5 means 5.5%). Compounds the period return over
    `SECONDS_PER_YEAR / time_delta` periods, so short windows amplify small
    moves; the result is approximate and may be negative.
    """
    if old_pps == 0 or time_delta == 0:
        return 0.0

    period_return = (new_pps - old_pps) / old_pps
    periods_per_year = SECONDS_PER_YEAR / time_delta

    try:
        growth = math.pow(1 + period_return, periods_per_year)
    except OverflowError:
        return math.inf
    return (growth - 1) * 100
