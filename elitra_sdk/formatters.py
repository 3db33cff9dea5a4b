"""Formatting and conversion utilities."""

from elitra_sdk.constants import DEFAULT_DECIMALS, DEFAULT_DISPLAY_PRECISION


def as_int(value, *, default: int = 0) -> int:
    """Convert value to int, handling various types."""
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        v = value.strip()
        if v.startswith("0x"):
            return int(v, 16)
        return int(v)
    return int(value)


def normalize_hex_str(value) -> str:
    """Normalize hex string to 0x-prefixed format."""
    if isinstance(value, (bytes, bytearray)):
        return f"0x{value.hex()}"
    if hasattr(value, "hex") and not isinstance(value, str):
        hex_str = value.hex()
        return hex_str if hex_str.startswith("0x") else f"0x{hex_str}"
    s = str(value).strip()
    if s.lower().startswith("0x"):
        return f"0x{s[2:]}"
    return f"0x{s}"


def format_shares(amount: int, decimals: int = DEFAULT_DECIMALS, precision: int = DEFAULT_DISPLAY_PRECISION) -> str:
    """
    Format a raw token amount as a decimal string.

    The fractional part is truncated (never rounded) to `precision` digits and
    dropped entirely when those digits are all zero:

        format_shares(1_234_567_890_000_000_000) == "1.2345"
        format_shares(10**18) == "1"
    """
    whole, remainder = divmod(amount, 10**decimals)
    decimal_part = str(remainder).rjust(decimals, "0")[:precision]
    if precision == 0 or int(decimal_part) == 0:
        return str(whole)
    return f"{whole}.{decimal_part}"


def parse_amount(text: str, decimals: int = DEFAULT_DECIMALS) -> int:
    """
    Parse a human-readable decimal string into a raw token amount.

    Extra fractional digits beyond `decimals` are truncated. Malformed input
    (signs, extra dots, non-digits) is left to `int()` to reject.
    """
    whole, _, fraction = text.partition(".")
    padded_fraction = fraction.ljust(decimals, "0")[:decimals]
    return int(whole + padded_fraction)
