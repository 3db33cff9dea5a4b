"""Parsing helpers: human-readable ABI signatures, contract return values, receipt events."""

from typing import Any

from web3.logs import DISCARD

from elitra_sdk.constants import REDEEM_REQUEST_EVENT
from elitra_sdk.formatters import as_int
from elitra_sdk.models import PendingRedeem


def split_top_level(params: str) -> list[str]:
    """Split a comma-separated parameter list, ignoring commas inside nested parentheses."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in params:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return parts


def _matching_paren(text: str, start: int) -> int:
    depth = 0
    for i in range(start, len(text)):
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                return i
    raise ValueError(f"Unbalanced parentheses in {text!r}")


def canonical_type(param: str) -> str:
    """
    Reduce a parameter declaration to its canonical ABI type.

    "uint256 amount" -> "uint256", "uint amount" -> "uint256",
    "(address to, uint256[] ids)[] items" -> "(address,uint256[])[]".
    """
    param = param.strip()
    if param.startswith("tuple("):
        param = param[len("tuple") :]
    if param.startswith("("):
        end = _matching_paren(param, 0)
        inner = ",".join(canonical_type(p) for p in split_top_level(param[1:end]))
        suffix = param[end + 1 :].split()
        array_suffix = suffix[0] if suffix and suffix[0].startswith("[") else ""
        return f"({inner}){array_suffix}"

    type_name = param.split()[0]
    base, bracket, dims = type_name.partition("[")
    if base in ("uint", "int"):
        base = f"{base}256"
    return base + (bracket + dims if bracket else "")


def parse_function_signature(signature: str) -> tuple[str, list[str]]:
    """
    Parse a human-readable function signature into (name, input types).

    Accepts the forms "function approve(address spender, uint256 amount) returns (bool)"
    and the bare "approve(address,uint256)".
    """
    text = signature.strip()
    if text.startswith("function "):
        text = text[len("function ") :].strip()
    open_idx = text.find("(")
    if open_idx <= 0:
        raise ValueError(f"Invalid function signature: {signature!r}")
    name = text[:open_idx].strip()
    close_idx = _matching_paren(text, open_idx)
    params = split_top_level(text[open_idx + 1 : close_idx])
    types = [canonical_type(p) for p in params]
    return name, types


def parse_pending_redeem(raw: Any) -> PendingRedeem:
    """Decode the `pendingRedeemRequest` (assets, pendingShares) return tuple."""
    assets, shares = raw
    return PendingRedeem(assets=as_int(assets), shares=as_int(shares))


def parse_redeem_request(contract: Any, receipt: Any) -> dict[str, Any] | None:
    """Return the args of the first RedeemRequest event in `receipt`, or None."""
    event = getattr(contract.events, REDEEM_REQUEST_EVENT)()
    logs = event.process_receipt(receipt, errors=DISCARD)
    if not logs:
        return None
    args = logs[0]["args"]
    return {
        "receiver": args["receiver"],
        "owner": args["owner"],
        "assets": as_int(args["assets"]),
        "shares": as_int(args["shares"]),
        "instant": bool(args["instant"]),
    }
