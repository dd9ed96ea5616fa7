"""Token display values and the catalog of faucet tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    ETH = 0
    BTC = 1
    USDC = 2
    DAI = 3


@dataclass(frozen=True)
class TokenDisplay:
    """Everything a token card renders. Rebuilt by the parent on each refresh."""

    name: str
    symbol: str
    icon: str
    color: str
    display_amount: str
    token_type: int


def format_units(raw: int, decimals: int) -> str:
    """Render integer base units as a decimal string.

    Trailing zeros are trimmed but one fractional digit is always kept,
    so ``format_units(10 * 10**18, 18)`` is ``"10.0"``.
    """

    negative = raw < 0
    whole, fraction = divmod(abs(raw), 10**decimals)
    fraction_text = str(fraction).rjust(decimals, "0").rstrip("0") if decimals else ""
    text = f"{whole}.{fraction_text or '0'}"
    return f"-{text}" if negative else text


@dataclass(frozen=True)
class TokenInfo:
    """Static metadata for a faucet token and its deployed contract."""

    token_type: TokenType
    contract_name: str
    name: str
    symbol: str
    icon: str
    color: str
    decimals: int
    claim_amount: int

    def to_display(self, raw_amount: Optional[int] = None) -> TokenDisplay:
        amount = self.claim_amount if raw_amount is None else raw_amount
        return TokenDisplay(
            name=self.name,
            symbol=self.symbol,
            icon=self.icon,
            color=self.color,
            display_amount=format_units(amount, self.decimals),
            token_type=int(self.token_type),
        )


TOKEN_CATALOG: list[TokenInfo] = [
    TokenInfo(TokenType.ETH, "ConfidentialETH", "Confidential ETH", "cETH", "Ξ", "blue", 18, 10 * 10**18),
    TokenInfo(TokenType.BTC, "ConfidentialBTC", "Confidential BTC", "cBTC", "₿", "orange", 8, 1 * 10**8),
    TokenInfo(TokenType.USDC, "ConfidentialUSDC", "Confidential USDC", "cUSDC", "$", "green", 6, 1000 * 10**6),
    TokenInfo(TokenType.DAI, "ConfidentialDAI", "Confidential DAI", "cDAI", "◈", "yellow", 18, 1000 * 10**18),
]


def token_by_type(token_type: int) -> TokenInfo:
    for info in TOKEN_CATALOG:
        if info.token_type == token_type:
            return info
    raise KeyError(f"Unknown token type: {token_type}")
