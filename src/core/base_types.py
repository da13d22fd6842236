"""Core value types shared by the chain and routing modules."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from typing import Optional

from eth_utils.address import is_address, to_checksum_address


@dataclass(frozen=True)
class Address:
    """Ethereum address with validation and checksumming."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("Address value must be a string")
        if not is_address(self.value):
            raise ValueError("Invalid Ethereum address")
        object.__setattr__(self, "value", to_checksum_address(self.value))

    @classmethod
    def from_string(cls, s: str) -> "Address":
        return cls(s)

    @property
    def checksum(self) -> str:
        return self.value

    @property
    def lower(self) -> str:
        return self.value.lower()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Address):
            return self.lower == other.lower
        if isinstance(other, str):
            return self.lower == other.lower()
        return False

    def __hash__(self) -> int:
        return hash(self.lower)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TokenAmount:
    """
    Represents a token amount with proper decimal handling.

    Internally stores raw integer (wei-equivalent).
    Provides human-readable formatting.
    """

    raw: int
    decimals: int
    symbol: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.raw, int) or isinstance(self.raw, bool):
            raise TypeError("raw must be an int")
        if not isinstance(self.decimals, int) or self.decimals < 0:
            raise ValueError("decimals must be a non-negative integer")

    @classmethod
    def from_human(
        cls, amount: str | int | Decimal, decimals: int, symbol: str | None = None
    ) -> "TokenAmount":
        """Create from human-readable amount (e.g., '1.5' ETH)."""
        if isinstance(amount, float):
            raise TypeError("amount must be a string, int or Decimal, not float")
        if isinstance(amount, bool) or not isinstance(amount, (str, int, Decimal)):
            raise TypeError("amount must be a string, int or Decimal")
        try:
            decimal_amount = Decimal(amount)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount: {amount!r}") from exc
        if not decimal_amount.is_finite():
            raise ValueError(f"Invalid amount: {amount!r}")

        with localcontext() as ctx:
            ctx.prec = _precision_for(decimal_amount, decimals)
            raw_decimal = decimal_amount.scaleb(decimals)
        if raw_decimal != raw_decimal.to_integral_value():
            raise ValueError("amount has more precision than decimals allow")
        return cls(raw=int(raw_decimal), decimals=decimals, symbol=symbol)

    @property
    def human(self) -> Decimal:
        """Returns human-readable decimal."""
        with localcontext() as ctx:
            ctx.prec = _precision_for(Decimal(self.raw), self.decimals)
            return Decimal(self.raw).scaleb(-self.decimals)

    def __str__(self) -> str:
        return f"{self.human} {self.symbol or ''}".strip()


@dataclass(frozen=True)
class CallRequest:
    """A read-only contract call (eth_call payload)."""

    to: Address
    data: bytes

    def to_dict(self) -> dict:
        """Convert to JSON-RPC call object."""
        return {
            "to": self.to.checksum,
            "data": f"0x{self.data.hex()}",
        }


def _precision_for(value: Decimal, decimals: int) -> int:
    # Enough significant digits that rescaling never rounds.
    return max(28, len(value.as_tuple().digits) + decimals + 2)
