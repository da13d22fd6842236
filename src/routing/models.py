"""Immutable route and quote records returned to callers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

from core.base_types import TokenAmount

from .tokens import Token
from .trade_path import TradePath

# Ordered token path, [from, to] or [from, hub, to].
Route = tuple[Token, ...]


@dataclass(frozen=True)
class RouteQuote:
    """A route priced for one input amount."""

    route_path_tokens: Route
    route_text: str
    amount_in: TokenAmount
    expected_convert_quote: TokenAmount
    trade_path: TradePath

    @property
    def route_path_array(self) -> list[str]:
        """Pool-level addresses of the path (native resolved to wrapped)."""
        return [token.address.checksum for token in self.route_path_tokens]

    @property
    def num_hops(self) -> int:
        return len(self.route_path_tokens) - 1

    def to_dict(self) -> dict:
        return {
            "routeText": self.route_text,
            "routePathArray": self.route_path_array,
            "tradePath": self.trade_path.value,
            "amountIn": _format_decimal(self.amount_in.human),
            "expectedConvertQuote": _format_decimal(self.expected_convert_quote.human),
            "expectedConvertQuoteRaw": str(self.expected_convert_quote.raw),
        }


@dataclass(frozen=True)
class BestRouteQuoteResult:
    best_route_quote: RouteQuote
    tried_routes_quote: tuple[RouteQuote, ...]

    def to_dict(self) -> dict:
        return {
            "bestRouteQuote": self.best_route_quote.to_dict(),
            "triedRoutesQuote": [quote.to_dict() for quote in self.tried_routes_quote],
        }


def _format_decimal(value: Decimal) -> str:
    """Plain notation without trailing zeros, e.g. ``1.5`` or ``1000``."""
    if value == 0:
        return "0"
    with localcontext() as ctx:
        ctx.prec = max(28, len(value.as_tuple().digits))
        return format(value.normalize(), "f")
