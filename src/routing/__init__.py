from .errors import (
    ErrorCodes,
    InsufficientLiquidity,
    NoRoutesFound,
    RoutingError,
    UnsupportedChain,
)
from .factory import RouterFactory
from .models import BestRouteQuoteResult, Route, RouteQuote
from .reserves import ChainReserveFetcher, PairReserves, ReserveFetcher
from .tokens import ChainId, Token, hub_tokens_for, native_eth, weth
from .trade_path import TradePath, get_trade_path

__all__ = [
    "RouterFactory",
    "Route",
    "RouteQuote",
    "BestRouteQuoteResult",
    "ReserveFetcher",
    "ChainReserveFetcher",
    "PairReserves",
    "Token",
    "ChainId",
    "TradePath",
    "get_trade_path",
    "hub_tokens_for",
    "weth",
    "native_eth",
    "ErrorCodes",
    "RoutingError",
    "NoRoutesFound",
    "UnsupportedChain",
    "InsufficientLiquidity",
]
