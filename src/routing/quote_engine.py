"""Hop-by-hop pricing of a route against fetched pool reserves."""

from __future__ import annotations

import logging
from typing import Optional

from core.base_types import TokenAmount

from .amm import DEFAULT_FEE, get_amount_out
from .models import Route, RouteQuote
from .path_enumerator import route_hops
from .reserves import ReserveBook
from .trade_path import TradePath

logger = logging.getLogger(__name__)

ROUTE_SEPARATOR = " > "


def render_route_text(route: Route) -> str:
    """Join the route's symbols, e.g. ``"1INCH > WETH > AAVE"``."""
    return ROUTE_SEPARATOR.join(token.symbol for token in route)


def quote_route(
    route: Route,
    amount_in: TokenAmount,
    reserves: ReserveBook,
    trade_path: TradePath,
    fee: int = DEFAULT_FEE,
) -> Optional[RouteQuote]:
    """
    Price ``amount_in`` of the route's first token along every hop.

    Amounts stay in raw integer units of the token being held, so the output
    of one hop is already denominated the way the next pool expects it.
    Returns None when any hop has no pool or the trade rounds to nothing.
    """
    if amount_in.raw <= 0:
        raise ValueError("amount_in must be positive")

    amount = amount_in.raw
    for token_in, token_out in route_hops(route):
        pair = reserves.get(token_in, token_out)
        if pair is None:
            logger.debug(
                "route %s dropped: no pool %s/%s",
                render_route_text(route),
                token_in.symbol,
                token_out.symbol,
            )
            return None
        reserve_in, reserve_out = pair.oriented(token_in)
        if reserve_in == 0 or reserve_out == 0:
            logger.debug("route %s dropped: empty pool", render_route_text(route))
            return None
        amount = get_amount_out(amount, reserve_in, reserve_out, fee)
        if amount == 0:
            logger.debug(
                "route %s dropped: output rounds to zero", render_route_text(route)
            )
            return None

    to_token = route[-1]
    return RouteQuote(
        route_path_tokens=tuple(route),
        route_text=render_route_text(route),
        amount_in=amount_in,
        expected_convert_quote=TokenAmount(
            raw=amount, decimals=to_token.decimals, symbol=to_token.symbol
        ),
        trade_path=trade_path,
    )
