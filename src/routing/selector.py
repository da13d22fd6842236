"""Best route selection."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .errors import NoRoutesFound
from .models import BestRouteQuoteResult, RouteQuote
from .tokens import Token
from .trade_path import TradePath

logger = logging.getLogger(__name__)


def select_best_route(
    quotes: Sequence[RouteQuote],
    from_token: Token,
    to_token: Token,
    trade_path: Optional[TradePath] = None,
) -> BestRouteQuoteResult:
    """
    Pick the quote with the largest output. On equal outputs the earliest
    quote wins, so the result only depends on enumeration order.
    """
    if not quotes:
        raise NoRoutesFound(
            from_token.contract_address, to_token.contract_address, trade_path
        )

    best = quotes[0]
    for quote in quotes[1:]:
        if quote.expected_convert_quote.raw > best.expected_convert_quote.raw:
            best = quote

    logger.debug(
        "best route %s out of %d (%s)",
        best.route_text,
        len(quotes),
        best.expected_convert_quote,
    )
    return BestRouteQuoteResult(
        best_route_quote=best,
        tried_routes_quote=tuple(quotes),
    )
