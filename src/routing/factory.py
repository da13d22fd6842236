"""Route discovery and quoting for one token pair."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Sequence

from core.base_types import TokenAmount

from .models import BestRouteQuoteResult, Route, RouteQuote
from .path_enumerator import (
    candidate_pairs,
    enumerate_candidate_routes,
    filter_routable,
)
from .quote_engine import quote_route
from .reserves import ReserveFetcher, fetch_all_reserves
from .selector import select_best_route
from .tokens import Token, hub_tokens_for
from .trade_path import TradePath, get_trade_path

logger = logging.getLogger(__name__)


class RouterFactory:
    """
    Finds and prices the routes between ``from_token`` and ``to_token``.

    Every call fetches fresh reserves; nothing is cached between calls, so a
    factory can serve concurrent requests.
    """

    def __init__(
        self,
        from_token: Token,
        to_token: Token,
        disable_multihops: bool,
        fetcher: ReserveFetcher,
        chain_id: int,
        trade_path: Optional[TradePath] = None,
        hub_tokens: Optional[Sequence[Token]] = None,
    ):
        self.from_token = from_token
        self.to_token = to_token
        self.disable_multihops = disable_multihops
        self.chain_id = chain_id
        self.trade_path = trade_path or get_trade_path(chain_id, from_token, to_token)
        self._fetcher = fetcher
        if hub_tokens is None:
            hub_tokens = hub_tokens_for(chain_id)
        self.hub_tokens: tuple[Token, ...] = tuple(hub_tokens)

    def candidate_routes(self) -> list[Route]:
        """All structurally possible routes, before any pool lookup."""
        return enumerate_candidate_routes(
            self.from_token,
            self.to_token,
            self.hub_tokens,
            self.disable_multihops,
        )

    async def get_all_possible_routes(self) -> list[Route]:
        """Candidate routes whose pools exist."""
        candidates = self.candidate_routes()
        if not candidates:
            return []
        book = await fetch_all_reserves(self._fetcher, candidate_pairs(candidates))
        routes = filter_routable(candidates, book.has_pool, self.trade_path)
        logger.debug(
            "%d of %d candidate routes routable for %s > %s",
            len(routes),
            len(candidates),
            self.from_token.symbol,
            self.to_token.symbol,
        )
        return routes

    async def get_all_possible_routes_with_quotes(
        self, amount: str | int | Decimal
    ) -> list[RouteQuote]:
        """Quote every candidate route; routes without pools are left out."""
        amount_in = TokenAmount.from_human(
            amount, self.from_token.decimals, self.from_token.symbol
        )
        if amount_in.raw <= 0:
            raise ValueError("amount must be positive")

        candidates = self.candidate_routes()
        if not candidates:
            return []
        book = await fetch_all_reserves(self._fetcher, candidate_pairs(candidates))

        quotes: list[RouteQuote] = []
        for route in candidates:
            quote = quote_route(route, amount_in, book, self.trade_path)
            if quote is not None:
                quotes.append(quote)
        logger.debug(
            "quoted %d of %d routes for %s %s",
            len(quotes),
            len(candidates),
            amount_in.human,
            self.from_token.symbol,
        )
        return quotes

    async def find_best_route(
        self, amount: str | int | Decimal
    ) -> BestRouteQuoteResult:
        """Best quote for ``amount``; raises NoRoutesFound when none exist."""
        quotes = await self.get_all_possible_routes_with_quotes(amount)
        return select_best_route(
            quotes, self.from_token, self.to_token, self.trade_path
        )
