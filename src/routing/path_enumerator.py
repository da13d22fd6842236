"""Candidate route generation over the hub token graph."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from .models import Route
from .tokens import Token, pool_token
from .trade_path import TradePath

logger = logging.getLogger(__name__)

Hop = tuple[Token, Token]
PairKey = tuple[str, str]


def enumerate_candidate_routes(
    from_token: Token,
    to_token: Token,
    hub_tokens: Sequence[Token],
    multihop_disabled: bool,
) -> list[Route]:
    """
    Build candidate routes: the direct route first, then one
    [from, hub, to] route per hub in configuration order.

    Pool existence is not checked here.
    """
    from_pool = pool_token(from_token)
    to_pool = pool_token(to_token)
    if from_pool == to_pool:
        return []

    routes: list[Route] = [(from_token, to_token)]
    if multihop_disabled:
        return routes

    for hub in hub_tokens:
        hub_pool = pool_token(hub)
        if hub_pool == from_pool or hub_pool == to_pool:
            continue
        routes.append((from_token, hub, to_token))
    return routes


def route_hops(route: Route) -> list[Hop]:
    """Consecutive (token_in, token_out) pool-token pairs of a route."""
    tokens = [pool_token(token) for token in route]
    return list(zip(tokens, tokens[1:]))


def pair_key(token_a: Token, token_b: Token) -> PairKey:
    """Order-independent key of the pool between two tokens."""
    a = token_a.address.lower
    b = token_b.address.lower
    return (a, b) if a < b else (b, a)


def candidate_pairs(routes: Iterable[Route]) -> list[Hop]:
    """Distinct pools touched by the routes, in first-seen order."""
    seen: set[PairKey] = set()
    pairs: list[Hop] = []
    for route in routes:
        for token_in, token_out in route_hops(route):
            key = pair_key(token_in, token_out)
            if key in seen:
                continue
            seen.add(key)
            pairs.append((token_in, token_out))
    return pairs


def filter_routable(
    routes: Iterable[Route],
    pool_exists: Callable[[Token, Token], bool],
    trade_path: TradePath,
) -> list[Route]:
    """
    Keep routes whose every hop has a pool.

    The direct route of a trade involving the native currency is always
    kept; a missing pool there is only discovered when quoting.
    """
    routable: list[Route] = []
    for route in routes:
        if len(route) == 2 and trade_path.involves_eth:
            routable.append(route)
            continue
        if all(pool_exists(a, b) for a, b in route_hops(route)):
            routable.append(route)
        else:
            logger.debug("dropping route %s: missing pool", _symbols(route))
    return routable


def _symbols(route: Route) -> str:
    return "/".join(token.symbol for token in route)
