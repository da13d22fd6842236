"""CLI for discovering and quoting swap routes."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from chain.client import ChainClient
from chain.errors import ChainError

from .config import RouterSettings
from .errors import NoRoutesFound, RoutingError
from .factory import RouterFactory
from .quote_engine import render_route_text
from .reserves import ChainReserveFetcher, ReserveFetcher
from .tokens import Token, find_known_token


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AMM route finder")
    parser.add_argument("--rpc-url", action="append", help="RPC endpoint (repeatable)")
    parser.add_argument("--chain-id", type=int, help="Chain id (default from env)")
    parser.add_argument("--factory", help="Pair factory address")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("routes", "List routes whose pools exist"),
        ("quote", "Quote every route and pick the best"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        for side in ("from", "to"):
            sub.add_argument(
                f"--{side}",
                dest=f"{side}_token",
                required=True,
                help="Address or symbol",
            )
            sub.add_argument(f"--{side}-symbol", help="Symbol for an unknown address")
            sub.add_argument(
                f"--{side}-decimals", type=int, help="Decimals for an unknown address"
            )
        sub.add_argument(
            "--disable-multihops", action="store_true", help="Direct routes only"
        )
        if name == "quote":
            sub.add_argument(
                "--amount", required=True, help="Input amount in token units"
            )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = RouterSettings.from_env()
        chain_id = args.chain_id or settings.chain_id
        rpc_urls = args.rpc_url or list(settings.rpc_urls)
        if not rpc_urls:
            raise ValueError("No RPC url: pass --rpc-url or set ROUTER_RPC_URLS")
        client = ChainClient(rpc_urls, timeout=settings.rpc_timeout)
        fetcher = ChainReserveFetcher(client, args.factory or settings.factory_address)
        factory = _build_factory(args, chain_id, fetcher, settings.disable_multihops)
        output = asyncio.run(_run(args, factory))
    except NoRoutesFound as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)
    except (ValueError, RoutingError, ChainError) as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(2)

    print(json.dumps(output, indent=2))


def _build_factory(
    args: argparse.Namespace,
    chain_id: int,
    fetcher: ReserveFetcher,
    disable_multihops: bool,
) -> RouterFactory:
    from_token = _resolve_token(
        chain_id, args.from_token, args.from_symbol, args.from_decimals
    )
    to_token = _resolve_token(chain_id, args.to_token, args.to_symbol, args.to_decimals)
    return RouterFactory(
        from_token,
        to_token,
        args.disable_multihops or disable_multihops,
        fetcher,
        chain_id,
    )


async def _run(args: argparse.Namespace, factory: RouterFactory) -> object:
    if args.command == "routes":
        routes = await factory.get_all_possible_routes()
        return [render_route_text(route) for route in routes]
    result = await factory.find_best_route(args.amount)
    return result.to_dict()


def _resolve_token(
    chain_id: int,
    query: str,
    symbol: Optional[str],
    decimals: Optional[int],
) -> Token:
    known = find_known_token(chain_id, query)
    if known is not None:
        return known
    if symbol is None or decimals is None:
        raise ValueError(
            f"Unknown token {query}: pass its symbol and decimals explicitly"
        )
    return Token(
        chain_id=chain_id,
        contract_address=query,
        symbol=symbol,
        decimals=decimals,
    )


if __name__ == "__main__":
    main()
