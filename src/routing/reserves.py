"""Pool reserve lookups and their concurrent fan-out."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from eth_abi import decode, encode
from eth_utils.crypto import keccak

from chain.client import ChainClient
from core.base_types import Address, CallRequest

from .path_enumerator import Hop, PairKey, pair_key
from .tokens import Token

logger = logging.getLogger(__name__)

SUSHISWAP_FACTORY_ADDRESS = "0xC0AEe478e3658e2610c5F7A4A2E1777cE9e4f2Ac"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


@dataclass(frozen=True)
class PairReserves:
    """Reserves of one pool, aligned to (token_a, token_b)."""

    token_a: Token
    token_b: Token
    reserve_a: int
    reserve_b: int

    def __post_init__(self) -> None:
        if not isinstance(self.reserve_a, int) or not isinstance(self.reserve_b, int):
            raise TypeError("reserves must be int")
        if self.reserve_a < 0 or self.reserve_b < 0:
            raise ValueError("reserves must be non-negative")

    def oriented(self, token_in: Token) -> tuple[int, int]:
        """Return (reserve_in, reserve_out) for a swap starting at token_in."""
        if token_in.address == self.token_a.address:
            return self.reserve_a, self.reserve_b
        if token_in.address == self.token_b.address:
            return self.reserve_b, self.reserve_a
        raise ValueError("token_in not in pair")


class ReserveFetcher(ABC):
    """Source of pool reserves. Reports a missing pool as None, not an error."""

    @abstractmethod
    async def fetch_reserves(
        self, token_a: Token, token_b: Token
    ) -> Optional[PairReserves]:
        """Reserves of the token_a/token_b pool, or None if no pool exists."""


class ReserveBook:
    """Result of one fan-out: pool reserves keyed by unordered pair."""

    def __init__(self, entries: dict[PairKey, Optional[PairReserves]]):
        self._entries = dict(entries)

    def get(self, token_a: Token, token_b: Token) -> Optional[PairReserves]:
        return self._entries.get(pair_key(token_a, token_b))

    def has_pool(self, token_a: Token, token_b: Token) -> bool:
        return self.get(token_a, token_b) is not None

    def __len__(self) -> int:
        return len(self._entries)


async def fetch_all_reserves(
    fetcher: ReserveFetcher, pairs: Sequence[Hop]
) -> ReserveBook:
    """
    Issue one lookup per distinct pair, all at once, and wait for every
    lookup to settle. Fetcher errors propagate to the caller.
    """
    unique: dict[PairKey, Hop] = {}
    for token_a, token_b in pairs:
        unique.setdefault(pair_key(token_a, token_b), (token_a, token_b))

    logger.debug("fetching reserves for %d pairs", len(unique))
    results = await asyncio.gather(
        *(fetcher.fetch_reserves(a, b) for a, b in unique.values())
    )
    entries = dict(zip(unique.keys(), results))
    missing = sum(1 for result in results if result is None)
    if missing:
        logger.debug("%d of %d pairs have no pool", missing, len(unique))
    return ReserveBook(entries)


class ChainReserveFetcher(ReserveFetcher):
    """
    Reads reserves from a Uniswap V2 style factory and its pair contracts.

    The blocking RPC calls run in worker threads so lookups for different
    pairs proceed concurrently.
    """

    def __init__(
        self,
        client: ChainClient,
        factory_address: Address | str = SUSHISWAP_FACTORY_ADDRESS,
    ):
        self._client = client
        if isinstance(factory_address, str):
            factory_address = Address.from_string(factory_address)
        self._factory = factory_address

    async def fetch_reserves(
        self, token_a: Token, token_b: Token
    ) -> Optional[PairReserves]:
        return await asyncio.to_thread(self._fetch_reserves_sync, token_a, token_b)

    def _fetch_reserves_sync(
        self, token_a: Token, token_b: Token
    ) -> Optional[PairReserves]:
        pair = self._get_pair(token_a.address, token_b.address)
        if pair is None:
            logger.debug("no pool for %s/%s", token_a.symbol, token_b.symbol)
            return None

        token0 = _call_address(self._client, pair, "token0()")
        reserve0, reserve1 = _call_reserves(self._client, pair)
        if reserve0 == 0 or reserve1 == 0:
            logger.debug(
                "empty pool %s for %s/%s", pair, token_a.symbol, token_b.symbol
            )
            return None

        if token0 == token_a.address:
            reserve_a, reserve_b = reserve0, reserve1
        else:
            reserve_a, reserve_b = reserve1, reserve0
        return PairReserves(
            token_a=token_a,
            token_b=token_b,
            reserve_a=reserve_a,
            reserve_b=reserve_b,
        )

    def _get_pair(self, token_a: Address, token_b: Address) -> Optional[Address]:
        data = _selector(_selector_hash("getPair(address,address)")) + encode(
            ["address", "address"], [token_a.checksum, token_b.checksum]
        )
        raw = self._client.call(CallRequest(to=self._factory, data=data))
        (decoded,) = decode(["address"], raw)
        if int(decoded, 16) == 0:
            return None
        return Address.from_string(decoded)


def _selector_hash(signature: str) -> str:
    return f"0x{keccak(text=signature).hex()[:8]}"


def _selector(value: str) -> bytes:
    normalized = value[2:] if value.startswith("0x") else value
    return bytes.fromhex(normalized)


def _call_address(client: ChainClient, contract: Address, signature: str) -> Address:
    request = CallRequest(to=contract, data=_selector(_selector_hash(signature)))
    raw = client.call(request)
    (decoded,) = decode(["address"], raw)
    return Address.from_string(decoded)


def _call_reserves(client: ChainClient, pair: Address) -> tuple[int, int]:
    request = CallRequest(to=pair, data=_selector(_selector_hash("getReserves()")))
    raw = client.call(request)
    reserve0, reserve1, _ = decode(["uint112", "uint112", "uint32"], raw)
    return int(reserve0), int(reserve1)
