"""Routing exceptions."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .trade_path import TradePath


class ErrorCodes(str, Enum):
    NO_ROUTES_FOUND = "noRoutesFound"
    CHAIN_NOT_SUPPORTED = "chainIdNotSupported"
    INSUFFICIENT_LIQUIDITY = "insufficientLiquidity"


class RoutingError(Exception):
    """Base class for routing errors."""

    def __init__(self, message: str, code: ErrorCodes):
        self.code = code
        super().__init__(message)


class NoRoutesFound(RoutingError):
    """No candidate route could be quoted for the requested pair."""

    def __init__(
        self,
        from_address: str,
        to_address: str,
        trade_path: Optional["TradePath"] = None,
    ):
        self.from_address = from_address
        self.to_address = to_address
        self.trade_path = trade_path
        super().__init__(
            f"No routes found for {from_address} > {to_address}",
            ErrorCodes.NO_ROUTES_FOUND,
        )


class UnsupportedChain(RoutingError):
    """No routing configuration exists for the chain."""

    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(
            f"Chain id {chain_id} is not supported",
            ErrorCodes.CHAIN_NOT_SUPPORTED,
        )


class InsufficientLiquidity(RoutingError):
    """Pool reserves cannot satisfy the swap."""

    def __init__(self, message: str = "Insufficient liquidity"):
        super().__init__(message, ErrorCodes.INSUFFICIENT_LIQUIDITY)
