"""Trade direction variants (token/native endpoints)."""

from __future__ import annotations

from enum import Enum

from .tokens import Token, pool_token, weth


class TradePath(str, Enum):
    ERC20_TO_ERC20 = "erc20ToErc20"
    ERC20_TO_ETH = "erc20ToEth"
    ETH_TO_ERC20 = "ethToErc20"

    @property
    def involves_eth(self) -> bool:
        return self is not TradePath.ERC20_TO_ERC20


def is_eth_endpoint(token: Token, chain_id: int) -> bool:
    """True for the native currency or the chain's wrapped native token."""
    return token.is_native or token == weth(chain_id)


def get_trade_path(chain_id: int, from_token: Token, to_token: Token) -> TradePath:
    """Infer the trade direction from the two endpoints."""
    if pool_token(from_token) == pool_token(to_token):
        raise ValueError(
            f"Cannot route {from_token.symbol} to {to_token.symbol}: "
            "same underlying token"
        )
    if is_eth_endpoint(from_token, chain_id):
        return TradePath.ETH_TO_ERC20
    if is_eth_endpoint(to_token, chain_id):
        return TradePath.ERC20_TO_ETH
    return TradePath.ERC20_TO_ERC20
