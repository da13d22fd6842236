"""Token records, wrapped-native tokens and per-chain hub token configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from core.base_types import Address

from .errors import UnsupportedChain

NATIVE_SUFFIX = "_ETH"
NATIVE_SYMBOL = "ETH"
NATIVE_DECIMALS = 18


class ChainId(IntEnum):
    MAINNET = 1
    ROPSTEN = 3
    RINKEBY = 4
    GORLI = 5
    KOVAN = 42


def is_native_address(contract_address: str) -> bool:
    return contract_address.endswith(NATIVE_SUFFIX)


def append_native_suffix(contract_address: str) -> str:
    if is_native_address(contract_address):
        return contract_address
    return f"{contract_address}{NATIVE_SUFFIX}"


def remove_native_suffix(contract_address: str) -> str:
    if is_native_address(contract_address):
        return contract_address[: -len(NATIVE_SUFFIX)]
    return contract_address


@dataclass(frozen=True, eq=False)
class Token:
    """
    An ERC-20 token, or the chain's native currency.

    Native currency is addressed as the wrapped token's address plus the
    ``_ETH`` suffix, so it can always be mapped back to its pool token.
    """

    chain_id: int
    contract_address: str
    symbol: str
    decimals: int
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.decimals, int) or self.decimals < 0:
            raise ValueError("decimals must be a non-negative integer")
        base = Address(remove_native_suffix(self.contract_address))
        normalized = base.checksum
        if is_native_address(self.contract_address):
            normalized = append_native_suffix(normalized)
        object.__setattr__(self, "contract_address", normalized)

    @property
    def address(self) -> Address:
        """On-chain address used for pool lookups (native resolves to wrapped)."""
        return Address(remove_native_suffix(self.contract_address))

    @property
    def is_native(self) -> bool:
        return is_native_address(self.contract_address)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.contract_address.lower() == other.contract_address.lower()
            and self.chain_id == other.chain_id
        )

    def __hash__(self) -> int:
        return hash((self.contract_address.lower(), self.chain_id))

    def __repr__(self) -> str:
        return f"Token({self.symbol} {self.contract_address} chain={self.chain_id})"


WETH_ADDRESSES: dict[int, str] = {
    ChainId.MAINNET: "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
    ChainId.ROPSTEN: "0xc778417E063141139Fce010982780140Aa0cD5Ab",
    ChainId.RINKEBY: "0xc778417E063141139Fce010982780140Aa0cD5Ab",
    ChainId.GORLI: "0xB4FBF271143F4FBf7B91A5ded31805e42b2208d6",
    ChainId.KOVAN: "0xd0A1E359811322d97991E03f863a0C30C2cF029C",
}


def weth(chain_id: int) -> Token:
    """Wrapped native token for the chain."""
    address = WETH_ADDRESSES.get(chain_id)
    if address is None:
        raise UnsupportedChain(chain_id)
    return Token(
        chain_id=chain_id,
        contract_address=address,
        symbol="WETH",
        decimals=18,
        name="Wrapped Ether",
    )


def native_eth(chain_id: int) -> Token:
    """Native currency, addressed through its wrapped token."""
    wrapped = weth(chain_id)
    return Token(
        chain_id=chain_id,
        contract_address=append_native_suffix(wrapped.contract_address),
        symbol=NATIVE_SYMBOL,
        decimals=NATIVE_DECIMALS,
        name="Ether",
    )


def pool_token(token: Token) -> Token:
    """Token whose pools carry liquidity for ``token``."""
    if token.is_native:
        return weth(token.chain_id)
    return token


# address, symbol, decimals, name
_MAINNET_TOKENS: tuple[tuple[str, str, int, str], ...] = (
    ("0xdAC17F958D2ee523a2206206994597C13D831ec7", "USDT", 6, "Tether USD"),
    ("0xc00e94Cb662C3520282E6f5717214004A7f26888", "COMP", 18, "Compound"),
    ("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", "USDC", 6, "USD Coin"),
    ("0x6B175474E89094C44Da98b954EedeAC495271d0F", "DAI", 18, "Dai Stablecoin"),
    ("0x111111111117dC0aa78b770fA6A738034120C302", "1INCH", 18, "1INCH Token"),
    ("0x7Fc66500c84A76Ad7e9c93437bFc5Ac33E2DDaE9", "AAVE", 18, "Aave Token"),
)

_MAINNET_HUB_SYMBOLS = ("USDT", "COMP", "USDC", "DAI")


def _mainnet_token(symbol: str) -> Token:
    for address, token_symbol, decimals, name in _MAINNET_TOKENS:
        if token_symbol == symbol:
            return Token(ChainId.MAINNET, address, token_symbol, decimals, name)
    raise KeyError(symbol)


# Hub order is the order routes are enumerated in.
HUB_TOKENS: dict[int, tuple[Token, ...]] = {
    ChainId.MAINNET: tuple(_mainnet_token(s) for s in _MAINNET_HUB_SYMBOLS)
    + (weth(ChainId.MAINNET),),
    ChainId.ROPSTEN: (weth(ChainId.ROPSTEN),),
    ChainId.RINKEBY: (weth(ChainId.RINKEBY),),
    ChainId.GORLI: (weth(ChainId.GORLI),),
    ChainId.KOVAN: (weth(ChainId.KOVAN),),
}


def hub_tokens_for(chain_id: int) -> tuple[Token, ...]:
    hubs = HUB_TOKENS.get(chain_id)
    if hubs is None:
        raise UnsupportedChain(chain_id)
    return hubs


def known_tokens(chain_id: int) -> tuple[Token, ...]:
    """Tokens with built-in metadata (hubs, wrapped and native currency)."""
    tokens: list[Token] = list(hub_tokens_for(chain_id))
    if chain_id == ChainId.MAINNET:
        tokens.extend(_mainnet_token(t[1]) for t in _MAINNET_TOKENS)
    tokens.append(weth(chain_id))
    tokens.append(native_eth(chain_id))
    unique: list[Token] = []
    for token in tokens:
        if token not in unique:
            unique.append(token)
    return tuple(unique)


def find_known_token(chain_id: int, query: str) -> Optional[Token]:
    """Look up a built-in token by address or (case-insensitive) symbol."""
    lowered = query.lower()
    for token in known_tokens(chain_id):
        if token.contract_address.lower() == lowered:
            return token
        if token.symbol.lower() == lowered:
            return token
    return None
