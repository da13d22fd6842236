import pytest

from routing.errors import UnsupportedChain
from routing.tokens import (
    ChainId,
    Token,
    find_known_token,
    hub_tokens_for,
    native_eth,
    pool_token,
    weth,
)
from routing.trade_path import TradePath, get_trade_path

ONE_INCH = find_known_token(ChainId.MAINNET, "1INCH")
AAVE = find_known_token(ChainId.MAINNET, "AAVE")


def test_token_equality_ignores_address_case():
    upper = Token(1, "0x111111111117DC0AA78B770FA6A738034120C302", "1INCH", 18)
    lower = Token(1, "0x111111111117dc0aa78b770fa6a738034120c302", "oneinch", 8)
    assert upper == lower
    assert hash(upper) == hash(lower)


def test_token_equality_respects_chain():
    mainnet = Token(1, "0x111111111117dC0aa78b770fA6A738034120C302", "1INCH", 18)
    kovan = Token(42, "0x111111111117dC0aa78b770fA6A738034120C302", "1INCH", 18)
    assert mainnet != kovan


def test_token_rejects_invalid_address():
    with pytest.raises(ValueError):
        Token(1, "0x1234", "BAD", 18)


def test_native_token_maps_to_wrapped_pool_token():
    eth = native_eth(ChainId.MAINNET)
    assert eth.is_native
    assert eth.symbol == "ETH"
    assert eth.contract_address.endswith("_ETH")
    assert eth != weth(ChainId.MAINNET)
    assert pool_token(eth) == weth(ChainId.MAINNET)
    assert eth.address == weth(ChainId.MAINNET).address


def test_mainnet_hubs_in_configuration_order():
    symbols = [token.symbol for token in hub_tokens_for(ChainId.MAINNET)]
    assert symbols == ["USDT", "COMP", "USDC", "DAI", "WETH"]


def test_testnet_hubs_are_wrapped_native_only():
    assert hub_tokens_for(ChainId.KOVAN) == (weth(ChainId.KOVAN),)


def test_unsupported_chain():
    with pytest.raises(UnsupportedChain) as exc:
        hub_tokens_for(56)
    assert exc.value.chain_id == 56


def test_find_known_token_by_address_or_symbol():
    by_symbol = find_known_token(ChainId.MAINNET, "aave")
    by_address = find_known_token(
        ChainId.MAINNET, "0x7fc66500c84a76ad7e9c93437bfc5ac33e2ddae9"
    )
    assert by_symbol == by_address
    assert by_symbol.decimals == 18
    assert find_known_token(ChainId.MAINNET, "NOPE") is None


def test_get_trade_path_variants():
    chain = ChainId.MAINNET
    assert get_trade_path(chain, ONE_INCH, AAVE) is TradePath.ERC20_TO_ERC20
    assert get_trade_path(chain, ONE_INCH, weth(chain)) is TradePath.ERC20_TO_ETH
    assert get_trade_path(chain, ONE_INCH, native_eth(chain)) is TradePath.ERC20_TO_ETH
    assert get_trade_path(chain, weth(chain), ONE_INCH) is TradePath.ETH_TO_ERC20
    assert get_trade_path(chain, native_eth(chain), AAVE) is TradePath.ETH_TO_ERC20


def test_get_trade_path_rejects_wrapping():
    chain = ChainId.MAINNET
    with pytest.raises(ValueError, match="same underlying token"):
        get_trade_path(chain, native_eth(chain), weth(chain))
