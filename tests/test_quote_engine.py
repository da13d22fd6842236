import pytest

from core.base_types import TokenAmount
from routing.errors import NoRoutesFound
from routing.models import RouteQuote
from routing.path_enumerator import pair_key
from routing.quote_engine import quote_route, render_route_text
from routing.reserves import PairReserves, ReserveBook
from routing.selector import select_best_route
from routing.tokens import ChainId, Token, find_known_token, native_eth, weth
from routing.trade_path import TradePath

ONE_INCH = find_known_token(ChainId.MAINNET, "1INCH")
AAVE = find_known_token(ChainId.MAINNET, "AAVE")
USDC = find_known_token(ChainId.MAINNET, "USDC")
WETH = weth(ChainId.MAINNET)
ETH = native_eth(ChainId.MAINNET)


def _book(*pools: PairReserves) -> ReserveBook:
    return ReserveBook({pair_key(p.token_a, p.token_b): p for p in pools})


def _quote(text: str, raw_out: int) -> RouteQuote:
    return RouteQuote(
        route_path_tokens=(ONE_INCH, AAVE),
        route_text=text,
        amount_in=TokenAmount(raw=1, decimals=18),
        expected_convert_quote=TokenAmount(raw=raw_out, decimals=18),
        trade_path=TradePath.ERC20_TO_ERC20,
    )


def test_render_route_text():
    assert render_route_text((ONE_INCH, WETH, AAVE)) == "1INCH > WETH > AAVE"


def test_render_route_text_uses_native_symbol():
    assert render_route_text((ETH, ONE_INCH)) == "ETH > 1INCH"
    assert render_route_text((WETH, ONE_INCH)) == "WETH > 1INCH"


def test_quote_chains_hops_through_mixed_decimals():
    """1INCH (18) -> USDC (6) -> AAVE (18): intermediate stays in USDC units."""
    book = _book(
        PairReserves(ONE_INCH, USDC, 1_000_000 * 10**18, 2_000_000 * 10**6),
        PairReserves(AAVE, USDC, 10_000 * 10**18, 1_000_000 * 10**6),
    )
    amount_in = TokenAmount.from_human("100", 18)

    quote = quote_route(
        (ONE_INCH, USDC, AAVE), amount_in, book, TradePath.ERC20_TO_ERC20
    )

    usdc_out = (100 * 10**18 * 997 * 2_000_000 * 10**6) // (
        1_000_000 * 10**18 * 1000 + 100 * 10**18 * 997
    )
    aave_out = (usdc_out * 997 * 10_000 * 10**18) // (
        1_000_000 * 10**6 * 1000 + usdc_out * 997
    )
    assert quote is not None
    assert quote.expected_convert_quote.raw == aave_out
    assert quote.expected_convert_quote.decimals == 18
    assert quote.route_text == "1INCH > USDC > AAVE"
    assert quote.num_hops == 2


def test_quote_reads_reserves_in_either_orientation():
    forward = _book(PairReserves(ONE_INCH, WETH, 10**24, 10**21))
    backward = _book(PairReserves(WETH, ONE_INCH, 10**21, 10**24))
    amount_in = TokenAmount.from_human("100", 18)

    a = quote_route((ONE_INCH, WETH), amount_in, forward, TradePath.ERC20_TO_ETH)
    b = quote_route((ONE_INCH, WETH), amount_in, backward, TradePath.ERC20_TO_ETH)
    assert a.expected_convert_quote == b.expected_convert_quote


def test_quote_missing_hop_drops_route():
    book = _book(PairReserves(ONE_INCH, USDC, 10**24, 10**12))
    amount_in = TokenAmount.from_human("1", 18)
    route = (ONE_INCH, USDC, AAVE)
    assert quote_route(route, amount_in, book, TradePath.ERC20_TO_ERC20) is None


def test_quote_output_rounding_to_zero_drops_route():
    book = _book(PairReserves(ONE_INCH, USDC, 10**30, 1))
    amount_in = TokenAmount(raw=1, decimals=18)
    route = (ONE_INCH, USDC)
    assert quote_route(route, amount_in, book, TradePath.ERC20_TO_ERC20) is None


def test_quote_native_endpoint_uses_wrapped_pool():
    book = _book(PairReserves(WETH, ONE_INCH, 1000 * 10**18, 1_000_000 * 10**18))
    amount_in = TokenAmount.from_human("1", 18)

    quote = quote_route((ETH, ONE_INCH), amount_in, book, TradePath.ETH_TO_ERC20)
    assert quote.route_text == "ETH > 1INCH"
    assert quote.route_path_array == [WETH.address.checksum, ONE_INCH.address.checksum]


def test_select_best_picks_max_output():
    quotes = [_quote("a", 5), _quote("b", 9), _quote("c", 7)]
    result = select_best_route(quotes, ONE_INCH, AAVE)
    assert result.best_route_quote.route_text == "b"
    assert [q.route_text for q in result.tried_routes_quote] == ["a", "b", "c"]


def test_select_best_tie_goes_to_first_enumerated():
    quotes = [_quote("a", 5), _quote("b", 9), _quote("c", 9)]
    result = select_best_route(quotes, ONE_INCH, AAVE)
    assert result.best_route_quote.route_text == "b"


def test_select_best_empty_raises():
    with pytest.raises(NoRoutesFound) as exc:
        select_best_route([], ONE_INCH, AAVE, TradePath.ERC20_TO_ERC20)
    assert str(exc.value) == (
        f"No routes found for {ONE_INCH.contract_address} > {AAVE.contract_address}"
    )
    assert exc.value.code.value == "noRoutesFound"
    assert exc.value.trade_path is TradePath.ERC20_TO_ERC20


def test_result_to_dict_is_json_safe():
    result = select_best_route([_quote("a", 1_500_000_000_000_000_000)], ONE_INCH, AAVE)
    payload = result.to_dict()
    assert payload["bestRouteQuote"]["expectedConvertQuote"] == "1.5"
    assert payload["bestRouteQuote"]["routePathArray"] == [
        ONE_INCH.contract_address,
        AAVE.contract_address,
    ]
    assert len(payload["triedRoutesQuote"]) == 1


def test_custom_token_symbols_render():
    token = Token(1, "0x00000000000000000000000000000000000000a1", "SHIB", 18)
    assert render_route_text((token, WETH)) == "SHIB > WETH"
