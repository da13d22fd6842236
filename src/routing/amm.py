"""Constant-product (x * y = k) pool math."""

from __future__ import annotations

from .errors import InsufficientLiquidity

FEE_DENOMINATOR = 1000
DEFAULT_FEE = 3  # 0.3% = 3 parts per 1000


def get_amount_out(
    amount_in: int, reserve_in: int, reserve_out: int, fee: int = DEFAULT_FEE
) -> int:
    """
    Calculate output amount for a given input.
    All math uses integers only, matching the pair contract exactly:

    amount_in_with_fee = amount_in * (1000 - fee)
    numerator = amount_in_with_fee * reserve_out
    denominator = reserve_in * 1000 + amount_in_with_fee
    amount_out = numerator // denominator
    """
    _check_int("amount_in", amount_in)
    _check_int("reserve_in", reserve_in)
    _check_int("reserve_out", reserve_out)
    _check_fee(fee)
    if amount_in <= 0:
        raise ValueError("amount_in must be positive")
    if reserve_in <= 0 or reserve_out <= 0:
        raise InsufficientLiquidity("reserves must be positive")

    amount_in_with_fee = amount_in * (FEE_DENOMINATOR - fee)
    numerator = amount_in_with_fee * reserve_out
    denominator = reserve_in * FEE_DENOMINATOR + amount_in_with_fee
    return numerator // denominator


def get_amount_in(
    amount_out: int, reserve_in: int, reserve_out: int, fee: int = DEFAULT_FEE
) -> int:
    """
    Calculate required input for desired output.
    (Inverse of get_amount_out)
    """
    _check_int("amount_out", amount_out)
    _check_int("reserve_in", reserve_in)
    _check_int("reserve_out", reserve_out)
    _check_fee(fee)
    if amount_out <= 0:
        raise ValueError("amount_out must be positive")
    if reserve_in <= 0 or reserve_out <= 0:
        raise InsufficientLiquidity("reserves must be positive")
    if amount_out >= reserve_out:
        raise InsufficientLiquidity("amount_out must be less than reserve_out")

    numerator = amount_out * reserve_in * FEE_DENOMINATOR
    denominator = (reserve_out - amount_out) * (FEE_DENOMINATOR - fee)
    return numerator // denominator + 1


def _check_int(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int")


def _check_fee(fee: int) -> None:
    _check_int("fee", fee)
    if fee < 0 or fee >= FEE_DENOMINATOR:
        raise ValueError("fee must be in [0, 1000)")
