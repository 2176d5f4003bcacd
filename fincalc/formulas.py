"""Financial formulas: simple and compound interest, Price amortization, present and future value."""

from __future__ import annotations


def simple_interest(capital: float, rate: float, periods: int) -> float:
    """Interest earned on ``capital`` at ``rate`` percent per period over ``periods`` periods."""
    return capital * (rate / 100) * periods


def compound_amount(capital: float, rate: float, periods: int) -> float:
    """Amount reached by ``capital`` compounded at ``rate`` percent per period."""
    return capital * (1 + rate / 100) ** periods


def amortization_payment(principal: float, rate: float, periods: int) -> float:
    """Fixed instalment (Price table) repaying ``principal`` at a decimal ``rate`` per period.

    Raises ValueError when the formula is undefined, i.e. when
    ``(1 + rate) ** periods`` equals one (a zero rate or zero periods).
    """
    growth = (1 + rate) ** periods
    denominator = growth - 1
    if denominator == 0:
        raise ValueError("amortization is undefined for a zero rate or zero periods")
    return principal * (rate * growth / denominator)


def present_value(future_value: float, rate: float, periods: int) -> float:
    """Value today of ``future_value`` discounted at a decimal ``rate`` per period.

    Raises ValueError when the discount factor is zero.
    """
    factor = (1 + rate) ** periods
    if factor == 0:
        raise ValueError("present value is undefined for a zero discount factor")
    return future_value / factor


def future_value(present_value: float, rate: float, periods: int) -> float:
    """Value of ``present_value`` after growing at a decimal ``rate`` per period."""
    return present_value * (1 + rate) ** periods