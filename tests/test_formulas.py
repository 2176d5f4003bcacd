import pytest

from fincalc.formulas import (
    amortization_payment,
    compound_amount,
    future_value,
    present_value,
    simple_interest,
)


def test_simple_interest_worked_example():
    assert simple_interest(1000, 5, 12) == pytest.approx(600)


def test_simple_interest_is_linear_in_periods():
    one = simple_interest(2500, 3.5, 1)
    assert simple_interest(2500, 3.5, 7) == pytest.approx(one * 7)


def test_simple_interest_zero_periods():
    assert simple_interest(1000, 5, 0) == 0


def test_compound_amount_worked_example():
    assert compound_amount(1000, 10, 2) == pytest.approx(1210)


def test_compound_amount_zero_periods_keeps_capital():
    assert compound_amount(1234.5, 7, 0) == pytest.approx(1234.5)


def test_compound_matches_simple_for_one_period():
    capital, rate = 800, 4.25
    assert compound_amount(capital, rate, 1) == pytest.approx(
        capital + simple_interest(capital, rate, 1)
    )


def test_compound_exceeds_simple_for_many_periods():
    capital, rate, periods = 1000, 2, 24
    assert compound_amount(capital, rate, periods) > capital + simple_interest(
        capital, rate, periods
    )


def test_amortization_worked_example():
    assert amortization_payment(1000, 0.01, 12) == pytest.approx(88.85, abs=0.005)


def test_amortization_single_period_repays_with_interest():
    assert amortization_payment(500, 0.02, 1) == pytest.approx(500 * 1.02)


def test_amortization_total_paid_exceeds_principal():
    payment = amortization_payment(10000, 0.015, 36)
    assert payment * 36 > 10000


def test_amortization_scales_with_principal():
    assert amortization_payment(2000, 0.01, 12) == pytest.approx(
        2 * amortization_payment(1000, 0.01, 12)
    )


def test_amortization_zero_rate_raises():
    with pytest.raises(ValueError):
        amortization_payment(1000, 0, 12)


def test_amortization_zero_periods_raises():
    with pytest.raises(ValueError):
        amortization_payment(1000, 0.01, 0)


@pytest.mark.parametrize(
    "amount, rate, periods",
    [(1000, 0.01, 12), (250.75, 0.005, 60), (99, 0.2, 3), (1, 0.0, 10)],
)
def test_present_and_future_value_round_trip(amount, rate, periods):
    assert present_value(future_value(amount, rate, periods), rate, periods) == pytest.approx(
        amount
    )
    assert future_value(present_value(amount, rate, periods), rate, periods) == pytest.approx(
        amount
    )


def test_future_value_matches_compound_amount():
    assert future_value(1000, 0.03, 5) == pytest.approx(compound_amount(1000, 3, 5))


def test_present_value_less_than_future_for_positive_rate():
    assert present_value(1000, 0.01, 12) < 1000


def test_present_value_zero_factor_raises():
    with pytest.raises(ValueError):
        present_value(1000, -1, 3)