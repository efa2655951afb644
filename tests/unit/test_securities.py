"""
Tests for securities formulas: per-share ratios and zero coupon bond value
"""

from decimal import Decimal

import pytest

from moneycalc.core.compound import (
    CompoundValue,
    InvalidArgumentError,
    InvalidConstructionParameterError,
    InvalidInputTypeError,
)
from moneycalc.core.domain import MonetaryAmount, Rate
from moneycalc.functions.securities import (
    BookValuePerShare,
    DividendsPerShare,
    EarningsPerShare,
    ZeroCouponBondValue,
    zero_coupon_bond_value,
)

EQUITY = MonetaryAmount.of(100, "GBP")
NUMBER_OF_COMMON_SHARES = 10


# =============================================================================
# PER-SHARE RATIOS
# =============================================================================


class TestBookValuePerShare:
    def test_calculate(self):
        assert BookValuePerShare.evaluate(EQUITY, NUMBER_OF_COMMON_SHARES) == MonetaryAmount.of(10, "GBP")

    def test_apply(self):
        bvps = BookValuePerShare.of(NUMBER_OF_COMMON_SHARES)
        assert bvps.apply(EQUITY) == MonetaryAmount.of(10, "GBP")
        assert bvps(EQUITY) == MonetaryAmount.of(10, "GBP")
        assert bvps.shares == NUMBER_OF_COMMON_SHARES

    def test_keeps_currency(self):
        assert BookValuePerShare(4)(MonetaryAmount.of(10, "JPY")).currency == "JPY"

    def test_compound(self):
        value = CompoundValue.of(
            BookValuePerShare.INPUT_TYPE,
            equity=EQUITY,
            number_of_common_shares=NUMBER_OF_COMMON_SHARES,
        )
        assert BookValuePerShare(1).calculate(value) == MonetaryAmount.of(10, "GBP")

    def test_compound_zero_shares(self):
        value = CompoundValue.of(
            BookValuePerShare.INPUT_TYPE, equity=EQUITY, number_of_common_shares=0
        )
        with pytest.raises(InvalidArgumentError) as exc_info:
            BookValuePerShare(1).calculate(value)
        assert exc_info.value.name == "number_of_common_shares"

    def test_zero_shares_rejected_at_construction(self):
        with pytest.raises(InvalidConstructionParameterError):
            BookValuePerShare(0)

    def test_evaluate_zero_shares(self):
        with pytest.raises(InvalidArgumentError):
            BookValuePerShare.evaluate(EQUITY, 0)

    def test_equality_and_repr(self):
        assert BookValuePerShare(10) == BookValuePerShare(10)
        assert BookValuePerShare(10) != EarningsPerShare(10)
        assert repr(BookValuePerShare(10)) == "BookValuePerShare(number_of_common_shares=10)"


class TestOtherPerShareRatios:
    def test_earnings_per_share(self):
        eps = EarningsPerShare(4)
        assert eps(MonetaryAmount.of(10, "USD")) == MonetaryAmount.of("2.5", "USD")

    def test_earnings_per_share_compound(self):
        value = CompoundValue.of(
            EarningsPerShare.INPUT_TYPE,
            net_income=MonetaryAmount.of(1000, "USD"),
            weighted_average_outstanding_shares=400,
        )
        assert EarningsPerShare(1).calculate(value) == MonetaryAmount.of("2.5", "USD")

    def test_dividends_per_share(self):
        assert DividendsPerShare(3)(MonetaryAmount.of(9, "EUR")) == MonetaryAmount.of(3, "EUR")

    def test_input_types_not_interchangeable(self):
        value = CompoundValue.of(
            DividendsPerShare.INPUT_TYPE,
            dividends=MonetaryAmount.of(9, "EUR"),
            number_of_shares=3,
        )
        with pytest.raises(InvalidInputTypeError):
            EarningsPerShare(3).calculate(value)


# =============================================================================
# ZERO COUPON BOND
# =============================================================================


class TestZeroCouponBondValue:
    def test_function(self):
        face = MonetaryAmount.of(1000, "USD")
        assert zero_coupon_bond_value(face, Rate.of(0.25), 2) == MonetaryAmount.of(640, "USD")

    def test_operator(self):
        bond = ZeroCouponBondValue.of(Rate.of(0.25), 1)
        assert bond.apply(MonetaryAmount.of(1000, "USD")) == MonetaryAmount.of(800, "USD")
        assert bond.number_of_years_to_maturity == 1

    def test_at_maturity(self):
        bond = ZeroCouponBondValue(Rate.of(0.05), 0)
        assert bond(MonetaryAmount.of(1000, "USD")) == MonetaryAmount.of(1000, "USD")

    def test_typical_value(self):
        bond = ZeroCouponBondValue(Rate.of(0.06), 5)
        value = bond(MonetaryAmount.of(1000, "USD"))
        assert value.number.quantize(Decimal("0.01")) == Decimal("747.26")

    def test_compound(self):
        value = CompoundValue.of(
            ZeroCouponBondValue.INPUT_TYPE,
            face=MonetaryAmount.of(1000, "USD"),
            rate=Rate.of(0.25),
            number_of_years_to_maturity=2,
        )
        assert ZeroCouponBondValue(Rate.of(0), 0).calculate(value) == MonetaryAmount.of(640, "USD")

    def test_compound_negative_years(self):
        value = CompoundValue.of(
            ZeroCouponBondValue.INPUT_TYPE,
            face=MonetaryAmount.of(1000, "USD"),
            rate=Rate.of(0.05),
            number_of_years_to_maturity=-1,
        )
        with pytest.raises(InvalidArgumentError) as exc_info:
            ZeroCouponBondValue(Rate.of(0.05), 1).calculate(value)
        assert exc_info.value.name == "number_of_years_to_maturity"

    def test_none_rate_rejected(self):
        with pytest.raises(InvalidConstructionParameterError, match="rate"):
            ZeroCouponBondValue(None, 5)

    def test_negative_years_rejected(self):
        with pytest.raises(InvalidConstructionParameterError, match="number_of_years_to_maturity"):
            ZeroCouponBondValue(Rate.of(0.05), -1)

    def test_equality(self):
        assert ZeroCouponBondValue(Rate.of(0.05), 5) == ZeroCouponBondValue(Rate.of(0.05), 5)
        assert ZeroCouponBondValue(Rate.of(0.05), 5) != ZeroCouponBondValue(Rate.of(0.06), 5)
        assert repr(ZeroCouponBondValue(Rate.of(0.05), 5)) == (
            "ZeroCouponBondValue(rate=5%, number_of_years_to_maturity=5)"
        )
