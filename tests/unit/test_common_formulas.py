"""
Tests for common time-value-of-money formulas

Covers:
1. Future/present value (operator, module function and compound forms)
2. Factors, including the PVAF reference values
3. Annuity values and payments with their boundary rules
4. Construction parameter validation
"""

from decimal import Decimal

import pytest

from moneycalc.core.compound import (
    CompoundValue,
    InvalidArgumentError,
    InvalidConstructionParameterError,
)
from moneycalc.core.domain import MonetaryAmount, Rate, RateAndPeriods
from moneycalc.core.math import RateDomainViolation
from moneycalc.functions.common import (
    AnnuityPaymentFV,
    AnnuityPaymentPV,
    FutureValue,
    FutureValueFactor,
    FutureValueOfAnnuity,
    FutureValueOfAnnuityPaymentFactor,
    PresentValue,
    PresentValueFactor,
    PresentValueOfAnnuity,
    PresentValueOfAnnuityPaymentFactor,
    annuity_payment_fv,
    annuity_payment_pv,
    future_value,
    present_value,
)

# Reference values are 15-16 significant digits
FIXTURE_TOL = Decimal("1e-13")


def usd(number) -> MonetaryAmount:
    return MonetaryAmount.of(number, "USD")


# =============================================================================
# FUTURE / PRESENT VALUE
# =============================================================================


class TestFutureValue:
    def test_function(self):
        assert future_value(usd(1000), Rate.of(0.05), 10) == usd("1628.89462677744140625")

    def test_operator(self):
        fv = FutureValue.of(Rate.of(0.1), 2)
        assert fv.apply(usd(100)) == usd(121)
        assert fv(usd(100)) == usd(121)

    def test_zero_periods_identity(self):
        assert FutureValue(Rate.of(0.05), 0).apply(usd(100)) == usd(100)

    def test_negative_rate(self):
        assert FutureValue(Rate.of(-0.5), 2).apply(usd(100)) == usd(25)

    def test_rate_domain_violation(self):
        with pytest.raises(RateDomainViolation):
            FutureValue(Rate.of(-1), 2).apply(usd(100))

    def test_compound(self):
        value = CompoundValue.of(
            FutureValue.INPUT_TYPE, rate=Rate.of(0.1), periods=2, amount=usd(100)
        )
        assert FutureValue(Rate.of(0), 0).calculate(value) == usd(121)

    def test_accepts_plain_rate_number(self):
        assert future_value(usd(100), 0.1, 1) == usd(110)


class TestPresentValue:
    def test_function(self):
        assert present_value(usd(1000), Rate.of(0.25), 2) == usd(640)

    def test_operator(self):
        assert PresentValue(Rate.of(0.25), 1)(usd(1000)) == usd(800)

    def test_inverse_of_future_value(self):
        rate = Rate.of(0.05)
        roundtrip = present_value(future_value(usd(1000), rate, 10), rate, 10)
        assert abs(roundtrip.number - Decimal(1000)) < Decimal("1e-25")

    def test_rate_minus_one_is_domain_violation(self):
        with pytest.raises(RateDomainViolation):
            PresentValue(Rate.of(-1), 1).apply(usd(1))


# =============================================================================
# FACTORS
# =============================================================================


class TestPresentValueOfAnnuityPaymentFactor:
    """Reference values from the PVAF fixture table."""

    def test_periods0(self):
        assert PresentValueOfAnnuityPaymentFactor.evaluate(RateAndPeriods.of(0.05, 0)) == Decimal(0)
        assert PresentValueOfAnnuityPaymentFactor.evaluate(RateAndPeriods.of(-0.05, 0)) == Decimal(0)

    def test_periods1(self):
        pvaf = PresentValueOfAnnuityPaymentFactor()
        assert abs(pvaf(RateAndPeriods.of(0.05, 1)) - Decimal("0.952380952380952")) < FIXTURE_TOL
        assert abs(pvaf(RateAndPeriods.of(-0.05, 1)) - Decimal("1.05263157894736")) < FIXTURE_TOL

    def test_periods10(self):
        pvaf = PresentValueOfAnnuityPaymentFactor()
        assert abs(pvaf(RateAndPeriods.of(0.05, 10)) - Decimal("7.721734929184812")) < FIXTURE_TOL
        assert abs(pvaf(RateAndPeriods.of(-0.05, 10)) - Decimal("13.40365140230186")) < FIXTURE_TOL

    def test_zero_rate(self):
        assert PresentValueOfAnnuityPaymentFactor().apply(RateAndPeriods.of(0, 5)) == Decimal(5)

    def test_compound(self):
        pvaf = PresentValueOfAnnuityPaymentFactor()
        value = CompoundValue.of(pvaf.input_type, rate=Rate.of(0.25), periods=2)
        assert pvaf.calculate(value) == Decimal("1.44")
        assert pvaf.result_type is Decimal

    def test_compound_negative_periods(self):
        pvaf = PresentValueOfAnnuityPaymentFactor()
        value = CompoundValue.of(pvaf.input_type, rate=Rate.of(0.25), periods=-2)
        with pytest.raises(InvalidArgumentError, match="negative"):
            pvaf.calculate(value)


class TestOtherFactors:
    def test_future_value_factor(self):
        assert FutureValueFactor()(RateAndPeriods.of(0.1, 2)) == Decimal("1.21")

    def test_present_value_factor(self):
        assert PresentValueFactor()(RateAndPeriods.of(0.25, 2)) == Decimal("0.64")

    def test_fvaf(self):
        fvaf = FutureValueOfAnnuityPaymentFactor()
        assert fvaf(RateAndPeriods.of(0.1, 2)) == Decimal("2.1")
        assert fvaf(RateAndPeriods.of(0.05, 0)) == Decimal(0)
        assert fvaf(RateAndPeriods.of(-0.05, 0)) == Decimal(0)

    def test_factors_have_distinct_input_types(self):
        assert FutureValueFactor().input_type != PresentValueFactor().input_type

    def test_stateless_equality(self):
        assert FutureValueFactor() == FutureValueFactor()
        assert FutureValueFactor() != PresentValueFactor()


# =============================================================================
# ANNUITIES
# =============================================================================


class TestAnnuityValues:
    def test_present_value_of_annuity(self):
        assert PresentValueOfAnnuity(Rate.of(0.25), 2).apply(usd(100)) == usd(144)

    def test_future_value_of_annuity(self):
        assert FutureValueOfAnnuity(Rate.of(0.1), 2).apply(usd(100)) == usd(210)

    def test_zero_periods_is_zero(self):
        assert PresentValueOfAnnuity(Rate.of(0.05), 0).apply(usd(100)).is_zero()
        assert FutureValueOfAnnuity(Rate.of(-0.05), 0).apply(usd(100)).is_zero()


class TestAnnuityPaymentPV:
    def test_function(self):
        assert annuity_payment_pv(usd(144), Rate.of(0.25), 2) == usd(100)

    def test_loan_payment(self):
        payment = AnnuityPaymentPV(Rate.of(0.05), 10).apply(usd(1000))
        assert abs(payment.number - Decimal("129.5045749654566")) < Decimal("1e-12")

    def test_zero_rate(self):
        assert AnnuityPaymentPV(Rate.of(0), 12).apply(usd(1200)) == usd(100)

    def test_zero_periods_rejected(self):
        with pytest.raises(InvalidArgumentError, match="at least one period"):
            AnnuityPaymentPV(Rate.of(0.05), 0).apply(usd(1000))


class TestAnnuityPaymentFV:
    def test_function(self):
        assert annuity_payment_fv(usd(210), Rate.of(0.1), 2) == usd(100)

    def test_savings_payment(self):
        payment = AnnuityPaymentFV(Rate.of(0.05), 10).apply(usd(1000))
        assert abs(payment.number - Decimal("79.50457496545663")) < Decimal("1e-12")

    def test_payment_accumulates_to_future_value(self):
        rate = Rate.of(0.05)
        payment = AnnuityPaymentFV(rate, 10).apply(usd(1000))
        accumulated = FutureValueOfAnnuity(rate, 10).apply(payment)
        assert abs(accumulated.number - Decimal(1000)) < Decimal("1e-25")

    def test_zero_rate(self):
        assert AnnuityPaymentFV(Rate.of(0), 12).apply(usd(1200)) == usd(100)

    def test_zero_periods_rejected(self):
        with pytest.raises(InvalidArgumentError):
            AnnuityPaymentFV(Rate.of(0.05), 0).apply(usd(1000))

        with pytest.raises(InvalidArgumentError):
            AnnuityPaymentFV(Rate.of(-0.05), 0).apply(usd(1000))


class TestRateBelowPrecision:
    """Rates too small to change 1 + r behave like a zero rate."""

    def test_factors(self):
        rate_and_periods = RateAndPeriods.of("1e-40", 12)
        assert PresentValueOfAnnuityPaymentFactor()(rate_and_periods) == Decimal(12)
        assert FutureValueOfAnnuityPaymentFactor()(rate_and_periods) == Decimal(12)

    @pytest.mark.parametrize("formula", [AnnuityPaymentFV, AnnuityPaymentPV])
    def test_payments(self, formula):
        assert formula(Rate.of("1e-40"), 12).apply(usd(1200)) == usd(100)

    def test_annuity_values(self):
        assert PresentValueOfAnnuity(Rate.of("1e-40"), 12).apply(usd(100)) == usd(1200)
        assert FutureValueOfAnnuity(Rate.of("1e-40"), 12).apply(usd(100)) == usd(1200)


# =============================================================================
# COMPOUND FORM ARGUMENT CHECKS
# =============================================================================


class TestCompoundNegativePeriods:
    @pytest.mark.parametrize(
        "formula",
        [
            FutureValue,
            PresentValue,
            PresentValueOfAnnuity,
            FutureValueOfAnnuity,
            AnnuityPaymentPV,
            AnnuityPaymentFV,
        ],
    )
    def test_operator_formulas(self, formula):
        value = CompoundValue.of(
            formula.INPUT_TYPE, rate=Rate.of(0.05), periods=-1, amount=usd(100)
        )
        with pytest.raises(InvalidArgumentError, match="negative") as exc_info:
            formula(Rate.of(0.05), 1).calculate(value)
        assert exc_info.value.name == "periods"

    @pytest.mark.parametrize(
        "factor",
        [
            FutureValueFactor,
            PresentValueFactor,
            PresentValueOfAnnuityPaymentFactor,
            FutureValueOfAnnuityPaymentFactor,
        ],
    )
    def test_factors(self, factor):
        fn = factor()
        value = CompoundValue.of(fn.input_type, rate=Rate.of(0.05), periods=-1)
        with pytest.raises(InvalidArgumentError) as exc_info:
            fn.calculate(value)
        assert exc_info.value.name == "periods"


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestConstruction:
    @pytest.mark.parametrize(
        "formula",
        [AnnuityPaymentFV, AnnuityPaymentPV, FutureValue, PresentValue, PresentValueOfAnnuity],
    )
    def test_none_rate_rejected(self, formula):
        with pytest.raises(InvalidConstructionParameterError, match="rate") as exc_info:
            formula(None, 10)
        assert exc_info.value.parameter == "rate"

    def test_invalid_rate_rejected(self):
        with pytest.raises(InvalidConstructionParameterError):
            FutureValue("abc", 1)

    def test_negative_periods_rejected(self):
        with pytest.raises(InvalidConstructionParameterError, match="periods"):
            FutureValue(Rate.of(0.05), -1)

    def test_non_int_periods_rejected(self):
        with pytest.raises(InvalidConstructionParameterError):
            FutureValue(Rate.of(0.05), 1.5)

    def test_plain_number_rate_accepted(self):
        assert FutureValue(0.05, 1).rate == Rate.of(0.05)

    def test_equality_and_repr(self):
        assert FutureValue(Rate.of(0.05), 10) == FutureValue(Rate.of("0.05"), 10)
        assert FutureValue(Rate.of(0.05), 10) != FutureValue(Rate.of(0.05), 11)
        assert FutureValue(Rate.of(0.05), 10) != PresentValue(Rate.of(0.05), 10)
        assert hash(FutureValue(Rate.of(0.05), 10)) == hash(FutureValue(Rate.of(0.05), 10))
        assert repr(FutureValue(Rate.of(0.05), 10)) == "FutureValue(rate=5%, periods=10)"
