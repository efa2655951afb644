"""
Per-Share Ratios

    BookValuePerShare   equity / number of common shares
    EarningsPerShare    net income / weighted average outstanding shares
    DividendsPerShare   dividends / number of shares

Share counts are positive ints; the result keeps the input currency.
"""

from moneycalc.core.compound import CompoundType
from moneycalc.core.domain import MonetaryAmount
from moneycalc.functions.base import PerShareRatio


def _per_share_type(key: str, amount_arg: str, shares_arg: str) -> CompoundType:
    return (
        CompoundType.builder()
        .with_id(key)
        .with_required_arg(amount_arg, MonetaryAmount)
        .with_required_arg(shares_arg, int)
        .build()
    )


class BookValuePerShare(PerShareRatio):
    """
    Book value per share: the common equity attributable to one share.

    Examples:
        >>> BookValuePerShare.evaluate(MonetaryAmount.of(100, "GBP"), 10)
        MonetaryAmount(number=Decimal('10'), currency='GBP')
    """

    AMOUNT_ARG = "equity"
    SHARES_ARG = "number_of_common_shares"
    INPUT_TYPE = _per_share_type("book_value_per_share", AMOUNT_ARG, SHARES_ARG)


class EarningsPerShare(PerShareRatio):
    AMOUNT_ARG = "net_income"
    SHARES_ARG = "weighted_average_outstanding_shares"
    INPUT_TYPE = _per_share_type("earnings_per_share", AMOUNT_ARG, SHARES_ARG)


class DividendsPerShare(PerShareRatio):
    AMOUNT_ARG = "dividends"
    SHARES_ARG = "number_of_shares"
    INPUT_TYPE = _per_share_type("dividends_per_share", AMOUNT_ARG, SHARES_ARG)
