"""
Securities formulas: per-share ratios and bond valuation.
"""

from .per_share import BookValuePerShare, DividendsPerShare, EarningsPerShare
from .zero_coupon_bond import ZeroCouponBondValue, zero_coupon_bond_value

__all__ = [
    "BookValuePerShare",
    "DividendsPerShare",
    "EarningsPerShare",
    "ZeroCouponBondValue",
    "zero_coupon_bond_value",
]
