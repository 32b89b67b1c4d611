"""
Coupons module: discount codes, no lifecycle coupling.
"""

from .models import Coupon, CreateCouponRequest

__all__ = ["Coupon", "CreateCouponRequest"]
