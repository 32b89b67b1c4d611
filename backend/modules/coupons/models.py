"""
Coupon data models.
"""

from datetime import datetime
from typing import Optional, Union

from shared.models import DocumentModel, RequestModel


class Coupon(DocumentModel):
    """A discount coupon. Codes are not enforced unique."""

    code: str
    discount: float
    description: str
    created_at: Optional[datetime] = None


class CreateCouponRequest(RequestModel):
    code: Optional[str] = None
    discount: Optional[Union[float, str]] = None
    description: Optional[str] = None
