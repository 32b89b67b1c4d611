"""
Payments module.

Payment history and recording; the agreement flip is done by the
lifecycle service.
"""

from .models import Payment, RecordPaymentRequest, RecordPaymentResponse

__all__ = ["Payment", "RecordPaymentRequest", "RecordPaymentResponse"]
