"""
Billing module.

Payment gateway client for Stripe card payments.

Public API:
- IPaymentGateway: Interface for gateway operations
- PaymentIntentSecret: Client-confirmation secret for a charge
- Billing exceptions: InvalidAmountError, PaymentGatewayError, etc.
"""

from .interfaces import IPaymentGateway
from .models import (
    CreatePaymentIntentRequest,
    CreatePaymentIntentResponse,
    PaymentIntentSecret,
    SUCCEEDED_STATUS,
)
from .exceptions import (
    InvalidAmountError,
    PaymentGatewayError,
    GatewayNotConfiguredError,
    PaymentNotSettledError,
)

__all__ = [
    # Interface
    "IPaymentGateway",
    # Models
    "CreatePaymentIntentRequest",
    "CreatePaymentIntentResponse",
    "PaymentIntentSecret",
    "SUCCEEDED_STATUS",
    # Exceptions
    "InvalidAmountError",
    "PaymentGatewayError",
    "GatewayNotConfiguredError",
    "PaymentNotSettledError",
]
