"""
Payment gateway exceptions.

These exceptions are raised by the billing module and mapped to HTTP
responses by the API error handlers.
"""

from typing import Any, Optional

from shared.exceptions import ExternalServiceError, ValidationError


class InvalidAmountError(ValidationError):
    """Raised when a charge amount is missing, non-numeric or not positive."""

    def __init__(self, amount: Any, reason: str = "Amount is required"):
        super().__init__(
            reason,
            code="INVALID_AMOUNT",
            details={"amount": str(amount) if amount is not None else None},
        )


class PaymentGatewayError(ExternalServiceError):
    """Raised when the payment gateway rejects or fails a call."""

    def __init__(self, message: str, gateway_code: Optional[str] = None):
        super().__init__(
            message,
            service="stripe",
            code="PAYMENT_GATEWAY_ERROR",
            details={"gateway_code": gateway_code},
        )


class GatewayNotConfiguredError(PaymentGatewayError):
    """Raised when no gateway secret key is configured."""

    def __init__(self):
        super().__init__("Payment gateway not configured")


class PaymentNotSettledError(ValidationError):
    """
    Raised when the gateway reports that a charge has not succeeded.

    Only used when server-side settlement checks are enabled.
    """

    def __init__(self, transaction_id: str, status: str):
        super().__init__(
            f"Payment {transaction_id} has not succeeded (status: {status})",
            code="PAYMENT_NOT_SETTLED",
            details={"transaction_id": transaction_id, "status": status},
        )
