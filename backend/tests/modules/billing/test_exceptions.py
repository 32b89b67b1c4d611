"""Tests for billing module exceptions."""

from modules.billing.exceptions import (
    GatewayNotConfiguredError,
    InvalidAmountError,
    PaymentGatewayError,
    PaymentNotSettledError,
)
from shared.exceptions import ExternalServiceError, ValidationError


class TestInvalidAmountError:
    def test_default_reason(self):
        error = InvalidAmountError(None)
        assert error.message == "Amount is required"
        assert error.details == {"amount": None}
        assert isinstance(error, ValidationError)
        assert error.status_code == 400

    def test_custom_reason(self):
        error = InvalidAmountError("-5", "Amount must be positive")
        assert error.message == "Amount must be positive"
        assert error.details == {"amount": "-5"}


class TestPaymentGatewayError:
    def test_is_external_service_error(self):
        error = PaymentGatewayError("Card declined", gateway_code="card_declined")
        assert isinstance(error, ExternalServiceError)
        assert error.service == "stripe"
        assert error.details["gateway_code"] == "card_declined"
        assert error.status_code == 500

    def test_not_configured(self):
        error = GatewayNotConfiguredError()
        assert isinstance(error, PaymentGatewayError)
        assert error.message == "Payment gateway not configured"


class TestPaymentNotSettledError:
    def test_details(self):
        error = PaymentNotSettledError("pi_123", "requires_payment_method")
        assert error.status_code == 400
        assert error.details == {"transaction_id": "pi_123", "status": "requires_payment_method"}
        assert "pi_123" in error.message
