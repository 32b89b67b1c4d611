"""
Payment service.

Payment history, payment recording (delegated to the lifecycle service so
the agreement flip and the payment insert stay paired) and gateway
client secrets.
"""

import logging
from typing import Any, Optional

from modules.auth.exceptions import EmailMismatchError
from modules.billing.interfaces import IPaymentGateway
from modules.billing.models import SUCCEEDED_STATUS, PaymentIntentSecret
from modules.billing.exceptions import PaymentNotSettledError
from modules.billing.service import parse_amount
from modules.lifecycle.interfaces import ILifecycleService
from modules.lifecycle.models import TransitionResult
from shared.config import Settings, get_settings
from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser

from .models import Payment, RecordPaymentRequest
from .repository import PaymentRepository

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(
        self,
        repository: PaymentRepository,
        lifecycle: ILifecycleService,
        gateway: IPaymentGateway,
        settings: Optional[Settings] = None,
    ):
        self._payments = repository
        self._lifecycle = lifecycle
        self._gateway = gateway
        self._settings = settings or get_settings()

    async def history(self, email: Optional[str], principal: AuthenticatedUser) -> list[Payment]:
        """
        Payment history for the verified principal, newest first.

        Raises:
            ValidationError: If email is missing
            EmailMismatchError: If email is not the principal's
        """
        if not email:
            raise ValidationError("Email query parameter is required", code="EMAIL_REQUIRED")
        if email.lower() != principal.email.lower():
            raise EmailMismatchError(email, principal.email)
        return self._payments.list_by_email(email)

    async def record_payment(self, request: RecordPaymentRequest) -> TransitionResult:
        """
        Record a payment the client reports as completed.

        The gateway is only consulted when verify_payments_with_gateway is
        enabled; otherwise the client's word is taken for the charge.

        Raises:
            PaymentNotSettledError: If settlement checks are enabled and the
                gateway does not report the charge as succeeded
        """
        if self._settings.verify_payments_with_gateway:
            await self._check_settled(request.transaction_id)

        logger.info(
            "Recording payment for agreement %s by %s",
            request.agreement_id,
            request.user_email,
        )
        return await self._lifecycle.record_payment(request)

    async def create_payment_intent(self, amount: Any) -> PaymentIntentSecret:
        """
        Obtain a client-confirmation secret for a card charge.

        Raises:
            InvalidAmountError: If amount is missing or not a positive number
        """
        cents = parse_amount(amount)
        return await self._gateway.create_payment_intent(cents, self._settings.payment_currency)

    async def _check_settled(self, transaction_id: Optional[str]) -> None:
        if not transaction_id:
            raise ValidationError(
                "transactionId is required to verify the payment",
                code="MISSING_FIELDS",
            )
        status = await self._gateway.get_payment_status(transaction_id)
        if status != SUCCEEDED_STATUS:
            raise PaymentNotSettledError(transaction_id, status)
