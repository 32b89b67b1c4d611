"""
Stripe payment gateway client.

Creates PaymentIntents for the client-side card flow and, when
settlement checks are enabled, retrieves them to confirm a charge.
"""

import asyncio
import logging
from typing import Any, Optional

import stripe

from shared.config import get_settings

from .interfaces import IPaymentGateway
from .models import PaymentIntentSecret
from .exceptions import (
    GatewayNotConfiguredError,
    InvalidAmountError,
    PaymentGatewayError,
)

logger = logging.getLogger(__name__)


def parse_amount(raw: Any) -> int:
    """
    Coerce a request amount to an integer number of cents.

    Raises:
        InvalidAmountError: If the amount is missing, non-numeric or not positive
    """
    if raw is None or raw == "":
        raise InvalidAmountError(raw)
    try:
        amount = int(float(raw))
    except (TypeError, ValueError):
        raise InvalidAmountError(raw, "Amount must be a number")
    if amount <= 0:
        raise InvalidAmountError(raw, "Amount must be positive")
    return amount


class StripePaymentGateway(IPaymentGateway):
    """
    Payment gateway backed by Stripe PaymentIntents.
    """

    def __init__(self, client: Optional[stripe.StripeClient] = None):
        self._client = client

    def _get_client(self) -> stripe.StripeClient:
        if self._client is None:
            settings = get_settings()
            if not settings.stripe_secret_key:
                raise GatewayNotConfiguredError()
            self._client = stripe.StripeClient(settings.stripe_secret_key)
        return self._client

    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
    ) -> PaymentIntentSecret:
        if amount <= 0:
            raise InvalidAmountError(amount, "Amount must be positive")

        client = self._get_client()
        params = {
            "amount": amount,
            "currency": currency,
            "payment_method_types": ["card"],
        }

        try:
            intent = await asyncio.to_thread(client.payment_intents.create, params=params)
        except stripe.StripeError as e:
            logger.error("Error creating payment intent: %s", e.user_message or str(e))
            raise PaymentGatewayError(e.user_message or str(e), gateway_code=e.code)

        return PaymentIntentSecret(
            intent_id=intent.id,
            client_secret=intent.client_secret,
            amount=amount,
            currency=currency,
        )

    async def get_payment_status(self, intent_id: str) -> str:
        client = self._get_client()

        try:
            intent = await asyncio.to_thread(client.payment_intents.retrieve, intent_id)
        except stripe.StripeError as e:
            logger.error("Error retrieving payment intent %s: %s", intent_id, str(e))
            raise PaymentGatewayError(e.user_message or str(e), gateway_code=e.code)

        return intent.status


# Module-level instance getter
_gateway_instance: Optional[StripePaymentGateway] = None


def get_payment_gateway() -> StripePaymentGateway:
    """Get the payment gateway singleton."""
    global _gateway_instance
    if _gateway_instance is None:
        _gateway_instance = StripePaymentGateway()
    return _gateway_instance


def reset_payment_gateway() -> None:
    """Reset the payment gateway singleton (for testing)."""
    global _gateway_instance
    _gateway_instance = None
