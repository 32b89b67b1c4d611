"""
Payment gateway interface.

Other modules should depend on IPaymentGateway, not the concrete implementation.
The gateway never writes Payment documents; it only talks to Stripe.
"""

from typing import Protocol, runtime_checkable

from .models import PaymentIntentSecret


@runtime_checkable
class IPaymentGateway(Protocol):
    """
    Interface for payment gateway operations.
    """

    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
    ) -> PaymentIntentSecret:
        """
        Create a card PaymentIntent.

        Args:
            amount: Amount in the smallest currency unit (must be positive)
            currency: ISO currency code (e.g., "usd")

        Returns:
            PaymentIntentSecret with the client-confirmation secret

        Raises:
            InvalidAmountError: If amount is not positive
            PaymentGatewayError: If the gateway call fails
        """
        ...

    async def get_payment_status(self, intent_id: str) -> str:
        """
        Look up the gateway status of a PaymentIntent.

        Args:
            intent_id: PaymentIntent ID (the client's transaction id)

        Returns:
            Gateway status string (e.g., "succeeded", "requires_payment_method")

        Raises:
            PaymentGatewayError: If the gateway call fails
        """
        ...
