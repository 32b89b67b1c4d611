"""
Payment gateway data models.
"""

from typing import Optional, Union
from pydantic import BaseModel, Field


# Stripe PaymentIntent status that means the charge settled
SUCCEEDED_STATUS = "succeeded"


class CreatePaymentIntentRequest(BaseModel):
    """Request for a client-confirmation secret."""

    amount: Optional[Union[int, float, str]] = Field(
        None,
        description="Amount in the smallest currency unit (cents)",
    )


class PaymentIntentSecret(BaseModel):
    """Result of creating a PaymentIntent."""

    intent_id: str = Field(..., description="Gateway PaymentIntent ID")
    client_secret: str = Field(..., description="Secret the client uses to confirm the charge")
    amount: int = Field(..., description="Amount in the smallest currency unit")
    currency: str = Field(..., description="ISO currency code")


class CreatePaymentIntentResponse(BaseModel):
    """Response body for POST /create-payment-intent."""

    success: bool = True
    client_secret: str
