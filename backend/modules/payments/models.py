"""
Payment data models.
"""

from datetime import datetime
from typing import Optional, Union
from pydantic import AliasChoices, Field

from shared.models import DocumentModel, RequestModel, SuccessResponse


class Payment(DocumentModel):
    """A recorded rent payment against an agreement."""

    agreement_id: str
    user_email: str
    amount: float
    month: Optional[str] = None
    transaction_id: Optional[str] = None
    payment_method: Optional[str] = None
    date: Optional[datetime] = None


class RecordPaymentRequest(RequestModel):
    """
    Body of POST /payments.

    Older clients send ``agreementsId`` and ``email``; both spellings
    are accepted.
    """

    agreement_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("agreement_id", "agreementId", "agreementsId"),
    )
    user_email: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("user_email", "userEmail", "email"),
    )
    amount: Optional[Union[float, str]] = None
    month: Optional[str] = None
    transaction_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("transaction_id", "transactionId"),
    )
    payment_method: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("payment_method", "paymentMethod"),
    )


class RecordPaymentResponse(SuccessResponse):
    payment_id: str
