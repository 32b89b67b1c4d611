"""
Agreement data models.

An agreement is a user's request to rent a specific apartment. Its status
moves pending -> checked (accepted or rejected) and, once paid, -> paid.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Union
from pydantic import AliasChoices, Field

from shared.models import DocumentModel, RequestModel


class AgreementStatus(str, Enum):
    """Agreement lifecycle status."""

    PENDING = "pending"  # Submitted, awaiting an administrator
    CHECKED = "checked"  # Accepted or rejected
    PAID = "paid"        # Payment recorded


class AgreementDecision(str, Enum):
    """Outcome recorded when an agreement is checked."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Agreement(DocumentModel):
    """A stored agreement."""

    user_email: str
    user_name: Optional[str] = None
    apartment_no: str
    floor: Optional[Union[int, str]] = None
    block: Optional[str] = None
    rent: Optional[float] = None
    status: AgreementStatus = AgreementStatus.PENDING
    decision: Optional[AgreementDecision] = None
    checked_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class CreateAgreementRequest(RequestModel):
    """Body of POST /agreements."""

    user_email: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("user_email", "userEmail"),
    )
    user_name: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("user_name", "userName"),
    )
    apartment_no: Optional[Union[int, str]] = Field(
        None,
        validation_alias=AliasChoices("apartment_no", "apartmentNo"),
    )
    floor: Optional[Union[int, str]] = None
    block: Optional[str] = None
    rent: Optional[Union[float, str]] = None
