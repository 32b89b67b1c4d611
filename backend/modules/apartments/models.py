"""
Apartment data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Union
from pydantic import AliasChoices, Field

from shared.models import DocumentModel, RequestModel


class ApartmentStatus(str, Enum):
    """Listing status of an apartment."""

    PENDING = "pending"
    AVAILABLE = "available"
    RENTED = "rented"


class Apartment(DocumentModel):
    """An apartment listed by an administrator."""

    apartment_no: str
    floor: Union[int, str]
    block: str
    rent: float
    status: ApartmentStatus = ApartmentStatus.PENDING
    image: Optional[str] = None
    created_at: Optional[datetime] = None


class CreateApartmentRequest(RequestModel):
    """Body of POST /apartments."""

    apartment_no: Optional[Union[int, str]] = Field(
        None,
        validation_alias=AliasChoices("apartment_no", "apartmentNo"),
    )
    floor: Optional[Union[int, str]] = None
    block: Optional[str] = None
    rent: Optional[Union[float, str]] = None
    status: Optional[ApartmentStatus] = None
    image: Optional[str] = None
