"""
Apartments module: reference data listed by administrators.
"""

from .models import Apartment, ApartmentStatus, CreateApartmentRequest

__all__ = ["Apartment", "ApartmentStatus", "CreateApartmentRequest"]
