"""
Agreements module.

A user's request to rent an apartment. Reads and deletion live here;
status transitions are handled by the lifecycle module.

Public API:
- IAgreementService: Interface for agreement queries
- Agreement, AgreementStatus, AgreementDecision
"""

from .interfaces import IAgreementService
from .models import Agreement, AgreementStatus, AgreementDecision, CreateAgreementRequest
from .exceptions import AgreementNotFoundError

__all__ = [
    "IAgreementService",
    "Agreement",
    "AgreementStatus",
    "AgreementDecision",
    "CreateAgreementRequest",
    "AgreementNotFoundError",
]
