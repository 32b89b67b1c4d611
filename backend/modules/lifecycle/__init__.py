"""
Lifecycle module.

Keeps agreements, users, members and payments consistent with each other:
- agreement acceptance makes the user a member
- payment flips the agreement to paid
- member activation makes the user a member

Public API:
- ILifecycleService: Interface for lifecycle events
- TransitionResult: Outcome returned to callers
- transitions: Pure plan-building functions
"""

from .interfaces import ILifecycleService
from .models import TransitionPlan, TransitionResult, Write, WriteLabel, WriteOp
from .exceptions import (
    DuplicateAgreementError,
    InvalidTransitionError,
    AgreementNotPayableError,
    MemberNotUpdatedError,
    InvalidMemberStatusError,
)

__all__ = [
    # Interface
    "ILifecycleService",
    # Models
    "TransitionPlan",
    "TransitionResult",
    "Write",
    "WriteLabel",
    "WriteOp",
    # Exceptions
    "DuplicateAgreementError",
    "InvalidTransitionError",
    "AgreementNotPayableError",
    "MemberNotUpdatedError",
    "InvalidMemberStatusError",
]
