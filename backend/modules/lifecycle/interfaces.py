"""
Lifecycle service interface.

Every write that changes an agreement's status, a member's status, or a
user's role as a side effect goes through this service.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.agreements.models import CreateAgreementRequest
from modules.payments.models import RecordPaymentRequest

from .models import TransitionResult


@runtime_checkable
class ILifecycleService(Protocol):
    async def submit_agreement(self, request: CreateAgreementRequest) -> TransitionResult:
        """
        Submit a new agreement request in pending status.

        Raises:
            ValidationError: If user email or apartment number is missing
            DuplicateAgreementError: If the pair already has a pending agreement
        """
        ...

    async def accept_agreement(self, agreement_id: str) -> TransitionResult:
        """
        Accept a pending agreement and make its user a member.

        A missing agreement or user is reported through ``warnings`` and
        ``role_updated=False`` rather than an error.

        Raises:
            InvalidIdentifierError: If agreement_id is malformed
            InvalidTransitionError: If the agreement is not pending
        """
        ...

    async def reject_agreement(self, agreement_id: str) -> TransitionResult:
        """
        Reject a pending agreement. The user's role is untouched.

        Raises:
            InvalidIdentifierError: If agreement_id is malformed
            InvalidTransitionError: If the agreement is not pending
        """
        ...

    async def record_payment(self, request: RecordPaymentRequest) -> TransitionResult:
        """
        Mark an agreement paid and record the payment.

        Raises:
            ValidationError: If agreement id, user email or amount is missing
            InvalidIdentifierError: If the agreement id is malformed
            AgreementNotPayableError: If the agreement is missing or already paid
        """
        ...

    async def update_member_status(
        self,
        member_id: str,
        status: Optional[str],
        supplied_email: Optional[str] = None,
    ) -> TransitionResult:
        """
        Change a member's status; activation makes the user a member.

        Raises:
            InvalidIdentifierError: If member_id is malformed
            InvalidMemberStatusError: If status is missing or unknown
            MemberNotUpdatedError: If the member is missing or already has the status
        """
        ...
