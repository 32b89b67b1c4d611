"""
Lifecycle exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class DuplicateAgreementError(ConflictError):
    """Raised when a pending agreement already exists for a user and apartment."""

    def __init__(self, user_email: str, apartment_no: str):
        super().__init__(
            "User already applied for this apartment",
            code="DUPLICATE_AGREEMENT",
            details={"user_email": user_email, "apartment_no": apartment_no},
        )


class InvalidTransitionError(ConflictError):
    """Raised when an event is not allowed from the document's current status."""

    def __init__(self, agreement_id: str, status: str, event: str):
        super().__init__(
            f"Cannot {event} an agreement that is {status}",
            code="INVALID_TRANSITION",
            details={"agreement_id": agreement_id, "status": status, "event": event},
        )


class AgreementNotPayableError(NotFoundError):
    """Raised when the agreement to pay doesn't exist or is already paid."""

    def __init__(self, agreement_id: str):
        super().__init__(
            "Agreement not found or already paid",
            code="AGREEMENT_NOT_PAYABLE",
            details={"agreement_id": agreement_id},
        )


class MemberNotUpdatedError(NotFoundError):
    """Raised when a member status update modified nothing."""

    def __init__(self, member_id: str):
        super().__init__(
            "Member not found or already updated",
            code="MEMBER_NOT_UPDATED",
            details={"member_id": member_id},
        )


class InvalidMemberStatusError(ValidationError):
    def __init__(self, status: str | None):
        message = (
            "Status field is missing in request body"
            if not status
            else f"Invalid member status: {status}"
        )
        super().__init__(message, code="INVALID_MEMBER_STATUS", details={"status": status})
