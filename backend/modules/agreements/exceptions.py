"""
Agreements module exceptions.
"""

from shared.exceptions import NotFoundError


class AgreementNotFoundError(NotFoundError):
    """Raised when an agreement is not found."""

    def __init__(self, agreement_id: str):
        super().__init__(
            "Agreement not found",
            code="AGREEMENT_NOT_FOUND",
            details={"agreement_id": agreement_id},
        )
