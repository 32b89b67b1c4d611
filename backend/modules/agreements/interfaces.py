"""
Agreements module interface (read side and deletion).

State transitions live in the lifecycle module (ILifecycleService).
"""

from typing import Optional, Protocol, runtime_checkable

from .models import Agreement


@runtime_checkable
class IAgreementService(Protocol):
    async def list_for_email(self, email: Optional[str]) -> list[Agreement]:
        """
        List an email's agreements, most recent first.

        Raises:
            ValidationError: If email is missing
        """
        ...

    async def list_all(self) -> list[Agreement]:
        """List every agreement, most recent first."""
        ...

    async def list_pending(self) -> list[Agreement]:
        """List agreements still awaiting a decision."""
        ...

    async def get(self, agreement_id: str) -> Agreement:
        """
        Get one agreement.

        Raises:
            InvalidIdentifierError: If agreement_id is malformed
            AgreementNotFoundError: If it doesn't exist
        """
        ...

    async def delete(self, agreement_id: str) -> None:
        """
        Delete an agreement.

        Raises:
            InvalidIdentifierError: If agreement_id is malformed
            AgreementNotFoundError: If nothing was deleted
        """
        ...
