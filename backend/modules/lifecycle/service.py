"""
Lifecycle service implementation.

Loads snapshots through the repositories, asks transitions.py for a plan,
and applies the plan's writes one by one. The store only guarantees
single-document atomicity: a crash between two writes of a plan can
leave them half-applied. A failed write after an applied one runs the
applied writes' undo steps before the error propagates.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from modules.agreements.models import CreateAgreementRequest
from modules.agreements.repository import AgreementRepository
from modules.members.models import MemberStatus
from modules.members.repository import MemberRepository
from modules.payments.models import RecordPaymentRequest
from modules.users.repository import UserRepository
from shared.exceptions import BmsHubError, ValidationError
from shared.store import DocumentStore, DuplicateDocumentError, parse_document_id

from . import transitions
from .exceptions import DuplicateAgreementError, InvalidMemberStatusError
from .interfaces import ILifecycleService
from .models import TransitionPlan, TransitionResult, Write, WriteLabel, WriteOp

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LifecycleService(ILifecycleService):
    """
    Applies agreement, payment and membership transitions.
    """

    def __init__(
        self,
        store: DocumentStore,
        agreements: AgreementRepository,
        users: UserRepository,
        members: MemberRepository,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._store = store
        self._agreements = agreements
        self._users = users
        self._members = members
        self._clock = clock

    async def submit_agreement(self, request: CreateAgreementRequest) -> TransitionResult:
        if not request.user_email or request.apartment_no in (None, ""):
            raise ValidationError(
                "User email and apartment number are required",
                code="MISSING_FIELDS",
            )

        apartment_no = str(request.apartment_no)
        rent = None
        if request.rent not in (None, ""):
            try:
                rent = float(request.rent)
            except (TypeError, ValueError):
                raise ValidationError("Rent must be a number", code="INVALID_RENT")

        fields = {
            "user_email": request.user_email,
            "user_name": request.user_name,
            "apartment_no": apartment_no,
            "floor": request.floor,
            "block": request.block,
            "rent": rent,
        }
        existing = self._agreements.find_pending(request.user_email, apartment_no)
        plan = transitions.plan_submission(fields, existing, self._clock())

        try:
            result = self._apply(plan)
        except DuplicateDocumentError:
            # Lost a race with a concurrent submission; the unique index caught it
            raise DuplicateAgreementError(request.user_email, apartment_no)

        result.message = "Agreement request submitted"
        return result

    async def accept_agreement(self, agreement_id: str) -> TransitionResult:
        agreement_id = parse_document_id(agreement_id, "agreement")
        agreement = self._agreements.get_by_id(agreement_id)
        user = self._users.get_by_email(agreement.user_email) if agreement else None

        plan = transitions.plan_acceptance(agreement_id, agreement, user, self._clock())
        result = self._apply(plan)
        result.message = "Agreement accepted" if result.modified_count else "No agreement updated"
        return result

    async def reject_agreement(self, agreement_id: str) -> TransitionResult:
        agreement_id = parse_document_id(agreement_id, "agreement")
        agreement = self._agreements.get_by_id(agreement_id)

        plan = transitions.plan_rejection(agreement_id, agreement, self._clock())
        result = self._apply(plan)
        result.message = "Agreement rejected" if result.modified_count else "No agreement updated"
        return result

    async def record_payment(self, request: RecordPaymentRequest) -> TransitionResult:
        if not request.agreement_id or not request.user_email or request.amount in (None, ""):
            raise ValidationError("Missing required payment fields", code="MISSING_FIELDS")

        try:
            amount = float(request.amount)
        except (TypeError, ValueError):
            raise ValidationError("Amount must be a number", code="INVALID_AMOUNT")
        if amount <= 0:
            raise ValidationError("Amount must be positive", code="INVALID_AMOUNT")

        agreement_id = parse_document_id(request.agreement_id, "agreement")
        agreement = self._agreements.get_by_id(agreement_id)

        payment = {
            "user_email": request.user_email,
            "amount": amount,
            "month": request.month or None,
            "transaction_id": request.transaction_id,
            "payment_method": request.payment_method,
        }
        plan = transitions.plan_payment(agreement_id, agreement, payment, self._clock())
        result = self._apply(plan)
        result.message = "Payment successful & agreement marked as paid"
        return result

    async def update_member_status(
        self,
        member_id: str,
        status: Optional[str],
        supplied_email: Optional[str] = None,
    ) -> TransitionResult:
        member_id = parse_document_id(member_id, "member")
        if not status:
            raise InvalidMemberStatusError(status)
        try:
            new_status = MemberStatus(status)
        except ValueError:
            raise InvalidMemberStatusError(status)

        member = self._members.get_by_id(member_id)
        email = transitions.member_email(member, supplied_email)
        user = self._users.get_by_email(email) if email else None

        plan = transitions.plan_member_status(member_id, member, new_status, supplied_email, user)
        result = self._apply(plan)
        result.message = f"Member status updated to {new_status.value}"
        return result

    # -------------------------------------------------------------------------
    # Plan application
    # -------------------------------------------------------------------------

    def _apply(self, plan: TransitionPlan) -> TransitionResult:
        result = TransitionResult(warnings=list(plan.warnings))
        applied: list[Write] = []

        for index, write in enumerate(plan.writes):
            try:
                outcome = self._execute(write)
            except BmsHubError:
                self._compensate(plan, applied)
                raise

            if write.op == WriteOp.INSERT:
                result.inserted_id = outcome
                count = 1
            else:
                count = outcome

            if index == 0:
                result.modified_count = count

            if count == 0 and write.abort_if_noop:
                logger.info("Transition %s stopped: %s matched nothing", plan.event, write.label.value)
                self._compensate(plan, applied)
                raise plan.noop_error or BmsHubError(f"{plan.event} modified nothing")

            if write.label == WriteLabel.USER_ROLE and count > 0:
                result.role_updated = True
            applied.append(write)

        for warning in result.warnings:
            logger.warning("Transition %s: %s", plan.event, warning)
        logger.info(
            "Transition %s applied (%d writes, modified=%d, role_updated=%s)",
            plan.event,
            len(applied),
            result.modified_count,
            result.role_updated,
        )
        return result

    def _execute(self, write: Write):
        collection = self._store.collection(write.collection)
        if write.op == WriteOp.INSERT:
            return collection.insert_one(write.data)
        return collection.update_one(write.filter, write.data)

    def _compensate(self, plan: TransitionPlan, applied: list[Write]) -> None:
        for write in reversed(applied):
            if write.undo is None:
                continue
            try:
                self._execute(write.undo)
                logger.error("Transition %s rolled back %s", plan.event, write.label.value)
            except BmsHubError:
                logger.exception(
                    "Transition %s could not roll back %s; documents may be inconsistent",
                    plan.event,
                    write.label.value,
                )
