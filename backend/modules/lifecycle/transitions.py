"""
Lifecycle transition functions.

One function per lifecycle event. Each takes the current snapshot of the
documents it affects and returns the full TransitionPlan to apply, or
raises if the event is not allowed. Nothing here touches the store.

Agreement:  pending --accept--> checked --pay--> paid
            pending --reject--> checked --pay--> paid
Member:     pending --activate--> active

Accepting an agreement or activating a member makes the user a member.
Administrators keep their role.
"""

from datetime import datetime
from typing import Any, Optional

from modules.agreements.models import Agreement, AgreementDecision, AgreementStatus
from modules.members.models import Member, MemberStatus
from modules.users.models import User, UserRole
from shared.store import Ne

from .exceptions import (
    AgreementNotPayableError,
    DuplicateAgreementError,
    InvalidTransitionError,
    MemberNotUpdatedError,
)
from .models import TransitionPlan, Write, WriteLabel, WriteOp


def plan_submission(
    agreement: dict[str, Any],
    existing_pending: Optional[Agreement],
    now: datetime,
) -> TransitionPlan:
    """
    Plan a new agreement request.

    Args:
        agreement: Normalized agreement fields (user_email and apartment_no set)
        existing_pending: Pending agreement for the same pair, if any
        now: Submission time

    Raises:
        DuplicateAgreementError: If a pending agreement already exists
    """
    if existing_pending is not None:
        raise DuplicateAgreementError(agreement["user_email"], agreement["apartment_no"])

    document = {
        **agreement,
        "status": AgreementStatus.PENDING.value,
        "decision": None,
        "checked_at": None,
        "created_at": now,
    }
    return TransitionPlan(
        event="submit",
        writes=[Write("agreements", WriteOp.INSERT, WriteLabel.AGREEMENT_CREATE, document)],
    )


def _check_decidable(agreement_id: str, agreement: Optional[Agreement], event: str) -> None:
    if agreement is not None and agreement.status != AgreementStatus.PENDING:
        raise InvalidTransitionError(agreement_id, agreement.status.value, event)


def _decision_write(
    agreement_id: str,
    decision: AgreementDecision,
    now: datetime,
    guarded: bool,
) -> Write:
    # Conditional on pending, so a concurrent decision or payment is not overwritten.
    # A guarded write stops the plan when that condition no longer holds.
    return Write(
        "agreements",
        WriteOp.UPDATE,
        WriteLabel.AGREEMENT_STATUS,
        {
            "status": AgreementStatus.CHECKED.value,
            "decision": decision.value,
            "checked_at": now,
        },
        filter={"id": agreement_id, "status": AgreementStatus.PENDING.value},
        abort_if_noop=guarded,
    )


def _decision_plan(
    event: str,
    agreement_id: str,
    agreement: Optional[Agreement],
    decision: AgreementDecision,
    now: datetime,
) -> TransitionPlan:
    """
    Plan holding the decision write.

    With a pending snapshot in hand, a decision write that matches nothing
    means the agreement was decided or paid since it was read, so the plan
    stops before any side effect. Without a snapshot the write is attempted
    and simply reports zero modified.
    """
    guarded = agreement is not None
    plan = TransitionPlan(
        event=event,
        writes=[_decision_write(agreement_id, decision, now, guarded)],
    )
    if guarded:
        plan.noop_error = InvalidTransitionError(agreement_id, "no longer pending", event)
    return plan


def _member_write(
    email: str,
    user: User,
    extra: dict[str, Any],
    warnings: list[str],
) -> Optional[Write]:
    """Write that makes ``user`` a member, plus any extra profile fields."""
    if user.role == UserRole.ADMIN:
        warnings.append(f"User {email} is an admin; role left unchanged")
        if not extra:
            return None
        return Write("users", WriteOp.UPDATE, WriteLabel.USER_PROFILE, extra, filter={"email": email})

    return Write(
        "users",
        WriteOp.UPDATE,
        WriteLabel.USER_ROLE,
        {"role": UserRole.MEMBER.value, **extra},
        filter={"email": email},
    )


def plan_acceptance(
    agreement_id: str,
    agreement: Optional[Agreement],
    user: Optional[User],
    now: datetime,
) -> TransitionPlan:
    """
    Plan accepting an agreement.

    The user is the one named by the agreement's stored email, never one
    supplied by the caller. If the agreement or that user is missing, the
    status write still goes ahead and the role write is skipped with a
    warning.

    Raises:
        InvalidTransitionError: If the agreement exists but is not pending
    """
    _check_decidable(agreement_id, agreement, "accept")

    plan = _decision_plan("accept", agreement_id, agreement, AgreementDecision.ACCEPTED, now)

    if agreement is None:
        plan.warnings.append("Agreement not found; user role not updated")
        return plan
    if user is None:
        plan.warnings.append(f"No user with email {agreement.user_email}; role not updated")
        return plan

    rented = {
        "floor": agreement.floor,
        "block": agreement.block,
        "room_no": agreement.apartment_no,
    }
    write = _member_write(
        agreement.user_email,
        user,
        {"agreement_accept_date": now, "rented_apartment": rented},
        plan.warnings,
    )
    if write is not None:
        plan.writes.append(write)
    return plan


def plan_rejection(
    agreement_id: str,
    agreement: Optional[Agreement],
    now: datetime,
) -> TransitionPlan:
    """
    Plan rejecting an agreement. Status only; the user's role is untouched.

    Raises:
        InvalidTransitionError: If the agreement exists but is not pending
    """
    _check_decidable(agreement_id, agreement, "reject")

    plan = _decision_plan("reject", agreement_id, agreement, AgreementDecision.REJECTED, now)
    if agreement is None:
        plan.warnings.append("Agreement not found")
    return plan


def plan_payment(
    agreement_id: str,
    agreement: Optional[Agreement],
    payment: dict[str, Any],
    now: datetime,
) -> TransitionPlan:
    """
    Plan recording a payment.

    The agreement is flipped to paid first, conditional on it not being
    paid already. The payment document is only inserted if that flip
    modified the agreement; if the insert then fails, the flip is undone.

    Args:
        agreement_id: Agreement being paid
        agreement: Current agreement snapshot, if found
        payment: Normalized payment fields (user_email, amount, month, ...)
        now: Payment time

    Raises:
        AgreementNotPayableError: If the agreement is missing or already paid
    """
    if agreement is None or agreement.status == AgreementStatus.PAID:
        raise AgreementNotPayableError(agreement_id)

    previous_status = agreement.status.value
    flip = Write(
        "agreements",
        WriteOp.UPDATE,
        WriteLabel.AGREEMENT_STATUS,
        {"status": AgreementStatus.PAID.value},
        filter={"id": agreement_id, "status": Ne(AgreementStatus.PAID.value)},
        abort_if_noop=True,
        undo=Write(
            "agreements",
            WriteOp.UPDATE,
            WriteLabel.AGREEMENT_STATUS,
            {"status": previous_status},
            filter={"id": agreement_id, "status": AgreementStatus.PAID.value},
        ),
    )
    record = Write(
        "payments",
        WriteOp.INSERT,
        WriteLabel.PAYMENT_RECORD,
        {**payment, "agreement_id": agreement_id, "date": now},
    )
    return TransitionPlan(
        event="pay",
        writes=[flip, record],
        noop_error=AgreementNotPayableError(agreement_id),
    )


def member_email(member: Optional[Member], supplied_email: Optional[str]) -> Optional[str]:
    """
    Email whose user an activation should promote.

    The member's stored email wins; the caller-supplied one is only a
    fallback for records saved without an email.
    """
    if member is not None and member.email:
        return member.email
    return supplied_email or None


def plan_member_status(
    member_id: str,
    member: Optional[Member],
    new_status: MemberStatus,
    supplied_email: Optional[str],
    user: Optional[User],
) -> TransitionPlan:
    """
    Plan a member status change, promoting the user on activation.

    Args:
        member_id: Member being updated
        member: Current member snapshot, if found
        new_status: Requested status
        supplied_email: Email sent alongside the request
        user: User matching member_email(member, supplied_email), if found

    Raises:
        MemberNotUpdatedError: If the member is missing or already has new_status
    """
    if member is None or member.status == new_status:
        raise MemberNotUpdatedError(member_id)

    plan = TransitionPlan(
        event=f"member_{new_status.value}",
        writes=[
            Write(
                "members",
                WriteOp.UPDATE,
                WriteLabel.MEMBER_STATUS,
                {"status": new_status.value},
                filter={"id": member_id, "status": Ne(new_status.value)},
                abort_if_noop=True,
            )
        ],
        noop_error=MemberNotUpdatedError(member_id),
    )

    if new_status != MemberStatus.ACTIVE:
        return plan

    email = member_email(member, supplied_email)
    if supplied_email and member.email and supplied_email != member.email:
        plan.warnings.append(
            f"Ignored supplied email {supplied_email}; member record belongs to {member.email}"
        )

    if not email:
        plan.warnings.append("Member has no email; role not updated")
    elif user is None:
        plan.warnings.append(f"No user with email {email}; role not updated")
    else:
        write = _member_write(email, user, {}, plan.warnings)
        if write is not None:
            plan.writes.append(write)
    return plan
