"""
Lifecycle data models.

A TransitionPlan is the ordered list of writes a single lifecycle event
produces from a snapshot of the affected documents. Plans are built by
the pure functions in transitions.py and applied by LifecycleService.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from shared.exceptions import BmsHubError
from shared.store import Filter


class WriteOp(str, Enum):
    INSERT = "insert"
    UPDATE = "update"


class WriteLabel(str, Enum):
    """What a write does, so results can report on it."""

    AGREEMENT_CREATE = "agreement_create"
    AGREEMENT_STATUS = "agreement_status"
    USER_ROLE = "user_role"
    USER_PROFILE = "user_profile"
    PAYMENT_RECORD = "payment_record"
    MEMBER_STATUS = "member_status"


@dataclass(frozen=True)
class Write:
    """
    A single-document write.

    Attributes:
        collection: Target collection name
        op: Insert or update
        label: What the write does
        data: Document to insert, or patch to apply
        filter: Update filter (ignored for inserts)
        abort_if_noop: Stop the plan if the update modifies nothing
        undo: Write that reverses this one if a later step fails
    """

    collection: str
    op: WriteOp
    label: WriteLabel
    data: dict[str, Any]
    filter: Filter = field(default_factory=dict)
    abort_if_noop: bool = False
    undo: Optional["Write"] = None


@dataclass
class TransitionPlan:
    """Writes for one lifecycle event, applied in order."""

    event: str
    writes: list[Write] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    # Raised when a write marked abort_if_noop modifies nothing
    noop_error: Optional[BmsHubError] = None


class TransitionResult(BaseModel):
    """Outcome of an applied transition, returned to the caller."""

    success: bool = True
    message: Optional[str] = None
    modified_count: int = Field(0, description="Documents changed by the primary write")
    role_updated: bool = Field(False, description="Whether a user role was written")
    inserted_id: Optional[str] = None
    warnings: list[str] = Field(default_factory=list)
