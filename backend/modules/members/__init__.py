"""
Members module.

Membership applications; activation is a lifecycle transition.
"""

from .models import Member, MemberStatus, CreateMemberRequest, UpdateMemberStatusRequest

__all__ = ["Member", "MemberStatus", "CreateMemberRequest", "UpdateMemberStatusRequest"]
