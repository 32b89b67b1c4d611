"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The container owns the process-scoped document store
handle: it is opened when the application starts and closed on
shutdown, and every repository is built on top of it.
"""

from typing import TYPE_CHECKING, Optional

from shared.database import open_document_store
from shared.store import DocumentStore

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.agreements.interfaces import IAgreementService
    from modules.announcements.service import AnnouncementService
    from modules.apartments.service import ApartmentService
    from modules.auth.interfaces import IIdentityVerifier
    from modules.billing.interfaces import IPaymentGateway
    from modules.coupons.service import CouponService
    from modules.lifecycle.interfaces import ILifecycleService
    from modules.members.service import MemberService
    from modules.payments.service import PaymentService
    from modules.users.interfaces import IUserService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. The store handle is opened explicitly with
    open(), or lazily the first time a service needs it.
    """

    def __init__(self, store: Optional[DocumentStore] = None) -> None:
        self._store = store
        self._services: dict[str, object] = {}

    def open(self) -> DocumentStore:
        """Open the document store handle if it isn't open yet."""
        if self._store is None:
            self._store = open_document_store()
        return self._store

    def close(self) -> None:
        """Close the store handle and drop every cached service."""
        if self._store is not None:
            self._store.close()
        self._store = None
        self._services.clear()

    @property
    def store(self) -> DocumentStore:
        return self.open()

    def _cached(self, name: str, factory):
        if name not in self._services:
            self._services[name] = factory()
        return self._services[name]

    # Repositories

    @property
    def user_repository(self):
        from modules.users.repository import UserRepository
        return self._cached("user_repository", lambda: UserRepository(self.store))

    @property
    def agreement_repository(self):
        from modules.agreements.repository import AgreementRepository
        return self._cached("agreement_repository", lambda: AgreementRepository(self.store))

    @property
    def member_repository(self):
        from modules.members.repository import MemberRepository
        return self._cached("member_repository", lambda: MemberRepository(self.store))

    @property
    def payment_repository(self):
        from modules.payments.repository import PaymentRepository
        return self._cached("payment_repository", lambda: PaymentRepository(self.store))

    # Services

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        from modules.users.service import UserService
        return self._cached("users", lambda: UserService(self.user_repository))

    @property
    def agreements(self) -> "IAgreementService":
        """Get the agreement service instance."""
        from modules.agreements.service import AgreementService
        return self._cached("agreements", lambda: AgreementService(self.agreement_repository))

    @property
    def lifecycle(self) -> "ILifecycleService":
        """Get the lifecycle service instance."""
        from modules.lifecycle.service import LifecycleService
        return self._cached(
            "lifecycle",
            lambda: LifecycleService(
                store=self.store,
                agreements=self.agreement_repository,
                users=self.user_repository,
                members=self.member_repository,
            ),
        )

    @property
    def members(self) -> "MemberService":
        """Get the member service instance."""
        from modules.members.service import MemberService
        return self._cached("members", lambda: MemberService(self.member_repository))

    @property
    def payments(self) -> "PaymentService":
        """Get the payment service instance."""
        from modules.payments.service import PaymentService
        return self._cached(
            "payments",
            lambda: PaymentService(
                repository=self.payment_repository,
                lifecycle=self.lifecycle,
                gateway=self.gateway,
            ),
        )

    @property
    def apartments(self) -> "ApartmentService":
        from modules.apartments.service import ApartmentRepository, ApartmentService
        return self._cached("apartments", lambda: ApartmentService(ApartmentRepository(self.store)))

    @property
    def coupons(self) -> "CouponService":
        from modules.coupons.service import CouponRepository, CouponService
        return self._cached("coupons", lambda: CouponService(CouponRepository(self.store)))

    @property
    def announcements(self) -> "AnnouncementService":
        from modules.announcements.service import AnnouncementRepository, AnnouncementService
        return self._cached(
            "announcements",
            lambda: AnnouncementService(AnnouncementRepository(self.store)),
        )

    @property
    def gateway(self) -> "IPaymentGateway":
        """Get the payment gateway instance."""
        from modules.billing.service import get_payment_gateway
        return get_payment_gateway()

    @property
    def identity(self) -> "IIdentityVerifier":
        """Get the identity verifier instance."""
        from modules.auth.service import get_identity_verifier
        return get_identity_verifier()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    Closes the current container's store handle, so the next call to
    get_container() creates a fresh container. Used on shutdown and in tests.
    """
    global _container
    if _container is not None:
        _container.close()
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_document_store() -> DocumentStore:
    """FastAPI dependency for the document store handle."""
    return get_container().store


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_agreement_service() -> "IAgreementService":
    """FastAPI dependency for agreement service."""
    return get_container().agreements


def get_lifecycle_service() -> "ILifecycleService":
    """FastAPI dependency for lifecycle service."""
    return get_container().lifecycle


def get_member_service() -> "MemberService":
    """FastAPI dependency for member service."""
    return get_container().members


def get_payment_service() -> "PaymentService":
    """FastAPI dependency for payment service."""
    return get_container().payments


def get_apartment_service() -> "ApartmentService":
    return get_container().apartments


def get_coupon_service() -> "CouponService":
    return get_container().coupons


def get_announcement_service() -> "AnnouncementService":
    return get_container().announcements


def get_identity_verifier() -> "IIdentityVerifier":
    """FastAPI dependency for the bearer token verifier."""
    return get_container().identity
