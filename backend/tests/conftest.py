"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.agreements.repository import AgreementRepository
from modules.auth.service import JWTIdentityVerifier, reset_identity_verifier
from modules.billing.service import reset_payment_gateway
from modules.lifecycle.service import LifecycleService
from modules.members.repository import MemberRepository
from modules.users.repository import UserRepository
from shared.config import Settings, get_settings
from shared.database import reset_client_cache

from tests.fakes import InMemoryDocumentStore


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
    secret: str = TEST_JWT_SECRET,
    audience: str = "authenticated",
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: Subject to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified
        secret: Signing secret
        audience: Audience claim

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": audience,
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, clients and services around each test."""
    get_settings.cache_clear()
    reset_identity_verifier()
    reset_payment_gateway()
    reset_container()
    reset_client_cache()
    yield
    get_settings.cache_clear()
    reset_identity_verifier()
    reset_payment_gateway()
    reset_container()
    reset_client_cache()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known JWT secret and no external services."""
    return Settings(jwt_secret=TEST_JWT_SECRET, stripe_secret_key="sk_test_123")


@pytest.fixture
def verifier(test_settings: Settings) -> JWTIdentityVerifier:
    return JWTIdentityVerifier(test_settings)


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def lifecycle(store: InMemoryDocumentStore) -> LifecycleService:
    """Lifecycle service over the in-memory store with a fixed clock."""
    return LifecycleService(
        store=store,
        agreements=AgreementRepository(store),
        users=UserRepository(store),
        members=MemberRepository(store),
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def payment_gateway():
    """Gateway double that never reaches Stripe."""
    from unittest.mock import AsyncMock
    from modules.billing.models import PaymentIntentSecret

    gateway = AsyncMock()
    gateway.create_payment_intent.return_value = PaymentIntentSecret(
        intent_id="pi_test", client_secret="pi_test_secret_xyz", amount=1500, currency="usd"
    )
    gateway.get_payment_status.return_value = "succeeded"
    return gateway


@pytest.fixture
def app(store, verifier, payment_gateway, test_settings):
    """
    Fresh app whose services run over the in-memory store.

    The lifespan is not run, so no Supabase client is ever created.
    """
    from api import dependencies
    from api.app import create_app
    from modules.payments.service import PaymentService

    application = create_app()
    container = dependencies.ServiceContainer(store=store)
    payments = PaymentService(
        repository=container.payment_repository,
        lifecycle=container.lifecycle,
        gateway=payment_gateway,
        settings=test_settings,
    )

    application.dependency_overrides.update({
        dependencies.get_document_store: lambda: store,
        dependencies.get_user_service: lambda: container.users,
        dependencies.get_agreement_service: lambda: container.agreements,
        dependencies.get_lifecycle_service: lambda: container.lifecycle,
        dependencies.get_member_service: lambda: container.members,
        dependencies.get_payment_service: lambda: payments,
        dependencies.get_apartment_service: lambda: container.apartments,
        dependencies.get_coupon_service: lambda: container.coupons,
        dependencies.get_announcement_service: lambda: container.announcements,
        dependencies.get_identity_verifier: lambda: verifier,
    })
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app)
