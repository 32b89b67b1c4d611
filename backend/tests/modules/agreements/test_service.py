"""Tests for the agreement query service."""

import pytest

from modules.agreements.exceptions import AgreementNotFoundError
from modules.agreements.repository import AgreementRepository
from modules.agreements.service import AgreementService
from shared.exceptions import ValidationError
from shared.store import InvalidIdentifierError


@pytest.fixture
def service(store) -> AgreementService:
    return AgreementService(AgreementRepository(store))


def seed(store, email, created_at, status="pending", apartment_no="A-101"):
    return store.seed(
        "agreements",
        user_email=email,
        apartment_no=apartment_no,
        status=status,
        created_at=created_at,
    )


class TestAgreementQueries:
    @pytest.mark.asyncio
    async def test_list_for_email_latest_first(self, service, store):
        seed(store, "a@example.com", "2024-01-01T00:00:00+00:00", apartment_no="1")
        seed(store, "a@example.com", "2024-03-01T00:00:00+00:00", apartment_no="2")
        seed(store, "b@example.com", "2024-02-01T00:00:00+00:00")

        agreements = await service.list_for_email("a@example.com")

        assert [a.apartment_no for a in agreements] == ["2", "1"]

    @pytest.mark.asyncio
    async def test_list_for_email_requires_email(self, service):
        with pytest.raises(ValidationError) as exc_info:
            await service.list_for_email(None)
        assert exc_info.value.message == "Email query parameter is required"

    @pytest.mark.asyncio
    async def test_list_pending(self, service, store):
        seed(store, "a@example.com", "2024-01-01T00:00:00+00:00")
        seed(store, "b@example.com", "2024-01-02T00:00:00+00:00", status="paid")
        pending = await service.list_pending()
        assert [a.user_email for a in pending] == ["a@example.com"]

    @pytest.mark.asyncio
    async def test_list_all(self, service, store):
        seed(store, "a@example.com", "2024-01-01T00:00:00+00:00")
        seed(store, "b@example.com", "2024-01-02T00:00:00+00:00", status="checked")
        assert [a.user_email for a in await service.list_all()] == ["b@example.com", "a@example.com"]

    @pytest.mark.asyncio
    async def test_get(self, service, store):
        agreement_id = seed(store, "a@example.com", "2024-01-01T00:00:00+00:00")
        assert (await service.get(agreement_id)).id == agreement_id

    @pytest.mark.asyncio
    async def test_get_missing(self, service):
        with pytest.raises(AgreementNotFoundError):
            await service.get("44444444-4444-4444-4444-444444444444")

    @pytest.mark.asyncio
    async def test_get_malformed_id(self, service):
        with pytest.raises(InvalidIdentifierError):
            await service.get("42")


class TestDeleteAgreement:
    @pytest.mark.asyncio
    async def test_delete(self, service, store):
        agreement_id = seed(store, "a@example.com", "2024-01-01T00:00:00+00:00")
        await service.delete(agreement_id)
        assert store.all("agreements") == []

    @pytest.mark.asyncio
    async def test_delete_missing(self, service):
        with pytest.raises(AgreementNotFoundError) as exc_info:
            await service.delete("44444444-4444-4444-4444-444444444444")
        assert exc_info.value.status_code == 404
