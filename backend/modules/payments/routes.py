"""
Payment API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_payment_service
from api.middleware.auth import get_current_user
from modules.billing.models import CreatePaymentIntentRequest, CreatePaymentIntentResponse
from shared.models import AuthenticatedUser, ListResponse

from .models import Payment, RecordPaymentRequest, RecordPaymentResponse
from .service import PaymentService

router = APIRouter()


@router.get("/payments", response_model=ListResponse[Payment])
async def payment_history(
    email: Optional[str] = Query(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service),
) -> ListResponse[Payment]:
    """
    Get the caller's payment history, newest first.

    Requires authentication; ``email`` must be the caller's own.
    """
    return ListResponse[Payment].of(await service.history(email, user))


@router.post("/payments", response_model=RecordPaymentResponse)
async def record_payment(
    request: RecordPaymentRequest,
    service: PaymentService = Depends(get_payment_service),
) -> RecordPaymentResponse:
    """
    Record a payment and mark its agreement as paid.

    Fails with 404 if the agreement doesn't exist or is already paid;
    no payment is recorded in that case.
    """
    result = await service.record_payment(request)
    return RecordPaymentResponse(message=result.message, payment_id=result.inserted_id)


@router.post("/create-payment-intent", response_model=CreatePaymentIntentResponse)
async def create_payment_intent(
    request: CreatePaymentIntentRequest,
    service: PaymentService = Depends(get_payment_service),
) -> CreatePaymentIntentResponse:
    """Create a card PaymentIntent and return its client secret."""
    intent = await service.create_payment_intent(request.amount)
    return CreatePaymentIntentResponse(client_secret=intent.client_secret)
