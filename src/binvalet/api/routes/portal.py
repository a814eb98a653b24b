"""Customer self-service portal endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...persistence.memory import MemStorage
from ...schemas.cleaning import BinCleaningModel
from ...schemas.customers import CustomerModel, PlanId
from ...schemas.messages import MessageModel
from ...schemas.portal import (
    MemberDashboardResponse,
    MemberMessageRequest,
    PaymentReceiptModel,
    PlanModel,
    SignupRequest,
    UpgradeQuoteModel,
    UpgradeRequest,
    UpgradeResponse,
)
from ...services.errors import NotFoundError, PaymentDeclinedError
from ...services.portal import (
    Plan,
    list_plans,
    member_dashboard,
    send_member_message,
    signup,
    upgrade_customer,
    upgrade_quote,
)
from ..dependencies import get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/portal", tags=["portal"])


def _plan_model(plan: Plan) -> PlanModel:
    return PlanModel(
        id=plan.id,
        name=plan.name,
        monthly_price=plan.monthly_price,
        yearly_price=plan.yearly_price,
        features=list(plan.features),
        popular=plan.popular,
    )


def _customer_or_404(storage: MemStorage, customer_id: int):
    customer = storage.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Customer {customer_id} not found")
    return customer


@router.get("/plans", response_model=List[PlanModel], status_code=status.HTTP_200_OK)
def get_plans() -> List[PlanModel]:
    return [_plan_model(plan) for plan in list_plans()]


@router.post("/signup", response_model=CustomerModel, status_code=status.HTTP_201_CREATED)
def portal_signup(payload: SignupRequest, storage: MemStorage = Depends(get_storage)) -> CustomerModel:
    try:
        return CustomerModel.model_validate(signup(storage, payload))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/members/{customer_id}", response_model=MemberDashboardResponse, status_code=status.HTTP_200_OK)
def get_member_dashboard(customer_id: int, storage: MemStorage = Depends(get_storage)) -> MemberDashboardResponse:
    try:
        view = member_dashboard(storage, customer_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MemberDashboardResponse(
        customer=CustomerModel.model_validate(view.customer),
        plan=_plan_model(view.plan),
        messages=[MessageModel.model_validate(message) for message in view.messages],
        appointments=[BinCleaningModel.model_validate(item) for item in view.appointments],
    )


@router.post("/members/{customer_id}/messages", response_model=MessageModel, status_code=status.HTTP_201_CREATED)
def post_member_message(
    customer_id: int,
    payload: MemberMessageRequest,
    storage: MemStorage = Depends(get_storage),
) -> MessageModel:
    try:
        return MessageModel.model_validate(send_member_message(storage, customer_id, payload.message))
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("/members/{customer_id}/upgrade-quote", response_model=UpgradeQuoteModel, status_code=status.HTTP_200_OK)
def get_upgrade_quote(
    customer_id: int,
    target_plan: PlanId = Query(default="ultimate"),
    storage: MemStorage = Depends(get_storage),
) -> UpgradeQuoteModel:
    customer = _customer_or_404(storage, customer_id)
    try:
        quote = upgrade_quote(customer, target_plan)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return UpgradeQuoteModel.model_validate(quote, from_attributes=True)


@router.post("/members/{customer_id}/upgrade", response_model=UpgradeResponse, status_code=status.HTTP_200_OK)
def upgrade(customer_id: int, payload: UpgradeRequest, storage: MemStorage = Depends(get_storage)) -> UpgradeResponse:
    try:
        customer, quote, receipt = upgrade_customer(storage, customer_id, payload)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except PaymentDeclinedError as exc:
        raise HTTPException(status_code=status.HTTP_402_PAYMENT_REQUIRED, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error upgrading customer %s: %s", customer_id, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to upgrade customer: {exc}",
        ) from exc
    return UpgradeResponse(
        customer=CustomerModel.model_validate(customer),
        quote=UpgradeQuoteModel.model_validate(quote, from_attributes=True),
        receipt=PaymentReceiptModel.model_validate(receipt, from_attributes=True),
    )
