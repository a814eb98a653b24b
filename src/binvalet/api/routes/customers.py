"""Customer endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ...persistence.memory import MemStorage
from ...schemas.customers import CustomerCreate, CustomerModel, CustomerUpdate
from ..dependencies import get_storage

router = APIRouter(prefix="/customers", tags=["customers"])


def _not_found(customer_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Customer {customer_id} not found")


@router.get("", response_model=List[CustomerModel], status_code=status.HTTP_200_OK)
def list_customers(storage: MemStorage = Depends(get_storage)) -> List[CustomerModel]:
    return [CustomerModel.model_validate(customer) for customer in storage.list_customers()]


@router.get("/{customer_id}", response_model=CustomerModel, status_code=status.HTTP_200_OK)
def get_customer(customer_id: int, storage: MemStorage = Depends(get_storage)) -> CustomerModel:
    customer = storage.get_customer(customer_id)
    if customer is None:
        raise _not_found(customer_id)
    return CustomerModel.model_validate(customer)


@router.post("", response_model=CustomerModel, status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerCreate, storage: MemStorage = Depends(get_storage)) -> CustomerModel:
    return CustomerModel.model_validate(storage.create_customer(payload.model_dump()))


@router.put("/{customer_id}", response_model=CustomerModel, status_code=status.HTTP_200_OK)
def update_customer(
    customer_id: int,
    payload: CustomerUpdate,
    storage: MemStorage = Depends(get_storage),
) -> CustomerModel:
    customer = storage.update_customer(customer_id, payload.model_dump(exclude_unset=True))
    if customer is None:
        raise _not_found(customer_id)
    return CustomerModel.model_validate(customer)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: int, storage: MemStorage = Depends(get_storage)) -> Response:
    if not storage.delete_customer(customer_id):
        raise _not_found(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
