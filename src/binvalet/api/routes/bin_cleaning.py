"""Bin cleaning appointment endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ...persistence.memory import MemStorage
from ...schemas.cleaning import BinCleaningCreate, BinCleaningModel, BinCleaningUpdate, check_time_window
from ..dependencies import get_storage

router = APIRouter(prefix="/bin-cleaning", tags=["bin-cleaning"])


def _not_found(appointment_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Appointment {appointment_id} not found")


@router.get("", response_model=List[BinCleaningModel], status_code=status.HTTP_200_OK)
def list_appointments(storage: MemStorage = Depends(get_storage)) -> List[BinCleaningModel]:
    return [BinCleaningModel.model_validate(item) for item in storage.list_bin_cleaning_appointments()]


@router.get("/{appointment_id}", response_model=BinCleaningModel, status_code=status.HTTP_200_OK)
def get_appointment(appointment_id: int, storage: MemStorage = Depends(get_storage)) -> BinCleaningModel:
    appointment = storage.get_bin_cleaning_appointment(appointment_id)
    if appointment is None:
        raise _not_found(appointment_id)
    return BinCleaningModel.model_validate(appointment)


@router.post("", response_model=BinCleaningModel, status_code=status.HTTP_201_CREATED)
def create_appointment(payload: BinCleaningCreate, storage: MemStorage = Depends(get_storage)) -> BinCleaningModel:
    return BinCleaningModel.model_validate(storage.create_bin_cleaning_appointment(payload.model_dump()))


@router.put("/{appointment_id}", response_model=BinCleaningModel, status_code=status.HTTP_200_OK)
def update_appointment(
    appointment_id: int,
    payload: BinCleaningUpdate,
    storage: MemStorage = Depends(get_storage),
) -> BinCleaningModel:
    current = storage.get_bin_cleaning_appointment(appointment_id)
    if current is None:
        raise _not_found(appointment_id)
    changes = payload.model_dump(exclude_unset=True)
    try:
        check_time_window(changes.get("start_time", current.start_time), changes.get("end_time", current.end_time))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    appointment = storage.update_bin_cleaning_appointment(appointment_id, changes)
    return BinCleaningModel.model_validate(appointment)


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_appointment(appointment_id: int, storage: MemStorage = Depends(get_storage)) -> Response:
    if not storage.delete_bin_cleaning_appointment(appointment_id):
        raise _not_found(appointment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
