# app/routers/barbers_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app import repository
from app.db import get_session
from app.deps import get_admin
from app.errors import NotFoundError
from app.schemas import BarberCreate, BarberPublic, BarberUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/barbers",
    tags=["barbers"],
)


@router.get("", response_model=List[BarberPublic])
def list_barbers(
    active_only: bool = True,
    session: Session = Depends(get_session),
):
    return repository.list_barbers(session, active_only=active_only)


@router.post("", response_model=BarberPublic, status_code=201)
def create_barber(
    barber: BarberCreate,
    session: Session = Depends(get_session),
    admin: dict = Depends(get_admin),
):
    db_barber = repository.create_barber(session, name=barber.name, active=barber.active)
    logger.info("Admin %s added barber %s (%s)", admin["email"], db_barber.id, db_barber.name)
    return db_barber


@router.patch("/{barber_id}", response_model=BarberPublic)
def update_barber(
    barber_id: int,
    changes: BarberUpdate,
    session: Session = Depends(get_session),
    admin: dict = Depends(get_admin),
):
    db_barber = repository.get_barber(session, barber_id)
    if db_barber is None:
        raise NotFoundError("Barber not found")

    # existing appointments stay valid when a barber is deactivated
    db_barber = repository.update_barber(
        session, db_barber, name=changes.name, active=changes.active,
    )
    logger.info(
        "Admin %s updated barber %s (active=%s)",
        admin["email"], db_barber.id, db_barber.active,
    )
    return db_barber
