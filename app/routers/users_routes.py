# app/routers/users_routes.py

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.db import get_session
from app.models import User
from app.schemas import UserCreate, UserPublic, UserRole
from app.auth import get_current_user, hash_password

router = APIRouter(
    tags=["users"],
)


@router.get("/me", response_model=UserPublic)
def me(current_user: dict = Depends(get_current_user)):
    return current_user


@router.post("/users", status_code=201, response_model=UserPublic)
def register_customer(
    user: UserCreate,
    session: Session = Depends(get_session),
):
    email = user.email.strip().lower()

    # 1) Check if email already exists
    existing = session.exec(
        select(User).where(User.email == email)
    ).first()
    if existing is not None:
        raise HTTPException(status_code=409, detail="Email already registered")

    # 2) Self-registration only ever creates customers
    db_user = User(
        email=email,
        name=user.name,
        password_hash=hash_password(user.password),
        role=UserRole.customer.value,
    )

    session.add(db_user)
    try:
        session.commit()
    except IntegrityError:
        # a concurrent sign-up won the unique email index
        session.rollback()
        raise HTTPException(status_code=409, detail="Email already registered")
    session.refresh(db_user)  # fills db_user.id

    return db_user
