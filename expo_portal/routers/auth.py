from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from expo_portal.core.current_user import get_current_user
from expo_portal.core.deps import get_db
from expo_portal.models.user import User
from expo_portal.schemas.auth import LoginRequest
from expo_portal.schemas.token import Token
from expo_portal.schemas.user import UserCreate, UserRead
from expo_portal.services import auth as auth_service

router = APIRouter()


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"description": "Email or username already registered"},
        422: {"description": "Invalid form, e.g. passwords do not match"},
    },
)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    return auth_service.sign_up(db, payload)


@router.post(
    "/login",
    response_model=Token,
    responses={
        401: {"description": "Invalid email or password"},
    },
)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    access_token = auth_service.sign_in(db, payload.email, payload.password)
    return {
        "access_token": access_token,
        "token_type": "bearer",
    }


@router.get("/me", response_model=UserRead)
def me(current_user: User = Depends(get_current_user)):
    return current_user
