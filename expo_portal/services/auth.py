"""Email/password sign-up and sign-in against the profile store."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from expo_portal.core.choices import Role
from expo_portal.core.errors import AuthenticationFailed, Conflict
from expo_portal.core.security import create_access_token, hash_password, verify_password
from expo_portal.models.user import User
from expo_portal.schemas.user import UserCreate

logger = logging.getLogger(__name__)


def sign_up(db: Session, payload: UserCreate, role: Role = Role.STUDENT) -> User:
    if db.query(User).filter(User.email == payload.email).first():
        raise Conflict("Email already registered")
    if db.query(User).filter(User.username == payload.username).first():
        raise Conflict("Username already taken")

    user = User(
        email=payload.email,
        username=payload.username,
        full_name=payload.full_name,
        study_program=payload.study_program,
        hashed_password=hash_password(payload.password),
        role=role.value,
    )
    db.add(user)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Email or username already registered")

    db.refresh(user)
    logger.info("Registered %s account %s", user.role, user.id)
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.hashed_password):
        logger.warning("Failed sign-in for %s", email)
        raise AuthenticationFailed("Invalid email or password")
    return user


def sign_in(db: Session, email: str, password: str) -> str:
    user = authenticate(db, email, password)
    return create_access_token(data={"sub": str(user.id), "role": user.role})
