from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from expo_portal.core.actor import Actor, actor_for
from expo_portal.core.deps import get_db
from expo_portal.core.errors import AuthenticationFailed
from expo_portal.core.security import decode_access_token
from expo_portal.models.user import User

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    payload = decode_access_token(token)

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise AuthenticationFailed("Invalid token")

    user = db.get(User, user_id)
    if user is None:
        raise AuthenticationFailed("User no longer exists")
    return user


def get_current_actor(current_user: User = Depends(get_current_user)) -> Actor:
    return actor_for(current_user)
