from fastapi import Depends

from expo_portal.core.actor import Actor, AdminActor, StudentActor
from expo_portal.core.current_user import get_current_actor
from expo_portal.core.errors import PermissionDenied


def require_admin(actor: Actor = Depends(get_current_actor)) -> AdminActor:
    if not isinstance(actor, AdminActor):
        raise PermissionDenied("Admin role required")
    return actor


def require_student(actor: Actor = Depends(get_current_actor)) -> StudentActor:
    if not isinstance(actor, StudentActor):
        raise PermissionDenied("Student role required")
    return actor
