from typing import Union

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from expo_portal.core.actor import Actor, AdminActor
from expo_portal.core.current_user import get_current_actor
from expo_portal.core.deps import get_db
from expo_portal.routers.submissions import to_admin_read, to_submission_read
from expo_portal.schemas.dashboard import AdminDashboard, StudentDashboard
from expo_portal.schemas.user import UserRead
from expo_portal.services import submissions as submission_service

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=Union[AdminDashboard, StudentDashboard])
def dashboard(
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
):
    profile = UserRead.model_validate(actor.profile)

    if isinstance(actor, AdminActor):
        return AdminDashboard(
            profile=profile,
            stats=submission_service.submission_stats(db, actor),
            submissions=[to_admin_read(s) for s in submission_service.list_all_submissions(db, actor)],
        )

    return StudentDashboard(
        profile=profile,
        submissions=[to_submission_read(s, actor) for s in submission_service.list_own_submissions(db, actor)],
    )
