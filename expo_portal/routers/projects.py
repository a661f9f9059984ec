from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from expo_portal.core.actor import AdminActor
from expo_portal.core.choices import SortDirection
from expo_portal.core.config import SORTABLE_PROJECT_FIELDS, STUDY_PROGRAMS
from expo_portal.core.deps import get_db
from expo_portal.core.permissions import require_admin
from expo_portal.models.project import Project
from expo_portal.schemas.project import ProjectCreate, ProjectListing, ProjectRead
from expo_portal.services.listing import (
    ListingCriteria,
    check_sort_field,
    filter_and_sort,
    next_sort_directions,
)

router = APIRouter()

PROJECT_SEARCH_FIELDS = ("project_name", "group_name", "course_name", "lecturer", "members")
DEFAULT_SORT_FIELD = "project_name"


@router.get("", response_model=ProjectListing)
def list_projects(
    search: str = "",
    status_filter: Literal["all", "pending", "approved", "rejected"] = Query("all", alias="status"),
    program: str = "all",
    sort: Optional[str] = DEFAULT_SORT_FIELD,
    direction: SortDirection = SortDirection.ASC,
    db: Session = Depends(get_db),
):
    check_sort_field(sort, SORTABLE_PROJECT_FIELDS)

    records = [
        ProjectRead.model_validate(p)
        for p in db.query(Project).order_by(Project.id.asc()).all()
    ]
    criteria = ListingCriteria(
        search_term=search,
        status_filter=status_filter,
        category_filter=program,
        sort_field=sort,
        sort_direction=direction.value,
    )
    items = filter_and_sort(
        records,
        criteria,
        search_fields=PROJECT_SEARCH_FIELDS,
        category_field="program",
    )

    return {
        "items": items,
        "total": len(items),
        "sort_field": sort,
        "sort_direction": direction.value,
        "next_sort": next_sort_directions(sort, direction.value, SORTABLE_PROJECT_FIELDS),
    }


@router.get("/programs", response_model=list[str])
def list_programs():
    return STUDY_PROGRAMS


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def register_project(
    payload: ProjectCreate,
    db: Session = Depends(get_db),
    admin: AdminActor = Depends(require_admin),
):
    project = Project(**payload.model_dump())
    db.add(project)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(project)
    return project
