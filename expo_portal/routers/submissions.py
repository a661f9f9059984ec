from typing import Literal, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from expo_portal.core.actor import Actor, AdminActor, StudentActor
from expo_portal.core.choices import SortDirection, SubmissionStatus
from expo_portal.core.config import SORTABLE_SUBMISSION_FIELDS
from expo_portal.core.current_user import get_current_actor
from expo_portal.core.deps import get_db
from expo_portal.core.permissions import require_admin, require_student
from expo_portal.models.submission import Submission
from expo_portal.schemas.submission import (
    SubmissionAdminRead,
    SubmissionFields,
    SubmissionListing,
    SubmissionRead,
    SubmissionReview,
    SubmissionStats,
)
from expo_portal.services import submissions as submission_service
from expo_portal.services.listing import (
    ListingCriteria,
    check_sort_field,
    filter_and_sort,
    next_sort_directions,
)
from expo_portal.services.storage import DocumentStorage, get_storage

router = APIRouter()
admin_router = APIRouter()

ADMIN_SEARCH_FIELDS = ("project_name", "course", "lecturer", "owner_full_name")


def to_submission_read(sub: Submission, viewer: Actor) -> SubmissionRead:
    owner_view = isinstance(viewer, StudentActor) and sub.user_id == viewer.id
    editable = owner_view and submission_service.is_editable(sub)
    read = SubmissionRead.model_validate(sub)
    return read.model_copy(update={"can_edit": editable, "can_delete": editable})


def to_admin_read(sub: Submission) -> SubmissionAdminRead:
    read = SubmissionRead.model_validate(sub)
    return SubmissionAdminRead(
        **read.model_dump(),
        owner_full_name=sub.owner.full_name or sub.owner.username,
        owner_username=sub.owner.username,
    )


def submission_form(
    project_name: str = Form(...),
    class_name: str = Form(...),
    group_class: str = Form(...),
    course: str = Form(...),
    lecturer: str = Form(...),
    program_study: str = Form(...),
    grade: Optional[str] = Form(None),
) -> SubmissionFields:
    try:
        return SubmissionFields(
            project_name=project_name,
            class_name=class_name,
            group_class=group_class,
            course=course,
            lecturer=lecturer,
            program_study=program_study,
            grade=grade or None,
        )
    except ValidationError as exc:
        raise RequestValidationError(exc.errors())


def _store_document(
    storage: DocumentStorage,
    student: StudentActor,
    document: Optional[UploadFile],
) -> Optional[str]:
    if document is None or not document.filename:
        return None
    # one byte past the cap is enough for save() to reject it
    content = document.file.read(storage.max_bytes + 1)
    return storage.save(student.id, document.filename, content)


@router.get("/submissions/me", response_model=list[SubmissionRead])
def my_submissions(
    db: Session = Depends(get_db),
    student: StudentActor = Depends(require_student),
):
    subs = submission_service.list_own_submissions(db, student)
    return [to_submission_read(s, student) for s in subs]


@router.post(
    "/submissions",
    response_model=SubmissionRead,
    status_code=status.HTTP_201_CREATED,
)
def create_submission(
    fields: SubmissionFields = Depends(submission_form),
    document: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: DocumentStorage = Depends(get_storage),
    student: StudentActor = Depends(require_student),
):
    document_url = _store_document(storage, student, document)
    sub = submission_service.create_submission(db, student, fields, document_url)
    return to_submission_read(sub, student)


@router.get("/submissions/{submission_id}", response_model=SubmissionRead)
def get_submission(
    submission_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
):
    sub = submission_service.get_submission(db, actor, submission_id)
    return to_submission_read(sub, actor)


@router.patch("/submissions/{submission_id}", response_model=SubmissionRead)
def update_submission(
    submission_id: int,
    fields: SubmissionFields = Depends(submission_form),
    document: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: DocumentStorage = Depends(get_storage),
    student: StudentActor = Depends(require_student),
):
    # check ownership and state before writing any file
    submission_service.ensure_owner_can_change(db, student, submission_id, "edit")

    document_url = _store_document(storage, student, document)
    sub = submission_service.update_submission(db, student, submission_id, fields, document_url)
    return to_submission_read(sub, student)


@router.delete("/submissions/{submission_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_submission(
    submission_id: int,
    db: Session = Depends(get_db),
    storage: DocumentStorage = Depends(get_storage),
    student: StudentActor = Depends(require_student),
):
    document_url = submission_service.delete_submission(db, student, submission_id)
    storage.delete(document_url)


@admin_router.get("/submissions", response_model=SubmissionListing)
def review_queue(
    search: str = "",
    status_filter: Literal["all", "pending", "approved", "rejected"] = Query("all", alias="status"),
    program: str = "all",
    sort: Optional[str] = None,
    direction: SortDirection = SortDirection.ASC,
    db: Session = Depends(get_db),
    admin: AdminActor = Depends(require_admin),
):
    check_sort_field(sort, SORTABLE_SUBMISSION_FIELDS)

    records = [
        to_admin_read(s).model_dump(mode="json")
        for s in submission_service.list_all_submissions(db, admin)
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
        search_fields=ADMIN_SEARCH_FIELDS,
        category_field="program_study",
    )

    return {
        "items": items,
        "total": len(items),
        "sort_field": sort,
        "sort_direction": direction.value,
        "next_sort": next_sort_directions(sort, direction.value, SORTABLE_SUBMISSION_FIELDS),
    }


@admin_router.get("/submissions/stats", response_model=SubmissionStats)
def review_stats(
    db: Session = Depends(get_db),
    admin: AdminActor = Depends(require_admin),
):
    return submission_service.submission_stats(db, admin)


def _review(
    db: Session,
    admin: AdminActor,
    submission_id: int,
    decision: SubmissionStatus,
    payload: Optional[SubmissionReview],
):
    notes = payload.notes if payload else None
    sub = submission_service.review_submission(db, admin, submission_id, decision, notes)
    return to_admin_read(sub)


@admin_router.post("/submissions/{submission_id}/approve", response_model=SubmissionAdminRead)
def approve_submission(
    submission_id: int,
    payload: Optional[SubmissionReview] = None,
    db: Session = Depends(get_db),
    admin: AdminActor = Depends(require_admin),
):
    return _review(db, admin, submission_id, SubmissionStatus.APPROVED, payload)


@admin_router.post("/submissions/{submission_id}/reject", response_model=SubmissionAdminRead)
def reject_submission(
    submission_id: int,
    payload: Optional[SubmissionReview] = None,
    db: Session = Depends(get_db),
    admin: AdminActor = Depends(require_admin),
):
    return _review(db, admin, submission_id, SubmissionStatus.REJECTED, payload)
