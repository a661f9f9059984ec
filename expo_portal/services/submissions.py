"""Data-access boundary for student project submissions.

Every operation takes the acting ``Actor`` explicitly and enforces:
- Only students create submissions; the owner is always the acting student.
- Owners may edit or delete only while the submission is pending.
- Only admins review, and only pending -> approved | rejected.
- Owner and creation time never change after insert.
"""
import logging
from typing import Optional

from sqlalchemy import case, func
from sqlalchemy.orm import Session, joinedload

from expo_portal.core.actor import Actor, AdminActor, StudentActor
from expo_portal.core.choices import SubmissionStatus
from expo_portal.core.errors import InvalidTransition, NotFound, PermissionDenied
from expo_portal.models.submission import Submission
from expo_portal.schemas.submission import SubmissionFields

logger = logging.getLogger(__name__)

REVIEW_DECISIONS = (SubmissionStatus.APPROVED, SubmissionStatus.REJECTED)


def is_editable(submission: Submission) -> bool:
    return submission.status == SubmissionStatus.PENDING.value


def _ensure_student(actor: Actor) -> StudentActor:
    if not isinstance(actor, StudentActor):
        raise PermissionDenied("Student role required")
    return actor


def _ensure_admin(actor: Actor) -> AdminActor:
    if not isinstance(actor, AdminActor):
        raise PermissionDenied("Admin role required")
    return actor


def _load(db: Session, submission_id: int) -> Submission:
    sub = db.get(Submission, submission_id)
    if sub is None:
        raise NotFound("Submission not found")
    return sub


def ensure_owner_can_change(db: Session, actor: Actor, submission_id: int, action: str) -> Submission:
    student = _ensure_student(actor)
    sub = _load(db, submission_id)
    if sub.user_id != student.id:
        raise PermissionDenied(f"Only the owner can {action} this submission")
    if not is_editable(sub):
        raise InvalidTransition(f"Cannot {action} a submission that is already {sub.status}")
    return sub


def _commit(db: Session) -> None:
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


def create_submission(
    db: Session,
    actor: Actor,
    data: SubmissionFields,
    document_url: Optional[str] = None,
) -> Submission:
    student = _ensure_student(actor)

    sub = Submission(
        user_id=student.id,
        project_name=data.project_name,
        class_name=data.class_name,
        group_class=data.group_class,
        course=data.course,
        lecturer=data.lecturer,
        grade=data.grade,
        program_study=data.program_study,
        document_url=document_url,
        status=SubmissionStatus.PENDING.value,
    )
    db.add(sub)
    _commit(db)
    db.refresh(sub)

    logger.info("Submission %s created by user %s", sub.id, student.id)
    return sub


def list_own_submissions(db: Session, actor: Actor) -> list[Submission]:
    student = _ensure_student(actor)
    return (
        db.query(Submission)
        .filter(Submission.user_id == student.id)
        .order_by(Submission.created_at.desc(), Submission.id.desc())
        .all()
    )


def list_all_submissions(db: Session, actor: Actor) -> list[Submission]:
    _ensure_admin(actor)
    subs = (
        db.query(Submission)
        .options(joinedload(Submission.owner))
        .order_by(Submission.created_at.desc(), Submission.id.desc())
        .all()
    )
    # rows without an owner profile are not shown in the review queue
    return [s for s in subs if s.owner is not None]


def get_submission(db: Session, actor: Actor, submission_id: int) -> Submission:
    sub = _load(db, submission_id)
    if isinstance(actor, AdminActor) or sub.user_id == actor.id:
        return sub
    raise PermissionDenied("Not allowed to view this submission")


def update_submission(
    db: Session,
    actor: Actor,
    submission_id: int,
    data: SubmissionFields,
    document_url: Optional[str] = None,
) -> Submission:
    sub = ensure_owner_can_change(db, actor, submission_id, "edit")

    sub.project_name = data.project_name
    sub.class_name = data.class_name
    sub.group_class = data.group_class
    sub.course = data.course
    sub.lecturer = data.lecturer
    sub.grade = data.grade
    sub.program_study = data.program_study
    if document_url is not None:
        sub.document_url = document_url

    _commit(db)
    db.refresh(sub)

    logger.info("Submission %s updated by user %s", sub.id, actor.id)
    return sub


def delete_submission(db: Session, actor: Actor, submission_id: int) -> Optional[str]:
    """Delete a pending submission and return the locator of its document, if any."""
    sub = ensure_owner_can_change(db, actor, submission_id, "delete")
    document_url = sub.document_url

    db.delete(sub)
    _commit(db)

    logger.info("Submission %s deleted by user %s", submission_id, actor.id)
    return document_url


def review_submission(
    db: Session,
    actor: Actor,
    submission_id: int,
    decision: SubmissionStatus,
    notes: Optional[str] = None,
) -> Submission:
    admin = _ensure_admin(actor)
    if decision not in REVIEW_DECISIONS:
        raise InvalidTransition(f"Unsupported review decision: {decision}")
    decision = SubmissionStatus(decision)

    sub = _load(db, submission_id)
    if sub.status != SubmissionStatus.PENDING.value:
        raise InvalidTransition(f"Submission has already been {sub.status}")

    sub.status = decision.value
    sub.admin_notes = (notes or "").strip() or None

    _commit(db)
    db.refresh(sub)

    logger.info("Submission %s %s by admin %s", sub.id, sub.status, admin.id)
    return sub


def submission_stats(db: Session, actor: Actor) -> dict[str, int]:
    _ensure_admin(actor)
    row = db.query(
        func.count(Submission.id).label("total"),
        func.sum(case((Submission.status == SubmissionStatus.PENDING.value, 1), else_=0)).label("pending"),
        func.sum(case((Submission.status == SubmissionStatus.APPROVED.value, 1), else_=0)).label("approved"),
        func.sum(case((Submission.status == SubmissionStatus.REJECTED.value, 1), else_=0)).label("rejected"),
    ).one()

    return {
        "total": int(row.total or 0),
        "pending": int(row.pending or 0),
        "approved": int(row.approved or 0),
        "rejected": int(row.rejected or 0),
    }
