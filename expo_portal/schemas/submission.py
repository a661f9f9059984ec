from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


class SubmissionFields(BaseModel):
    """Content fields a student fills in; all but grade are required."""

    project_name: str = Field(min_length=1, max_length=255)
    class_name: str = Field(min_length=1, max_length=50)
    group_class: str = Field(min_length=1, max_length=100)
    course: str = Field(min_length=1, max_length=255)
    lecturer: str = Field(min_length=1, max_length=255)
    program_study: str = Field(min_length=1, max_length=255)
    grade: Optional[str] = Field(default=None, max_length=20)


class SubmissionRead(BaseModel):
    id: int
    user_id: int
    project_name: str
    class_name: str
    group_class: str
    course: str
    lecturer: str
    grade: Optional[str] = None
    program_study: str
    document_url: Optional[str] = None
    status: str
    admin_notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    # owner-side flags; only true while the submission is pending
    can_edit: bool = False
    can_delete: bool = False

    class Config:
        from_attributes = True


class SubmissionAdminRead(SubmissionRead):
    owner_full_name: str
    owner_username: str


class SubmissionReview(BaseModel):
    notes: Optional[str] = Field(default=None, max_length=2000)


class SubmissionStats(BaseModel):
    total: int
    pending: int
    approved: int
    rejected: int


class SubmissionListing(BaseModel):
    items: list[SubmissionAdminRead]
    total: int
    sort_field: Optional[str] = None
    sort_direction: Literal["asc", "desc"] = "asc"
    next_sort: dict[str, str] = {}
