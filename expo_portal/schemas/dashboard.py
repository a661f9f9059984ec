from typing import Literal

from pydantic import BaseModel

from expo_portal.schemas.submission import SubmissionAdminRead, SubmissionRead, SubmissionStats
from expo_portal.schemas.user import UserRead


class StudentDashboard(BaseModel):
    role: Literal["student"] = "student"
    profile: UserRead
    submissions: list[SubmissionRead]


class AdminDashboard(BaseModel):
    role: Literal["admin"] = "admin"
    profile: UserRead
    stats: SubmissionStats
    submissions: list[SubmissionAdminRead]
