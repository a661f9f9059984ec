from enum import Enum


class Role(str, Enum):
    STUDENT = "student"
    ADMIN = "admin"


class SubmissionStatus(str, Enum):
    # pending -> approved | rejected, both terminal
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


ALL = "all"
