from typing import Literal, Optional

from pydantic import BaseModel, Field


class ProjectCreate(BaseModel):
    project_name: str = Field(min_length=1, max_length=255)
    group_name: str = Field(min_length=1, max_length=255)
    members: list[str] = Field(default_factory=list)
    course_name: str = Field(min_length=1, max_length=255)
    lecturer: str = Field(min_length=1, max_length=255)
    class_name: str = Field(min_length=1, max_length=50)
    program: str = Field(min_length=1, max_length=255)
    batch: str = Field(min_length=1, max_length=10)
    status: Literal["pending", "approved", "rejected"] = "pending"


class ProjectRead(BaseModel):
    id: int
    project_name: str
    group_name: str
    members: list[str]
    course_name: str
    lecturer: str
    class_name: str
    program: str
    batch: str
    status: str

    class Config:
        from_attributes = True


class ProjectListing(BaseModel):
    items: list[ProjectRead]
    total: int
    sort_field: Optional[str] = None
    sort_direction: Literal["asc", "desc"] = "asc"
    next_sort: dict[str, str] = {}
