from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from expo_portal.db.base_class import Base


class Project(Base):
    """Project registered for the public exhibition catalogue."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    project_name: Mapped[str] = mapped_column(String(255), nullable=False)
    group_name: Mapped[str] = mapped_column(String(255), nullable=False)
    members: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    course_name: Mapped[str] = mapped_column(String(255), nullable=False)
    lecturer: Mapped[str] = mapped_column(String(255), nullable=False)
    class_name: Mapped[str] = mapped_column(String(50), nullable=False)
    program: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    batch: Mapped[str] = mapped_column(String(10), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
