from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from expo_portal.db.base_class import Base


class Submission(Base):
    __tablename__ = "projects_submissions"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)

    project_name = Column(String(255), nullable=False)
    class_name = Column("class", String(50), nullable=False)
    group_class = Column(String(100), nullable=False)
    course = Column(String(255), nullable=False)
    lecturer = Column(String(255), nullable=False)
    grade = Column(String(20), nullable=True)
    program_study = Column(String(255), nullable=False, index=True)

    document_url = Column(String(1024), nullable=True)

    # Review fields; status only leaves "pending" through an admin review
    status = Column(String(20), nullable=False, default="pending", server_default="pending", index=True)
    admin_notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    owner = relationship("User", back_populates="submissions")
