import uuid
from sqlalchemy import Column, String, Text, Date, DateTime, Index, Uuid
from app.core.database import Base


class Application(Base):
    """
    A single job application tracked by one caller.

    Every read and write is scoped by user_id; item operations match on
    user_id and id together.
    """
    __tablename__ = "applications"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # Opaque caller identity taken from the X-User-Id header
    user_id = Column(String, nullable=False, index=True)

    company = Column(String, nullable=False)
    role = Column(String, nullable=False)
    status = Column(String, nullable=False, default="applied")
    source = Column(String, nullable=True)
    applied_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)

    # Assigned by the repository so both match exactly on insert
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("ix_applications_user_id_created_at", "user_id", "created_at"),
    )

    def __repr__(self):
        return f"<Application(id={self.id}, user_id='{self.user_id}', company='{self.company}', status='{self.status}')>"
