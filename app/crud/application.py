"""
CRUD operations for the Application model.

Each function issues exactly one SQL statement scoped by user_id and commits
it. A row owned by another user is reported exactly like a missing row.
"""

from datetime import datetime, timezone
from typing import List
from uuid import UUID

from sqlalchemy import delete as sa_delete, insert, select, update as sa_update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import NotFound, StoreError, ValidationError
from app.models.application import Application
from app.schemas.application import ApplicationCreateRequest, ApplicationUpdateRequest

DEFAULT_STATUS = "applied"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _is_blank(value) -> bool:
    return value is None or not value.strip()


def create(db: Session, user_id: str, data: ApplicationCreateRequest) -> Application:
    """
    Create a new application owned by user_id.

    Args:
        db: Database session
        user_id: Caller id
        data: Decoded creation request

    Returns:
        The inserted row, including generated id and timestamps

    Raises:
        ValidationError: company or role is blank
        StoreError: The insert failed
    """
    if _is_blank(data.company):
        raise ValidationError("company is required")
    if _is_blank(data.role):
        raise ValidationError("role is required")

    now = _utcnow()
    stmt = (
        insert(Application)
        .values(
            user_id=user_id,
            company=data.company,
            role=data.role,
            status=DEFAULT_STATUS if _is_blank(data.status) else data.status,
            source=data.source or None,
            applied_date=data.applied_date,
            notes=data.notes or None,
            created_at=now,
            updated_at=now,
        )
        .returning(Application)
    )

    try:
        application = db.scalars(stmt).one()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError("failed to create") from e

    return application


def get_multi(db: Session, user_id: str) -> List[Application]:
    """
    List every application owned by user_id, most recently created first.

    Returns:
        List of Application instances (empty if the user has none)
    """
    stmt = (
        select(Application)
        .where(Application.user_id == user_id)
        .order_by(Application.created_at.desc())
    )
    try:
        return list(db.scalars(stmt).all())
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError("failed to list") from e


def get_by_id(db: Session, user_id: str, application_id: UUID) -> Application:
    """
    Retrieve one application by id, scoped to user_id.

    Raises:
        NotFound: No such id for this user
        StoreError: The query failed
    """
    stmt = select(Application).where(
        Application.user_id == user_id,
        Application.id == application_id,
    )
    try:
        application = db.scalars(stmt).first()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError("failed to get") from e

    if application is None:
        raise NotFound()
    return application


def update(db: Session, user_id: str, application_id: UUID, data: ApplicationUpdateRequest) -> Application:
    """
    Merge status, notes and applied_date into an existing application.

    Blank or omitted fields keep their stored value. updated_at always
    advances, even when nothing else changes.

    Args:
        db: Database session
        user_id: Caller id
        application_id: Application to update
        data: Decoded update request

    Returns:
        The updated row

    Raises:
        NotFound: No such id for this user
        StoreError: The update failed
    """
    changes = {"updated_at": _utcnow()}
    if not _is_blank(data.status):
        changes["status"] = data.status
    if not _is_blank(data.notes):
        changes["notes"] = data.notes
    if data.applied_date is not None:
        changes["applied_date"] = data.applied_date

    stmt = (
        sa_update(Application)
        .where(Application.user_id == user_id, Application.id == application_id)
        .values(**changes)
        .returning(Application)
        .execution_options(populate_existing=True)
    )

    try:
        application = db.scalars(stmt).one_or_none()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError("failed to update") from e

    if application is None:
        raise NotFound()
    return application


def delete(db: Session, user_id: str, application_id: UUID) -> None:
    """
    Delete an application by id, scoped to user_id.

    Raises:
        NotFound: Zero rows were deleted
        StoreError: The delete failed
    """
    stmt = (
        sa_delete(Application)
        .where(Application.user_id == user_id, Application.id == application_id)
        .execution_options(synchronize_session=False)
    )

    try:
        result = db.execute(stmt)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError("failed to delete") from e

    if result.rowcount == 0:
        raise NotFound()
