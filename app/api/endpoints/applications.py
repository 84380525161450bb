"""
API endpoints for job application tracking.

Every route requires the X-User-Id header and only ever touches rows owned
by that caller.
"""

import logging
from uuid import UUID
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.codec import json_body
from app.core.database import get_db
from app.core.deps import get_user_id
from app.core.errors import NotFound
from app.crud import application as application_crud
from app.schemas.application import (
    ApplicationCreateRequest,
    ApplicationResponse,
    ApplicationUpdateRequest,
)

router = APIRouter(prefix="/applications", tags=["Applications"])
logger = logging.getLogger(__name__)


def _parse_id(application_id: str) -> UUID:
    """An id that is not a UUID cannot exist, so it is reported as not found."""
    try:
        return UUID(application_id)
    except ValueError:
        raise NotFound()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ApplicationResponse)
def create_application(
    user_id: str = Depends(get_user_id),
    request: ApplicationCreateRequest = Depends(json_body(ApplicationCreateRequest)),
    db: Session = Depends(get_db)
):
    """
    Create a new application for the caller.

    company and role are required; status defaults to "applied".
    """
    application = application_crud.create(db, user_id, request)
    logger.info(f"Created application {application.id} for user {user_id}")
    return application


@router.get("", response_model=list[ApplicationResponse])
def list_applications(
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db)
):
    """List the caller's applications, most recently created first."""
    return application_crud.get_multi(db, user_id)


@router.get("/{application_id}", response_model=ApplicationResponse)
def get_application(
    application_id: str,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db)
):
    """
    Retrieve an application by ID.

    Applications owned by another user are reported as not found.
    """
    return application_crud.get_by_id(db, user_id, _parse_id(application_id))


@router.patch("/{application_id}", response_model=ApplicationResponse)
def update_application(
    application_id: str,
    user_id: str = Depends(get_user_id),
    request: ApplicationUpdateRequest = Depends(json_body(ApplicationUpdateRequest)),
    db: Session = Depends(get_db)
):
    """
    Update status, notes and/or applied_date.

    Omitted or empty fields keep their current value; updated_at always advances.
    """
    application = application_crud.update(db, user_id, _parse_id(application_id), request)
    logger.info(f"Updated application {application.id} for user {user_id}")
    return application


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_application(
    application_id: str,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db)
):
    """
    Delete an application by ID.
    """
    application_crud.delete(db, user_id, _parse_id(application_id))
    logger.info(f"Deleted application {application_id} for user {user_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
