"""
FastAPI dependencies for caller identification.

The caller id is trusted as given; verifying it is the job of whatever sits
in front of this service.
"""

from typing import Optional
from fastapi import Header

from app.core.errors import Unauthorized

USER_ID_HEADER = "X-User-Id"


def get_user_id(x_user_id: Optional[str] = Header(None, alias=USER_ID_HEADER)) -> str:
    """
    Extract the caller id from the X-User-Id header.

    Surrounding whitespace is trimmed; any non-empty value is accepted.

    Raises:
        Unauthorized: If the header is absent or blank
    """
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise Unauthorized(f"missing {USER_ID_HEADER} header")
    return user_id
