"""
Strict JSON request decoding.

Bodies are decoded by hand instead of through FastAPI's body parameters so
that the identity dependency always runs first and every decode failure,
including unknown fields, maps to a 400.
"""

from typing import Callable, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


def json_body(model: Type[ModelT]) -> Callable:
    """
    Build a dependency that decodes the request body into `model`.

    A `null` body decodes to a request with every field omitted.

    Usage:
        payload: ApplicationCreateRequest = Depends(json_body(ApplicationCreateRequest))

    Raises:
        DecodeError: Body is empty, not JSON, or does not fit the model
    """
    async def decode(request: Request) -> ModelT:
        try:
            payload = await request.json()
        except ValueError as e:
            raise DecodeError() from e

        # A JSON null body carries no fields
        if payload is None:
            payload = {}

        try:
            return model.model_validate(payload)
        except PydanticValidationError as e:
            raise DecodeError() from e

    return decode
