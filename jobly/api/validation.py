"""
Request body validation against the declared payload models
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.errors import BadRequestError, format_validation_errors

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_payload(model: Type[ModelT], payload: Any) -> ModelT:
    """Validate ``payload`` against ``model``; BadRequestError lists every problem"""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise BadRequestError(format_validation_errors(exc.errors())) from exc
