"""Request body validation for Flask views.

Bodies are decoded into pydantic models before any handler logic runs, so a
missing field or a malformed body surfaces as a ValidationError instead of a
None deep inside the handler.
"""

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError


def parse_body(model: type[BaseModel], message: str = "Invalid request data") -> BaseModel:
    """
    Validate the current request's JSON body against a model.

    Args:
        model: Pydantic model class to validate against
        message: Error message used when validation fails

    Returns:
        Validated model instance

    Raises:
        ValidationError: If the body is missing, is not a JSON object, or
            fails model validation
    """
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        raise ValidationError(message, {"reason": "Request body must be a JSON object"})

    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            message,
            {"errors": e.errors(include_url=False, include_context=False, include_input=False)}
        )
