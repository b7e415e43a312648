# galleryadmin/services/validation.py
"""Turn request payloads into checked pydantic inputs."""

from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError
from ..result import Err, Ok, Result

M = TypeVar("M", bound=BaseModel)


def parse_input(model: Type[M], payload: Mapping[str, Any] | None) -> Result[M, ValidationError]:
    """Validate `payload`; the Err message names the first offending field."""
    try:
        return Ok(model.model_validate(payload or {}))
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first["loc"]) or "payload"
        return Err(ValidationError(f"{field}: {first['msg']}"))
