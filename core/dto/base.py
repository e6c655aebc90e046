"""Shared helpers for DTO validation."""
from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError


DTOType = TypeVar("DTOType", bound=BaseModel)


def validate_dto(dto_class: Type[DTOType], data: Union[DTOType, Mapping[str, Any]]) -> DTOType:
    """
    Validate raw input against a DTO class.
    
    Args:
        dto_class: Pydantic model to validate with
        data: Raw mapping or an already built DTO
        
    Returns:
        Validated DTO instance
        
    Raises:
        ValidationError: With the name of the first offending field
    """
    if isinstance(data, dto_class):
        return data
    
    try:
        return dto_class.model_validate(data)
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or dto_class.__name__
        raise ValidationError(field, error["msg"]) from e
