"""Input validation with strong typing."""

from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure

from pydantic import BaseModel, Field, field_validator, ConfigDict

from .json import JSONParseError, validate_json_depth, validate_json_size


# Validation limits
MAX_TEMPLATE_NAME_LENGTH = 200


class ValidationError(Exception):
    """Validation failed."""

    pass


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


class RequestValidator(BaseModel):
    """Base validator with strict configuration."""

    model_config = ConfigDict(
        strict=True, validate_assignment=True, extra="forbid", frozen=True  # Immutable by default
    )


class TemplateNameRequest(RequestValidator):
    """Validated template save request."""

    name: str = Field(min_length=1, max_length=MAX_TEMPLATE_NAME_LENGTH)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure name is non-empty after stripping."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Template name cannot be empty")
        return stripped


def validate_template_name(name: Any) -> Result[str, ValidationResult]:
    """
    Validate a template name (Result pattern).

    Returns:
        Success with the stripped name, or Failure with the reason
    """
    if not isinstance(name, str) or not name.strip():
        return Failure(ValidationResult("Template name cannot be empty", "name", name))
    try:
        return Success(TemplateNameRequest(name=name).name)
    except ValueError as e:
        return Failure(ValidationResult(str(e), "name", name))


class DocumentPayloadValidator:
    """Validates decoded document payloads before they become nodes."""

    @staticmethod
    def validate_text(text: str, max_size: int) -> None:
        """
        Check raw import text.

        Raises:
            ValidationError: If the text is too large
        """
        try:
            validate_json_size(text, max_size, "Document")
        except JSONParseError as e:
            raise ValidationError(str(e)) from e

    @staticmethod
    def validate(data: Any, max_depth: int) -> list[dict[str, Any]]:
        """
        Check the decoded shape of a document.

        Args:
            data: Decoded JSON value
            max_depth: Maximum nesting depth

        Returns:
            The payload, typed as a list of node mappings

        Raises:
            ValidationError: If validation fails
        """
        if not isinstance(data, list):
            raise ValidationError(
                f"Invalid JSON format: expected an array of components, got {type(data).__name__}"
            )

        try:
            validate_json_depth(data, max_depth)
        except JSONParseError as e:
            raise ValidationError(str(e)) from e

        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise ValidationError(f"Component at index {index} must be an object")

        return data
