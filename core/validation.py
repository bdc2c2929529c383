# =============================================================================
# core/validation.py - Schema Validation for Product Forms
# =============================================================================
# Declares the two schemas a product submission passes through and a single
# entry point that runs either of them:
#
#   record = validate_fields(ProductFields, form_values)
#   checked = validate_fields(ImageFields, {"image": image_file})
#
# Failures raise app.exceptions.ValidationError with *every* field message
# joined by ", " so the form can show them all at once.
# =============================================================================

from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from app.exceptions import ValidationError
from core.models.product import ImageFile
from core.parsing import ParseError, ParseFailure, count_words, parse_flag, parse_price

SchemaT = TypeVar("SchemaT", bound=BaseModel)

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
DESCRIPTION_MIN_WORDS = 10
DESCRIPTION_MAX_WORDS = 1000
MAX_IMAGE_SIZE_BYTES = 1024 * 1024
ACCEPTED_IMAGE_PREFIXES = ("image/",)

# Prefix for error types raised by our validators. Their messages are shown
# verbatim; pydantic's built-in messages get the field name prepended.
_ERROR_PREFIX = "storefront_"

PRICE_MESSAGES = {
    ParseFailure.MISSING: "price is required",
    ParseFailure.NOT_A_NUMBER: "price must be a number",
    ParseFailure.NOT_AN_INTEGER: "price must be a whole number",
    ParseFailure.NEGATIVE: "price must be a positive number",
}


def _field_error(code: str, message: str) -> PydanticCustomError:
    return PydanticCustomError(_ERROR_PREFIX + code, message)


# =============================================================================
# Product Schema
# =============================================================================

class ProductFields(BaseModel):
    """
    Validated product attributes from the create form.

    Raw form values are strings; price and featured are parsed with the
    functions in core.parsing before the type check runs.
    """

    name: str
    company: str
    price: int
    description: str
    featured: bool = False

    @field_validator("name", "company", "description", mode="before")
    @classmethod
    def _require_text(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise _field_error("required", f"{info.field_name} is required")
        if not isinstance(value, str):
            raise _field_error("not_text", f"{info.field_name} must be text")
        return value

    @field_validator("name")
    @classmethod
    def _check_name_length(cls, value: str) -> str:
        if len(value) < NAME_MIN_LENGTH:
            raise _field_error(
                "name_too_short",
                f"name must be at least {NAME_MIN_LENGTH} characters long",
            )
        if len(value) > NAME_MAX_LENGTH:
            raise _field_error(
                "name_too_long",
                f"name must be at most {NAME_MAX_LENGTH} characters long",
            )
        return value

    @field_validator("company")
    @classmethod
    def _check_company(cls, value: str) -> str:
        if not value.strip():
            raise _field_error("company_empty", "company must not be empty")
        return value

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> int:
        try:
            return parse_price(value)
        except ParseError as e:
            raise _field_error(f"price_{e.reason.value}", PRICE_MESSAGES[e.reason])

    @field_validator("description")
    @classmethod
    def _check_word_count(cls, value: str) -> str:
        words = count_words(value)
        if words < DESCRIPTION_MIN_WORDS or words > DESCRIPTION_MAX_WORDS:
            raise _field_error(
                "description_word_count",
                f"description must be between {DESCRIPTION_MIN_WORDS} "
                f"and {DESCRIPTION_MAX_WORDS} words",
            )
        return value

    @field_validator("featured", mode="before")
    @classmethod
    def _parse_featured(cls, value: Any) -> bool:
        try:
            return parse_flag(value)
        except ParseError:
            raise _field_error("featured_flag", "featured must be a boolean flag")


# =============================================================================
# Image Schema
# =============================================================================

class ValidatedImage(BaseModel):
    """Metadata of an uploaded image that passed the size and type checks."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    file: ImageFile
    content_type: str
    size: int

    @field_validator("content_type")
    @classmethod
    def _check_type(cls, value: str) -> str:
        if not value.startswith(ACCEPTED_IMAGE_PREFIXES):
            raise _field_error("image_type", "File must be an image")
        return value

    @field_validator("size")
    @classmethod
    def _check_size(cls, value: int) -> int:
        if value > MAX_IMAGE_SIZE_BYTES:
            raise _field_error("image_size", "File size must be less than 1MB")
        return value


class ImageFields(BaseModel):
    """
    Image part of the create form.

    An absent image is valid here. The create pipeline enforces that one was
    actually sent.
    """

    image: Optional[ValidatedImage] = None

    @field_validator("image", mode="before")
    @classmethod
    def _describe_file(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, ImageFile):
            raise _field_error("not_a_file", "image must be a file")
        return {
            "file": value,
            "content_type": value.content_type or "",
            "size": value.size,
        }


# =============================================================================
# Entry Point
# =============================================================================

def _format_error(error: dict[str, Any]) -> str:
    """Turn one pydantic error into a form-facing sentence."""
    if error["type"].startswith(_ERROR_PREFIX):
        return error["msg"]

    field = ".".join(str(part) for part in error["loc"]) or "input"
    if error["type"] == "missing":
        return f"{field} is required"
    return f"{field}: {error['msg']}"


def validate_fields(schema: type[SchemaT], raw_input: Mapping[str, Any]) -> SchemaT:
    """
    Validate raw input against a schema.

    Args:
        schema: Pydantic model class describing the expected shape
        raw_input: Untyped values, usually straight from a form

    Returns:
        The schema instance with coerced, typed values

    Raises:
        ValidationError: With all field messages joined by ", "
    """
    try:
        return schema.model_validate(raw_input)
    except PydanticValidationError as e:
        raise ValidationError([_format_error(error) for error in e.errors()])
