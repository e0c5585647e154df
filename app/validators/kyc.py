"""
KYC form field validation.

Field rules come from an externally supplied KYC schema; each field
may be required and may carry a pattern and length limits.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class KycField(BaseModel):
    """One field of the KYC form schema."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    required: bool = False
    pattern: str | None = None
    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)


def _is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def validate_field(field: KycField, value: Any) -> str | None:
    """
    Validate one KYC field value.

    Args:
        field: Field rules
        value: Submitted value

    Returns:
        Error message, or None if the value is acceptable

    Examples:
        >>> validate_field(KycField(id="pin", label="Pin Code", required=True), "")
        'Pin Code is required'
        >>> validate_field(KycField(id="pin", label="Pin Code", pattern=r"^\\d{6}$"), "400001")
    """
    if field.required and _is_blank(value):
        return f"{field.label} is required"
    if _is_empty(value):
        return None

    text = str(value)

    if field.pattern and not re.search(field.pattern, text):
        return f"{field.label} format is invalid"

    if field.min_length and len(text) < field.min_length:
        return f"{field.label} must be at least {field.min_length} characters"

    if field.max_length and len(text) > field.max_length:
        return f"{field.label} must be no more than {field.max_length} characters"

    return None


def validate_section(
    fields: Iterable[KycField],
    data: Mapping[str, Any],
) -> dict[str, str]:
    """
    Validate every field of a KYC form section.

    Args:
        fields: Field rules of the section
        data: Submitted values keyed by field id

    Returns:
        Error messages keyed by field id; empty when the section is valid
    """
    errors: dict[str, str] = {}
    for field in fields:
        error = validate_field(field, data.get(field.id))
        if error:
            errors[field.id] = error
    return errors
