"""
Shared pydantic base for persisted records.
"""

from enum import Enum
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from common.utils.exceptions import ValidationException

E = TypeVar("E", bound=Enum)


class SnapshotModel(BaseModel):
    """
    Record stored in a collection snapshot.

    Attributes are snake_case in Python and camelCase in snapshots.
    Records are immutable; changes go through `model_copy(update=...)`
    and a store commit.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_snapshot(self) -> Dict[str, Any]:
        """Serialize with snapshot field names."""
        return self.model_dump(mode="json", by_alias=True)


def coerce_enum(enum_cls: Type[E], value: Any, field: str) -> E:
    """
    Convert raw input to an enum member.

    Raises:
        ValidationException: If the value is not one of the enum's values
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationException(
            message=f"Invalid {field}: {value!r}",
            code="INVALID_ENUM_VALUE",
            details={"field": field, "allowed": allowed},
        )


def require_text(value: Any, field: str) -> str:
    """
    Trim a required text field.

    Raises:
        ValidationException: If the value is missing or blank
    """
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValidationException(
            message=f"{field} is required",
            code="MISSING_FIELD",
            details={"field": field},
        )
    return text
