"""Common schema utilities for the nursing rules core."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictModel(BaseModel):
    """Immutable base model forbidding unexpected fields."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class FormModel(BaseModel):
    """Immutable model fed by form payloads.

    Form sections arrive with camelCase keys (``intakeOral``) while the Python
    side uses snake_case attributes; both spellings are accepted. Unknown keys
    are ignored because form sections carry UI-only fields.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @classmethod
    def resolve_field(cls, name: str) -> str:
        """Return the attribute name for *name*, given either spelling."""

        for field_name, info in cls.model_fields.items():
            if name in (field_name, info.alias):
                return field_name
        raise KeyError(name)

    def with_item(self, name: str, value: Any):
        """Return a copy with one field replaced and re-validated."""

        data = self.model_dump()
        data[self.resolve_field(name)] = value
        return type(self).model_validate(data)
