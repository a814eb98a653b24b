"""Base for partial-update payloads."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """Fields may be omitted, but only those in ``nullable_fields`` may be sent as null.

    Updates are merged with ``model_dump(exclude_unset=True)``, so an explicit
    null would otherwise overwrite a required field on the stored record.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _reject_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = sorted(
                key for key, value in data.items()
                if value is None and key in cls.model_fields and key not in cls.nullable_fields
            )
            if nulls:
                raise ValueError(f"{', '.join(nulls)} cannot be null")
        return data
