"""Todo record model stored in a RecordStore collection."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def normalize_id(value: Any) -> int:
    """Coerce an id to ``int``.

    Accepts ints and digit strings (``"42"``, ``" 42 "``). Booleans, floats with
    a fractional part and anything else raise ``ValueError``.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid record id: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text.startswith("-") else text
        if digits.isdigit():
            return int(text)
    raise ValueError(f"Invalid record id: {value!r}")


def stored_id(data: dict[str, Any]) -> int | None:
    """The normalized id of a stored entry, or None when it has no usable id."""
    try:
        return normalize_id(data.get("id"))
    except ValueError:
        return None


class TodoRecord(BaseModel):
    """One todo item.

    Caller input goes through ``validate_fields``: the typed fields are checked
    and coerced, every other key passes through as is. Stored entries are
    wrapped with ``from_stored`` without validation, so whatever a collection
    already holds is returned and written back unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: int | None = Field(default=None)
    title: str = Field(default="")
    completed: bool = Field(default=False)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> int | None:
        if value is None:
            return None
        return normalize_id(value)

    @classmethod
    def validate_fields(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Validate the model fields present in *data*.

        Returns a copy of *data* with those fields coerced (``"3"`` id to ``3``,
        ``"true"`` to ``True``). Raises ``pydantic.ValidationError``.
        """
        known = {key: value for key, value in data.items() if key in cls.model_fields}
        validated = cls.model_validate(known)
        return {**data, **{key: getattr(validated, key) for key in known}}

    @classmethod
    def from_stored(cls, data: dict[str, Any]) -> TodoRecord:
        """Wrap a stored entry as is. Missing fields read as their defaults."""
        return cls.model_construct(**data)

    def to_dict(self) -> dict[str, Any]:
        """The supplied fields and extras, as they were given."""
        data = {
            key: value
            for key, value in self.__dict__.items()
            if key in self.model_fields_set
        }
        data.update(self.model_extra or {})
        return data

    def matches(self, query: dict[str, Any]) -> bool:
        """True when every queried field is present and equal. Ids compare normalized."""
        values = self.to_dict()
        for key, expected in query.items():
            if key not in values:
                return False
            if key == "id":
                if stored_id(values) is None or stored_id(query) != stored_id(values):
                    return False
            elif values[key] != expected:
                return False
        return True
