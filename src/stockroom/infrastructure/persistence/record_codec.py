"""Field-named JSON encoding for frozen dataclass records.

The raw form is a flat dict keyed by the dataclass field names. Dates and
datetimes travel as ISO-8601 strings. Decoding is strict: the key set must
match the fields exactly and every value must have the expected JSON type.
"""

from __future__ import annotations

import dataclasses
import typing
from datetime import date, datetime
from typing import Any, Generic, TypeVar

from stockroom.domain.exceptions import DecodeError, DomainException

T = TypeVar("T")

_SUPPORTED = (int, str, date, datetime)


class RecordCodec(Generic[T]):

    def __init__(self, record_type: type[T]) -> None:
        if not dataclasses.is_dataclass(record_type):
            raise TypeError(f"{record_type.__name__} is not a dataclass")
        hints = typing.get_type_hints(record_type)
        self._record_type = record_type
        self._fields: dict[str, type] = {}
        for field in dataclasses.fields(record_type):
            field_type = hints[field.name]
            if field_type not in _SUPPORTED:
                raise TypeError(
                    f"Unsupported field type {field_type!r} "
                    f"for {record_type.__name__}.{field.name}"
                )
            self._fields[field.name] = field_type

    @property
    def record_type(self) -> type[T]:
        return self._record_type

    # --- Serialization --------------------------------------------------------

    def to_raw(self, record: T) -> dict[str, Any]:
        raw: dict[str, Any] = {}
        for name in self._fields:
            value = getattr(record, name)
            if isinstance(value, date):
                value = value.isoformat()
            raw[name] = value
        return raw

    def from_raw(self, raw: Any) -> T:
        name = self._record_type.__name__
        if not isinstance(raw, dict):
            raise DecodeError(f"Expected an object for {name}, got {type(raw).__name__}")

        missing = self._fields.keys() - raw.keys()
        unexpected = raw.keys() - self._fields.keys()
        if missing or unexpected:
            raise DecodeError(
                f"Field mismatch for {name}: "
                f"missing {sorted(missing)}, unexpected {sorted(unexpected)}"
            )

        values = {
            field: self._decode_value(name, field, field_type, raw[field])
            for field, field_type in self._fields.items()
        }
        try:
            return self._record_type(**values)
        except DomainException as exc:
            raise DecodeError(f"Invalid {name} record: {exc}") from exc

    # --- Value helpers --------------------------------------------------------

    @staticmethod
    def _decode_value(record_name: str, field: str, field_type: type, value: Any) -> Any:
        if field_type is int:
            # bool is an int subclass but never a valid JSON number here
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        elif field_type is str:
            if isinstance(value, str):
                return value
        elif isinstance(value, str):
            if field_type is datetime and len(value) <= len("YYYY-MM-DD"):
                raise DecodeError(
                    f"{record_name}.{field}: expected a date and time, got {value!r}"
                )
            parse = datetime.fromisoformat if field_type is datetime else date.fromisoformat
            try:
                return parse(value)
            except ValueError as exc:
                raise DecodeError(
                    f"{record_name}.{field}: invalid {field_type.__name__} {value!r}"
                ) from exc
        raise DecodeError(
            f"{record_name}.{field}: expected {field_type.__name__}, "
            f"got {type(value).__name__}"
        )
