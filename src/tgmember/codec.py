"""Declarative decoding of sparse wire records.

A record type is a frozen ``msgspec.Struct``; its annotations are the schema.
Required fields have no default, optional fields default to ``UNSET`` so that an
absent key stays distinguishable from a present ``false``; an explicit ``null``
on an optional field reads as absent. Unknown keys are ignored. ``RecordCodec``
wraps msgspec and reports failures as ``DecodeError``.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import msgspec
from msgspec import UNSET, UnsetType

from .enums import PermissiveEnum, dec_hook
from .errors import MalformedPayload, from_validation_error

__all__ = [
    "UNSET",
    "Record",
    "RecordCodec",
    "UnsetType",
    "is_present",
    "unrecognized_values",
]

R = TypeVar("R", bound="Record")


class Record(msgspec.Struct, frozen=True, forbid_unknown_fields=False):
    """Base for wire records.

    Optional fields may be annotated ``X | None | UnsetType``; an explicit
    ``null`` is stored as ``UNSET`` so absent and null read the same. Records
    order field by field in declaration order, ``UNSET`` before any value.
    """

    def __post_init__(self) -> None:
        for field in msgspec.structs.fields(self):
            if not field.required and getattr(self, field.name) is None:
                msgspec.structs.force_setattr(self, field.name, UNSET)

    def _order_key(self) -> tuple[Any, ...]:
        return tuple(
            _field_order_key(getattr(self, name)) for name in self.__struct_fields__
        )

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._order_key() < other._order_key()  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._order_key() <= other._order_key()  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._order_key() > other._order_key()  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._order_key() >= other._order_key()  # type: ignore[attr-defined]

    def present_fields(self) -> dict[str, Any]:
        """Fields that were set on the wire, keyed by attribute name."""
        return {
            name: value
            for name, value in msgspec.structs.asdict(self).items()
            if value is not UNSET
        }


def _field_order_key(value: Any) -> tuple[Any, ...]:
    if value is UNSET:
        return (0,)
    if isinstance(value, Record):
        return (1, value._order_key())
    return (1, value)


def is_present(value: Any) -> bool:
    return value is not UNSET


class RecordCodec(Generic[R]):
    """Decoder for one record type, from parsed dicts or raw JSON."""

    __slots__ = ("_record_type", "_json_decoder")

    def __init__(self, record_type: type[R]) -> None:
        self._record_type = record_type
        self._json_decoder = msgspec.json.Decoder(record_type, dec_hook=dec_hook)

    @property
    def record_type(self) -> type[R]:
        return self._record_type

    @property
    def name(self) -> str:
        return self._record_type.__name__

    def decode(self, raw: dict[str, Any]) -> R:
        try:
            return msgspec.convert(raw, type=self._record_type, dec_hook=dec_hook)
        except msgspec.ValidationError as exc:
            raise from_validation_error(exc) from exc

    def decode_json(self, payload: str | bytes) -> R:
        try:
            return self._json_decoder.decode(payload)
        except msgspec.ValidationError as exc:
            raise from_validation_error(exc) from exc
        except msgspec.DecodeError as exc:
            raise MalformedPayload((), str(exc)) from exc

    def decode_any(self, item: dict[str, Any] | str | bytes) -> R:
        if isinstance(item, (str, bytes)):
            return self.decode_json(item)
        return self.decode(item)

    def __repr__(self) -> str:
        return f"RecordCodec({self.name})"


def unrecognized_values(
    record: Record, prefix: str = ""
) -> list[tuple[str, PermissiveEnum]]:
    """Dotted paths of every enumeration value the schema does not know."""
    found: list[tuple[str, PermissiveEnum]] = []
    for field in msgspec.structs.fields(record):
        value = getattr(record, field.name)
        path = f"{prefix}{field.encode_name}"
        if isinstance(value, PermissiveEnum):
            if not value.is_known:
                found.append((path, value))
        elif isinstance(value, Record):
            found.extend(unrecognized_values(value, f"{path}."))
    return found

