"""String enumerations that tolerate literals added by the remote API."""

from __future__ import annotations

import functools
from typing import Any, ClassVar, Self

__all__ = ["PermissiveEnum", "dec_hook", "shape_name"]


@functools.total_ordering
class PermissiveEnum:
    """Base class for wire enumerations that never fail to decode.

    Subclasses declare one upper-case class attribute per known literal::

        class Color(PermissiveEnum):
            __slots__ = ()

            RED = "red"
            GREEN = "green"

    Each declaration is replaced by a member of the subclass. ``decode`` maps a
    known literal to its member and wraps any other string in an unrecognized
    member that keeps the literal verbatim.

    Members compare by variant first (declaration order, unrecognized last)
    and by literal second.
    """

    __slots__ = ("_name", "_value")
    __match_args__ = ("value",)

    _members: ClassVar[dict[str, Any]] = {}
    _ranks: ClassVar[dict[str, int]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        members: dict[str, Any] = {}
        for name, literal in list(vars(cls).items()):
            if name.startswith("_") or not name.isupper():
                continue
            if not isinstance(literal, str):
                continue
            if literal in members:
                raise TypeError(
                    f"{cls.__name__}.{name} repeats literal {literal!r}"
                )
            member = cls._make(name, literal)
            members[literal] = member
            setattr(cls, name, member)
        cls._members = members
        cls._ranks = {literal: rank for rank, literal in enumerate(members)}

    @classmethod
    def _make(cls, name: str | None, value: str) -> Self:
        member = object.__new__(cls)
        object.__setattr__(member, "_name", name)
        object.__setattr__(member, "_value", value)
        return member

    @classmethod
    def decode(cls, raw: str) -> Self:
        member = cls._members.get(raw)
        if member is not None:
            return member
        return cls._make(None, raw)

    @classmethod
    def members(cls) -> tuple[Self, ...]:
        return tuple(cls._members.values())

    @property
    def name(self) -> str | None:
        """Attribute name of a known member, ``None`` when unrecognized."""
        return self._name

    @property
    def value(self) -> str:
        return self._value

    @property
    def is_known(self) -> bool:
        return self._name is not None

    def _sort_key(self) -> tuple[int, str]:
        if self.is_known:
            return (self._ranks[self._value], "")
        return (len(self._ranks), self._value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} members are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} members are immutable")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() < other._sort_key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __reduce__(self) -> tuple[Any, tuple[str]]:
        return (type(self).decode, (self._value,))

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        cls_name = type(self).__name__
        if self._name is None:
            return f"<{cls_name} (unrecognized): {self._value!r}>"
        return f"<{cls_name}.{self._name}: {self._value!r}>"


def shape_name(obj: Any) -> str:
    """Name a decoded JSON value the way msgspec does in its errors."""
    if obj is None:
        return "null"
    if isinstance(obj, bool):
        return "bool"
    if isinstance(obj, dict):
        return "object"
    if isinstance(obj, (list, tuple)):
        return "array"
    return type(obj).__name__


def dec_hook(type_: type, obj: Any) -> Any:
    """msgspec ``dec_hook`` for ``PermissiveEnum`` subclasses."""
    if isinstance(type_, type) and issubclass(type_, PermissiveEnum):
        if not isinstance(obj, str):
            raise TypeError(f"Expected `str`, got `{shape_name(obj)}`")
        return type_.decode(obj)
    raise NotImplementedError(f"Objects of type {type_!r} are not supported")
