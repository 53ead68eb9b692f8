from __future__ import annotations

import re
from typing import Self

import msgspec

__all__ = [
    "DecodeError",
    "MalformedPayload",
    "MissingField",
    "TypeMismatch",
    "format_path",
    "from_validation_error",
]

PathSegment = str | int

_LOCATION_RE = re.compile(r"^(?P<message>.*?)(?: - at `\$(?P<path>[^`]*)`)?$", re.S)
_MISSING_RE = re.compile(r"^Object missing required field `(?P<field>[^`]+)`$")
_EXPECTED_RE = re.compile(r"^Expected `(?P<expected>[^`]+)`, got `(?P<actual>[^`]+)`$")
_SEGMENT_RE = re.compile(r"\.([^.\[]+)|\[(\d+)\]")


def format_path(path: tuple[PathSegment, ...]) -> str:
    """Render ``("old_chat_member", "user", "id")`` as ``old_chat_member.user.id``."""
    out: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            out.append(f"[{segment}]")
        elif out:
            out.append(f".{segment}")
        else:
            out.append(segment)
    return "".join(out)


def _parse_path(raw: str | None) -> tuple[PathSegment, ...]:
    if not raw:
        return ()
    segments: list[PathSegment] = []
    for name, index in _SEGMENT_RE.findall(raw):
        segments.append(int(index) if index else name)
    return tuple(segments)


class DecodeError(ValueError):
    """A record could not be modeled; ``path`` locates the first bad field."""

    def __init__(self, path: tuple[PathSegment, ...], detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(self._render())

    @property
    def field_path(self) -> str:
        return format_path(self.path)

    def _render(self) -> str:
        if not self.path:
            return self.detail
        return f"{self.detail} at `{self.field_path}`"

    def _copy_with_path(self, path: tuple[PathSegment, ...]) -> Self:
        return type(self)(path, self.detail)

    def prefixed(self, *segments: PathSegment) -> Self:
        """Same error, located under ``segments`` of an enclosing record."""
        return self._copy_with_path((*segments, *self.path))


class MissingField(DecodeError):
    def __init__(self, path: tuple[PathSegment, ...], detail: str = "") -> None:
        super().__init__(path, detail or "missing required field")


class TypeMismatch(DecodeError):
    def __init__(
        self,
        path: tuple[PathSegment, ...],
        expected_shape: str,
        actual_shape: str | None = None,
    ) -> None:
        self.expected_shape = expected_shape
        self.actual_shape = actual_shape
        detail = f"expected {expected_shape}"
        if actual_shape is not None:
            detail = f"{detail}, got {actual_shape}"
        super().__init__(path, detail)

    def _copy_with_path(self, path: tuple[PathSegment, ...]) -> Self:
        return type(self)(path, self.expected_shape, self.actual_shape)


class MalformedPayload(DecodeError):
    """The payload is not parseable JSON, so no field could be located."""


def from_validation_error(exc: msgspec.ValidationError) -> DecodeError:
    """Translate a msgspec validation message into a typed decode error."""
    located = _LOCATION_RE.match(str(exc))
    if located is None:
        return DecodeError((), str(exc))
    message = located.group("message")
    path = _parse_path(located.group("path"))

    missing = _MISSING_RE.match(message)
    if missing is not None:
        return MissingField((*path, missing.group("field")))

    expected = _EXPECTED_RE.match(message)
    if expected is not None:
        return TypeMismatch(path, expected.group("expected"), expected.group("actual"))

    return DecodeError(path, message)
