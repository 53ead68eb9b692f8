import msgspec
import pytest

from tgmember.errors import (
    DecodeError,
    MissingField,
    TypeMismatch,
    format_path,
    from_validation_error,
)


class TestFromValidationError:
    def test_missing_field_at_root(self) -> None:
        err = from_validation_error(
            msgspec.ValidationError("Object missing required field `user`")
        )

        assert isinstance(err, MissingField)
        assert err.path == ("user",)
        assert err.field_path == "user"

    def test_missing_field_nested(self) -> None:
        err = from_validation_error(
            msgspec.ValidationError(
                "Object missing required field `id` - at `$.old_chat_member.user`"
            )
        )

        assert isinstance(err, MissingField)
        assert err.field_path == "old_chat_member.user.id"

    def test_type_mismatch(self) -> None:
        err = from_validation_error(
            msgspec.ValidationError(
                "Expected `bool`, got `str` - at `$.new_chat_member.can_pin_messages`"
            )
        )

        assert isinstance(err, TypeMismatch)
        assert err.path == ("new_chat_member", "can_pin_messages")
        assert err.expected_shape == "bool"
        assert err.actual_shape == "str"

    def test_array_index_in_path(self) -> None:
        err = from_validation_error(
            msgspec.ValidationError("Expected `int`, got `str` - at `$[3].date`")
        )

        assert err.path == (3, "date")
        assert err.field_path == "[3].date"

    def test_unknown_message_kept_as_generic_error(self) -> None:
        err = from_validation_error(
            msgspec.ValidationError("Expected `int` >= 1 - at `$.member_limit`")
        )

        assert type(err) is DecodeError
        assert err.path == ("member_limit",)
        assert err.detail == "Expected `int` >= 1"


class TestPrefixed:
    def test_missing_field_keeps_type(self) -> None:
        err = MissingField(("user",)).prefixed("old_chat_member")

        assert isinstance(err, MissingField)
        assert err.field_path == "old_chat_member.user"

    def test_type_mismatch_keeps_shapes(self) -> None:
        err = TypeMismatch(("date",), "int", "str").prefixed(2)

        assert isinstance(err, TypeMismatch)
        assert err.field_path == "[2].date"
        assert err.expected_shape == "int"
        assert err.actual_shape == "str"

    def test_original_unchanged(self) -> None:
        err = MissingField(("status",))
        err.prefixed("new_chat_member")

        assert err.path == ("status",)


def test_message_names_path() -> None:
    err = TypeMismatch(("invite_link", "member_limit"), "int", "str")

    assert str(err) == "expected int, got str at `invite_link.member_limit`"
    assert isinstance(err, ValueError)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ((), ""),
        (("user",), "user"),
        (("old_chat_member", "user", "id"), "old_chat_member.user.id"),
        ((0, "chat"), "[0].chat"),
        (("items", 1, "id"), "items[1].id"),
    ],
)
def test_format_path(path: tuple, expected: str) -> None:
    assert format_path(path) == expected
