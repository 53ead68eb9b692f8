from __future__ import annotations

from pathlib import Path

from tgmember import ChatMemberStatus, DecodeError, unrecognized_values
from tgmember.api_models import CHAT_MEMBER_UPDATED


def _fixture_path(name: str) -> Path:
    return Path(__file__).parent / "fixtures" / name


def _decode_fixture(name: str) -> tuple[list, list[str]]:
    path = _fixture_path(name)
    decoded = []
    errors: list[str] = []

    for lineno, line in enumerate(path.read_bytes().splitlines(), 1):
        if not line.strip():
            continue
        try:
            decoded.append(CHAT_MEMBER_UPDATED.decode_json(line))
        except DecodeError as exc:
            errors.append(f"line {lineno}: {exc.__class__.__name__}: {exc}")

    return decoded, errors


def test_fixture_decodes_without_errors() -> None:
    decoded, errors = _decode_fixture("chat_member_updates.jsonl")

    assert not errors, f"{len(errors)} errors: " + "; ".join(errors[:5])
    assert len(decoded) == 5


def test_fixture_statuses() -> None:
    decoded, _ = _decode_fixture("chat_member_updates.jsonl")

    transitions = [
        (update.old_chat_member.status.value, update.new_chat_member.status.value)
        for update in decoded
    ]
    assert transitions == [
        ("left", "administrator"),
        ("left", "member"),
        ("member", "restricted"),
        ("restricted", "kicked"),
        ("creator", "creator"),
    ]
    assert decoded[0].new_chat_member.status is ChatMemberStatus.ADMINISTRATOR
    assert decoded[1].invite_link.is_primary is True


def test_fixture_restricted_is_reported_unrecognized() -> None:
    decoded, _ = _decode_fixture("chat_member_updates.jsonl")

    found = [path for update in decoded for path, _ in unrecognized_values(update)]
    assert found == ["new_chat_member.status", "old_chat_member.status"]
