"""Typed Telegram Bot API chat-membership records.

Optional fields default to ``UNSET``: absent on the wire, or sent as ``null``, is
never read as ``False`` or ``0``. Required fields reject ``null``. Which flags
apply depends on ``status`` (administrator flags, restriction flags) but that
is not enforced here.
"""

from __future__ import annotations

from typing import Any

import msgspec

from .codec import UNSET, Record, RecordCodec, UnsetType
from .enums import PermissiveEnum

__all__ = [
    "Chat",
    "ChatInviteLink",
    "ChatMember",
    "ChatMemberStatus",
    "ChatMemberUpdated",
    "User",
    "decode_chat_invite_link",
    "decode_chat_invite_link_json",
    "decode_chat_member",
    "decode_chat_member_json",
    "decode_chat_member_updated",
    "decode_chat_member_updated_json",
]


class ChatMemberStatus(PermissiveEnum):
    __slots__ = ()

    CREATOR = "creator"
    ADMINISTRATOR = "administrator"
    MEMBER = "member"
    LEFT = "left"
    KICKED = "kicked"


class User(Record):
    id: int
    is_bot: bool
    first_name: str
    last_name: str | None | UnsetType = UNSET
    username: str | None | UnsetType = UNSET
    language_code: str | None | UnsetType = UNSET


class Chat(Record):
    id: int
    type: str
    title: str | None | UnsetType = UNSET
    username: str | None | UnsetType = UNSET
    first_name: str | None | UnsetType = UNSET
    last_name: str | None | UnsetType = UNSET


class ChatMember(Record):
    user: User
    status: ChatMemberStatus
    # restricted and kicked: unix time when restrictions are lifted
    until_date: int | None | UnsetType = UNSET
    # administrators only
    can_be_edited: bool | None | UnsetType = UNSET
    can_change_info: bool | None | UnsetType = UNSET
    can_post_messages: bool | None | UnsetType = UNSET
    can_edit_messages: bool | None | UnsetType = UNSET
    can_delete_messages: bool | None | UnsetType = UNSET
    can_invite_users: bool | None | UnsetType = UNSET
    can_restrict_members: bool | None | UnsetType = UNSET
    can_pin_messages: bool | None | UnsetType = UNSET
    can_promote_members: bool | None | UnsetType = UNSET
    # restricted only
    can_send_messages: bool | None | UnsetType = UNSET
    can_send_media_messages: bool | None | UnsetType = UNSET
    can_send_other_messages: bool | None | UnsetType = UNSET
    can_add_web_page_previews: bool | None | UnsetType = UNSET


class ChatInviteLink(Record):
    # links created by another administrator arrive with the tail replaced by "..."
    invite_link: str
    creator: User
    is_primary: bool
    is_revoked: bool
    expire_date: int | None | UnsetType = UNSET
    # 1-99999 per the Bot API docs; not checked
    member_limit: int | None | UnsetType = UNSET


class ChatMemberUpdated(Record):
    chat: Chat
    from_: User = msgspec.field(name="from")
    date: int
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: ChatInviteLink | None | UnsetType = UNSET


CHAT_MEMBER = RecordCodec(ChatMember)
CHAT_INVITE_LINK = RecordCodec(ChatInviteLink)
CHAT_MEMBER_UPDATED = RecordCodec(ChatMemberUpdated)


def decode_chat_member(raw: dict[str, Any]) -> ChatMember:
    return CHAT_MEMBER.decode(raw)


def decode_chat_member_json(payload: str | bytes) -> ChatMember:
    return CHAT_MEMBER.decode_json(payload)


def decode_chat_invite_link(raw: dict[str, Any]) -> ChatInviteLink:
    return CHAT_INVITE_LINK.decode(raw)


def decode_chat_invite_link_json(payload: str | bytes) -> ChatInviteLink:
    return CHAT_INVITE_LINK.decode_json(payload)


def decode_chat_member_updated(raw: dict[str, Any]) -> ChatMemberUpdated:
    return CHAT_MEMBER_UPDATED.decode(raw)


def decode_chat_member_updated_json(payload: str | bytes) -> ChatMemberUpdated:
    return CHAT_MEMBER_UPDATED.decode_json(payload)
