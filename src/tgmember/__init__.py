from __future__ import annotations

from .api_models import (
    Chat,
    ChatInviteLink,
    ChatMember,
    ChatMemberStatus,
    ChatMemberUpdated,
    User,
    decode_chat_invite_link,
    decode_chat_invite_link_json,
    decode_chat_member,
    decode_chat_member_json,
    decode_chat_member_updated,
    decode_chat_member_updated_json,
)
from .codec import UNSET, UnsetType, is_present, unrecognized_values
from .errors import DecodeError, MalformedPayload, MissingField, TypeMismatch

__version__ = "0.1.0"

__all__ = [
    "UNSET",
    "Chat",
    "ChatInviteLink",
    "ChatMember",
    "ChatMemberStatus",
    "ChatMemberUpdated",
    "DecodeError",
    "MalformedPayload",
    "MissingField",
    "TypeMismatch",
    "UnsetType",
    "User",
    "decode_chat_invite_link",
    "decode_chat_invite_link_json",
    "decode_chat_member",
    "decode_chat_member_json",
    "decode_chat_member_updated",
    "decode_chat_member_updated_json",
    "is_present",
    "unrecognized_values",
]
