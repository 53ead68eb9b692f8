from __future__ import annotations

from typing import Any


def user(user_id: int = 42, **extra: Any) -> dict[str, Any]:
    return {"id": user_id, "is_bot": False, "first_name": "Ada", **extra}


def chat(chat_id: int = -100123, **extra: Any) -> dict[str, Any]:
    return {"id": chat_id, "type": "supergroup", "title": "ops", **extra}


def chat_member(status: str = "member", **extra: Any) -> dict[str, Any]:
    return {"user": user(), "status": status, **extra}


def invite_link(**extra: Any) -> dict[str, Any]:
    return {
        "invite_link": "https://t.me/+AbCdEfGhIjK",
        "creator": user(7),
        "is_primary": False,
        "is_revoked": False,
        **extra,
    }


def chat_member_updated(
    old: dict[str, Any] | None = None,
    new: dict[str, Any] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    return {
        "chat": chat(),
        "from": user(7),
        "date": 1620000000,
        "old_chat_member": old if old is not None else chat_member("left"),
        "new_chat_member": new if new is not None else chat_member("member"),
        **extra,
    }
