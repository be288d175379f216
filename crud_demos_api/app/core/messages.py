"""
User-facing "not found" messages.

Each resource has one message template per locale.  Templates are
formatted with ``id``; the profile template names the user id the
lookup was made with.  Japanese is the default, matching the wording
clients of the demo APIs already receive.
"""

from typing import Dict

DEFAULT_LOCALE = "ja"

NOT_FOUND_MESSAGES: Dict[str, Dict[str, str]] = {
    "ja": {
        "post": "投稿ID{id}が見つかりません",
        "comment": "コメントID {id} が見つかりません",
        "file": "ファイルID {id} が見つかりません",
        "memo": "メモID: {id} が見つかりません",
        "task": "タスクID: {id} が見つかりません",
        "user": "ユーザーID: {id} が見つかりません",
        "profile": "ユーザーID: {id} のプロフィールが見つかりません",
    },
    "en": {
        "post": "Post with ID {id} not found",
        "comment": "Comment with ID {id} not found",
        "file": "File with ID {id} not found",
        "memo": "Memo with ID {id} not found",
        "task": "Task with ID {id} not found",
        "user": "User with ID {id} not found",
        "profile": "Profile for user ID {id} not found",
    },
}


def not_found_message(resource: str, record_id: int, locale: str = DEFAULT_LOCALE) -> str:
    """Return the localized "not found" message for ``resource``.

    Unknown locales fall back to ``DEFAULT_LOCALE``; unknown resources
    get a generic English message.
    """
    catalogue = NOT_FOUND_MESSAGES.get(locale) or NOT_FOUND_MESSAGES[DEFAULT_LOCALE]
    template = catalogue.get(resource)
    if template is None:
        return f"{resource} {record_id} not found"
    return template.format(id=record_id)
