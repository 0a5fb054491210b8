"""Errors raised while building a channel message for a hook."""

from typing import Any, Optional


class NotificationError(Exception):
    """Base class for failures that abort a single message build."""


class MissingTranslation(NotificationError):
    def __init__(self, key: str, locale: Optional[str] = None, detail: Optional[str] = None):
        self.key = key
        self.locale = locale
        message = f"No translation for '{key}'"
        if locale:
            message += f" (locale: {locale})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class InvalidReference(NotificationError):
    def __init__(self, resource: str, id: Any, detail: Optional[str] = None):
        self.resource = resource
        self.id = id
        message = f"Cannot generate URL for {resource} '{id}'"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class MalformedConfiguration(NotificationError):
    def __init__(self, hook_type: str, detail: str):
        self.hook_type = hook_type
        self.detail = detail
        super().__init__(f"Invalid {hook_type} hook configuration: {detail}")
