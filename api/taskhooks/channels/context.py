"""Derived values shared by every channel builder."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from taskhooks.i18n import Translator
from taskhooks.models import Project, Task
from taskhooks.routing import UrlGenerator

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_time(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return value.strftime(TIME_FORMAT)


def unix_timestamp(value: Optional[datetime]) -> Optional[int]:
    """Seconds since the epoch; naive datetimes are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


@dataclass(frozen=True)
class EventContext:
    """
    A finished task of a project, with the services needed to describe it.

    Nothing is cached: project and task are immutable for the duration of
    a build, so every property is computed on access.
    """
    project: Project
    task: Task
    translator: Translator
    urls: UrlGenerator

    def trans(self, key: str, **params: Any) -> str:
        return self.translator.resolve(key, **params)

    @property
    def project_url(self) -> str:
        return self.urls.url_for("projects", self.project.id)

    @property
    def task_url(self) -> str:
        return self.urls.url_for("deployments", self.task.id)

    @property
    def task_ref(self) -> str:
        return f"#{self.task.id}"

    @property
    def commit_url(self) -> Optional[str]:
        return self.task.commit_url or None

    @property
    def reason(self) -> Optional[str]:
        reason = self.task.reason
        if reason is None or not reason.strip():
            return None
        return reason

    @property
    def started_at(self) -> str:
        return format_time(self.task.started_at)

    @property
    def finished_at(self) -> str:
        return format_time(self.task.finished_at)

    @property
    def finished_timestamp(self) -> Optional[int]:
        return unix_timestamp(self.task.finished_at)
