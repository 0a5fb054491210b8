"""
Task finished notifications.

A notification pairs a finished task with its outcome. The outcome decides
which hooks receive it and which messages are used for each channel; the
message building itself is left to the channel builders.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from taskhooks.channels import MailMessage, SlackMessage, WebhookMessage
from taskhooks.channels.context import EventContext
from taskhooks.channels.dingtalk import build_dingtalk_message
from taskhooks.channels.mail import build_mail_message
from taskhooks.channels.slack import build_slack_message
from taskhooks.channels.webhook import EVENT_SUCCEEDED, build_webhook_message
from taskhooks.models import Hook, Project, Task

logger = logging.getLogger(__name__)

EVENT_FAILED = "deployment_failed"


@dataclass(frozen=True)
class TaskFinishedNotification(ABC):
    project: Project
    task: Task
    event: str = ""

    @property
    @abstractmethod
    def mail_subject_key(self) -> str:
        ...

    @property
    @abstractmethod
    def mail_message_key(self) -> str:
        ...

    @property
    @abstractmethod
    def slack_message_key(self) -> str:
        ...

    @property
    @abstractmethod
    def dingtalk_message_key(self) -> str:
        ...

    @abstractmethod
    def subscribed(self, hook: Hook) -> bool:
        """Whether the hook subscribes to this outcome."""
        ...

    def via(self, hook: Hook) -> Optional[str]:
        """Hook type to deliver on, or None when the hook does not want this event."""
        if not hook.enabled or not self.subscribed(hook):
            return None
        return hook.type

    def to_mail(self, ctx: EventContext, hook: Hook) -> MailMessage:
        return build_mail_message(ctx, hook, self.mail_subject_key, self.mail_message_key)

    def to_slack(self, ctx: EventContext, hook: Hook) -> SlackMessage:
        return build_slack_message(ctx, hook, self.slack_message_key)

    def to_dingtalk(self, ctx: EventContext, hook: Hook) -> WebhookMessage:
        return build_dingtalk_message(ctx, hook, self.dingtalk_message_key)

    def to_webhook(self, ctx: EventContext, hook: Hook) -> WebhookMessage:
        return build_webhook_message(ctx, hook, self.event)


@dataclass(frozen=True)
class TaskSucceededNotification(TaskFinishedNotification):
    event: str = EVENT_SUCCEEDED

    mail_subject_key = "hooks.task_success_email_subject"
    mail_message_key = "hooks.task_success_email_message"
    slack_message_key = "hooks.task_success_slack_message"
    dingtalk_message_key = "hooks.task_success_dingtalk_message"

    def subscribed(self, hook: Hook) -> bool:
        return hook.on_task_success


@dataclass(frozen=True)
class TaskFailedNotification(TaskFinishedNotification):
    event: str = EVENT_FAILED

    mail_subject_key = "hooks.task_failed_email_subject"
    mail_message_key = "hooks.task_failed_email_message"
    slack_message_key = "hooks.task_failed_slack_message"
    dingtalk_message_key = "hooks.task_failed_dingtalk_message"

    def subscribed(self, hook: Hook) -> bool:
        return hook.on_task_failure


def notification_for(event: str, project: Project, task: Task) -> TaskFinishedNotification:
    """
    Pick the notification for an event name.

    Only ``deployment_succeeded`` counts as success. Any other name is sent
    as a failure, keeping the original name in the webhook ``X-Event`` header.
    """
    if event == EVENT_SUCCEEDED:
        return TaskSucceededNotification(project=project, task=task)
    if event != EVENT_FAILED:
        logger.warning("Unmapped task event %s, notifying as failure", event)
    return TaskFailedNotification(project=project, task=task, event=event)
