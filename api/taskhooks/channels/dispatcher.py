"""Build the channel messages of a notification for all of a project's hooks."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from taskhooks.channels import ChannelMessage
from taskhooks.channels.context import EventContext
from taskhooks.channels.validate import validate_hook_config
from taskhooks.errors import MalformedConfiguration, NotificationError
from taskhooks.i18n import Translator
from taskhooks.models import Hook
from taskhooks.notifications import TaskFinishedNotification
from taskhooks.routing import UrlGenerator

logger = logging.getLogger(__name__)

ChannelBuilder = Callable[[TaskFinishedNotification, EventContext, Hook], ChannelMessage]

CHANNEL_BUILDERS: dict[str, ChannelBuilder] = {
    "mail": TaskFinishedNotification.to_mail,
    "slack": TaskFinishedNotification.to_slack,
    "dingtalk": TaskFinishedNotification.to_dingtalk,
    "webhook": TaskFinishedNotification.to_webhook,
}


@dataclass
class BuiltMessage:
    hook_id: int
    channel: str
    message: ChannelMessage

    def to_dict(self) -> dict:
        return {
            "hook_id": self.hook_id,
            "channel": self.channel,
            "message": self.message.to_dict(),
        }


@dataclass
class BuildFailure:
    """A hook whose message could not be built."""
    hook_id: int
    channel: str
    error_type: str
    error: str

    @classmethod
    def from_exception(cls, hook: Hook, channel: str, exc: Exception) -> "BuildFailure":
        return cls(
            hook_id=hook.id,
            channel=channel,
            error_type=type(exc).__name__,
            error=str(exc),
        )

    def to_dict(self) -> dict:
        return {
            "hook_id": self.hook_id,
            "channel": self.channel,
            "error_type": self.error_type,
            "error": self.error,
        }


@dataclass
class BuildReport:
    messages: list[BuiltMessage] = field(default_factory=list)
    failures: list[BuildFailure] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "messages": [m.to_dict() for m in self.messages],
            "failures": [f.to_dict() for f in self.failures],
            "skipped": list(self.skipped),
        }


def build_message(
    notification: TaskFinishedNotification,
    ctx: EventContext,
    hook: Hook,
    channel_type: str,
) -> ChannelMessage:
    """Validate the hook config and build its message; raises NotificationError."""
    config_error = validate_hook_config(channel_type, hook.config)
    if config_error:
        raise MalformedConfiguration(channel_type, config_error)
    return CHANNEL_BUILDERS[channel_type](notification, ctx, hook)


def build_notifications(
    notification: TaskFinishedNotification,
    hooks: Iterable[Hook],
    translator: Translator,
    urls: UrlGenerator,
) -> BuildReport:
    """
    Build one message per subscribed hook.

    A hook whose message cannot be built is recorded as a failure and the
    remaining hooks are still built.

    Args:
        notification: The finished task and its outcome
        hooks: The project's hooks
        translator: Message lookup for labels and bodies
        urls: URL generator for project and deployment links
    """
    ctx = EventContext(
        project=notification.project,
        task=notification.task,
        translator=translator,
        urls=urls,
    )
    report = BuildReport()

    for hook in hooks:
        channel_type = notification.via(hook)
        if channel_type is None:
            report.skipped.append(hook.id)
            continue

        try:
            message = build_message(notification, ctx, hook, channel_type)
        except NotificationError as e:
            logger.warning(
                "Cannot build %s notification for hook %s: %s", channel_type, hook.id, e
            )
            report.failures.append(BuildFailure.from_exception(hook, channel_type, e))
            continue
        except Exception as e:
            logger.error(
                "Error building %s notification for hook %s: %s",
                channel_type,
                hook.id,
                e,
                exc_info=True,
            )
            report.failures.append(BuildFailure.from_exception(hook, channel_type, e))
            continue

        report.messages.append(BuiltMessage(hook_id=hook.id, channel=channel_type, message=message))

    logger.debug(
        "Built %d message(s) for task %s, %d failure(s)",
        len(report.messages),
        notification.task.id,
        len(report.failures),
    )
    return report
