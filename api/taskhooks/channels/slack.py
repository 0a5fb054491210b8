"""Slack channel builder."""

from taskhooks.channels import SlackAttachment, SlackMessage
from taskhooks.channels.context import EventContext
from taskhooks.errors import MalformedConfiguration
from taskhooks.models import Hook


def slack_link(url: str, label: str) -> str:
    return f"<{url}|{label}>"


def build_slack_message(ctx: EventContext, hook: Hook, message_key: str) -> SlackMessage:
    """
    Build the Slack message for a finished task.

    Config expects:
        - url: Slack incoming webhook URL
        - channel: channel to post to
        - icon: optional emoji shown as the sender icon
    """
    channel = hook.config.get("channel")
    if not channel:
        raise MalformedConfiguration("slack", "Missing required field: channel")

    task = ctx.task

    # The commit is only linked when the task knows where it lives
    commit = task.short_commit
    if ctx.commit_url:
        commit = slack_link(ctx.commit_url, task.short_commit)

    fields = [
        (ctx.trans("hooks.project"), slack_link(ctx.project_url, ctx.project.name)),
        (ctx.trans("hooks.commit"), commit),
        (ctx.trans("hooks.committer"), task.committer),
        (ctx.trans("hooks.branch"), task.branch),
    ]

    attachment = SlackAttachment(
        content=ctx.trans(message_key, task=slack_link(ctx.task_url, ctx.task_ref)),
        fallback=ctx.trans(message_key, task=ctx.task_ref),
        fields=fields,
        footer=ctx.trans("app.name"),
        timestamp=ctx.finished_timestamp,
    )

    return SlackMessage(
        url=hook.config.get("url", ""),
        channel=channel,
        icon=hook.config.get("icon") or None,
        attachment=attachment,
    )
