"""DingTalk (markdown chat-bot webhook) channel builder."""

from taskhooks.channels import WebhookMessage
from taskhooks.channels.context import EventContext
from taskhooks.models import Hook


def markdown_link(label: str, url: str) -> str:
    return f"[{label}]({url})"


def parse_mentions(value) -> list[str]:
    """Split the comma-separated ``at_mobiles`` setting; empty gives []."""
    if not value:
        return []
    return str(value).split(",")


def _flag(value) -> bool:
    """Strict boolean of a config flag; form-stored "0" and "" are false."""
    if isinstance(value, str):
        return value.strip() not in ("", "0")
    return bool(value)


def build_dingtalk_message(ctx: EventContext, hook: Hook, message_key: str) -> WebhookMessage:
    """
    Build the markdown message for a DingTalk robot.

    Config expects:
        - url: robot webhook URL
        - at_mobiles: optional comma-separated phone numbers to mention
        - is_at_all: optional flag to mention everyone
    """
    task = ctx.task
    title = ctx.trans(message_key, task=ctx.task_ref)

    commit = task.short_commit
    if ctx.commit_url:
        commit = markdown_link(task.short_commit, ctx.commit_url)

    content = (
        f"{ctx.trans('hooks.project')}: {markdown_link(ctx.project.name, ctx.project_url)} "
        f"{ctx.trans('hooks.commit')}: {commit}\n\n"
    )
    content += (
        f"{ctx.trans('hooks.committer')}:{task.committer} "
        f"{ctx.trans('hooks.branch')}:{task.branch}\n\n"
    )
    if ctx.reason:
        content += f"> {ctx.trans('hooks.deployment_reason', reason=ctx.reason)}\n\n"

    text = (
        f"#### {title}\n"
        + content
        + f"##### {markdown_link(ctx.trans('hooks.deployment_details'), ctx.task_url)}\n\n"
    )

    data = {
        "msgtype": "markdown",
        "markdown": {
            "title": title,
            "text": text,
        },
        "at": {
            "atMobiles": parse_mentions(hook.config.get("at_mobiles")),
            "isAtAll": _flag(hook.config.get("is_at_all")),
        },
    }

    return WebhookMessage(
        url=hook.config.get("url", ""),
        data=data,
        headers={"Content-Type": "application/json;charset=utf-8"},
    )
