"""Generic webhook channel builder."""

from taskhooks.channels import WebhookMessage
from taskhooks.channels.context import EventContext
from taskhooks.models import Hook

EVENT_SUCCEEDED = "deployment_succeeded"

# Task attributes forwarded as-is; nothing else of the task is sent
TASK_ATTRIBUTES = ("id", "branch", "started_at", "finished_at", "commit", "source", "reason")


def task_status(event: str) -> str:
    return "success" if event == EVENT_SUCCEEDED else "failure"


def build_webhook_message(ctx: EventContext, hook: Hook, event: str) -> WebhookMessage:
    """
    Build the JSON payload for a generic webhook.

    Config expects:
        - url: Webhook URL
        - custom_headers: Optional dict of custom headers
    """
    task = ctx.task
    attributes = task.attributes()

    data = {key: attributes[key] for key in TASK_ATTRIBUTES if key in attributes}
    data.update({
        "project": task.project_name,
        "committed_by": task.committer,
        "started_by": task.deployer_name,
        "status": task_status(event),
        "url": ctx.task_url,
    })

    headers = {}
    custom_headers = hook.config.get("custom_headers")
    if isinstance(custom_headers, dict):
        headers.update({str(k): str(v) for k, v in custom_headers.items()})

    # Identity headers always win over custom ones
    headers.update({
        "X-Project-Id": str(hook.project_id),
        "X-Notification-Id": str(hook.id),
        "X-Event": event,
    })

    return WebhookMessage(
        url=hook.config.get("url", ""),
        data=data,
        headers=headers,
    )
