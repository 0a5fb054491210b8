import pytest

from taskhooks.models import Hook
from taskhooks.notifications import (
    TaskFailedNotification,
    TaskFinishedNotification,
    TaskSucceededNotification,
    notification_for,
)


def test_notification_for_events(project, task):
    succeeded = notification_for("deployment_succeeded", project, task)
    failed = notification_for("deployment_failed", project, task)

    assert isinstance(succeeded, TaskSucceededNotification)
    assert succeeded.event == "deployment_succeeded"
    assert isinstance(failed, TaskFailedNotification)
    assert failed.event == "deployment_failed"


def test_unknown_event_is_failure(project, task):
    notification = notification_for("deployment_rolled_back", project, task)

    assert isinstance(notification, TaskFailedNotification)
    assert notification.event == "deployment_rolled_back"


def test_via_respects_subscription(project, task, slack_hook):
    succeeded = TaskSucceededNotification(project=project, task=task)
    failed = TaskFailedNotification(project=project, task=task)
    success_only = slack_hook.model_copy(update={"on_task_failure": False})
    disabled = slack_hook.model_copy(update={"enabled": False})

    assert succeeded.via(success_only) == "slack"
    assert failed.via(success_only) is None
    assert succeeded.via(disabled) is None


def test_keys_per_outcome(project, task, ctx, mail_hook, slack_hook):
    succeeded = TaskSucceededNotification(project=project, task=task)
    failed = TaskFailedNotification(project=project, task=task)

    assert succeeded.to_mail(ctx, mail_hook).subject == "Deployment Finished"
    assert failed.to_mail(ctx, mail_hook).subject == "Deployment Failed"
    assert failed.to_slack(ctx, slack_hook).attachment.fallback == ":x: Deployment #42 failed!"


def test_webhook_status_follows_event(project, task, ctx, webhook_hook):
    assert TaskSucceededNotification(project, task).to_webhook(ctx, webhook_hook).data["status"] == "success"
    assert TaskFailedNotification(project, task).to_webhook(ctx, webhook_hook).data["status"] == "failure"


def test_dingtalk_title(project, task, ctx):
    hook = Hook(id=8, project_id=3, name="Bot", type="dingtalk", config={"url": "https://oapi.dingtalk.com/x"})
    message = TaskSucceededNotification(project, task).to_dingtalk(ctx, hook)
    assert message.data["markdown"]["title"] == "Deployment #42 successful!"


def test_base_notification_is_abstract(project, task):
    with pytest.raises(TypeError):
        TaskFinishedNotification(project=project, task=task)


def test_outcome_without_keys_is_abstract(project, task):
    class HalfDone(TaskFinishedNotification):
        def subscribed(self, hook):
            return True

    with pytest.raises(TypeError):
        HalfDone(project=project, task=task)
