"""Shared fixtures: one project, a finished task and a hook per channel."""

from datetime import datetime

import pytest

from taskhooks.channels.context import EventContext
from taskhooks.i18n import get_translator
from taskhooks.models import Hook, Project, Task
from taskhooks.routing import RouteUrlGenerator

BASE_URL = "https://deploy.example.test"


@pytest.fixture
def project():
    return Project(id=3, name="Storefront")


def make_task(**overrides) -> Task:
    data = {
        "id": 42,
        "project_id": 3,
        "project_name": "Storefront",
        "branch": "main",
        "commit": "8f14e45fceea167a5a36dedd4bea2543c0ffee00",
        "commit_url": "https://git.example.test/storefront/commit/8f14e45",
        "committer": "Ada",
        "deployer_name": "Grace",
        "started_at": datetime(2024, 5, 1, 12, 0, 0),
        "finished_at": datetime(2024, 5, 1, 12, 3, 30),
        "reason": None,
        "source": "branch",
    }
    data.update(overrides)
    return Task(**data)


@pytest.fixture
def task():
    return make_task()


@pytest.fixture
def translator():
    return get_translator("en")


@pytest.fixture
def urls():
    return RouteUrlGenerator(BASE_URL)


@pytest.fixture
def make_ctx(project, translator, urls):
    def _make(**task_overrides) -> EventContext:
        return EventContext(
            project=project,
            task=make_task(**task_overrides),
            translator=translator,
            urls=urls,
        )

    return _make


@pytest.fixture
def ctx(make_ctx):
    return make_ctx()


@pytest.fixture
def mail_hook():
    return Hook(id=1, project_id=3, name="Ops mail", type="mail", config={"email": "ops@example.test"})


@pytest.fixture
def slack_hook():
    return Hook(
        id=2,
        project_id=3,
        name="Slack",
        type="slack",
        config={"url": "https://hooks.slack.com/services/T/B/X", "channel": "#deploys", "icon": ":rocket:"},
    )


@pytest.fixture
def dingtalk_hook():
    return Hook(
        id=3,
        project_id=3,
        name="DingTalk",
        type="dingtalk",
        config={"url": "https://oapi.dingtalk.com/robot/send?access_token=abc", "at_mobiles": "a,b,c", "is_at_all": 1},
    )


@pytest.fixture
def webhook_hook():
    return Hook(
        id=4,
        project_id=3,
        name="CI",
        type="webhook",
        config={"url": "https://ci.example.test/hooks", "custom_headers": {"Authorization": "Bearer t"}},
    )
