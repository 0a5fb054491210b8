import pytest

from taskhooks.channels.dingtalk import build_dingtalk_message, parse_mentions
from taskhooks.models import Hook

MESSAGE = "hooks.task_success_dingtalk_message"


def test_dingtalk_message(ctx, dingtalk_hook):
    message = build_dingtalk_message(ctx, dingtalk_hook, MESSAGE)

    assert message.headers == {"Content-Type": "application/json;charset=utf-8"}
    assert message.data["msgtype"] == "markdown"
    assert message.data["markdown"]["title"] == "Deployment #42 successful!"
    assert message.data["at"] == {"atMobiles": ["a", "b", "c"], "isAtAll": True}


def test_dingtalk_text(ctx, dingtalk_hook):
    text = build_dingtalk_message(ctx, dingtalk_hook, MESSAGE).data["markdown"]["text"]

    assert text == (
        "#### Deployment #42 successful!\n"
        "Project: [Storefront](https://deploy.example.test/projects/3) "
        "Commit: [8f14e45](https://git.example.test/storefront/commit/8f14e45)\n\n"
        "Committer:Ada Branch:main\n\n"
        "##### [Deployment details](https://deploy.example.test/deployments/42)\n\n"
    )


@pytest.mark.parametrize("commit_url", [None, ""])
def test_dingtalk_reason_and_plain_commit(make_ctx, dingtalk_hook, commit_url):
    ctx = make_ctx(commit_url=commit_url, reason="Hotfix")
    text = build_dingtalk_message(ctx, dingtalk_hook, MESSAGE).data["markdown"]["text"]

    assert "Commit: 8f14e45\n\n" in text
    assert "](https://git.example.test" not in text
    assert text.count("> Deployment reason - Hotfix\n\n") == 1


def test_dingtalk_blank_reason_omitted(make_ctx, dingtalk_hook):
    text = build_dingtalk_message(make_ctx(reason=" "), dingtalk_hook, MESSAGE).data["markdown"]["text"]
    assert ">" not in text


def test_mentions_missing(ctx):
    hook = Hook(id=5, project_id=3, name="Bot", type="dingtalk", config={"url": "https://oapi.dingtalk.com/x"})
    message = build_dingtalk_message(ctx, hook, MESSAGE)

    assert message.data["at"] == {"atMobiles": [], "isAtAll": False}


def test_parse_mentions():
    assert parse_mentions("") == []
    assert parse_mentions(None) == []
    assert parse_mentions("a") == ["a"]
    assert parse_mentions("a,b,c") == ["a", "b", "c"]


@pytest.mark.parametrize(
    "is_at_all, expected",
    [("0", False), ("", False), (0, False), (None, False), ("1", True), (1, True), (True, True)],
)
def test_is_at_all_flag(ctx, dingtalk_hook, is_at_all, expected):
    hook = dingtalk_hook.model_copy(update={"config": {**dingtalk_hook.config, "is_at_all": is_at_all}})
    assert build_dingtalk_message(ctx, hook, MESSAGE).data["at"]["isAtAll"] is expected
