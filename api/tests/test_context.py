from datetime import datetime, timezone

from taskhooks.channels.context import format_time, unix_timestamp


def test_links(ctx):
    assert ctx.project_url == "https://deploy.example.test/projects/3"
    assert ctx.task_url == "https://deploy.example.test/deployments/42"
    assert ctx.task_ref == "#42"


def test_short_commit_derived_from_commit(ctx):
    assert ctx.task.short_commit == "8f14e45"


def test_explicit_short_commit_kept(make_ctx):
    ctx = make_ctx(short_commit="8f14")
    assert ctx.task.short_commit == "8f14"


def test_commit_url_empty_is_none(make_ctx):
    assert make_ctx(commit_url="").commit_url is None
    assert make_ctx(commit_url=None).commit_url is None


def test_reason_blank_is_none(make_ctx):
    assert make_ctx(reason=None).reason is None
    assert make_ctx(reason="").reason is None
    assert make_ctx(reason="   ").reason is None


def test_reason_kept_verbatim(make_ctx):
    assert make_ctx(reason=" hotfix for #12 ").reason == " hotfix for #12 "


def test_formatted_times(ctx):
    assert ctx.started_at == "2024-05-01 12:00:00"
    assert ctx.finished_at == "2024-05-01 12:03:30"


def test_missing_times(make_ctx):
    ctx = make_ctx(started_at=None, finished_at=None)
    assert ctx.started_at == ""
    assert ctx.finished_timestamp is None


def test_naive_times_are_utc():
    naive = datetime(2024, 5, 1, 12, 3, 30)
    aware = datetime(2024, 5, 1, 12, 3, 30, tzinfo=timezone.utc)
    assert unix_timestamp(naive) == unix_timestamp(aware) == 1714565010
    assert format_time(None) == ""
