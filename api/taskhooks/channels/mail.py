"""Mail channel builder."""

import html as html_lib

from taskhooks.channels import MailMessage
from taskhooks.channels.context import EventContext
from taskhooks.models import Hook

MAIL_VIEWS = ("notifications.email", "notifications.email-plain")


def build_mail_message(
    ctx: EventContext,
    hook: Hook,
    subject_key: str,
    message_key: str,
) -> MailMessage:
    """
    Build the email for a finished task.

    Config expects:
        - email: recipient address
    """
    task = ctx.task

    table = [
        (ctx.trans("hooks.project_name"), ctx.project.name),
        (ctx.trans("hooks.deployed_branch"), task.branch),
        (ctx.trans("hooks.started_at"), ctx.started_at),
        (ctx.trans("hooks.finished_at"), ctx.finished_at),
        (ctx.trans("hooks.last_committer"), task.committer),
        (ctx.trans("hooks.last_commit"), task.short_commit),
    ]

    outro_lines = []
    if ctx.reason:
        outro_lines.append(ctx.trans("hooks.deployment_reason", reason=ctx.reason))

    return MailMessage(
        to=hook.config.get("email", ""),
        subject=ctx.trans(subject_key),
        view=MAIL_VIEWS,
        view_data={"name": hook.name, "table": table},
        lines=[ctx.trans(message_key)],
        action_text=ctx.trans("hooks.deployment_details"),
        action_url=ctx.task_url,
        outro_lines=outro_lines,
    )


def render_mail_html(message: MailMessage, app_name: str) -> str:
    """Render a MailMessage as a standalone HTML body."""
    escape = html_lib.escape

    field_rows = ""
    for label, val in message.view_data["table"]:
        field_rows += (
            f"<tr>"
            f'<td style="padding:10px 14px;font-weight:600;color:#555;'
            f'white-space:nowrap;vertical-align:top;border-bottom:1px solid #eee;">{escape(str(label))}</td>'
            f'<td style="padding:10px 14px;color:#222;border-bottom:1px solid #eee;">{escape(str(val))}</td>'
            f"</tr>"
        )

    intro = "".join(
        f'<p style="margin:0 0 16px;color:#666;font-size:14px;">{escape(line)}</p>'
        for line in message.lines
    )
    outro = "".join(
        f'<p style="margin:16px 0 0;color:#666;font-size:14px;">{escape(line)}</p>'
        for line in message.outro_lines
    )

    return f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body style="margin:0;padding:0;background:#f4f5f7;font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,Helvetica,Arial,sans-serif;">
  <table width="100%" cellpadding="0" cellspacing="0" style="background:#f4f5f7;padding:32px 0;">
    <tr><td align="center">
      <table width="600" cellpadding="0" cellspacing="0" style="background:#ffffff;border-radius:8px;overflow:hidden;">
        <tr>
          <td style="background:#1a1a2e;padding:24px 32px;">
            <h1 style="margin:0;color:#ffffff;font-size:20px;font-weight:600;">{escape(message.subject)}</h1>
          </td>
        </tr>
        <tr>
          <td style="padding:24px 32px;">
            {intro}
            <table width="100%" cellpadding="0" cellspacing="0" style="border:1px solid #eee;border-radius:6px;overflow:hidden;">
              {field_rows}
            </table>
          </td>
        </tr>
        <tr><td style="padding:0 32px 24px;"><a href="{escape(message.action_url)}" style="display:inline-block;padding:10px 20px;background:#1a1a2e;color:#fff;text-decoration:none;border-radius:5px;font-size:14px;">{escape(message.action_text)}</a>{outro}</td></tr>
        <tr>
          <td style="padding:16px 32px;background:#fafafa;border-top:1px solid #eee;">
            <p style="margin:0;color:#999;font-size:12px;">Delivered by {escape(app_name)} &middot; {escape(message.view_data["name"])}</p>
          </td>
        </tr>
      </table>
    </td></tr>
  </table>
</body>
</html>"""
