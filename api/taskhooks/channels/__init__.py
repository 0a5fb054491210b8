"""Message types produced by the channel builders."""

import copy
import json
from dataclasses import asdict, dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class MailMessage:
    """An email, referencing the view that renders its body."""
    to: str
    subject: str
    view: tuple[str, str]
    view_data: dict
    lines: list[str]
    action_text: str
    action_url: str
    outro_lines: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SlackAttachment:
    content: str
    fallback: str
    fields: list[tuple[str, str]]
    footer: str
    timestamp: Optional[int]

    def to_dict(self) -> dict:
        return {
            "text": self.content,
            "fallback": self.fallback,
            "fields": [
                {"title": title, "value": value, "short": True}
                for title, value in self.fields
            ],
            "footer": self.footer,
            "ts": self.timestamp,
        }


@dataclass(frozen=True)
class SlackMessage:
    """A Slack incoming-webhook message with a single attachment."""
    url: str
    channel: str
    icon: Optional[str]
    attachment: SlackAttachment

    def to_dict(self) -> dict:
        body = {
            "channel": self.channel,
            "attachments": [self.attachment.to_dict()],
        }
        if self.icon:
            body["icon_emoji"] = self.icon
        return {"url": self.url, "body": body}


@dataclass(frozen=True)
class WebhookMessage:
    """A JSON body plus the HTTP headers to send it with."""
    url: str
    data: dict
    headers: dict[str, str]

    def body(self) -> str:
        return json.dumps(self.data, ensure_ascii=False)

    def to_dict(self) -> dict:
        return {"url": self.url, "headers": dict(self.headers), "body": copy.deepcopy(self.data)}


ChannelMessage = Union[MailMessage, SlackMessage, WebhookMessage]
