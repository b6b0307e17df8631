import base64
import urllib.parse
from dataclasses import dataclass, field, fields
from enum import Enum

from .tokenizer import tokenize

REDACTED = "###"


@dataclass(frozen=True)
class CommandRequest:
    token: str | None = None
    team_id: str | None = None
    team_domain: str | None = None
    enterprise_id: str | None = None
    enterprise_name: str | None = None
    channel_id: str | None = None
    channel_name: str | None = None
    user_id: str | None = None
    user_name: str | None = None
    command: str | None = None
    text: str | None = None
    response_url: str | None = None

    def __post_init__(self):
        if self.response_url is not None:
            parsed = urllib.parse.urlparse(self.response_url)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                raise ValueError(f"response_url is not an absolute URL: {self.response_url!r}")

    @classmethod
    def from_form(cls, form: dict) -> "CommandRequest":
        # parse_qs gives {"text": ["hello"]}; keep the first value of each field
        values = {}
        for f in fields(cls):
            value = form.get(f.name)
            if isinstance(value, (list, tuple)):
                value = value[0] if value else None
            values[f.name] = value
        return cls(**values)

    @classmethod
    def from_event(cls, event: dict) -> "CommandRequest":
        if "body" not in event:
            # mapping template or direct invoke: fields are already decoded
            return cls.from_form(event)
        body = event.get("body") or ""
        if isinstance(body, dict):
            # JSON mapping template or test invoke
            return cls.from_form(body)
        if not isinstance(body, (str, bytes)):
            raise ValueError(f"unsupported body type: {type(body).__name__}")
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body)
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        return cls.from_form(urllib.parse.parse_qs(body))

    @property
    def arguments(self) -> list[str]:
        return tokenize(self.text)

    def redacted(self) -> dict:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["token"] = REDACTED
        return data

    def __str__(self):
        return "".join(f"{k}: {v if v is not None else ''}\n" for k, v in self.redacted().items())


class ResponseType(str, Enum):
    IN_CHANNEL = "in_channel"
    EPHEMERAL = "ephemeral"


@dataclass(frozen=True)
class Attachment:
    text: str = ""
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "Attachment":
        extra = {k: v for k, v in data.items() if k != "text"}
        return cls(text=data.get("text") or "", extra=extra)

    def to_dict(self) -> dict:
        return {**self.extra, "text": self.text}


@dataclass(frozen=True)
class ResponseMessage:
    response_type: str
    text: str = ""
    attachments: tuple = ()

    def __post_init__(self):
        if not self.response_type or not str(self.response_type).strip():
            raise ValueError("response_type is null or whitespace")
        if self.text is None:
            object.__setattr__(self, "text", "")
        object.__setattr__(self, "attachments", tuple(
            a if isinstance(a, Attachment) else Attachment.from_dict(a) for a in self.attachments or ()
        ))

    @classmethod
    def in_channel(cls, text: str | None, *attachments) -> "ResponseMessage":
        return cls(ResponseType.IN_CHANNEL, text, attachments)

    @classmethod
    def ephemeral(cls, text: str | None, *attachments) -> "ResponseMessage":
        return cls(ResponseType.EPHEMERAL, text, attachments)

    def to_dict(self) -> dict:
        response_type = self.response_type
        if isinstance(response_type, ResponseType):
            response_type = response_type.value
        return {
            "response_type": response_type,
            "text": self.text,
            "attachments": [a.to_dict() for a in self.attachments] or None,
        }

    def __str__(self):
        lines = [self.text] + [a.text for a in self.attachments]
        return "".join(f"{line}\n" for line in lines)
