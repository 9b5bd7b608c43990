"""Data types returned by and sent to the server."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from .compat import parse_id

_TIME_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)


def _parse_time(value: Any) -> datetime | None:
    """Parse an RFC 3339 timestamp; a missing value gives ``None``."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise TypeError(f"cannot decode {value!r} as a time")
    match = _TIME_RE.match(value)
    if match is None:
        raise ValueError(f"invalid RFC 3339 time: {value!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micro = int((fraction or "0")[:6].ljust(6, "0"))
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = 1 if zone[0] == "+" else -1
        offset = timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))
        tz = timezone(sign * offset)
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micro, tzinfo=tz
    )


@dataclass
class Field:
    """A name/value pair on an account profile."""

    name: str = ""
    value: str = ""
    verified_at: datetime | None = None

    @classmethod
    def from_json(cls, data: dict) -> "Field":
        return cls(
            name=data.get("name") or "",
            value=data.get("value") or "",
            verified_at=_parse_time(data.get("verified_at")),
        )


@dataclass
class AccountSource:
    """Defaults and raw profile text of the current account; unset values are ``None``."""

    privacy: str | None = None
    sensitive: bool | None = None
    language: str | None = None
    note: str | None = None
    fields: list[Field] | None = None

    @classmethod
    def from_json(cls, data: dict) -> "AccountSource":
        raw_fields = data.get("fields")
        return cls(
            privacy=data.get("privacy"),
            sensitive=data.get("sensitive"),
            language=data.get("language"),
            note=data.get("note"),
            fields=None if raw_fields is None else [Field.from_json(f) for f in raw_fields],
        )


@dataclass
class Account:
    """A user account."""

    id: str = ""
    username: str = ""
    acct: str = ""
    display_name: str = ""
    locked: bool = False
    created_at: datetime | None = None
    followers_count: int = 0
    following_count: int = 0
    statuses_count: int = 0
    note: str = ""
    url: str = ""
    avatar: str = ""
    avatar_static: str = ""
    header: str = ""
    header_static: str = ""
    emojis: list[dict] = field(default_factory=list)
    moved: "Account | None" = None
    fields: list[Field] = field(default_factory=list)
    bot: bool = False
    discoverable: bool = False
    source: AccountSource | None = None

    @classmethod
    def from_json(cls, data: dict) -> "Account":
        moved = data.get("moved")
        source = data.get("source")
        return cls(
            id=parse_id(data.get("id")),
            username=data.get("username") or "",
            acct=data.get("acct") or "",
            display_name=data.get("display_name") or "",
            locked=bool(data.get("locked", False)),
            created_at=_parse_time(data.get("created_at")),
            followers_count=int(data.get("followers_count") or 0),
            following_count=int(data.get("following_count") or 0),
            statuses_count=int(data.get("statuses_count") or 0),
            note=data.get("note") or "",
            url=data.get("url") or "",
            avatar=data.get("avatar") or "",
            avatar_static=data.get("avatar_static") or "",
            header=data.get("header") or "",
            header_static=data.get("header_static") or "",
            emojis=list(data.get("emojis") or []),
            moved=None if moved is None else cls.from_json(moved),
            fields=[Field.from_json(f) for f in data.get("fields") or []],
            bot=bool(data.get("bot", False)),
            discoverable=bool(data.get("discoverable", False)),
            source=None if source is None else AccountSource.from_json(source),
        )


@dataclass
class Profile:
    """Changes to the current user's profile; ``None`` leaves a value untouched."""

    display_name: str | None = None
    note: str | None = None
    locked: bool | None = None
    fields: list[Field] | None = None
    source: AccountSource | None = None
    # Base64 data URIs of the images; empty means unchanged.
    avatar: str = ""
    header: str = ""

    def to_params(self) -> dict[str, str]:
        """Return the form parameters for an update request."""
        params: dict[str, str] = {}
        if self.display_name is not None:
            params["display_name"] = self.display_name
        if self.note is not None:
            params["note"] = self.note
        if self.locked is not None:
            params["locked"] = "true" if self.locked else "false"
        if self.fields is not None:
            for idx, item in enumerate(self.fields):
                params[f"fields_attributes[{idx}][name]"] = item.name
                params[f"fields_attributes[{idx}][value]"] = item.value
        if self.source is not None:
            if self.source.privacy is not None:
                params["source[privacy]"] = self.source.privacy
            if self.source.sensitive is not None:
                params["source[sensitive]"] = "true" if self.source.sensitive else "false"
            if self.source.language is not None:
                params["source[language]"] = self.source.language
        if self.avatar:
            params["avatar"] = self.avatar
        if self.header:
            params["header"] = self.header
        return params


@dataclass
class Relationship:
    """How the current user relates to another account."""

    id: str = ""
    following: bool = False
    followed_by: bool = False
    blocking: bool = False
    muting: bool = False
    muting_notifications: bool = False
    requested: bool = False
    domain_blocking: bool = False
    showing_reblogs: bool = False
    endorsed: bool = False

    @classmethod
    def from_json(cls, data: dict) -> "Relationship":
        flags = {
            name: bool(data.get(name, False))
            for name in (
                "following", "followed_by", "blocking", "muting",
                "muting_notifications", "requested", "domain_blocking",
                "showing_reblogs", "endorsed",
            )
        }
        return cls(id=parse_id(data.get("id")), **flags)


@dataclass
class Application:
    """A registered client application; ``auth_uri`` is built locally."""

    id: str = ""
    redirect_uri: str = ""
    client_id: str = ""
    client_secret: str = ""
    auth_uri: str = ""

    @classmethod
    def from_json(cls, data: dict) -> "Application":
        return cls(
            id=parse_id(data.get("id")),
            redirect_uri=data.get("redirect_uri") or "",
            client_id=data.get("client_id") or "",
            client_secret=data.get("client_secret") or "",
            auth_uri=data.get("auth_uri") or "",
        )


@dataclass
class ApplicationVerification:
    """The application behind the current access token."""

    name: str = ""
    website: str = ""
    vapid_key: str = ""

    @classmethod
    def from_json(cls, data: dict) -> "ApplicationVerification":
        return cls(
            name=data.get("name") or "",
            website=data.get("website") or "",
            vapid_key=data.get("vapid_key") or "",
        )


@dataclass
class DomainBlock:
    """A domain blocked by the instance."""

    domain: str = ""
    digest: str = ""
    severity: str = ""

    @classmethod
    def from_json(cls, data: dict) -> "DomainBlock":
        return cls(
            domain=data.get("domain") or "",
            digest=data.get("digest") or "",
            severity=data.get("severity") or "",
        )


@dataclass
class Filter:
    """A keyword filter on the current account."""

    id: str = ""
    phrase: str = ""
    context: list[str] = field(default_factory=list)
    whole_word: bool = False
    expires_at: datetime | None = None
    irreversible: bool = False

    @classmethod
    def from_json(cls, data: dict) -> "Filter":
        return cls(
            id=parse_id(data.get("id")),
            phrase=data.get("phrase") or "",
            context=list(data.get("context") or []),
            whole_word=bool(data.get("whole_word", False)),
            expires_at=_parse_time(data.get("expires_at")),
            irreversible=bool(data.get("irreversible", False)),
        )


@dataclass
class InstanceStats:
    """Counters published by an instance."""

    user_count: int = 0
    status_count: int = 0
    domain_count: int = 0

    @classmethod
    def from_json(cls, data: dict) -> "InstanceStats":
        return cls(
            user_count=int(data.get("user_count") or 0),
            status_count=int(data.get("status_count") or 0),
            domain_count=int(data.get("domain_count") or 0),
        )


@dataclass
class InstanceConfig:
    """Limits and settings an instance exposes to clients."""

    accounts: dict[str, int] | None = None
    statuses: dict[str, int] | None = None
    media_attachments: dict[str, Any] | None = None
    polls: dict[str, int] | None = None

    @classmethod
    def from_json(cls, data: dict) -> "InstanceConfig":
        def _optional(key: str) -> dict | None:
            value = data.get(key)
            return None if value is None else dict(value)

        return cls(
            accounts=_optional("accounts"),
            statuses=_optional("statuses"),
            media_attachments=_optional("media_attachments"),
            polls=_optional("polls"),
        )


@dataclass
class Instance:
    """Information about an instance."""

    uri: str = ""
    title: str = ""
    description: str = ""
    email: str = ""
    version: str = ""
    thumbnail: str = ""
    urls: dict[str, str] | None = None
    stats: InstanceStats | None = None
    languages: list[str] = field(default_factory=list)
    contact_account: Account | None = None
    configuration: InstanceConfig | None = None

    @classmethod
    def from_json(cls, data: dict) -> "Instance":
        urls = data.get("urls")
        stats = data.get("stats")
        contact = data.get("contact_account")
        configuration = data.get("configuration")
        return cls(
            uri=data.get("uri") or "",
            title=data.get("title") or "",
            description=data.get("description") or "",
            email=data.get("email") or "",
            version=data.get("version") or "",
            thumbnail=data.get("thumbnail") or "",
            urls=None if urls is None else dict(urls),
            stats=None if stats is None else InstanceStats.from_json(stats),
            languages=list(data.get("languages") or []),
            contact_account=None if contact is None else Account.from_json(contact),
            configuration=(
                None if configuration is None else InstanceConfig.from_json(configuration)
            ),
        )

    def get_config(self) -> InstanceConfig | None:
        """Return the instance configuration, if it was sent."""
        return self.configuration


@dataclass
class WeeklyActivity:
    """One week of instance activity."""

    week: str = ""
    statuses: int = 0
    logins: int = 0
    registrations: int = 0

    @classmethod
    def from_json(cls, data: dict) -> "WeeklyActivity":
        return cls(
            week=str(data.get("week") or ""),
            statuses=int(data.get("statuses") or 0),
            logins=int(data.get("logins") or 0),
            registrations=int(data.get("registrations") or 0),
        )


@dataclass
class UserList:
    """A list of followed accounts."""

    id: str = ""
    title: str = ""

    @classmethod
    def from_json(cls, data: dict) -> "UserList":
        return cls(id=parse_id(data.get("id")), title=data.get("title") or "")