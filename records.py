"""Immutable records normalized from untrusted GitHub REST responses."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional


def _int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def _str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


class EventType(Enum):
    PUSH = "PushEvent"
    CREATE = "CreateEvent"
    WATCH = "WatchEvent"
    FORK = "ForkEvent"
    ISSUES = "IssuesEvent"
    PULL_REQUEST = "PullRequestEvent"
    RELEASE = "ReleaseEvent"
    GOLLUM = "GollumEvent"
    DELETE = "DeleteEvent"
    PUBLIC = "PublicEvent"
    UNKNOWN = None

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> "EventType":
        try:
            return cls(raw)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class ProfileRecord:
    login: Optional[str]
    name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    public_gists: int = 0

    @classmethod
    def from_api(cls, raw: Any) -> "ProfileRecord":
        r = _mapping(raw)
        return cls(
            login=_str(r.get("login")),
            name=_str(r.get("name")),
            bio=_str(r.get("bio")),
            avatar_url=_str(r.get("avatar_url")),
            html_url=_str(r.get("html_url")),
            public_repos=_int(r.get("public_repos")),
            followers=_int(r.get("followers")),
            following=_int(r.get("following")),
            public_gists=_int(r.get("public_gists")),
        )


@dataclass(frozen=True)
class RepositoryRecord:
    name: Optional[str]
    description: Optional[str] = None
    stars: int = 0
    forks: int = 0
    language: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_api(cls, raw: Any) -> "RepositoryRecord":
        r = _mapping(raw)
        return cls(
            name=_str(r.get("name")),
            description=_str(r.get("description")),
            stars=_int(r.get("stargazers_count")),
            forks=_int(r.get("forks_count")),
            language=_str(r.get("language")),
            created_at=_str(r.get("created_at")),
            updated_at=_str(r.get("updated_at")),
            url=_str(r.get("html_url")),
        )


@dataclass(frozen=True)
class EventRecord:
    # Raw type string is kept so unrecognized types can still be described.
    type: Any
    created_at: Optional[str] = None
    repo_name: Optional[str] = None
    payload: Mapping[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> EventType:
        return EventType.from_raw(self.type) if isinstance(self.type, str) else EventType.UNKNOWN

    @classmethod
    def from_api(cls, raw: Any) -> "EventRecord":
        r = _mapping(raw)
        return cls(
            type=r.get("type"),
            created_at=_str(r.get("created_at")),
            repo_name=_str(_mapping(r.get("repo")).get("name")),
            payload=dict(_mapping(r.get("payload"))),
        )


def parse_repositories(raw: Any) -> List[RepositoryRecord]:
    return [RepositoryRecord.from_api(r) for r in (raw or []) if isinstance(r, Mapping)]


def parse_events(raw: Any) -> List[EventRecord]:
    return [EventRecord.from_api(e) for e in (raw or []) if isinstance(e, Mapping)]
