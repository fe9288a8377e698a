"""
View-model builders: raw profile / repository / event records in, display-ready shapes out.

Everything here is pure and never raises on missing or malformed fields; absence of data
is resolved by the default tables below.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from formatters import format_date, format_number, parse_timestamp, percentage
from mock_data import mock_repos
from records import EventRecord, EventType, ProfileRecord, RepositoryRecord, parse_repositories

MAX_DISPLAYED_REPOS = 12
MAX_LANGUAGES = 8
MAX_TIMELINE_EVENTS = 20
MAX_REPO_STATS = 10
REPO_LABEL_MAX_LEN = 15


class Placeholder(str, Enum):
    NO_REPOSITORIES = "No repositories found"
    NO_ACTIVITY = "No recent activity found"

    def __str__(self) -> str:
        return self.value


# -----------------------------
# Default tables
# -----------------------------
PROFILE_DEFAULTS: Dict[str, Any] = {
    "name": "N/A",
    "bio": "No bio available",
    "avatar_url": "",
    "public_repos": 0,
    "followers": 0,
    "following": 0,
    "public_gists": 0,
}

REPO_DEFAULTS: Dict[str, Any] = {
    "name": "Unnamed Repository",
    "description": "No description available",
}

# Shown when no repository declares a language.
CANNED_LANGUAGES: Dict[str, int] = {
    "JavaScript": 8,
    "Python": 5,
    "TypeScript": 4,
    "HTML": 3,
    "CSS": 2,
    "Java": 2,
}

EVENT_ICONS: Dict[EventType, str] = {
    EventType.PUSH: "📝",
    EventType.CREATE: "🆕",
    EventType.WATCH: "⭐",
    EventType.FORK: "🍴",
    EventType.ISSUES: "🐛",
    EventType.PULL_REQUEST: "🔀",
    EventType.RELEASE: "🚀",
    EventType.GOLLUM: "📚",
    EventType.DELETE: "🗑️",
    EventType.PUBLIC: "🌍",
}
DEFAULT_EVENT_ICON = "📋"
GENERIC_ACTIVITY = "Repository activity"
UNKNOWN_REPO = "Unknown repo"


# -----------------------------
# Profile
# -----------------------------
def build_profile_summary(raw: Union[Mapping[str, Any], ProfileRecord, None]) -> Dict[str, Any]:
    p = raw if isinstance(raw, ProfileRecord) else ProfileRecord.from_api(raw)
    return {
        "login": p.login,
        "name": p.name or p.login or PROFILE_DEFAULTS["name"],
        "bio": p.bio or PROFILE_DEFAULTS["bio"],
        "avatar_url": p.avatar_url or PROFILE_DEFAULTS["avatar_url"],
        "html_url": p.html_url,
        "public_repos": format_number(p.public_repos or PROFILE_DEFAULTS["public_repos"]),
        "followers": format_number(p.followers or PROFILE_DEFAULTS["followers"]),
        "following": format_number(p.following or PROFILE_DEFAULTS["following"]),
        "public_gists": format_number(p.public_gists or PROFILE_DEFAULTS["public_gists"]),
    }


# -----------------------------
# Repositories
# -----------------------------
def _by_stars(repos: Sequence[RepositoryRecord]) -> List[RepositoryRecord]:
    # sorted() is stable, so equal star counts keep their input order.
    return sorted(repos, key=lambda r: r.stars or 0, reverse=True)


def repository_card(repo: RepositoryRecord) -> Dict[str, Any]:
    return {
        "name": repo.name or REPO_DEFAULTS["name"],
        "description": repo.description or REPO_DEFAULTS["description"],
        "stars": format_number(repo.stars),
        "forks": format_number(repo.forks),
        "language": repo.language,
        "updated": format_date(repo.updated_at) if repo.updated_at else None,
        "url": repo.url,
    }


def rank_repositories(repos: Sequence[RepositoryRecord]) -> Union[List[Dict[str, Any]], Placeholder]:
    """
    Top repositories by stars, at most MAX_DISPLAYED_REPOS, as display cards.
    Empty input yields Placeholder.NO_REPOSITORIES so the caller can render a placeholder card.
    """
    if not repos:
        return Placeholder.NO_REPOSITORIES
    return [repository_card(r) for r in _by_stars(repos)[:MAX_DISPLAYED_REPOS]]


def build_language_histogram(repos: Sequence[RepositoryRecord]) -> List[Dict[str, Any]]:
    """
    Language -> repo count, top MAX_LANGUAGES, descending.

    Percentages are relative to the visible (truncated) total, matching what the chart draws.
    """
    counts: Dict[str, int] = Counter(r.language for r in repos if r.language)
    if not counts:
        counts = dict(CANNED_LANGUAGES)

    top = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[:MAX_LANGUAGES]
    visible_total = sum(c for _, c in top)

    out: List[Dict[str, Any]] = []
    for lang, count in top:
        pct = percentage(count, visible_total)
        out.append(
            {
                "language": lang,
                "count": count,
                "percentage": pct,
                "label": f"{lang}: {count} repos ({pct:.1f}%)",
            }
        )
    return out


def build_growth_series(repos: Sequence[RepositoryRecord]) -> Dict[str, List[Any]]:
    per_year: Dict[int, int] = {}
    for r in repos:
        created = parse_timestamp(r.created_at)
        if created is None:
            continue
        per_year[created.year] = per_year.get(created.year, 0) + 1

    labels: List[str] = []
    totals: List[int] = []
    running = 0
    for year in sorted(per_year):
        running += per_year[year]
        labels.append(str(year))
        totals.append(running)
    return {"labels": labels, "totals": totals}


def _short_label(name: Optional[str]) -> str:
    name = name or "Unnamed"
    return name[:REPO_LABEL_MAX_LEN] + "..." if len(name) > REPO_LABEL_MAX_LEN else name


def build_repo_stats_series(repos: Sequence[RepositoryRecord]) -> Dict[str, List[Any]]:
    """Stars/forks bar series for the most popular repositories that have either."""
    popular = _by_stars([r for r in repos if r.stars > 0 or r.forks > 0])[:MAX_REPO_STATS]
    if not popular:
        popular = parse_repositories(mock_repos("demo"))[:6]
    return {
        "labels": [_short_label(r.name) for r in popular],
        "stars": [r.stars for r in popular],
        "forks": [r.forks for r in popular],
    }


# -----------------------------
# Activity
# -----------------------------
def _action(payload: Mapping[str, Any]) -> str:
    return payload.get("action") or "Updated"


def _commit_count(payload: Mapping[str, Any]) -> int:
    commits = payload.get("commits")
    return len(commits) if isinstance(commits, list) else 1


EVENT_TITLES: Dict[EventType, Callable[[Mapping[str, Any]], str]] = {
    EventType.PUSH: lambda p: f"Pushed {_commit_count(p)} commit(s)",
    EventType.CREATE: lambda p: f"Created {p.get('ref_type') or 'repository'}",
    EventType.WATCH: lambda p: "Starred repository",
    EventType.FORK: lambda p: "Forked repository",
    EventType.ISSUES: lambda p: f"{_action(p)} issue",
    EventType.PULL_REQUEST: lambda p: f"{_action(p)} pull request",
    EventType.RELEASE: lambda p: "Published release",
    EventType.GOLLUM: lambda p: "Updated wiki",
    EventType.DELETE: lambda p: "Deleted branch or tag",
    EventType.PUBLIC: lambda p: "Made repository public",
}


def describe_event(raw: Union[Mapping[str, Any], EventRecord, None]) -> Dict[str, str]:
    event = raw if isinstance(raw, EventRecord) else EventRecord.from_api(raw)
    kind = event.kind

    if kind is EventType.UNKNOWN:
        if isinstance(event.type, str) and event.type:
            title = event.type.replace("Event", "", 1) or GENERIC_ACTIVITY
        else:
            title = GENERIC_ACTIVITY
    else:
        title = EVENT_TITLES[kind](event.payload)

    return {
        "icon": EVENT_ICONS.get(kind, DEFAULT_EVENT_ICON),
        "title": title,
        "meta_line": f"{format_date(event.created_at)} • {event.repo_name or UNKNOWN_REPO}",
    }


def build_timeline(events: Sequence[EventRecord]) -> Union[List[Dict[str, str]], Placeholder]:
    if not events:
        return Placeholder.NO_ACTIVITY
    return [describe_event(e) for e in events[:MAX_TIMELINE_EVENTS]]


# -----------------------------
# Aggregate
# -----------------------------
def build_repository_views(repos: Sequence[RepositoryRecord]) -> Dict[str, Any]:
    return {
        "top_repositories": rank_repositories(repos),
        "languages": build_language_histogram(repos),
        "repo_stats": build_repo_stats_series(repos),
        "growth": build_growth_series(repos),
    }
