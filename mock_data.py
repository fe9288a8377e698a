"""
Deterministic stand-in datasets used when the repository or event lookups fail.

Both functions return GitHub REST-shaped JSON so the result goes through exactly the
same parsing and view-model code as a live response.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional

# (suffix, description, stars, forks, language, created_at, updated_at)
_MOCK_REPOS = (
    ("awesome-project", "An awesome project with modern web technologies", 245, 32, "JavaScript",
     "2023-01-15T10:30:00Z", "2024-12-01T10:30:00Z"),
    ("react-dashboard", "Modern React dashboard with beautiful UI", 189, 28, "TypeScript",
     "2022-08-22T14:20:00Z", "2024-11-15T14:20:00Z"),
    ("python-ml", "Machine learning projects and experiments", 156, 45, "Python",
     "2022-03-10T09:15:00Z", "2024-10-20T09:15:00Z"),
    ("mobile-app", "Cross-platform mobile application", 98, 15, "Dart",
     "2023-06-05T16:45:00Z", "2024-09-10T16:45:00Z"),
    ("api-server", "RESTful API server with Node.js", 67, 12, "JavaScript",
     "2021-11-18T12:30:00Z", "2024-08-05T12:30:00Z"),
    ("data-viz", "Data visualization with D3.js", 43, 8, "JavaScript",
     "2023-02-28T11:20:00Z", "2024-07-12T11:20:00Z"),
)

# (type, days ago, repo suffix, payload)
_MOCK_EVENTS = (
    ("PushEvent", 2, "awesome-project", {"commits": [{}, {}, {}]}),
    ("CreateEvent", 5, "new-feature-branch", {"ref_type": "branch"}),
    ("WatchEvent", 7, "react-dashboard", {}),
    ("PullRequestEvent", 10, "python-ml", {"action": "opened"}),
    ("IssuesEvent", 12, "mobile-app", {"action": "closed"}),
    ("ForkEvent", 15, "api-server", {}),
    ("ReleaseEvent", 18, "data-viz", {}),
)


def _now_utc() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def _iso(d: dt.datetime) -> str:
    return d.astimezone(dt.timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def mock_repos(username: str) -> List[Dict[str, Any]]:
    return [
        {
            "name": f"{username}-{suffix}",
            "description": description,
            "stargazers_count": stars,
            "forks_count": forks,
            "language": language,
            "created_at": created_at,
            "updated_at": updated_at,
            "html_url": f"https://github.com/{username}/{suffix}",
        }
        for suffix, description, stars, forks, language, created_at, updated_at in _MOCK_REPOS
    ]


def mock_events(username: str, now: Optional[dt.datetime] = None) -> List[Dict[str, Any]]:
    """Seven events spaced 2..18 days before ``now``, newest first."""
    now = now or _now_utc()
    return [
        {
            "type": event_type,
            "created_at": _iso(now - dt.timedelta(days=days)),
            "repo": {"name": f"{username}/{suffix}"},
            "payload": {k: (list(v) if isinstance(v, list) else v) for k, v in payload.items()},
        }
        for event_type, days, suffix, payload in _MOCK_EVENTS
    ]
