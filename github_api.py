"""
Thin GitHub REST fetchers for the three datasets the dashboard shows.

Each call is a single unauthenticated GET: no retry, and no timeout unless
GITHUB_TIMEOUT_SECONDS is set.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import requests

from records import ProfileRecord

logger = logging.getLogger(__name__)

# -----------------------------
# Config
# -----------------------------
GITHUB_API_BASE = os.getenv("GITHUB_API_BASE", "https://api.github.com").rstrip("/")
API_VERSION = os.getenv("GITHUB_API_VERSION", "2022-11-28")


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    """Seconds from GITHUB_TIMEOUT_SECONDS; unset, non-numeric or non-positive means no timeout."""
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric GITHUB_TIMEOUT_SECONDS=%r", raw)
        return None
    return value if value > 0 else None


REQUEST_TIMEOUT: Optional[float] = _parse_timeout(os.getenv("GITHUB_TIMEOUT_SECONDS"))

MAX_REPOS = 100
MAX_EVENTS = 30


class GitHubAPIError(RuntimeError):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ProfileNotFoundError(GitHubAPIError):
    pass


# -----------------------------
# HTTP helpers
# -----------------------------
def _headers() -> Dict[str, str]:
    return {
        "Accept": "application/vnd.github+json",
        "User-Agent": "github-profile-explorer",
        "X-GitHub-Api-Version": API_VERSION,
    }


def _get_json(path: str, *, params: Optional[dict] = None) -> Any:
    url = f"{GITHUB_API_BASE}{path}"
    try:
        resp = requests.get(url, headers=_headers(), params=params, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise GitHubAPIError(f"GitHub request failed: {e}") from e

    if resp.status_code >= 400:
        raise GitHubAPIError(f"GitHub REST error {resp.status_code}: {resp.text[:600]}", status=resp.status_code)

    try:
        return resp.json()
    except ValueError as e:
        raise GitHubAPIError(f"GitHub returned invalid JSON for {path}") from e


def _get_list(path: str, *, params: dict) -> List[Dict[str, Any]]:
    data = _get_json(path, params=params)
    if not isinstance(data, list):
        raise GitHubAPIError(f"Expected a JSON array from {path}, got {type(data).__name__}")
    return data


# -----------------------------
# Fetchers
# -----------------------------
def fetch_profile(username: str) -> ProfileRecord:
    try:
        data = _get_json(f"/users/{username}")
    except GitHubAPIError as e:
        if e.status == 404:
            raise ProfileNotFoundError(f"No GitHub user named {username!r}", status=404) from e
        raise
    if not isinstance(data, dict):
        raise GitHubAPIError(f"Expected a JSON object for user {username}")
    return ProfileRecord.from_api(data)


def fetch_repos(username: str) -> List[Dict[str, Any]]:
    return _get_list(f"/users/{username}/repos", params={"sort": "updated", "per_page": MAX_REPOS})


def fetch_events(username: str) -> List[Dict[str, Any]]:
    return _get_list(f"/users/{username}/events", params={"per_page": MAX_EVENTS})
