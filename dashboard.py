"""
One dashboard search: profile lookup, then repositories and events side by side.

Only a failed profile lookup reaches the user. Failed repository or event lookups are
logged and replaced with mock data so the page always has something to draw.
"""

from __future__ import annotations

import datetime as dt
import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

import github_api
from github_api import GitHubAPIError, ProfileNotFoundError
from mock_data import mock_events, mock_repos
from records import parse_events, parse_repositories
from viewmodels import build_profile_summary, build_repository_views, build_timeline

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No profile found with this username"
FETCH_ERROR_MESSAGE = "Error fetching profile data. Please try again."


class UiState(str, Enum):
    LOADING = "loading"
    PROFILE = "profile"
    ERROR = "error"


def error_view(message: str) -> Dict[str, Any]:
    return {"state": UiState.ERROR, "error": f"Error: {message}"}


def _fetch_or_mock(
    fetch: Callable[[str], List[Dict[str, Any]]],
    fallback: Callable[[str], List[Dict[str, Any]]],
    username: str,
    what: str,
) -> Tuple[List[Dict[str, Any]], str]:
    try:
        return fetch(username), "live"
    except GitHubAPIError as e:
        logger.warning("Problem fetching %s for %s, using mock data: %s", what, username, e)
        return fallback(username), "mock"


def run_search(username: str) -> Tuple[Dict[str, Any], int]:
    """
    Returns (view, http_status). The view's "state" is UiState.PROFILE or UiState.ERROR.
    Repository and event lookups are only attempted once the profile has been found.
    """
    try:
        profile = github_api.fetch_profile(username)
    except ProfileNotFoundError:
        logger.info("Profile not found: %s", username)
        return error_view(NOT_FOUND_MESSAGE), 404
    except GitHubAPIError:
        logger.exception("Profile fetch error for %s", username)
        return error_view(FETCH_ERROR_MESSAGE), 502

    with ThreadPoolExecutor(max_workers=2) as ex:
        repos_future = ex.submit(_fetch_or_mock, github_api.fetch_repos, mock_repos, username, "repos")
        events_future = ex.submit(_fetch_or_mock, github_api.fetch_events, mock_events, username, "events")
        raw_repos, repos_source = repos_future.result()
        raw_events, events_source = events_future.result()

    repos = parse_repositories(raw_repos)
    events = parse_events(raw_events)

    view: Dict[str, Any] = {
        "state": UiState.PROFILE,
        "profile": build_profile_summary(profile),
        **build_repository_views(repos),
        "timeline": build_timeline(events),
        "meta": {
            "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(),
            "repos_source": repos_source,
            "events_source": events_source,
        },
    }
    return view, 200
