"""Unit tests for the GitHub REST fetchers. Only requests.get is mocked."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from github_api import (
    MAX_EVENTS,
    MAX_REPOS,
    GitHubAPIError,
    ProfileNotFoundError,
    _parse_timeout,
    fetch_events,
    fetch_profile,
    fetch_repos,
)
from records import ProfileRecord


def _mock_response(status_code=200, json_body=None, text=""):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.text = text
    if isinstance(json_body, Exception):
        resp.json.side_effect = json_body
    else:
        resp.json.return_value = json_body
    return resp


@pytest.fixture
def mock_get():
    with patch("github_api.requests.get") as get:
        yield get


def describe_fetch_profile():
    def it_returns_a_profile_record(mock_get):
        mock_get.return_value = _mock_response(200, {"login": "octocat", "followers": 10})

        profile = fetch_profile("octocat")

        assert profile == ProfileRecord.from_api({"login": "octocat", "followers": 10})
        url = mock_get.call_args.args[0]
        assert url.endswith("/users/octocat")

    def it_sends_unauthenticated_json_headers(mock_get):
        mock_get.return_value = _mock_response(200, {"login": "octocat"})

        fetch_profile("octocat")

        headers = mock_get.call_args.kwargs["headers"]
        assert headers["Accept"] == "application/vnd.github+json"
        assert "Authorization" not in headers

    def it_raises_not_found_on_404(mock_get):
        mock_get.return_value = _mock_response(404, {"message": "Not Found"}, text="Not Found")

        with pytest.raises(ProfileNotFoundError) as exc:
            fetch_profile("ghost-user")
        assert exc.value.status == 404

    def it_raises_a_generic_error_on_server_errors(mock_get):
        mock_get.return_value = _mock_response(503, text="unavailable")

        with pytest.raises(GitHubAPIError) as exc:
            fetch_profile("octocat")
        assert not isinstance(exc.value, ProfileNotFoundError)
        assert exc.value.status == 503

    def it_wraps_transport_errors(mock_get):
        mock_get.side_effect = requests.ConnectionError("boom")

        with pytest.raises(GitHubAPIError):
            fetch_profile("octocat")

    def it_rejects_non_object_bodies(mock_get):
        mock_get.return_value = _mock_response(200, ["not", "a", "user"])

        with pytest.raises(GitHubAPIError):
            fetch_profile("octocat")

    def it_wraps_invalid_json(mock_get):
        mock_get.return_value = _mock_response(200, ValueError("no json"))

        with pytest.raises(GitHubAPIError):
            fetch_profile("octocat")


def describe_fetch_repos():
    def it_requests_recently_updated_repositories(mock_get):
        mock_get.return_value = _mock_response(200, [{"name": "a"}])

        assert fetch_repos("octocat") == [{"name": "a"}]
        assert mock_get.call_args.args[0].endswith("/users/octocat/repos")
        assert mock_get.call_args.kwargs["params"] == {"sort": "updated", "per_page": MAX_REPOS}

    def it_treats_404_as_a_plain_failure(mock_get):
        mock_get.return_value = _mock_response(404)

        with pytest.raises(GitHubAPIError) as exc:
            fetch_repos("octocat")
        assert not isinstance(exc.value, ProfileNotFoundError)

    def it_rejects_non_list_bodies(mock_get):
        mock_get.return_value = _mock_response(200, {"message": "API rate limit exceeded"})

        with pytest.raises(GitHubAPIError):
            fetch_repos("octocat")


def describe_fetch_events():
    def it_requests_recent_events(mock_get):
        mock_get.return_value = _mock_response(200, [{"type": "PushEvent"}])

        assert fetch_events("octocat") == [{"type": "PushEvent"}]
        assert mock_get.call_args.args[0].endswith("/users/octocat/events")
        assert mock_get.call_args.kwargs["params"] == {"per_page": MAX_EVENTS}

    def it_raises_on_rate_limits(mock_get):
        mock_get.return_value = _mock_response(403, {"message": "rate limit"}, text="API rate limit exceeded")

        with pytest.raises(GitHubAPIError):
            fetch_events("octocat")


def describe_parse_timeout():
    def it_means_no_timeout_when_unset():
        assert _parse_timeout(None) is None
        assert _parse_timeout("  ") is None

    def it_reads_seconds():
        assert _parse_timeout("2.5") == 2.5

    def it_ignores_non_numeric_values(caplog):
        with caplog.at_level("WARNING", logger="github_api"):
            assert _parse_timeout("soon") is None
        assert "GITHUB_TIMEOUT_SECONDS" in caplog.text

    def it_ignores_non_positive_values():
        assert _parse_timeout("0") is None
        assert _parse_timeout("-3") is None
