"""Unit tests for mock_data module."""

import datetime as dt

from mock_data import mock_events, mock_repos
from records import parse_events, parse_repositories

NOW = dt.datetime(2024, 6, 30, 12, 0, tzinfo=dt.timezone.utc)


def describe_mock_repos():
    def it_returns_six_repositories_named_after_the_user():
        repos = mock_repos("alice")
        assert len(repos) == 6
        assert all(r["name"].startswith("alice-") for r in repos)
        assert repos[0]["html_url"] == "https://github.com/alice/awesome-project"

    def it_is_deterministic():
        assert mock_repos("alice") == mock_repos("alice")

    def it_matches_the_live_rest_shape():
        for r in mock_repos("alice"):
            assert set(r) == {
                "name", "description", "stargazers_count", "forks_count",
                "language", "created_at", "updated_at", "html_url",
            }
        parsed = parse_repositories(mock_repos("alice"))
        assert [p.stars for p in parsed] == [245, 189, 156, 98, 67, 43]


def describe_mock_events():
    def it_returns_seven_events_at_fixed_offsets():
        events = mock_events("alice", now=NOW)
        assert len(events) == 7
        assert events[0]["created_at"] == "2024-06-28T12:00:00.000Z"
        assert events[-1]["created_at"] == "2024-06-12T12:00:00.000Z"

    def it_names_repositories_after_the_user():
        assert mock_events("alice", now=NOW)[0]["repo"] == {"name": "alice/awesome-project"}

    def it_is_deterministic_for_a_fixed_clock():
        assert mock_events("bob", now=NOW) == mock_events("bob", now=NOW)

    def it_does_not_share_payloads_between_calls():
        first = mock_events("bob", now=NOW)
        first[0]["payload"]["commits"].append({})
        assert len(mock_events("bob", now=NOW)[0]["payload"]["commits"]) == 3

    def it_parses_like_live_events():
        parsed = parse_events(mock_events("alice", now=NOW))
        assert [e.type for e in parsed] == [
            "PushEvent", "CreateEvent", "WatchEvent", "PullRequestEvent",
            "IssuesEvent", "ForkEvent", "ReleaseEvent",
        ]
        assert parsed[1].payload == {"ref_type": "branch"}

    def it_defaults_to_the_current_time():
        created = dt.datetime.fromisoformat(mock_events("alice")[0]["created_at"].replace("Z", "+00:00"))
        age = dt.datetime.now(dt.timezone.utc) - created
        assert dt.timedelta(days=1, hours=23) < age < dt.timedelta(days=2, hours=1)
