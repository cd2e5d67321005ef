"""
Shared pytest fixtures and helpers for the activity tests.

The HTTP layer is exercised through httpx.MockTransport so that no test
talks to the real GitHub API.
"""

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from github_activity.services.github import GitHubService


def make_event(
    event_type: str = "WatchEvent",
    repo_name: Optional[str] = "octocat/Hello-World",
    payload: Optional[dict[str, Any]] = None,
    **extra: Any,
) -> dict[str, Any]:
    """Return one event object as the feed sends it, with sensible defaults."""
    event: dict[str, Any] = {
        "id": "12345",
        "type": event_type,
        "actor": {"id": 1, "login": "octocat"},
        "payload": payload if payload is not None else {},
        "public": True,
        "created_at": "2024-01-01T09:00:00Z",
    }
    if repo_name is not None:
        event["repo"] = {"id": 1296269, "name": repo_name}
    event.update(extra)
    return event


def make_body(*events: dict[str, Any]) -> str:
    """Serialise events into a response body."""
    return json.dumps(list(events))


@pytest.fixture
def make_service():
    """
    Build a GitHubService whose client answers through the given handler.

    Every request seen by the handler is recorded on ``service.requests``.
    """
    clients = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> GitHubService:
        requests: list[httpx.Request] = []

        def _recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(_recording_handler))
        clients.append(client)
        service = GitHubService(http_client=client)
        service.requests = requests
        return service

    yield _make

    for client in clients:
        client.close()
