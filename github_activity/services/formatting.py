"""
Module turning an event type and its payload into a one line description.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional

from github_activity.schemas.event import Event, EventType
from github_activity.schemas.payload import (
    ActionPayload,
    CreatePayload,
    PushPayload,
    WatchPayload,
)


def _text(value: Optional[str]) -> str:
    return "null" if value is None else value


def _describe_push(payload: Mapping[str, Any]) -> str:
    view = PushPayload.model_validate(payload)
    return f"Pushed {len(view.commits)} commits"


def _describe_create(payload: Mapping[str, Any]) -> str:
    view = CreatePayload.model_validate(payload)
    return f"Created a new {_text(view.ref_type)}"


def _describe_issues(payload: Mapping[str, Any]) -> str:
    view = ActionPayload.model_validate(payload)
    return f"Opened a new issue (Action: {_text(view.action)})"


def _describe_pull_request(payload: Mapping[str, Any]) -> str:
    view = ActionPayload.model_validate(payload)
    return f"A pull request was {_text(view.action)}"


def _describe_watch(payload: Mapping[str, Any]) -> str:
    WatchPayload.model_validate(payload)
    return "Starred (Watched)"


EVENT_FORMATTERS: dict[str, Callable[[Mapping[str, Any]], str]] = {
    EventType.PUSH.value: _describe_push,
    EventType.CREATE.value: _describe_create,
    EventType.ISSUES.value: _describe_issues,
    EventType.PULL_REQUEST.value: _describe_pull_request,
    EventType.WATCH.value: _describe_watch,
}


def describe_event(event_type: str, payload: Any) -> str:
    """
    Describe an event for the activity report.
    :param event_type: Type tag of the event, e.g. ``PushEvent``.
    :param payload: Payload of the event. Anything that is not a mapping is
        read as an empty payload.
    :return: The description, or an empty string for unrecognised types.
    """
    formatter = EVENT_FORMATTERS.get(event_type)
    if formatter is None:
        return ""
    if not isinstance(payload, Mapping):
        payload = {}
    return formatter(dict(payload))


def format_event(event: Event) -> str:
    """Describe a parsed event, see describe_event."""
    return describe_event(event.type, event.payload)
