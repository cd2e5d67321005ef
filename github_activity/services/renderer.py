"""
Module rendering a raw events feed as the lines of the activity report.
"""

from pydantic import TypeAdapter, ValidationError

from github_activity.schemas.event import Event
from github_activity.services.errors import ParseError
from github_activity.services.formatting import format_event
from github_activity.utils import logging

logger = logging.get_logger(__name__)

HEADER = ["", "--- Actividad Reciente del Usuario ---", ""]
FOOTER = ["", "--------------------------------------"]

_events_adapter = TypeAdapter(list[Event])


def parse_events(body: str) -> list[Event]:
    """
    Parse a response body into events, in the order GitHub sent them.
    :param body: JSON text of the events feed.

    :raise ParseError: The body is not a JSON array of event objects.

    :return: Parsed events.
    """
    try:
        events = _events_adapter.validate_json(body)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        detail = f"{location}: {first['msg']}" if location else first["msg"]
        raise ParseError(detail) from e
    logger.debug(f"Parsed {len(events)} events")
    return events


def render_events(events: list[Event]) -> list[str]:
    """
    Render parsed events between the report header and footer.

    Events whose type has no description are left out.
    """
    lines = list(HEADER)
    for event in events:
        description = format_event(event)
        if description:
            lines.append(f"  - {description} en {event.repo_name}")
    lines.extend(FOOTER)
    return lines


def render_activity(body: str) -> list[str]:
    """
    Parse and render a response body. Nothing is rendered if parsing fails.
    :param body: JSON text of the events feed.
    :return: Report lines, header and footer included.
    """
    return render_events(parse_events(body))
