"""
Typed views over the payload of each recognised event type.

Each view holds only the fields its report line needs. A field that is
missing or has an unexpected shape falls back to its default instead of
failing validation, so building a view from any mapping never raises.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _string_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class PushPayload(_Payload):
    """
    Payload of a PushEvent.

    Attributes:
        commits (list): Commits included in the push.
    """

    commits: list[Any] = Field(default_factory=list)

    @field_validator("commits", mode="before")
    @classmethod
    def _commits_as_list(cls, value: Any) -> list[Any]:
        return value if isinstance(value, list) else []


class CreatePayload(_Payload):
    """
    Payload of a CreateEvent.

    Attributes:
        ref_type (Optional[str]): Kind of object created (branch, tag, repository).
    """

    ref_type: Optional[str] = None

    @field_validator("ref_type", mode="before")
    @classmethod
    def _ref_type_as_string(cls, value: Any) -> Optional[str]:
        return _string_or_none(value)


class ActionPayload(_Payload):
    """
    Payload of an IssuesEvent or a PullRequestEvent.

    Attributes:
        action (Optional[str]): What happened, e.g. ``opened`` or ``closed``.
    """

    action: Optional[str] = None

    @field_validator("action", mode="before")
    @classmethod
    def _action_as_string(cls, value: Any) -> Optional[str]:
        return _string_or_none(value)


class WatchPayload(_Payload):
    """Payload of a WatchEvent. Nothing in it is displayed."""
