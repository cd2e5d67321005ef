"""
Pydantic schemas for the records of a user's public events feed.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNKNOWN_REPOSITORY = "Repositorio desconocido"


class EventType(str, Enum):
    """
    Event types that produce a line in the activity report.

    Attributes:
        PUSH: Commits pushed to a branch.
        CREATE: Branch, tag or repository created.
        ISSUES: Issue activity.
        PULL_REQUEST: Pull request activity.
        WATCH: Repository starred.
    """

    PUSH = "PushEvent"
    CREATE = "CreateEvent"
    ISSUES = "IssuesEvent"
    PULL_REQUEST = "PullRequestEvent"
    WATCH = "WatchEvent"


class Repo(BaseModel):
    """
    Minimal reference to the repository an event happened in.

    Attributes:
        name (Optional[str]): Full repository name, e.g. ``owner/repo``.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: Optional[str] = None


class Event(BaseModel):
    """
    Pydantic schema for one record of the events feed.

    Fields the feed sends but that are not modelled here are ignored.

    Attributes:
        type (str): Event type tag, recognised or not.
        repo (Optional[Repo]): Repository the event refers to.
        payload (dict): Type dependent data, kept as received.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: str
    repo: Optional[Repo] = None
    payload: dict[str, Any] = Field(default_factory=dict)

    @field_validator("payload", mode="before")
    @classmethod
    def _payload_as_mapping(cls, value: Any) -> Any:
        # A null or non-object payload is read as an empty one.
        return value if isinstance(value, dict) else {}

    @property
    def repo_name(self) -> str:
        """
        Repository name to display.

        The placeholder stands in for a missing repository. A repository
        without a name renders its name as ``null``.
        """
        if self.repo is None:
            return UNKNOWN_REPOSITORY
        return "null" if self.repo.name is None else self.repo.name
