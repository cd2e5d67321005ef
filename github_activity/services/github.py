"""
Module for interacting with the GitHub API to fetch a user's public events.
"""

from typing import Optional

import httpx

from github_activity.services.errors import (
    ActivityConnectionError,
    ApiError,
    UserNotFoundError,
)
from github_activity.utils import logging

logger = logging.get_logger(__name__)


class GitHubService:
    """
    A class to fetch the public events feed from the GitHub API.

    Requests carry no custom headers. When no client is given, each call
    opens its own short-lived httpx.Client and closes it afterwards.
    """

    EVENTS_ENDPOINT = "users/{username}/events"

    def __init__(self, http_client: Optional[httpx.Client] = None):
        self.base_url = "https://api.github.com"
        self._http_client = http_client

    def events_url(self, username: str) -> str:
        """
        Build the events URL for a user.
        :param username: GitHub username, substituted as given.
        :return: Absolute URL of the user's events feed.
        """
        return f"{self.base_url}/{self.EVENTS_ENDPOINT.format(username=username)}"

    def _send(self, url: str) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.get(url)
        with httpx.Client() as client:
            return client.get(url)

    def get_user_events(self, username: str) -> str:
        """
        Retrieve the raw events feed of a user.
        :param username: GitHub username of the user.

        :raise ActivityConnectionError: The URL was rejected or the request
            failed at the transport level.
        :raise UserNotFoundError: GitHub answered 404.
        :raise ApiError: GitHub answered any other non-200 status.

        :return: Response body, unmodified.
        """
        url = self.events_url(username)
        logger.debug(f"Requesting events feed: {url}")

        try:
            response = self._send(url)
        except (httpx.TransportError, httpx.InvalidURL) as e:
            logger.debug(f"Transport failure for {url}: {e!r}")
            raise ActivityConnectionError(str(e) or type(e).__name__) from e

        logger.debug(f"GitHub answered {response.status_code} for {url}")
        if response.status_code == 404:
            raise UserNotFoundError(username)
        if response.status_code != 200:
            raise ApiError(response.status_code)

        return response.text
