"""
Command line entry point printing a user's recent GitHub activity.
"""

import sys
from typing import Optional, Sequence

from cyclopts import App

from github_activity import __version__
from github_activity.services.errors import ActivityError
from github_activity.services.github import GitHubService
from github_activity.services.renderer import render_activity
from github_activity.utils import logging

logger = logging.get_logger(__name__)

USAGE = "Uso: github-activity <nombre_de_usuario_github>"

app = App(
    name="github-activity",
    help="Muestra la actividad pública reciente de un usuario de GitHub.",
    version=__version__,
)


@app.default
def show(username: str) -> int:
    """
    Print the recent public activity of a GitHub user.

    Args:
        username: GitHub username whose events feed is shown.

    Returns:
        Exit code (0 for success, 1 when the feed could not be fetched or read).
    """
    try:
        body = GitHubService().get_user_events(username)
        lines = render_activity(body)
    except ActivityError as e:
        logger.debug(f"Activity run for {username} failed: {e!r}")
        print(e, file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entry point for the CLI.
    :param argv: Arguments without the program name, sys.argv by default.
    :return: Process exit code.
    """
    logging.setup_logger()
    tokens = list(sys.argv[1:] if argv is None else argv)
    if len(tokens) != 1:
        print(USAGE)
        return 0
    if tokens[0] in (*app.help_flags, *app.version_flags):
        return app(tokens) or 0
    # Anything else is the username, even when it starts with a dash.
    return app(["--", *tokens]) or 0


if __name__ == "__main__":
    sys.exit(main())
