"""
Errors raised while fetching and rendering a user's activity feed.

All of them derive from ActivityError, which is what the command line
entry point catches. The message of each error is the exact line shown
to the user.
"""


class ActivityError(Exception):
    """Base class for every failure of a single activity run."""


class ActivityConnectionError(ActivityError):
    """
    The request could not be completed at the transport level.

    Attributes:
        cause (str): Description of the underlying transport failure.
    """

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Error de conexión o lectura de datos: {cause}")


class UserNotFoundError(ActivityError):
    """
    GitHub answered 404 for the requested user.

    Attributes:
        username (str): The username that was requested.
    """

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Error: El usuario '{username}' no fue encontrado.")


class ApiError(ActivityError):
    """
    GitHub answered with a status other than 200 or 404.

    Attributes:
        status_code (int): The HTTP status code of the response.
    """

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(
            f"Error en la API de GitHub. Código de estado: {status_code}"
        )


class ParseError(ActivityError):
    """The response body is not a JSON array of event objects."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Error al procesar la actividad: {detail}")
