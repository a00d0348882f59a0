from typing import Optional

from scarf_events.constants import (
    EXIT_CODE_DISABLED,
    EXIT_CODE_FAILURE,
    EXIT_CODE_INVALID_ENDPOINT,
    EXIT_CODE_NON_SUCCESS_STATUS,
    EXIT_CODE_REQUEST_FAILED,
)


class ScarfEventError(Exception):
    """
    Base exception for event delivery failures.

    Args:
        message (str): The error message.
    """
    def __init__(self, message: str = "The event could not be delivered."):
        self.message = message
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        """
        Get the exit code associated with this error.

        Returns:
            int: The exit code.
        """
        return EXIT_CODE_FAILURE


class AnalyticsDisabledError(ScarfEventError):
    """
    Error raised when analytics were opted out through the environment.
    """
    def __init__(self, message: str = "Analytics are disabled via environment; event not sent."):
        super().__init__(message)

    def get_exit_code(self) -> int:
        return EXIT_CODE_DISABLED


class MissingEndpointError(ScarfEventError):
    """
    Error raised when no endpoint URL is configured.
    """
    def __init__(self, message: str = "Endpoint URL is required."):
        super().__init__(message)

    def get_exit_code(self) -> int:
        return EXIT_CODE_INVALID_ENDPOINT


class InvalidEndpointError(ScarfEventError):
    """
    Error raised when the endpoint URL cannot be parsed.

    Args:
        endpoint_url (str): The offending endpoint.
        reason (Optional[str]): The parser's explanation.
    """
    def __init__(self, endpoint_url: str, reason: Optional[str] = None,
                 message: str = "Invalid endpoint URL {endpoint_url!r}"):
        self.endpoint_url = endpoint_url
        info = f": {reason}" if reason else ""
        super().__init__(message.format(endpoint_url=endpoint_url) + info)

    def get_exit_code(self) -> int:
        return EXIT_CODE_INVALID_ENDPOINT


class RequestBuildError(ScarfEventError):
    """
    Error raised when the outbound request could not be constructed.
    """
    def __init__(self, reason: Optional[str] = None,
                 message: str = "Failed to build request"):
        info = f": {reason}" if reason else ""
        super().__init__(message + info)


class RequestFailedError(ScarfEventError):
    """
    Error raised when the transport failed: DNS, connection, timeout or write errors.
    """
    def __init__(self, reason: Optional[str] = None,
                 message: str = "Request failed"):
        info = f": {reason}" if reason else ""
        super().__init__(message + info)

    def get_exit_code(self) -> int:
        return EXIT_CODE_REQUEST_FAILED


class NonSuccessStatusError(ScarfEventError):
    """
    Error raised when the endpoint answered with a status outside 2xx.

    Args:
        status_code (int): The HTTP status code received.
    """
    def __init__(self, status_code: int,
                 message: str = "Non-success status: {status_code}"):
        self.status_code = status_code
        super().__init__(message.format(status_code=status_code))

    def get_exit_code(self) -> int:
        return EXIT_CODE_NON_SUCCESS_STATUS
