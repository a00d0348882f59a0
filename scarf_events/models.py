from dataclasses import dataclass
from enum import Enum
from typing import Optional

from scarf_events.errors import (
    AnalyticsDisabledError,
    InvalidEndpointError,
    MissingEndpointError,
    NonSuccessStatusError,
    RequestBuildError,
    RequestFailedError,
    ScarfEventError,
)


class Outcome(Enum):
    """
    Classified result of one transmission attempt, in precedence order.
    """
    DISABLED = "disabled"
    MISSING_ENDPOINT = "missing_endpoint"
    INVALID_ENDPOINT = "invalid_endpoint"
    REQUEST_BUILD_FAILED = "request_build_failed"
    REQUEST_FAILED = "request_failed"
    NON_SUCCESS_STATUS = "non_success_status"
    SUCCESS = "success"


@dataclass(frozen=True)
class EventResult:
    """
    The outcome of `ScarfEventLogger.send`.

    Only a successful result is truthy, so callers that just want the
    fire-and-forget boolean can write `if logger.send(props): ...`.

    Args:
        outcome (Outcome): The classified outcome.
        status_code (Optional[int]): HTTP status, when a response was received.
        error (Optional[BaseException]): Underlying cause of a failure.
        url (Optional[str]): The request URL, once it could be built.
    """
    outcome: Outcome
    status_code: Optional[int] = None
    error: Optional[BaseException] = None
    url: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    def __bool__(self) -> bool:
        return self.ok

    def to_exception(self) -> Optional[ScarfEventError]:
        """
        Build the exception matching this outcome.

        Returns:
            Optional[ScarfEventError]: None for a successful result.
        """
        if self.ok:
            return None

        if isinstance(self.error, ScarfEventError):
            return self.error

        reason = str(self.error) if self.error else None

        if self.outcome is Outcome.DISABLED:
            return AnalyticsDisabledError()
        elif self.outcome is Outcome.MISSING_ENDPOINT:
            return MissingEndpointError()
        elif self.outcome is Outcome.INVALID_ENDPOINT:
            return InvalidEndpointError(self.url or "", reason=reason)
        elif self.outcome is Outcome.REQUEST_BUILD_FAILED:
            return RequestBuildError(reason=reason)
        elif self.outcome is Outcome.REQUEST_FAILED:
            return RequestFailedError(reason=reason)

        return NonSuccessStatusError(status_code=self.status_code or 0)

    def raise_for_outcome(self) -> None:
        """
        Raise the matching `ScarfEventError` if the event was not delivered.

        Raises:
            ScarfEventError: For every outcome other than SUCCESS.
        """
        exc = self.to_exception()
        if exc is None:
            return

        if self.error is not None and exc is not self.error:
            raise exc from self.error
        raise exc
