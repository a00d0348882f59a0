"""
Scarf event logger.

Sends a single analytics event to a collection endpoint as an empty-bodied
POST whose query string carries the event properties. Delivery is best
effort: one attempt, bounded by a timeout, and every expected failure comes
back as an `EventResult` instead of an exception.
"""

import logging
from typing import Any, Mapping, Optional

import httpx

from scarf_events.config import EventLoggerConfig, Timeout, get_event_logger_config, resolve_timeout
from scarf_events.encoding import build_event_url
from scarf_events.errors import InvalidEndpointError, MissingEndpointError
from scarf_events.logs_helpers import get_diagnostic_logger
from scarf_events.meta import get_meta_http_headers
from scarf_events.models import EventResult, Outcome

logger = logging.getLogger(__name__)


class ScarfEventLogger:
    """
    Synchronous telemetry emitter.

    The opt-out and verbosity signals are read once here and never again, so
    every call made through one instance sees the same decision. Instances
    hold no mutable state and can be shared between threads.

    Args:
        endpoint_url (str): The collection endpoint.
        timeout (Optional[Timeout]): Default timeout in seconds, 3 if unset or not positive.
        http_client (Optional[httpx.Client]): Injected client; not closed by this logger.
        verbose (Optional[bool]): Force diagnostics on or off, None reads SCARF_VERBOSE.
        logger (Optional[logging.Logger]): Diagnostic sink, defaults to stderr.
    """

    def __init__(
        self,
        endpoint_url: str,
        timeout: Optional[Timeout] = None,
        *,
        http_client: Optional[httpx.Client] = None,
        verbose: Optional[bool] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = get_event_logger_config(endpoint_url, timeout=timeout, verbose=verbose)
        self._diagnostics = logger or get_diagnostic_logger()
        self._headers = get_meta_http_headers()
        self._owns_client = http_client is None
        self._http_client = self._create_http_client() if http_client is None else http_client

    def _create_http_client(self) -> httpx.Client:
        return httpx.Client(
            headers=self._headers,
            timeout=httpx.Timeout(self._config.timeout),
        )

    @property
    def config(self) -> EventLoggerConfig:
        return self._config

    @property
    def enabled(self) -> bool:
        return not self._config.disabled

    def is_enabled(self) -> bool:
        """
        Report whether analytics are enabled.
        """
        return self.enabled

    def _log(self, msg: str, *args: Any) -> None:
        if self._config.verbose:
            self._diagnostics.info(msg, *args)

    def validate(self) -> None:
        """
        Check the configuration without sending anything.

        Raises:
            MissingEndpointError: If no endpoint URL is configured.
        """
        if not self._config.endpoint_url.strip():
            raise MissingEndpointError()

    def log_event(self, properties: Optional[Mapping[str, Any]] = None,
                  timeout: Optional[Timeout] = None) -> bool:
        """
        Send an event and return True if it was accepted with a 2xx status.
        """
        return bool(self.send(properties, timeout=timeout))

    def send(self, properties: Optional[Mapping[str, Any]] = None,
             timeout: Optional[Timeout] = None) -> EventResult:
        """
        Send an event.

        Args:
            properties (Optional[Mapping[str, Any]]): Event properties, sent as query parameters.
            timeout (Optional[Timeout]): Timeout for this call only; missing or
                non-positive values use the configured default.

        Returns:
            EventResult: The classified outcome. Truthy only on success.
        """
        if self._config.disabled:
            self._log("analytics disabled via env; not sending event")
            return EventResult(Outcome.DISABLED)

        try:
            self.validate()
        except MissingEndpointError as e:
            self._log("no endpoint URL configured; aborting")
            return EventResult(Outcome.MISSING_ENDPOINT, error=e)

        try:
            url = build_event_url(self._config.endpoint_url, properties or {})
        except InvalidEndpointError as e:
            self._log("invalid endpoint URL: %s", e)
            return EventResult(Outcome.INVALID_ENDPOINT, error=e, url=self._config.endpoint_url)

        effective_timeout = resolve_timeout(timeout, default=self._config.timeout)

        try:
            request = self._http_client.build_request(
                "POST",
                url,
                headers=self._headers,
                timeout=httpx.Timeout(effective_timeout),
            )
        except (httpx.InvalidURL, ValueError, TypeError) as e:
            self._log("failed to build request: %s", e)
            return EventResult(Outcome.REQUEST_BUILD_FAILED, error=e, url=str(url))

        self._log("sending event to %s (timeout=%ss)", url, effective_timeout)

        try:
            response = self._http_client.send(request, stream=True)
        except (httpx.RequestError, UnicodeError) as e:
            # idna failures from getaddrinfo are not mapped by httpx
            self._log("request failed: %s", e)
            return EventResult(Outcome.REQUEST_FAILED, error=e, url=str(url))

        status_code = response.status_code
        self._close_response(response)

        if 200 <= status_code < 300:
            self._log("event logged successfully: %s %s", status_code, response.reason_phrase)
            return EventResult(Outcome.SUCCESS, status_code=status_code, url=str(url))

        self._log("non-success status: %s %s", status_code, response.reason_phrase)
        return EventResult(Outcome.NON_SUCCESS_STATUS, status_code=status_code, url=str(url))

    def _close_response(self, response: httpx.Response) -> None:
        # The body is never read; closing releases the connection.
        try:
            response.close()
        except Exception as e:
            self._log("failed to close response: %s", e)
            logger.debug("Ignoring error while closing response", exc_info=True)

    def close(self) -> None:
        """
        Close the HTTP client if this logger created it.
        """
        if self._owns_client:
            self._http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(endpoint_url={self._config.endpoint_url!r}, "
            f"timeout={self._config.timeout!r}, enabled={self.enabled!r})"
        )
