import logging
import math
import os
from datetime import timedelta
from typing import Mapping, NamedTuple, Optional, Union

from scarf_events.constants import (
    DEFAULT_TIMEOUT,
    ENV_DO_NOT_TRACK,
    ENV_NO_ANALYTICS,
    ENV_VERBOSE,
    TRUE_VALUES,
)

logger = logging.getLogger(__name__)

Timeout = Union[int, float, timedelta]


class EventLoggerConfig(NamedTuple):
    """
    Frozen configuration of an event logger.

    Args:
        endpoint_url (str): The collection endpoint, validated at send time.
        timeout (float): Default request timeout in seconds.
        disabled (bool): Whether analytics were opted out when it was built.
        verbose (bool): Whether diagnostic lines are written.
    """

    endpoint_url: str
    timeout: float
    disabled: bool
    verbose: bool

    def as_dict(self) -> dict[str, Union[str, float, bool]]:
        return {
            "endpoint_url": self.endpoint_url,
            "timeout": self.timeout,
            "disabled": self.disabled,
            "verbose": self.verbose,
        }


def env_bool(name: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Read an environment variable as a boolean flag.

    Only `1`, `true`, `yes` and `on` (any case) are true; everything else,
    including unset or empty values, is false.

    Args:
        name (str): The environment variable name.
        environ (Optional[Mapping[str, str]]): Environment to read, defaults to os.environ.

    Returns:
        bool: The flag value.
    """
    if environ is None:
        environ = os.environ

    value = (environ.get(name) or "").strip()
    if not value:
        return False

    return value.lower() in TRUE_VALUES


def _to_seconds(timeout: Optional[Timeout]) -> Optional[float]:
    if timeout is None:
        return None
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    return float(timeout)


def resolve_timeout(timeout: Optional[Timeout], default: float = DEFAULT_TIMEOUT) -> float:
    """
    Return the timeout in seconds, falling back to the default when the
    override is missing, not strictly positive or not finite.
    """
    seconds = _to_seconds(timeout)
    if seconds is None or not math.isfinite(seconds) or not seconds > 0:
        return default
    return seconds


def get_event_logger_config(
    endpoint_url: str,
    timeout: Optional[Timeout] = None,
    verbose: Optional[bool] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> EventLoggerConfig:
    """
    Build the event logger configuration, reading the opt-out and verbosity
    signals from the environment once.

    Args:
        endpoint_url (str): The collection endpoint.
        timeout (Optional[Timeout]): Default timeout override.
        verbose (Optional[bool]): Explicit verbosity, None reads SCARF_VERBOSE.
        environ (Optional[Mapping[str, str]]): Environment to read, defaults to os.environ.

    Returns:
        EventLoggerConfig: The resolved configuration.
    """
    if environ is None:
        environ = os.environ

    disabled = env_bool(ENV_DO_NOT_TRACK, environ) or env_bool(ENV_NO_ANALYTICS, environ)

    if verbose is None:
        verbose = env_bool(ENV_VERBOSE, environ)

    config = EventLoggerConfig(
        endpoint_url=endpoint_url or "",
        timeout=resolve_timeout(timeout),
        disabled=disabled,
        verbose=bool(verbose),
    )

    logger.debug("Event logger config resolved: %s", config.as_dict())
    return config
