# -*- coding: utf-8 -*-

SDK_NAME = "scarf-python"
DISTRIBUTION_NAME = "scarf-events"
UNKNOWN_VERSION = "unknown"

# Seconds
DEFAULT_TIMEOUT = 3.0

# Environment signals, read once when an event logger is built
ENV_DO_NOT_TRACK = "DO_NOT_TRACK"
ENV_NO_ANALYTICS = "SCARF_NO_ANALYTICS"
ENV_VERBOSE = "SCARF_VERBOSE"

TRUE_VALUES = ("1", "true", "yes", "on")

DIAGNOSTIC_LOGGER_NAME = "scarf_events.diagnostics"
DIAGNOSTIC_LOG_FORMAT = "%(asctime)s [scarf] %(message)s"

# Exit codes
EXIT_CODE_OK = 0
EXIT_CODE_FAILURE = 1
EXIT_CODE_DISABLED = 3
EXIT_CODE_INVALID_ENDPOINT = 4
EXIT_CODE_REQUEST_FAILED = 5
EXIT_CODE_NON_SUCCESS_STATUS = 6
