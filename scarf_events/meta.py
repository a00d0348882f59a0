from importlib.metadata import PackageNotFoundError, version
import logging
import platform
from typing import Dict, Optional

from scarf_events.constants import DISTRIBUTION_NAME, SDK_NAME, UNKNOWN_VERSION


LOG = logging.getLogger(__name__)

OS_ALIASES = {
    "Darwin": "macOS",
}


def get_version() -> Optional[str]:
    """
    Get the version of the scarf-events package.

    The installed distribution metadata wins; a source checkout falls back to
    the VERSION file shipped inside the package, which the build can rewrite.

    Returns:
      Optional[str]: The version if found, otherwise None.
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        LOG.debug("Distribution metadata not found, using packaged VERSION.")

    from scarf_events import VERSION

    return VERSION or None


def get_os_name() -> str:
    """
    Get the operating system name, using the marketing name where one exists.

    Returns:
      str: The operating system name.
    """
    os_name = platform.system()
    if not os_name:
        return "unknown"
    return OS_ALIASES.get(os_name, os_name)


def get_arch() -> str:
    """
    Get the normalized CPU architecture.

    Returns:
      str: The architecture name.
    """
    machine = platform.machine()
    # Normalize architecture names
    if machine in ("x86_64", "AMD64"):
        return "x86_64"
    elif machine in ("arm64", "aarch64"):
        return "arm_64"
    elif machine == "i386":
        return "x86"
    return machine or "unknown"


def get_user_agent() -> str:
    """
    Get the user agent string for HTTP requests.

    Returns:
      str: The user agent string in the format:
        scarf-python/{version} (os={os}; arch={arch}; runtime={implementation}/{python_version})
    """
    sdk_version = get_version() or UNKNOWN_VERSION
    runtime = f"{platform.python_implementation()}/{platform.python_version()}"

    return f"{SDK_NAME}/{sdk_version} (os={get_os_name()}; arch={get_arch()}; runtime={runtime})"


def get_meta_http_headers() -> Dict[str, str]:
    """
    Get the metadata headers attached to every event request.

    Returns:
      Dict[str, str]: The metadata headers.
    """
    return {
        "User-Agent": get_user_agent(),
    }
