import json
import logging
import sys
from typing import Any, Dict, Optional, Tuple

import click

from scarf_events import VERSION
from scarf_events.constants import EXIT_CODE_FAILURE, EXIT_CODE_OK
from scarf_events.event_logger import ScarfEventLogger
from scarf_events.meta import get_user_agent

LOG = logging.getLogger(__name__)


def configure_logger(ctx, param, debug):
    level = logging.CRITICAL

    if debug:
        level = logging.DEBUG

    logging.basicConfig(format="%(asctime)s %(name)s => %(message)s", level=level)


def parse_property(ctx, param, values: Tuple[str, ...]) -> Dict[str, str]:
    properties = {}
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected key=value, got {raw!r}", ctx=ctx, param=param)
        properties[key.strip()] = value
    return properties


def parse_json_properties(ctx, param, value: Optional[str]) -> Dict[str, Any]:
    if not value:
        return {}
    try:
        data = json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}", ctx=ctx, param=param)
    if not isinstance(data, dict):
        raise click.BadParameter("expected a JSON object", ctx=ctx, param=param)
    return data


@click.group(help="Send analytics events to a Scarf endpoint.")
@click.option("--debug", is_flag=True, expose_value=False, is_eager=True,
              help="Enable debug logging.", callback=configure_logger)
@click.version_option(version=VERSION)
def cli():
    pass


@cli.command(help="Send one event to ENDPOINT.")
@click.argument("endpoint")
@click.option("-p", "--property", "properties", multiple=True, callback=parse_property,
              help="Event property as key=value, sent as a string. Repeatable.")
@click.option("--json-properties", callback=parse_json_properties,
              help="Event properties as a JSON object; values keep their JSON type.")
@click.option("--timeout", type=float, default=None,
              help="Request timeout in seconds (default: 3).")
@click.option("--verbose", is_flag=True, default=False,
              help="Write diagnostics to stderr, like SCARF_VERBOSE=1.")
def send(endpoint: str, properties: Dict[str, str], json_properties: Dict[str, Any],
         timeout: Optional[float], verbose: bool):
    event = dict(json_properties)
    event.update(properties)

    with ScarfEventLogger(endpoint, timeout=timeout, verbose=verbose or None) as event_logger:
        result = event_logger.send(event)

    LOG.info("Event result: %s", result)

    if result.ok:
        click.echo(f"Event sent ({result.status_code}).")
        sys.exit(EXIT_CODE_OK)

    exc = result.to_exception()
    click.secho(exc.message if exc else result.outcome.value, err=True, fg="red")
    sys.exit(exc.get_exit_code() if exc else EXIT_CODE_FAILURE)


@cli.command(help="Show whether analytics are enabled and the resolved settings.")
@click.argument("endpoint", required=False, default="")
@click.option("--timeout", type=float, default=None,
              help="Request timeout in seconds (default: 3).")
def status(endpoint: str, timeout: Optional[float]):
    with ScarfEventLogger(endpoint, timeout=timeout) as event_logger:
        config = event_logger.config

    click.echo(f"Analytics: {'enabled' if event_logger.enabled else 'disabled'}")
    click.echo(f"Endpoint: {config.endpoint_url or '(not set)'}")
    click.echo(f"Timeout: {config.timeout}s")
    click.echo(f"Verbose: {config.verbose}")
    click.echo(f"User-Agent: {get_user_agent()}")
