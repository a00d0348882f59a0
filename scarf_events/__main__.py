"""Allow scarf_events to be executable through `python -m scarf_events`."""
from scarf_events.cli import cli


if __name__ == "__main__":  # pragma: no cover
    cli(prog_name="scarf-event")
