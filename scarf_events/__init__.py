# -*- coding: utf-8 -*-

__author__ = """Scarf"""
__email__ = 'help@scarf.sh'

import os

ROOT = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(ROOT, 'VERSION')) as version_file:
    VERSION = version_file.read().strip()

from scarf_events.event_logger import ScarfEventLogger  # noqa: E402
from scarf_events.models import EventResult, Outcome  # noqa: E402

__all__ = ["ScarfEventLogger", "EventResult", "Outcome", "VERSION"]
