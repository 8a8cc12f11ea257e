"""
Title: Application Context Container for the Append Logger Console
Date Created: 2026-10-14
Last Modified: 2026-10-14
Version: 1.0

Purpose:
Defines a central application context object for the interactive logger
console. The AppContext aggregates the LogWriter, its configuration, the
clock it was built with and the shutdown primitive into a single, explicit
container so the command loop and signal handlers share one set of objects.

Scope and Limitations:
- Acts purely as a dependency container; contains no logging logic.
- Intended for console-driven use only.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- datetime (standard library)
- threading (standard library)
- typing (standard library)
- logger_configuration.py
- log_writer.py
"""

from dataclasses import dataclass, field
from datetime import datetime
from threading import Event
from typing import Callable

from logger_configuration import LoggerConfiguration
from log_writer import LogWriter


@dataclass
class AppContext:
    writer: LogWriter
    config: LoggerConfiguration
    clock: Callable[[], datetime]
    shutdown_event: Event = field(default_factory=Event)

    def shutdown(self) -> None:
        self.shutdown_event.set()
