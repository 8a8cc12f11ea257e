"""
Title: Append Logger Configuration Model (LoggerConfiguration)
Date Created: 2026-10-12
Last Modified: 2026-10-12
Version: 1.0

Purpose:
Defines an immutable data model holding the fixed defaults used by the
LogWriter: where failed writes are recorded (the meta-log), how timestamps
are rendered, which path the file-existence helper targets when none is
given, and the text encoding and error handler used for every append.

Scope and Limitations:
- Values are static and immutable once instantiated.
- No configuration file or environment lookup is performed; a
  configuration is constructed in code and injected into a LogWriter.
- Relative paths are resolved against the process working directory at
  write time, not at construction time.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- datetime (standard library)
"""

from dataclasses import dataclass
from datetime import datetime

META_LOG_PATH = "meta_log"
# Time of day first, date second.
TIMESTAMP_FORMAT = "%H:%M:%S %m-%d-%y"
DEFAULT_LOG_PATH = "log"


@dataclass(frozen=True)
class LoggerConfiguration:
    # Immutable logger configuration.
    meta_log_path: str = META_LOG_PATH
    timestamp_format: str = TIMESTAMP_FORMAT
    default_log_path: str = DEFAULT_LOG_PATH
    encoding: str = "utf-8"
    # Unencodable characters are escaped rather than raised.
    encoding_errors: str = "backslashreplace"

    def format_timestamp(self, moment: datetime) -> str:
        # Pure formatting, no clock access.
        return moment.strftime(self.timestamp_format)
