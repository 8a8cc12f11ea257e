"""
Title: Append-Only Log Writer
Date Created: 2026-10-12
Last Modified: 2026-10-18
Version: 1.3

Purpose:
Appends timestamped text entries to a caller-chosen log file. Entries are
timestamped using an injected clock and appended in call order. When an
append fails, the failure is described by a FailureRecord and written to a
fixed secondary "meta-log" so that it can be inspected later; the caller only
ever sees a boolean (log) or a WriteResult (try_log).

Scope and Limitations:
- Appends are synchronous and unbuffered; the file handle is held for the
  duration of one append only.
- No locking is performed; concurrent writers rely on append-mode semantics
  of the platform.
- Entries are written verbatim; an entry containing a newline spans lines.
- Characters the configured encoding cannot represent (lone surrogates,
  or non-ASCII text under an ASCII encoding) are written as backslash
  escapes, so any str entry can be appended to the log and the meta-log.
- If writing to the meta-log itself fails, the error propagates to the
  caller. There is no further fallback.

Dependencies:
- Python 3.10+
- datetime (standard library)
- logging (standard library)
- pathlib (standard library)
- typing (standard library)
- failure_record.py
- log_paths.py
- logger_configuration.py
- write_outcomes.py
"""

# Change Log:
#
# 1.3 (2026-10-18)
#   - Unencodable characters are backslash-escaped instead of raising, so an
#     entry that fails to encode can no longer escape log() via the meta-log.
#
# 1.2 (2026-10-15)
#   - Added try_log() returning a WriteResult; log() is now a thin wrapper.
#   - Encoding errors raised while appending are treated as write faults.
#
# 1.1 (2026-10-13)
#   - Meta-log path and timestamp format moved into LoggerConfiguration.
#
# 1.0 (2026-10-12)
#   - Initial append path, path validation and meta-log recording.

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from failure_record import FailureRecord
from log_paths import is_valid_relative_path
from logger_configuration import LoggerConfiguration
from write_outcomes import WriteResult

logger = logging.getLogger(__name__)


class LogWriter:
    def __init__(
        self,
        config: LoggerConfiguration | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._config = config or LoggerConfiguration()
        self._clock = clock

    @property
    def config(self) -> LoggerConfiguration:
        return self._config

    def log(self, file_path: str | None, entry: str | None) -> bool:
        # Reports success or failure; write faults are never re-raised.
        return self.try_log(file_path, entry).ok

    def try_log(self, file_path: str | None, entry: str | None) -> WriteResult:
        if entry is None or not is_valid_relative_path(file_path):
            logger.debug("Rejected log entry for path %r", file_path)
            return WriteResult.rejected(file_path)

        line = f"{self._config.format_timestamp(self._clock())} {entry}\n"
        result = self._append(file_path, line)

        if not result.ok:
            logger.warning(
                "Append to %s failed (%s); recording in %s",
                file_path,
                type(result.error).__name__,
                self._config.meta_log_path,
            )
            self.record_failure(
                FailureRecord.capture(
                    entry,
                    self._config.timestamp_format,
                    result.error,
                    clock=self._clock,
                )
            )

        return result

    def record_failure(self, record: FailureRecord) -> None:
        # Last resort: a failure here propagates to the caller.
        meta_log = self._config.meta_log_path
        self.ensure_file_exists(meta_log)
        with self._open_append(meta_log) as f:
            f.write("\n" + record.render())

    def ensure_file_exists(self, path: str | None = None) -> bool:
        # Creates an empty file if absent. Append mode never truncates, so an
        # existing file and a lost creation race both leave content intact.
        target = Path(path if path is not None else self._config.default_log_path)
        if not target.exists():
            with self._open_append(target):
                pass
            logger.debug("Created %s", target)
        return True

    def _open_append(self, path):
        return Path(path).open(
            "a",
            encoding=self._config.encoding,
            errors=self._config.encoding_errors,
        )

    def _append(self, file_path: str, text: str) -> WriteResult:
        try:
            with self._open_append(file_path) as f:
                f.write(text)
        except (OSError, ValueError) as e:
            return WriteResult.failed(file_path, e)
        return WriteResult.succeeded(file_path)


def log(file_path: str | None, entry: str | None) -> bool:
    # One-call convenience with default configuration and the wall clock.
    return LogWriter().log(file_path, entry)
