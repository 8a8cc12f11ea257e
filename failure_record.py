# failure_record.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from logger_configuration import TIMESTAMP_FORMAT


@dataclass(frozen=True)
class FailureRecord:
    message: str
    timestamp: str
    cause: BaseException | None = None

    @classmethod
    def capture(
        cls,
        message: str,
        timestamp_format: str = TIMESTAMP_FORMAT,
        cause: BaseException | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> FailureRecord:
        # Timestamp is taken when the record is built, not when it is written.
        return cls(
            message=message,
            timestamp=clock().strftime(timestamp_format),
            cause=cause,
        )

    def describe_cause(self) -> str:
        if self.cause is None:
            return "n/a"
        return f"{type(self.cause).__qualname__}: {self.cause}"

    def render(self) -> str:
        return f"{self.timestamp}: {self.message}\n\tException: {self.describe_cause()}"
