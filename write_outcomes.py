"""
Title: Append Attempt Outcomes (WriteOutcome Enum and WriteResult)
Date Created: 2026-10-12
Last Modified: 2026-10-13
Version: 1.1

Purpose:
Defines the authoritative set of outcomes for a single append attempt made
by the LogWriter, and the immutable result value that carries the outcome
together with the underlying fault. Callers that need more than a boolean
inspect the result instead of catching exceptions.

Scope and Limitations:
- Each attempt has exactly one outcome; there are no retries or partial states.
- A FAILED result always carries the error raised by the append.
- Meta-log faults are not represented here; they propagate to the caller.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- enum (standard library)
"""

from dataclasses import dataclass
from enum import Enum, auto


class WriteOutcome(Enum):
    NOT_ATTEMPTED = auto()
    SUCCEEDED = auto()
    FAILED = auto()


@dataclass(frozen=True)
class WriteResult:
    outcome: WriteOutcome
    path: str | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is WriteOutcome.SUCCEEDED

    @classmethod
    def rejected(cls, path: str | None) -> "WriteResult":
        return cls(WriteOutcome.NOT_ATTEMPTED, path)

    @classmethod
    def succeeded(cls, path: str) -> "WriteResult":
        return cls(WriteOutcome.SUCCEEDED, path)

    @classmethod
    def failed(cls, path: str, error: BaseException) -> "WriteResult":
        return cls(WriteOutcome.FAILED, path, error)
