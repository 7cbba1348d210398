"""Data models for procview."""

from dataclasses import dataclass
from enum import Enum


class OperationStatus(Enum):
    """Outcome of a single procview operation."""

    COMPLETE = "complete"
    PARTIAL = "partial"  # optional resource missing
    FAILED = "failed"  # required resource missing or bad input


_EXIT_CODES = {
    OperationStatus.COMPLETE: 0,
    OperationStatus.FAILED: 1,
    OperationStatus.PARTIAL: 2,
}


@dataclass(slots=True, frozen=True)
class DirectoryEntry:
    """A child of the proc root, classified by name."""

    name: str
    is_pid: bool


@dataclass(slots=True, frozen=True)
class OperationResult:
    """Status of an operation plus the diagnostics reported along the way."""

    status: OperationStatus
    diagnostics: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """True unless the operation failed outright."""
        return self.status is not OperationStatus.FAILED

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self.status]

    @classmethod
    def from_parts(cls, succeeded: int, total: int, diagnostics: list[str]) -> "OperationResult":
        """
        Build a result from a count of independent parts that succeeded.

        All parts succeeding is COMPLETE, none is FAILED, anything between is PARTIAL.
        """
        if succeeded == total:
            status = OperationStatus.COMPLETE
        elif succeeded == 0:
            status = OperationStatus.FAILED
        else:
            status = OperationStatus.PARTIAL
        return cls(status, tuple(diagnostics))
