"""The four procview operations."""

import logging
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from procview.config import ProcviewConfig
from procview.models import DirectoryEntry, OperationResult, OperationStatus
from procview.procfs import (
    STATUS_PREFIXES,
    InvalidPidError,
    LineSelection,
    copy_raw,
    describe_error,
    has_prefix,
    is_number,
    parse_pid,
    stream_cmdline,
)

logger = logging.getLogger(__name__)

# (section title, record name under the proc root)
SYSTEM_RECORDS = (
    ("CPU Information", "cpuinfo"),
    ("Memory Information", "meminfo"),
)

COMPARE_RECORD = "version"


class ProcReader:
    """
    Reads the process-information filesystem and prints human-readable reports.

    Each public operation opens, reads and closes its own files and returns
    an OperationResult. Failures are logged at the point they happen and are
    never raised to the caller.
    """

    def __init__(
        self,
        config: ProcviewConfig | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """
        Initialize the ProcReader.

        Args:
            config: Settings to use. Defaults to ProcviewConfig().
            stream: Text stream for reports. Defaults to sys.stdout, looked up
                when each operation runs. The raw comparison strategy writes
                to the stream's file descriptor.
        """
        self._config = config or ProcviewConfig()
        self._stream = stream

    @property
    def config(self) -> ProcviewConfig:
        return self._config

    @property
    def stream(self) -> TextIO:
        """The stream reports are written to."""
        return self._stream if self._stream is not None else sys.stdout

    def scan_process_directories(self) -> list[DirectoryEntry]:
        """Classify every child of the proc root. Raises OSError."""
        with os.scandir(self._config.proc_root) as entries:
            return [DirectoryEntry(entry.name, is_number(entry.name)) for entry in entries]

    def list_process_directories(self) -> OperationResult:
        """Print one row per numeric directory under the proc root."""
        root = self._config.proc_root
        try:
            entries = self.scan_process_directories()
        except OSError as exc:
            return self._failed(f"opendir {root}", exc)

        processes = [entry for entry in entries if entry.is_pid]
        logger.debug("Scanned %d entries under %s", len(entries), root)

        self._print(f"Listing all process directories in {root}...")
        self._print("PID      Type")
        self._print("---      ----")
        for entry in processes:
            self._print(f"{entry.name:<8} process")
        self._print(f"Found {len(processes)} process directories")
        self._print("SUCCESS: Process directories listed!")
        return OperationResult(OperationStatus.COMPLETE)

    def read_process_info(self, pid_text: str) -> OperationResult:
        """
        Print selected status fields and the command line of one process.

        The status record is required; a missing command line only makes the
        result PARTIAL.
        """
        try:
            pid = parse_pid(pid_text)
        except InvalidPidError as exc:
            logger.error("%s", exc)
            return OperationResult(OperationStatus.FAILED, (str(exc),))

        status_path = self._config.status_path(pid)
        self._print(f"Reading information for PID {pid}...\n")

        fields = LineSelection(status_path, predicate=has_prefix(*STATUS_PREFIXES))
        try:
            lines = list(fields)
        except OSError as exc:
            return self._failed(f"status {status_path}", exc)

        self._print(f"--- Process Information for PID {pid} ---")
        self._write_lines(lines)

        diagnostics: list[str] = []
        cmdline_path = self._config.cmdline_path(pid)
        self._print("\n--- Command Line ---")
        try:
            stream_cmdline(cmdline_path, self.stream, self._config.chunk_size)
        except OSError as exc:
            diagnostics.append(self._report(f"cmdline {cmdline_path}", exc))
        self._print()

        if diagnostics:
            self._print("PARTIAL: Process information read without command line")
            return OperationResult(OperationStatus.PARTIAL, tuple(diagnostics))
        self._print("SUCCESS: Process information read!")
        return OperationResult(OperationStatus.COMPLETE)

    def show_system_info(self) -> OperationResult:
        """Print the head of the CPU and memory records."""
        count = self._config.summary_lines
        diagnostics: list[str] = []
        shown = 0

        self._print("Reading system information...\n")
        for index, (title, name) in enumerate(SYSTEM_RECORDS):
            if index:
                self._print()
            self._print(f"--- {title} (first {count} lines) ---")
            path = self._config.record_path(name)
            head = LineSelection(path, limit=count, max_line_length=self._config.max_line_length)
            try:
                written = self._write_lines(head)
            except OSError as exc:
                diagnostics.append(self._report(f"fopen {path}", exc))
                continue
            logger.debug("Printed %d lines of %s", written, path)
            shown += 1

        result = OperationResult.from_parts(shown, len(SYSTEM_RECORDS), diagnostics)
        if result.ok:
            self._print("SUCCESS: System information displayed!")
        return result

    def read_file_with_syscalls(self, path: str | os.PathLike[str]) -> OperationResult:
        """Copy a file to the stream's descriptor with os.read()/os.write()."""
        stream = self.stream
        try:
            stream.flush()
            copied = copy_raw(path, stream.fileno(), self._config.chunk_size)
        except OSError as exc:
            return self._failed(f"raw copy {path}", exc)
        logger.debug("Copied %d bytes from %s", copied, path)
        return OperationResult(OperationStatus.COMPLETE)

    def read_file_with_library(self, path: str | os.PathLike[str]) -> OperationResult:
        """Echo a file line by line through buffered text I/O."""
        try:
            written = self._write_lines(LineSelection(path))
        except OSError as exc:
            return self._failed(f"fopen {path}", exc)
        logger.debug("Echoed %d lines from %s", written, path)
        return OperationResult(OperationStatus.COMPLETE)

    def compare_file_methods(self, path: str | os.PathLike[str] | None = None) -> OperationResult:
        """
        Print a file twice, once per reading strategy, for side-by-side comparison.

        Args:
            path: File to read. Defaults to the kernel version record.
        """
        target = Path(path) if path is not None else self._config.record_path(COMPARE_RECORD)

        self._print("Comparing file operation methods...")
        self._print(f"Comparing file reading methods for: {target}\n")

        self._print("=== Method 1: Using System Calls ===")
        raw = self.read_file_with_syscalls(target)
        self._print("\n")

        self._print("=== Method 2: Using Library Functions ===")
        buffered = self.read_file_with_library(target)
        self._print()

        self._print("\nNOTE: Run with strace to compare syscalls.")

        parts = (raw, buffered)
        diagnostics = [message for part in parts for message in part.diagnostics]
        return OperationResult.from_parts(sum(part.ok for part in parts), len(parts), diagnostics)

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream)

    def _write_lines(self, lines: Iterable[str]) -> int:
        stream = self.stream
        written = 0
        for line in lines:
            stream.write(line)
            written += 1
        return written

    def _report(self, context: str, exc: OSError) -> str:
        message = f"{context}: {describe_error(exc)}"
        logger.error("%s", message)
        return message

    def _failed(self, context: str, exc: OSError) -> OperationResult:
        return OperationResult(OperationStatus.FAILED, (self._report(context, exc),))
