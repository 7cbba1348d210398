"""Runtime configuration for procview."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

import psutil

ENV_PREFIX = "PROCVIEW_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a configuration value is out of range or malformed."""


@dataclass(slots=True, frozen=True)
class ProcviewConfig:
    """
    Settings shared by every procview operation.

    Attributes:
        proc_root: Mount point of the process-information filesystem.
        chunk_size: Bytes per read for the command line and raw copy paths.
        summary_lines: Lines printed per record by the system summary.
        max_line_length: Split lines longer than this many characters.
            None leaves lines whole.
        log_level: Name of the logging level for diagnostics.
    """

    proc_root: Path = Path(getattr(psutil, "PROCFS_PATH", "/proc"))
    chunk_size: int = 1024
    summary_lines: int = 10
    max_line_length: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        # Accept plain strings for the root
        object.__setattr__(self, "proc_root", Path(self.proc_root))
        for name in ("chunk_size", "summary_lines"):
            _require_positive(name, getattr(self, name))
        if self.max_line_length is not None:
            _require_positive("max_line_length", self.max_line_length)
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ProcviewConfig":
        """
        Build a config from PROCVIEW_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ.

        Raises:
            ConfigError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        root = env.get(f"{ENV_PREFIX}PROC_ROOT")
        if root:
            values["proc_root"] = Path(root)
        for name in ("chunk_size", "summary_lines", "max_line_length"):
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw:
                values[name] = _parse_int(name, raw)
        level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            values["log_level"] = level

        return cls(**values)

    def with_overrides(self, **overrides: object) -> "ProcviewConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self

    def status_path(self, pid: int) -> Path:
        return self.proc_root / str(pid) / "status"

    def cmdline_path(self, pid: int) -> Path:
        return self.proc_root / str(pid) / "cmdline"

    def record_path(self, name: str) -> Path:
        """Path of a system-wide record such as 'cpuinfo'."""
        return self.proc_root / name


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _require_positive(name: str, value: int) -> None:
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
