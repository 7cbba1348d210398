"""Shared fixtures: a synthetic process filesystem under tmp_path."""

from pathlib import Path

import pytest

# Ten allow-listed fields interleaved with five that must be dropped
STATUS_42 = (
    "Name:\tbash\n"
    "Umask:\t0022\n"
    "State:\tS (sleeping)\n"
    "FDSize:\t256\n"
    "Tgid:\t42\n"
    "Ngid:\t0\n"
    "Pid:\t42\n"
    "NStgid:\t42\n"
    "PPid:\t1\n"
    "TracerPid:\t0\n"
    "NSpid:\t42\n"
    "Uid:\t1000\t1000\t1000\t1000\n"
    "Groups:\t4 24 27\n"
    "Gid:\t1000\t1000\t1000\t1000\n"
    "VmPeak:\t   10984 kB\n"
)

STATUS_42_FIELDS = [
    "Name:\tbash\n",
    "Umask:\t0022\n",
    "State:\tS (sleeping)\n",
    "Tgid:\t42\n",
    "Ngid:\t0\n",
    "Pid:\t42\n",
    "PPid:\t1\n",
    "TracerPid:\t0\n",
    "Uid:\t1000\t1000\t1000\t1000\n",
    "Gid:\t1000\t1000\t1000\t1000\n",
]

CPUINFO_LINES = [f"line {i:04d}: cpu detail\n" for i in range(1000)]
MEMINFO = "MemTotal:       16318480 kB\nMemFree:         1122340 kB\nMemAvailable:    9876540 kB\n"
VERSION = "Linux version 6.1.0-test (builder@example) #1 SMP PREEMPT_DYNAMIC\n"


@pytest.fixture
def fake_proc(tmp_path: Path) -> Path:
    """
    Build a small proc root.

    Layout:
        1/      status + cmdline
        2/      empty
        7/      status only (no cmdline)
        42/     full status + NUL-separated cmdline
        self/   non-numeric directory
        cpuinfo, meminfo, version
    """
    root = tmp_path / "proc"
    root.mkdir()

    (root / "1").mkdir()
    (root / "1" / "status").write_text("Name:\tinit\nPid:\t1\nPPid:\t0\n")
    (root / "1" / "cmdline").write_bytes(b"/sbin/init\0")

    (root / "2").mkdir()

    (root / "7").mkdir()
    (root / "7" / "status").write_text("Name:\tkworker\nState:\tI (idle)\nPid:\t7\n")

    (root / "42").mkdir()
    (root / "42" / "status").write_text(STATUS_42)
    (root / "42" / "cmdline").write_bytes(b"foo\0bar\0baz\0")

    (root / "self").mkdir()
    (root / "cpuinfo").write_text("".join(CPUINFO_LINES))
    (root / "meminfo").write_text(MEMINFO)
    (root / "version").write_text(VERSION)

    return root
