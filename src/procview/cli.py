"""procview - command line entry point."""

import argparse
import logging
import sys

import psutil

from procview.config import LOG_LEVELS, ConfigError, ProcviewConfig
from procview.logging_config import setup_logging
from procview.reader import ProcReader

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the procview command."""
    parser = argparse.ArgumentParser(
        prog="procview",
        description="Inspect processes and system records through the /proc filesystem.",
    )
    parser.add_argument("--proc-root", default=None, help="process filesystem mount point (default: /proc)")
    parser.add_argument("--chunk-size", type=int, default=None, help="bytes per raw read (default: 1024)")
    parser.add_argument("--lines", type=int, default=None, help="lines shown per system record (default: 10)")
    parser.add_argument(
        "--max-line-length",
        type=int,
        default=None,
        help="split lines longer than this many characters (default: no limit)",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, default=None, help="diagnostic log level")
    parser.add_argument("-v", "--verbose", action="store_true", help="shorthand for --log-level DEBUG")

    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    list_cmd = commands.add_parser("list", help="list process directories")
    list_cmd.set_defaults(handler=lambda reader, args: reader.list_process_directories())

    info_cmd = commands.add_parser("info", help="show status fields and command line of a process")
    info_cmd.add_argument("pid", help="process id")
    info_cmd.set_defaults(handler=lambda reader, args: reader.read_process_info(args.pid))

    sysinfo_cmd = commands.add_parser("sysinfo", help="show the head of the CPU and memory records")
    sysinfo_cmd.set_defaults(handler=lambda reader, args: reader.show_system_info())

    compare_cmd = commands.add_parser("compare", help="read one file with raw and buffered I/O")
    compare_cmd.add_argument("file", nargs="?", default=None, help="file to read (default: <proc-root>/version)")
    compare_cmd.set_defaults(handler=lambda reader, args: reader.compare_file_methods(args.file))

    commands.add_parser("tui", help="interactive menu")

    return parser


def load_config(args: argparse.Namespace) -> ProcviewConfig:
    """Merge PROCVIEW_* environment settings with command line options."""
    return ProcviewConfig.from_env().with_overrides(
        proc_root=args.proc_root,
        chunk_size=args.chunk_size,
        summary_lines=args.lines,
        max_line_length=args.max_line_length,
        log_level="DEBUG" if args.verbose else args.log_level,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the procview command. Returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ConfigError as exc:
        parser.error(str(exc))

    setup_logging(config.log_level)
    if not psutil.LINUX:
        logger.warning("This platform is not Linux; %s may not exist", config.proc_root)

    if args.command == "tui":
        # Textual is only loaded for the interactive menu
        from procview.app import ProcviewApp

        ProcviewApp(config).run()
        return 0

    result = args.handler(ProcReader(config), args)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
