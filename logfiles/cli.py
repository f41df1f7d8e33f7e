"""CLI: create, append to, and list per-tag log files."""

import argparse
import logging
import os
import sys

from logfiles import configure
from logfiles.config import load_config, load_yaml_config
from logfiles.errors import LogFileError
from logfiles.identity import detect_identity
from logfiles.inspector import current_target, list_log_files


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="logfiles", description="Manage per-tag log files")
    parser.add_argument("--log-dir", default=None,
                        help="Write log files in this directory (default: system temp dir)")
    parser.add_argument("--program", default=None,
                        help="Program name used as the file name prefix")
    parser.add_argument("--config", metavar="PATH", default=os.environ.get("LOGFILES_CONFIG"),
                        help="Optional YAML config file")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Create a fresh log file, rotating the old one")
    create.add_argument("tag")

    append = sub.add_parser("append", help="Append a line to the current log file")
    append.add_argument("tag")
    append.add_argument("message")

    sub.add_parser("list", help="List log files in the candidate directories")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(
        load_yaml_config(args.config), log_dir=args.log_dir, program=args.program
    )
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)
    manager = configure(config)

    try:
        if args.command == "create":
            f, filename = manager.create(args.tag)
            f.close()
            print(filename)

        elif args.command == "append":
            with manager.open(args.tag) as f:
                f.write(args.message if args.message.endswith("\n") else args.message + "\n")

        elif args.command == "list":
            identity = detect_identity(manager.program)
            print(f"{identity.program} (pid {identity.pid}, {identity.user}@{identity.host})")
            for log_dir in manager.log_dirs():
                files = list_log_files(log_dir, manager.program)
                print(f"{log_dir}:")
                if not files:
                    print("  No log files found.")
                    continue
                for name in files:
                    path = os.path.join(log_dir, name)
                    target = current_target(log_dir, name)
                    if target is not None:
                        print(f"  {name} -> {target}")
                    else:
                        print(f"  {name}  ({_format_size(os.path.getsize(path))})")
    except LogFileError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
