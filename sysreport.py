#!/usr/bin/env python3
"""
Command-line system information report.

Prints OS, CPU, uptime, load average, memory and disk usage as one line,
the same line the "sys" and "esys" chat commands produce.
"""
import sys
import argparse
import logging

from cli.commands import COMMAND_HELP, OutputAction, handle_command
from cli.formatting import format_error, format_field, supports_color
from system_info.collector import SystemInfoCollector
from system_info.config import ReportConfig


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="System information report")

    parser.add_argument(
        "category",
        nargs="?",
        default="all",
        help=f"Metric category: {COMMAND_HELP} (default: all)"
    )

    # Which chat verb to emulate
    parser.add_argument(
        "--verb",
        choices=["sys", "esys"],
        default="esys",
        help="Command verb to run (default: esys)"
    )

    parser.add_argument(
        "-f", "--fields",
        action="store_true",
        help="Print each field on its own line instead of one summary line"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log probe failures and the selected platform provider"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the CLI application."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    color = supports_color()

    try:
        collector = SystemInfoCollector(config=ReportConfig.from_env())

        if args.fields:
            for field in collector.collect_fields(args.category):
                print(format_field(field, color=color))
            return 0

        output = handle_command(args.verb, [args.category], collector=collector)
        if output.action is OutputAction.SEND and not output.text:
            # Nothing to send; a chat host would drop the empty message too
            return 0
        print(output.text)

    except KeyboardInterrupt:
        return 130
    except Exception as e:
        print(format_error(str(e), color=color), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
