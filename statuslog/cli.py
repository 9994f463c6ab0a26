"""statuslog - Command line interface"""

import argparse
import json
import os

from rich.console import Console
from rich.markup import escape

from . import VERSION, LogAnalyzer, LogReadError, print_report
from .logs import setup_logging
from .patterns import DEFAULT_LOG_PATH, LOG_PATH_ENV


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="statuslog - HTTP status code summary for access logs",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", nargs="?",
                        default=os.environ.get(LOG_PATH_ENV, DEFAULT_LOG_PATH),
                        help=f"Access log to analyze (default: ${LOG_PATH_ENV} or {DEFAULT_LOG_PATH})")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Hide per-line parse warnings")
    parser.add_argument("--version", action="version", version=f"statuslog v{VERSION}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)
    console = Console()

    try:
        report = LogAnalyzer().analyze_file(args.logfile)
    except LogReadError as e:
        Console(stderr=True).print(f"[red]Error:[/] {escape(str(e))}")
        return 1

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print_report(report, console)

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(report, f, indent=2)
        if not args.json:
            console.print(f"\n[green]Report saved to:[/] {args.output}")

    return 0
