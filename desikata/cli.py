import argparse
import sys

from desikata.logging_setup import configure_logging, get_logger

from desikata.app import report as report_cmd
from desikata.app import title as title_cmd
from desikata.app import upi as upi_cmd
from desikata.app.inputs import InputError

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="desikata",
        description="desikata: UPI log analyzer, title fixer, report cards",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="""
Examples:
  desikata upi january.json
  desikata u - --json < january.json
  desikata title "  DILWALE   DULHANIA   LE   JAYENGE  "
  desikata rc rahul.json

Tips:
- Use '-' as FILE to read JSON from stdin
- Use '--json' for machine-readable output
"""
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command")

    # -------- UPI --------
    upi = subparsers.add_parser(
        "upi",
        aliases=["u"],
        help="Analyze a UPI transaction log (JSON array)"
    )
    upi.add_argument("path", metavar="FILE", help="JSON file, or '-' for stdin")
    upi.add_argument("--json", action="store_true", help="Print the result as JSON")

    # -------- TITLE --------
    title = subparsers.add_parser(
        "title",
        aliases=["t"],
        help="Fix a movie title into Title Case"
    )
    title.add_argument("words", nargs="+", help="Title text")

    # -------- REPORT CARD --------
    report = subparsers.add_parser(
        "report",
        aliases=["rc"],
        help="Generate a report card from a student JSON object"
    )
    report.add_argument("path", metavar="FILE", help="JSON file, or '-' for stdin")
    report.add_argument("--json", action="store_true", help="Print the result as JSON")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging("DEBUG" if args.verbose else None)

    # ==================================================
    # COMMAND DISPATCH
    # ==================================================

    try:
        if args.command in ("upi", "u"):
            return upi_cmd.run(args)

        elif args.command in ("title", "t"):
            return title_cmd.run(args)

        elif args.command in ("report", "rc"):
            return report_cmd.run(args)

    except InputError as exc:
        logger.debug("input error: %s", exc)
        print(f"✗ {exc}")
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
