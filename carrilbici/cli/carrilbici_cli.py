import argparse
import sys
from typing import Dict, List, Optional

from ..inventory.parser import load_registry
from ..logging import configure_logging, LOG_LEVEL
from ..registry.errors import CarrilBiciError
from ..report.report_service import report_file, report_file_json


def _parse_status_updates(pairs: List[str]) -> Dict[str, str]:
    updates: Dict[str, str] = {}
    for pair in pairs:
        name, sep, status = pair.partition("=")
        if not sep:
            raise ValueError(f"--set espera NOMBRE=ESTADO, recibido: {pair}")
        updates[name] = status
    return updates


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="carrilbici")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    subparsers = parser.add_subparsers(dest="command")

    report_parser = subparsers.add_parser("report", help="Print the lane report of an inventory file")
    report_parser.add_argument("-f", "--file", required=True, help="Path to inventory yaml/json")
    report_parser.add_argument("--set", dest="updates", action="append", default=[],
                               metavar="NAME=STATUS", help="Override a segment status before reporting")
    report_parser.add_argument("--json", action="store_true", help="Print the structured result as JSON")

    status_parser = subparsers.add_parser("status", help="Print the status of one segment")
    status_parser.add_argument("-f", "--file", required=True, help="Path to inventory yaml/json")
    status_parser.add_argument("-n", "--name", required=True, help="Segment name")

    total_parser = subparsers.add_parser("total", help="Print the total lane length in km")
    total_parser.add_argument("-f", "--file", required=True, help="Path to inventory yaml/json")

    list_parser = subparsers.add_parser("list", help="List segments and their lengths")
    list_parser.add_argument("-f", "--file", required=True, help="Path to inventory yaml/json")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else LOG_LEVEL)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "report":
            updates = _parse_status_updates(args.updates)
            if args.json:
                print(report_file_json(args.file, status_updates=updates))
                return
            res = report_file(args.file, status_updates=updates)
            if not res["ok"]:
                print("; ".join(res["reasons"]), file=sys.stderr)
                sys.exit(1)
            print(res["report"], end="")
        elif args.command == "status":
            print(load_registry(args.file).get_status(args.name))
        elif args.command == "total":
            print(f"{load_registry(args.file).total_length()} km")
        elif args.command == "list":
            for name, length_km in load_registry(args.file).list_segments().items():
                print(f"{name}\t{length_km}")
    except (CarrilBiciError, FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
