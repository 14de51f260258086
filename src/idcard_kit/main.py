"""
idcard-kit command line entry point

Run with: idcard-kit <command> ...
Or: python -m idcard_kit.main <command> ...
"""

import argparse
import sys
import uuid
from typing import Optional, Sequence

from idcard_kit import __version__
from idcard_kit.config.region_loader import validate_environment
from idcard_kit.core.errors import IdCardError
from idcard_kit.core.identity import Identity
from idcard_kit.core.upgrade import upgrade
from idcard_kit.logging.setup import get_logger, set_job_id, setup_logging
from idcard_kit.synthetic.fake import FakeGenerator, FakeOptions
from idcard_kit.validators.dispatch import check


logger = get_logger(__name__)


def _cmd_validate(args: argparse.Namespace) -> int:
    all_valid = True
    for number in args.numbers:
        report = check(number).to_report()
        all_valid = all_valid and report.valid
        print(report.model_dump_json())
    return 0 if all_valid else 1


def _cmd_inspect(args: argparse.Namespace) -> int:
    identity = Identity(args.number)
    print(identity.to_json(pretty=True))
    return 0 if identity.is_valid else 1


def _cmd_upgrade(args: argparse.Namespace) -> int:
    print(upgrade(args.number))
    return 0


def _cmd_fake(args: argparse.Namespace) -> int:
    options = FakeOptions(
        region=args.region,
        min_year=args.min_year,
        max_year=args.max_year,
        gender=args.gender,
    )
    generator = FakeGenerator(seed=args.seed)
    for _ in range(args.count):
        print(generator.random(options))
    return 0


def _cmd_scan(args: argparse.Namespace) -> int:
    # presidio is only loaded when scanning
    from idcard_kit.recognizers.registry import find_id_numbers

    if args.file == "-":
        text = sys.stdin.read()
    else:
        with open(args.file, "r", encoding="utf-8") as f:
            text = f.read()

    results = find_id_numbers(text)
    for result in results:
        print(f"{result.entity_type}\t{result.start}\t{result.end}\t{result.score:.2f}\t{text[result.start:result.end]}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="idcard-kit",
        description="Validate, decode, upgrade and generate identity card numbers.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("validate", help="Validate numbers of any supported jurisdiction")
    p.add_argument("numbers", nargs="+")
    p.set_defaults(func=_cmd_validate)

    p = subparsers.add_parser("inspect", help="Decode a Mainland China number as JSON")
    p.add_argument("number")
    p.set_defaults(func=_cmd_inspect)

    p = subparsers.add_parser("upgrade", help="Convert a 15-digit number to 18 digits")
    p.add_argument("number")
    p.set_defaults(func=_cmd_upgrade)

    p = subparsers.add_parser("fake", help="Generate synthetic Mainland China numbers")
    p.add_argument("--region", help="Region code or prefix")
    p.add_argument("--min-year", type=int)
    p.add_argument("--max-year", type=int)
    p.add_argument("--gender", choices=["male", "female"])
    p.add_argument("--count", type=int, default=1)
    p.add_argument("--seed", type=int)
    p.set_defaults(func=_cmd_fake)

    p = subparsers.add_parser("scan", help="Find ID numbers in a text file ('-' for stdin)")
    p.add_argument("file")
    p.set_defaults(func=_cmd_scan)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the idcard-kit command line."""
    validation_errors = validate_environment()
    if validation_errors:
        print("Configuration errors detected:", file=sys.stderr)
        for error in validation_errors:
            print(f"  - {error}", file=sys.stderr)
        return 2

    setup_logging()
    set_job_id(uuid.uuid4().hex[:12])

    args = build_parser().parse_args(argv)
    logger.debug("Command started", extra={"event": "command_started", "command": args.command})

    try:
        return args.func(args)
    except IdCardError as e:
        logger.warning(str(e), extra={"event": "command_failed", "command": args.command})
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
