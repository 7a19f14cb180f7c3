"""
Command-line interface for the secutil helpers.
"""
from __future__ import annotations

import argparse
import logging
import sys

from .alphabets import alphabet_names
from .config import SecutilConfig
from .errors import SecutilError
from .generator import random_id_with_meta
from .hashing import hash_password, verify_password
from .strength import check_password
from .timeutil import formatted_time


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secutil",
        description="Random identifiers, password strength checks and bcrypt hashes.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_id = sub.add_parser("id", help="generate a random identifier")
    p_id.add_argument("length", type=int)
    p_id.add_argument(
        "-a",
        "--alphabet",
        default=None,
        help=f"one of {', '.join(alphabet_names())} (unknown names use the default)",
    )
    p_id.add_argument("--uniform", action="store_true", help="use rejection sampling")
    p_id.add_argument("--meta", action="store_true", help="print alphabet and entropy")

    p_check = sub.add_parser("check", help="check password strength")
    p_check.add_argument("password")
    p_check.add_argument("-m", "--min-length", type=int, default=None)

    p_hash = sub.add_parser("hash", help="bcrypt-hash a password")
    p_hash.add_argument("password")
    p_hash.add_argument("-c", "--cost", type=int, default=None)

    p_verify = sub.add_parser("verify", help="check a password against a bcrypt hash")
    p_verify.add_argument("password")
    p_verify.add_argument("hash")

    p_time = sub.add_parser("time", help="print the current UTC timestamp")
    p_time.add_argument("-f", "--format", default="")

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for `python -m secutil.cli`, `run_secutil.py` and the
    `secutil` console script. Returns the process exit code.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = SecutilConfig.from_env()

        if args.command == "id":
            meta = random_id_with_meta(
                args.length, args.alphabet, uniform=args.uniform, config=cfg
            )
            print(meta.identifier)
            if args.meta:
                print(f"alphabet: {meta.alphabet.label}")
                print(f"entropy:  {meta.entropy_bits:.1f} bits")
            return 0

        if args.command == "check":
            min_length = (
                args.min_length if args.min_length is not None else cfg.min_password_length
            )
            report = check_password(args.password, min_length)
            if report.ok:
                print("ok")
                return 0
            print("weak: missing " + ", ".join(report.missing()))
            return 1

        if args.command == "hash":
            cost = args.cost if args.cost is not None else cfg.bcrypt_cost
            print(hash_password(args.password, cost))
            return 0

        if args.command == "verify":
            if verify_password(args.password, args.hash):
                print("match")
                return 0
            print("no match")
            return 1

        print(formatted_time(args.format or cfg.time_format))
        return 0
    except (SecutilError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
