"""ccndtag command-line interface.

Usage:
    python3 -m ccndtag name 14
    python3 -m ccndtag name 0x0e
    python3 -m ccndtag code ContentObject
    python3 -m ccndtag check
    python3 -m ccndtag version

Exit status is 0 on a hit, 1 on a lookup miss, 2 on a bad argument or a
malformed table.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import (
    DTAG_DICT,
    DTAG_ENTRIES,
    DictError,
    __table_version__,
    __version__,
    build,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ccndtag",
        description="ccnb DTAG symbol table lookups",
    )
    sub = parser.add_subparsers(dest="command")

    # ── name ──
    name_p = sub.add_parser("name", help="Look up the element name for a DTAG")
    name_p.add_argument("dtag", metavar="CODE",
                        help="Numeric tag, decimal or 0x-prefixed hex")

    # ── code ──
    code_p = sub.add_parser("code", help="Look up the DTAG for an element name")
    code_p.add_argument("name", metavar="NAME",
                        help="Element name (exact, case-sensitive)")

    # ── check ──
    sub.add_parser("check", help="Rebuild the embedded table and verify it")

    # ── version ──
    sub.add_parser("version", help="Print version and exit")

    return parser


def _parse_code(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise ValueError(f"not an integer: {text!r}") from None


def _cmd_name(args: argparse.Namespace) -> None:
    code = _parse_code(args.dtag)
    name = DTAG_DICT.name_for(code)
    if name is None:
        print(f"ccndtag: no element name for DTAG {code}", file=sys.stderr)
        sys.exit(1)
    print(name)


def _cmd_code(args: argparse.Namespace) -> None:
    code = DTAG_DICT.code_for(args.name)
    if code is None:
        print(f"ccndtag: no DTAG for element {args.name!r}", file=sys.stderr)
        sys.exit(1)
    print(code)


def _cmd_check(args: argparse.Namespace) -> None:
    table = build(DTAG_ENTRIES)
    print(f"OK: {len(table)} entries (table {__table_version__})")


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "version":
        print(f"ccndtag {__version__}")
        return

    try:
        if args.command == "name":
            _cmd_name(args)
        elif args.command == "code":
            _cmd_code(args)
        elif args.command == "check":
            _cmd_check(args)
    except DictError as e:
        print(f"ccndtag: error [{e.code}]: {e}", file=sys.stderr)
        sys.exit(2)
    except ValueError as e:
        print(f"ccndtag: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
