"""
bearer-token-discovery

Prints the bearer token found by the WLCG Bearer Token Discovery procedure.

Usage:
    bearer-token-discovery [--env-file PATH] [--override] [--show-path] [--json] [--reveal] [-v]

Exit codes:
    0    token found
    1    no token found
    2    token lookup failed
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from .discovery import TokenDiscovery
from .env_source import load_environ
from .errors import BearerTokenDiscoveryError, NoTokenFoundError

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bearer-token-discovery",
        description="Locate a bearer token using the WLCG Bearer Token Discovery procedure",
    )
    parser.add_argument(
        "--env-file",
        metavar="PATH",
        help="dotenv file merged into the environment before discovery",
    )
    parser.add_argument(
        "--override",
        action="store_true",
        help="let --env-file values replace variables already set",
    )
    parser.add_argument(
        "--show-path",
        action="store_true",
        help="print the token file path on a second line",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON (token masked unless --reveal)",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="include the clear token in --json output",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log every discovery step to stderr",
    )
    return parser


def _write_raw(data: bytes) -> None:
    # Token bytes go out unchanged, without decoding or console markup
    stream = getattr(sys.stdout, "buffer", None)
    if stream is None:
        sys.stdout.write(os.fsdecode(data))
        sys.stdout.flush()
        return
    sys.stdout.flush()
    stream.write(data)
    stream.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    out = Console(highlight=False, soft_wrap=True, emoji=False)
    err = Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)

    try:
        environ = load_environ(args.env_file, override=args.override)
    except (OSError, UnicodeDecodeError) as e:
        err.print(f"[red]error:[/red] cannot load env file: {escape(str(e))}")
        return EXIT_ERROR

    try:
        result = TokenDiscovery(environ=environ).discover()
    except NoTokenFoundError as e:
        err.print(f"[yellow]{escape(str(e))}[/yellow]")
        return EXIT_NOT_FOUND
    except BearerTokenDiscoveryError as e:
        err.print(f"[red]error:[/red] {escape(str(e))}")
        return EXIT_ERROR

    if args.json:
        out.print_json(data=result.to_dict(include_sensitive=args.reveal))
        return EXIT_FOUND

    lines = [result.token]
    if args.show_path:
        lines.append(os.fsencode(result.path))
    _write_raw(b"".join(line + b"\n" for line in lines))
    return EXIT_FOUND


if __name__ == "__main__":
    sys.exit(main())
