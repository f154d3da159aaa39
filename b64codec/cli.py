"""Command-line interface for b64codec.

Provides subcommands:
  encode - Base64-encode data from stdin
  decode - Base64-decode data from stdin

Exit codes:
    0 - Success
    1 - Invalid base64 character
    2 - Malformed base64 length
    3 - Invalid arguments
"""

import argparse
import sys

from b64codec.codec import (
    MIME_LINE_LENGTH,
    PEM_LINE_LENGTH,
    decode,
    encode,
    encode_wrapped,
)
from b64codec.errors import InvalidSymbolError, MalformedLengthError


def _resolve_width(args):
    """Resolve the wrap width from --pem, --mime or --wrap.

    Returns None when the output should not be wrapped.
    """
    if args.pem:
        return PEM_LINE_LENGTH
    if args.mime:
        return MIME_LINE_LENGTH
    if args.wrap is not None:
        if args.wrap < 1:
            print(
                f"error: --wrap must be a positive integer, got {args.wrap}",
                file=sys.stderr,
            )
            sys.exit(3)
        return args.wrap
    return None


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def cmd_encode(args) -> int:
    """Handle the 'encode' subcommand -- reads stdin, writes base64."""
    width = _resolve_width(args)
    raw = sys.stdin.buffer.read()
    if width is None:
        encoded = encode(raw, url_safe=args.url_safe)
    else:
        encoded = encode_wrapped(raw, width, url_safe=args.url_safe)
    sys.stdout.write(encoded)
    return 0


def cmd_decode(args) -> int:
    """Handle the 'decode' subcommand -- reads stdin, writes decoded."""
    encoded = sys.stdin.read().strip()
    if not encoded:
        return 0
    try:
        decoded = decode(encoded, strip_linebreaks=args.strip_linebreaks)
    except InvalidSymbolError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except MalformedLengthError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    sys.stdout.buffer.write(decoded)
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _add_wrap_args(parser: argparse.ArgumentParser) -> None:
    """Add the mutually exclusive line-wrapping options to a subparser."""
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--pem",
        action="store_true",
        help=f"Wrap output at {PEM_LINE_LENGTH} columns (PEM style)",
    )
    group.add_argument(
        "--mime",
        action="store_true",
        help=f"Wrap output at {MIME_LINE_LENGTH} columns (MIME style)",
    )
    group.add_argument(
        "--wrap",
        type=int,
        default=None,
        metavar="COLS",
        help="Wrap output at COLS columns",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="b64codec",
        description="Base64 encoder/decoder with URL-safe and wrapped output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__import__('b64codec').__version__}",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- encode --
    p_enc = sub.add_parser("encode", help="Base64-encode data from stdin")
    p_enc.add_argument(
        "--url-safe",
        action="store_true",
        help="Use the URL-safe alphabet ('-', '_' and '.' padding)",
    )
    _add_wrap_args(p_enc)
    p_enc.set_defaults(func=cmd_encode)

    # -- decode --
    p_dec = sub.add_parser("decode", help="Base64-decode data from stdin")
    p_dec.add_argument(
        "--strip-linebreaks",
        action="store_true",
        help="Remove embedded line breaks before decoding (PEM/MIME input)",
    )
    p_dec.set_defaults(func=cmd_decode)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)
