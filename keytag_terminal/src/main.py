"""Terminal CLI for SLIP39 <-> KeyTag dot pattern conversion."""

from __future__ import annotations

import argparse

import controller
from model import DEFAULT_WORD_COUNT, SHARE_WORD_COUNTS


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="SLIP39 KeyTag dot pattern converter")
    parser.add_argument(
        "mnemonic",
        nargs="*",
        help="Optional SLIP39 share words to convert once and exit.",
    )
    parser.add_argument(
        "--words",
        type=int,
        default=DEFAULT_WORD_COUNT,
        choices=SHARE_WORD_COUNTS,
        help=f"Rows on the plate / words per share (default: {DEFAULT_WORD_COUNT}).",
    )
    parser.add_argument(
        "--wordlist",
        default=None,
        help="JSON wordlist file (default: SLIP39 wordlist bundled with embit).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """CLI runner."""
    args = parse_args(argv)
    return controller.run(
        word_count=args.words,
        wordlist_path=args.wordlist,
        mnemonic=args.mnemonic,
    )


if __name__ == "__main__":
    raise SystemExit(main())
