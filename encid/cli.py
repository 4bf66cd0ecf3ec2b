"""Command-line interface: encode and decode IDs, and create keys."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from pathlib import Path
from typing import Optional, Sequence

import platformdirs

from .basexx import InvalidDigitError
from .core import BLOCK_SIZE, NotFoundError, decode, decode50, encode, encode50
from .sqlite_store import SQLiteKeyStore


def default_keystore_path() -> Path:
    """Return the keystore location inside the user's configuration directory."""
    return Path(platformdirs.user_config_dir("encid", appauthor=False)) / "keystore.db"


def build_parser(default_path: str | Path) -> argparse.ArgumentParser:
    """Build the argument parser, with ``default_path`` as the keystore default."""
    parser = argparse.ArgumentParser(prog="encid", description="Work with encrypted integer IDs.")
    parser.add_argument("-keystore", "--keystore", default=str(default_path), help="pathname of keystore")
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("enc", help="encode a number")
    enc.add_argument("-50", "--50", dest="fifty", action="store_true", help="use base50")
    enc.add_argument("typ", type=int, help="type of number to encode")
    enc.add_argument("n", type=int, help="number to encode")

    dec = sub.add_parser("dec", help="decode a number")
    dec.add_argument("-50", "--50", dest="fifty", action="store_true", help="use base50")
    dec.add_argument("id", type=int, help="id of decoding key")
    dec.add_argument("inp", help="input string to decode")

    newkey = sub.add_parser("newkey", help="create a new key")
    newkey.add_argument("typ", type=int, help="type of key to create")

    return parser


def _encode(ks: SQLiteKeyStore, fifty: bool, typ: int, n: int) -> tuple[int, str]:
    func = encode50 if fifty else encode
    try:
        return func(ks, typ, n)
    except NotFoundError:
        ks.new_key(typ, BLOCK_SIZE)
        return func(ks, typ, n)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; returns the process exit status."""
    args = build_parser(default_keystore_path()).parse_args(argv)
    ksfile = Path(args.keystore)
    try:
        ksfile.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        with SQLiteKeyStore(ksfile) as ks:
            if args.command == "enc":
                key_id, text = _encode(ks, args.fifty, args.typ, args.n)
                print(f"{key_id} {text}")
            elif args.command == "dec":
                func = decode50 if args.fifty else decode
                typ, n = func(ks, args.id, args.inp)
                print(f"{typ} {n}")
            else:
                print(ks.new_key(args.typ, BLOCK_SIZE))
    except (NotFoundError, InvalidDigitError, ValueError, RuntimeError, OSError, sqlite3.Error) as exc:
        print(f"encid: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())