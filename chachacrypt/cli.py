"""
Command line
============
    chachacrypt encrypt --file PATH (--key LITERAL | --key-file PATH)
    chachacrypt decrypt --file PATH (--key LITERAL | --key-file PATH)

Prints ``SUCCESS`` or ``ERROR: <message>`` on stdout. Logging goes to
stderr; ``-v`` or CHACHACRYPT_LOG_LEVEL turns it up.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .errors import FileCryptError
from .keys import resolve_key
from .pipeline import decrypt_file, encrypt_file

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "CHACHACRYPT_LOG_LEVEL"
LOG_FORMAT    = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

EXIT_OK    = 0
EXIT_ERROR = 1


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-f", "--file", required=True,
                        help="File to process")
    key_group = parser.add_mutually_exclusive_group(required=True)
    key_group.add_argument("-k", "--key",
                           help="Private key as a 32-character literal")
    key_group.add_argument("--key-file",
                           help="Private key from a file (32 raw bytes)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chachacrypt",
        description="Tool for encrypting and decrypting files utilizing ChaCha20-Poly1305",
    )
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    p_enc = sub.add_parser("encrypt", aliases=["en"],
                           help="Encrypt FILE into FILE.crypt")
    _add_common_arguments(p_enc)
    p_enc.set_defaults(handler=encrypt_file)

    p_dec = sub.add_parser("decrypt", aliases=["de"],
                           help="Decrypt FILE.crypt back into FILE")
    _add_common_arguments(p_dec)
    p_dec.set_defaults(handler=decrypt_file)

    return parser


def configure_logging(verbose: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        name  = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = getattr(logging, name, logging.WARNING)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr,
                        force=True)


def run(args: argparse.Namespace) -> None:
    """Resolve the key and run the chosen pipeline step. Raises FileCryptError."""
    with resolve_key(args.key, args.key_file) as key:
        args.handler(args.file, key)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args   = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        run(args)
    except FileCryptError as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"ERROR: {exc}")
        return EXIT_ERROR
    print("SUCCESS")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
