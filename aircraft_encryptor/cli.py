"""
Command-line entry points.

    aircraft-encrypt <input.xml> [output.bin]
    aircraft-decrypt <input.bin> [output.xml]
"""

import argparse
import sys

from aircraft_encryptor.crypto.encryption import encrypt_file
from aircraft_encryptor.crypto.decryption import decrypt_file
from aircraft_encryptor.crypto.errors import UsageError

DASH_EPILOG = "Paths starting with '-' must follow '--', e.g. %(prog)s -- -plane.xml"


class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on bad usage; this tool exits with 1."""

    def error(self, message):
        raise UsageError(message)


def _build_parser(prog, description, input_help, output_help):
    parser = _ArgumentParser(prog=prog, description=description, epilog=DASH_EPILOG)
    parser.add_argument("input", help=input_help)
    parser.add_argument("output", nargs="?", default=None, help=output_help)
    return parser


def _run(parser, action, done, failure, argv):
    try:
        args = parser.parse_args(argv)
    except UsageError:
        parser.print_help(sys.stdout)
        return 1

    try:
        output = action(args.input, args.output)
    except Exception as e:
        print(f"{failure} failed: {e}", file=sys.stderr)
        return 1

    print(f"{done}: {args.input} -> {output}")
    return 0


def main(argv=None) -> int:
    parser = _build_parser(
        "aircraft-encrypt",
        "Encrypts aircraft XML files using AES-256-CBC. "
        "If output is not specified, replaces .xml with .bin",
        "plain file to encrypt",
        "container to write (default: input with .xml replaced by .bin)",
    )
    return _run(parser, encrypt_file, "Encrypted", "Encryption", argv)


def decrypt_main(argv=None) -> int:
    parser = _build_parser(
        "aircraft-decrypt",
        "Decrypts containers produced by aircraft-encrypt. "
        "If output is not specified, replaces .bin with .xml",
        "container to decrypt",
        "plain file to write (default: input with .bin replaced by .xml)",
    )
    return _run(parser, decrypt_file, "Decrypted", "Decryption", argv)


if __name__ == "__main__":
    sys.exit(main())
