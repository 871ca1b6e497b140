#!/usr/bin/env python3
"""Testhelper CLI for nopadb64 interoperability testing."""

import json
import sys

from nopadb64 import NoPadBase64Error, from_base64, to_base64


def encode_stdin() -> None:
    """Encode raw bytes from stdin and output JSON."""
    data = sys.stdin.buffer.read()
    print(json.dumps({"success": True, "encoded": to_base64(data)}))


def decode_stdin() -> None:
    """Decode base64 text from stdin and output the bytes as hex."""
    text = sys.stdin.buffer.read().strip()
    print(json.dumps({"success": True, "hex": from_base64(text).hex()}))


def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2:
        print("usage: testhelper.py <encode|decode>", file=sys.stderr)
        sys.exit(1)

    command = sys.argv[1]

    try:
        if command == "encode":
            encode_stdin()
        elif command == "decode":
            decode_stdin()
        else:
            print(f"unknown command: {command}", file=sys.stderr)
            sys.exit(1)
    except NoPadBase64Error as e:
        print(json.dumps({"success": False, "error": type(e).__name__, "message": str(e)}))
        sys.exit(1)


if __name__ == "__main__":
    main()
