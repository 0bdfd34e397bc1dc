"""Command line entry point: validate JSON from a file or standard input."""

from __future__ import annotations

import sys

from jsonparse.json import ParseError, parse_json_value


def main(argv: list[str] | None = None) -> int:
    """Parse JSON from the file named in ``argv`` or from stdin and print it."""
    args = sys.argv[1:] if argv is None else list(argv)

    if args:
        path = args[0]
        try:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as error:
            print(f"Error reading file '{path}': {error}", file=sys.stderr)
            return 1
    else:
        try:
            text = sys.stdin.read()
        except (OSError, UnicodeDecodeError) as error:
            print(f"Error reading from stdin: {error}", file=sys.stderr)
            return 1

    try:
        rest, value = parse_json_value(text)
    except ParseError as error:
        print(f"Invalid JSON: {error}", file=sys.stderr)
        return 1

    if rest.strip():
        print(f"Warning: Unparsed input remaining: '{rest}'", file=sys.stderr)
    print("Valid JSON:")
    print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())