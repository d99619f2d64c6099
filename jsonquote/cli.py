"""jsonquote CLI: quote stdin or a file as a JSON string literal."""

from __future__ import annotations

import sys

from .quote import append_quote_bytes, append_quote_bytes_escape_html


USAGE: str = """\
jsonquote [OPTIONS] [INPUT] [-o OUTPUT]

Quote raw bytes as a JSON string literal. Invalid UTF-8 is replaced
with \\ufffd.

Options:
  --escape-html      Also escape <, > and & for embedding in HTML
  --lines            Quote each input line as its own literal
  -o, --output FILE  Write output to FILE instead of stdout
  --help             Show this help message
"""


def read_input(input_file: str | None) -> tuple[bytes, int]:
    """Read raw input from file or stdin. Returns (data, exit_code) where exit_code 0 means OK."""
    if input_file is None:
        return (sys.stdin.buffer.read(), 0)
    try:
        with open(input_file, "rb") as f:
            return (f.read(), 0)
    except OSError:
        print("jsonquote: cannot open '" + input_file + "'", file=sys.stderr)
        return (b"", 1)


def write_output(output: bytes | bytearray, output_file: str | None) -> int:
    """Write output to file or stdout. Returns 0 on success, 1 on error."""
    if output_file is None:
        sys.stdout.buffer.write(output)
        sys.stdout.buffer.flush()
        return 0
    try:
        with open(output_file, "wb") as f:
            f.write(output)
    except OSError:
        print("jsonquote: cannot write '" + output_file + "'", file=sys.stderr)
        return 1
    return 0


def split_lines(data: bytes) -> list[bytes]:
    """Split on newlines, dropping the empty piece after a final newline."""
    if len(data) == 0:
        return []
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return lines


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    input_file: str | None = None
    output_file: str | None = None
    have_input = False
    escape_html = False
    per_line = False
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "--escape-html":
            escape_html = True
            i += 1
        elif arg == "--lines":
            per_line = True
            i += 1
        elif arg == "-o" or arg == "--output":
            if i + 1 >= len(args):
                print("jsonquote: " + arg + " requires an argument", file=sys.stderr)
                return 2
            output_file = args[i + 1]
            i += 2
        elif arg.startswith("-") and arg != "-":
            print("jsonquote: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        elif not have_input:
            have_input = True
            if arg != "-":
                input_file = arg
            i += 1
        else:
            print("jsonquote: unexpected argument '" + arg + "'", file=sys.stderr)
            return 2

    data, code = read_input(input_file)
    if code != 0:
        return code

    append = append_quote_bytes_escape_html if escape_html else append_quote_bytes
    out = bytearray()
    if per_line:
        for line in split_lines(data):
            append(out, line)
            out += b"\n"
    else:
        append(out, data)
        out += b"\n"
    return write_output(out, output_file)


if __name__ == "__main__":
    sys.exit(main())
