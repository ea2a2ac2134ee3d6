from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .errors import LineIndexError
from .index import LineIndex
from .spans import LineNumber, SingleLineSpan


def _read(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).expanduser().read_bytes()


def _parse_anchor(value: str) -> SingleLineSpan:
    line, sep, col = value.partition(":")
    if not (sep and line.isdigit() and col.isdigit()) or int(line) < 1 or int(col) < 1:
        raise argparse.ArgumentTypeError(f"expected LINE:COL (one-indexed), got {value!r}")
    column = int(col) - 1
    return SingleLineSpan(line=LineNumber(int(line) - 1), start_col=column, end_col=column)


def _span_to_jsonable(span: SingleLineSpan) -> dict[str, object]:
    return {
        "line": span.line.as_index(),
        "display": span.line.display(),
        "start_col": span.start_col,
        "end_col": span.end_col,
    }


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="line-numbers", description="Map byte offsets to line numbers")
    ap.add_argument("path", help="File to index ('-' for stdin)")
    ap.add_argument("offset", type=int, help="Byte offset, or start of a region when END is given")
    ap.add_argument("end", type=int, nargs="?", help="End of the byte region")
    ap.add_argument(
        "--relative-to",
        type=_parse_anchor,
        metavar="LINE:COL",
        help="Treat the file as a snippet starting at this position of an enclosing document",
    )
    ap.add_argument("--json", action="store_true", help="Print the result as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    data = _read(args.path)
    index = LineIndex.from_text(data)
    lines = data.split(b"\n")

    try:
        if args.end is None and args.relative_to is None:
            line, column = index.from_offset(args.offset)
            text = lines[line.as_index()].decode("utf-8", errors="replace")
            if args.json:
                print(json.dumps({"line": line.as_index(), "display": line.display(), "column": column}))
            else:
                print(
                    f"Offset {args.offset} is on line {line.display()} (column {column}), "
                    f"and the text of that line is {text!r}."
                )
            return 0

        end = args.offset if args.end is None else args.end
        if args.relative_to is not None:
            inner = index.from_region(args.offset, end)
            spans = index.from_region_relative_to(args.relative_to, args.offset, end)
        else:
            inner = spans = index.from_region(args.offset, end)
    except LineIndexError as e:
        ap.exit(2, f"{ap.prog}: error: {e}\n")

    if args.json:
        print(json.dumps([_span_to_jsonable(s) for s in spans], indent=2))
        return 0

    # Text always comes from the file itself, even when positions are relative.
    for span, src in zip(spans, inner):
        text = lines[src.line.as_index()][src.start_col : src.end_col].decode("utf-8", errors="replace")
        print(f"{span.format()} {span.start_col}..{span.end_col} {text!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
