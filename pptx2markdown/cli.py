from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

import pptx2markdown
from pptx2markdown.converter import DEFAULT_RESOURCE_PATH, convert_file
from pptx2markdown.extractors.normalization import scrub_blank_entries
from pptx2markdown.extractors.serialization import serialize_extraction
from pptx2markdown.formatters import DEFAULT_FORMATTER, available_formatters
from pptx2markdown.writer import write_output


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pptx2markdown",
        description=(
            "Convert a PowerPoint presentation to Markdown. Without an output "
            "path the Markdown is written to stdout and images are not saved."
        ),
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Path to the presentation to convert.",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help=(
            "Output path. A path ending in .md receives all slides, any other "
            "path is used as a directory with one file per slide. Images are "
            "written to an img/ directory next to the Markdown."
        ),
    )
    parser.add_argument(
        "--format",
        default=DEFAULT_FORMATTER,
        choices=available_formatters(),
        help=f"Output markup (default: {DEFAULT_FORMATTER}).",
    )
    parser.add_argument(
        "--resource-path",
        default=DEFAULT_RESOURCE_PATH,
        help=f"Prefix for image references in the markup (default: {DEFAULT_RESOURCE_PATH}).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the extracted slides as JSON on stdout instead of markup (omits image data by default).",
    )
    parser.add_argument(
        "--binary",
        action="store_true",
        help="With --json, include image data as base64 blobs.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr.",
    )
    return parser


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )


def _emit_json(path: Path, *, include_binary: bool) -> None:
    results = list(pptx2markdown.read_file(path))
    for result in results:
        scrub_blank_entries(result.slides)
    if len(results) == 1:
        payload = serialize_extraction(results[0], include_binary=include_binary)
    else:
        payload = [
            serialize_extraction(result, include_binary=include_binary)
            for result in results
        ]
    json.dump(payload, sys.stdout)
    sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        return code

    if unknown:
        unknown_str = " ".join(unknown)
        print(
            f"pptx2markdown: warning: unsupported arguments: {unknown_str}",
            file=sys.stderr,
        )
        return 1

    _setup_logging(args.verbose)

    try:
        if args.binary and not args.json:
            raise ValueError("--binary requires --json")
        if args.json and args.output is not None:
            raise ValueError("--json writes to stdout and takes no output path")
        if not args.path.is_file():
            raise FileNotFoundError(f"File {args.path} does not exist")

        if args.json:
            _emit_json(args.path, include_binary=bool(args.binary))
            return 0

        rendered = convert_file(
            args.path, formatter=args.format, resource_path=args.resource_path
        )
        write_output(rendered, args.output)
        return 0
    except Exception as exc:
        print(f"pptx2markdown: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
