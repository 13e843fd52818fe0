"""Command-line interface for the Deva Converter.

WHY: Most conversions are one-off jobs on a file or a pasted line. The CLI
wires input reading, converter construction, rendering and output behind
a single command usable in shell pipelines.

HOW: argparse parses the options, a Converter is built from the selected
scheme, and the whole input is converted in one call. Output goes to
stdout (or --output); status and warnings go to stderr.

RULES:
- Positional argument: input file; "-" or absent reads stdin
- --to deva (default) reads Latin, --to latin reads Devanagari
- --aksaras prints the aksara JSON of the parsed input instead
- --rhymes prints rhyme statistics instead
- Latin output is NFC-composed unless --no-nfc is given
- Configuration errors and unreadable input exit with status 1
"""

from __future__ import annotations

import argparse
import logging
import sys
import unicodedata
from pathlib import Path
from typing import List, Optional

from deva_converter.config import DEFAULT_ALLOW, DEFAULT_SCHEME, DEFAULT_STRICT
from deva_converter.core.analysis import rhyme_counts
from deva_converter.core.converter import Converter
from deva_converter.core.tables import ConfigurationError
from deva_converter.schemes import SCHEMES

logger = logging.getLogger("deva_converter.cli")


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _write_output(text: str, path: Optional[str]) -> None:
    if path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
    else:
        Path(path).write_text(text, encoding="utf-8")
        _status("Saved: {}".format(path))


def _format_rhymes(counts) -> str:
    lines = [
        "{}\t{}".format(unicodedata.normalize("NFC", rhyme), count)
        for rhyme, count in counts.most_common()
    ]
    return "\n".join(lines) + "\n" if lines else ""


def run(args: argparse.Namespace) -> int:
    """Execute one conversion. Returns the process exit status.

    RULES:
    - Warnings are counted and summarized on stderr in strict mode
    - The converter is built before any input is read, so configuration
      errors are reported even for empty input
    """
    warnings: List[str] = []

    def _on_warning(message: str) -> None:
        warnings.append(message)
        logger.warning(message)

    allow = set(DEFAULT_ALLOW)
    if args.allow:
        allow.update(args.allow)

    try:
        converter = Converter.from_scheme(
            args.scheme,
            strict=args.strict,
            allow=allow,
            on_warning=_on_warning,
        )
    except ConfigurationError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    try:
        text = _read_input(args.input_file)
    except OSError as e:
        print("Error: Cannot read input: {}".format(e), file=sys.stderr)
        return 1

    if args.to == "deva":
        elements = converter.latin_to_aksara(text)
    else:
        elements = converter.devanagari_to_aksara(text)

    if args.rhymes:
        output = _format_rhymes(rhyme_counts(elements))
    elif args.aksaras:
        output = converter.render(elements, "aksara_json") + "\n"
    elif args.to == "deva":
        output = converter.to_devanagari(elements)
    else:
        output = converter.to_latin(elements)
        if args.nfc:
            output = unicodedata.normalize("NFC", output)

    try:
        _write_output(output, args.output)
    except OSError as e:
        print("Error: Cannot write output: {}".format(e), file=sys.stderr)
        return 1

    if warnings:
        _status("{} invalid input unit(s) reported.".format(len(warnings)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect defaults without
    running a conversion.
    """
    parser = argparse.ArgumentParser(
        prog="deva_converter",
        description="Convert Sanskrit between Latin transliteration and Devanagari.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default="-",
        help="Input text file (UTF-8). Reads stdin when omitted or '-'.",
    )

    parser.add_argument(
        "--to",
        choices=("deva", "latin"),
        default="deva",
        help="Target script: 'deva' reads Latin input, 'latin' reads "
             "Devanagari input (default: %(default)s).",
    )

    parser.add_argument(
        "--scheme",
        default=DEFAULT_SCHEME,
        help="Transliteration scheme. Available: {} (default: %(default)s).".format(
            ", ".join(sorted(SCHEMES))
        ),
    )

    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_STRICT,
        help="Warn about input that is not part of the scheme (default: %(default)s).",
    )

    parser.add_argument(
        "--allow",
        action="append",
        default=None,
        help="Character to exempt from strict-mode warnings. Can be given "
             "multiple times.",
    )

    parser.add_argument(
        "--nfc",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Compose Latin output to NFC (default: %(default)s).",
    )

    output_kind = parser.add_mutually_exclusive_group()
    output_kind.add_argument(
        "--aksaras",
        action="store_true",
        help="Print the aksara segmentation as JSON instead of converted text.",
    )
    output_kind.add_argument(
        "--rhymes",
        action="store_true",
        help="Print rhyme counts (rhyme, tab, count) instead of converted text.",
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write output to this file instead of stdout.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m deva_converter`` and the console script.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
