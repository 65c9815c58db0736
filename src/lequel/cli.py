"""Command-line interface for lequel."""

from __future__ import annotations

import argparse
import logging
import sys

import lequel
from lequel._utils import DEFAULT_MAX_BYTES, DEFAULT_MAX_LINES, DEFAULT_MAX_TRIGRAMS
from lequel.models import (
    LanguageProfile,
    load_language_names,
    load_language_profiles,
    load_languages,
)
from lequel.pipeline import NO_MATCH, IdentificationResult
from lequel.pipeline.orchestrator import rank_languages
from lequel.text import text_from_file, text_from_stream


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number < 1:
        msg = f"invalid positive integer: {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _describe(code: str | None, names: dict[str, str]) -> str:
    if code is None:
        return "None"
    name = names.get(code)
    return f"{code} ({name})" if name else code


def _print_result(
    label: str,
    result: IdentificationResult,
    args: argparse.Namespace,
    names: dict[str, str],
) -> None:
    if args.minimal:
        print(result.language)
    else:
        print(
            f"{label}: {_describe(result.language, names)} "
            f"with similarity {result.similarity:.4f}"
        )


def _report(
    label: str,
    text: list[str],
    args: argparse.Namespace,
    names: dict[str, str],
    languages: list[LanguageProfile],
) -> None:
    results = rank_languages(text, languages, max_lines=args.max_lines)
    if args.all:
        for r in results or [NO_MATCH]:
            _print_result(label, r, args, names)
        return

    _print_result(label, results[0] if results else NO_MATCH, args, names)


def main(argv: list[str] | None = None) -> None:
    """Run the ``lequel`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Identify the natural language of files."
    )
    parser.add_argument("files", nargs="*", help="Files to identify")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the language code"
    )
    parser.add_argument(
        "--all", action="store_true", help="List every matching language, best first"
    )
    parser.add_argument(
        "-d",
        "--data-dir",
        default=None,
        help="Directory holding languagecode_names.csv and trigrams/ "
        "(default: bundled profiles)",
    )
    parser.add_argument(
        "--max-trigrams",
        type=_positive_int,
        default=DEFAULT_MAX_TRIGRAMS,
        help=f"Trigrams kept per language with --data-dir "
        f"(default: {DEFAULT_MAX_TRIGRAMS})",
    )
    parser.add_argument(
        "--max-lines",
        type=_positive_int,
        default=DEFAULT_MAX_LINES,
        help=f"Lines examined per input (default: {DEFAULT_MAX_LINES})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"lequel {lequel.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    try:
        if args.data_dir:
            names, languages = load_language_profiles(args.data_dir, args.max_trigrams)
        else:
            names, languages = load_language_names(), load_languages()
    except (OSError, ValueError) as e:
        print(f"lequel: could not load trigram data: {e}", file=sys.stderr)
        sys.exit(1)

    failed = False
    if args.files:
        for filepath in args.files:
            try:
                text = text_from_file(filepath, DEFAULT_MAX_BYTES)
            except OSError as e:
                print(f"lequel: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            _report(filepath, text, args, names, languages)
    else:
        text = text_from_stream(sys.stdin.buffer, DEFAULT_MAX_BYTES)
        _report("stdin", text, args, names, languages)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
