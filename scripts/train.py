#!/usr/bin/env python3
"""Training script for lequel trigram profiles.

Reads plain UTF-8 corpus text for each language, counts character trigrams
line by line, and writes one ``trigrams/<code>.csv`` file per language,
sorted by frequency descending.  The bundled profiles in
``src/lequel/models`` are built from ``scripts/corpus``.

Usage:
    python scripts/train.py
    python scripts/train.py --corpus-dir corpus --output-dir data --max-trigrams 5000
    python scripts/train.py --names en=English --names fr=French
"""

from __future__ import annotations

import argparse
import csv
import functools
import time
from pathlib import Path

from lequel._utils import _validate_positive_int
from lequel.models import LANGUAGE_NAMES_FILE, TRIGRAMS_DIR, read_language_codes
from lequel.trigrams import TrigramProfile, build_trigram_profile

# Ensure progress output is visible when piped through tee.
print = functools.partial(print, flush=True)  # noqa: A001

_SCRIPTS_DIR = Path(__file__).resolve().parent
_DEFAULT_CORPUS_DIR = _SCRIPTS_DIR / "corpus"
_DEFAULT_OUTPUT_DIR = _SCRIPTS_DIR.parent / "src" / "lequel" / "models"


# ---------------------------------------------------------------------------
# Corpus discovery
# ---------------------------------------------------------------------------


def collect_corpus_files(corpus_dir: Path) -> dict[str, list[Path]]:
    """Map each language code to its corpus files.

    A language is either a single ``<code>.txt`` file or a ``<code>/``
    directory of ``.txt`` files.
    """
    corpus: dict[str, list[Path]] = {}
    for entry in sorted(corpus_dir.iterdir()):
        if entry.is_file() and entry.suffix == ".txt":
            corpus.setdefault(entry.stem, []).append(entry)
        elif entry.is_dir():
            files = sorted(p for p in entry.iterdir() if p.suffix == ".txt")
            if files:
                corpus.setdefault(entry.name, []).extend(files)
    return corpus


def read_corpus_lines(paths: list[Path]) -> list[str]:
    """Read every line of *paths*, dropping line terminators."""
    lines: list[str] = []
    for path in paths:
        lines.extend(path.read_text(encoding="utf-8").splitlines())
    return lines


# ---------------------------------------------------------------------------
# Profile computation and serialization
# ---------------------------------------------------------------------------


def compute_trigram_counts(paths: list[Path]) -> TrigramProfile:
    """Count trigrams across all corpus files of one language."""
    return build_trigram_profile(read_corpus_lines(paths), max_lines=None)


def rank_trigrams(
    counts: TrigramProfile, max_trigrams: int | None = None
) -> list[tuple[str, int]]:
    """Sort counts by frequency descending (ties by trigram) and truncate."""
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    if max_trigrams is not None:
        _validate_positive_int(max_trigrams, "max_trigrams")
        ranked = ranked[:max_trigrams]
    return [(trigram, int(count)) for trigram, count in ranked]


def write_trigram_csv(ranked: list[tuple[str, int]], output_path: Path) -> None:
    """Write ``trigram,count`` rows to *output_path*."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerows(ranked)


def write_language_names(names: dict[str, str], output_path: Path) -> None:
    """Write the ``code,name`` table in insertion order."""
    with output_path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerows(names.items())


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number < 1:
        msg = f"invalid positive integer: {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _parse_name(value: str) -> tuple[str, str]:
    code, sep, name = value.partition("=")
    if not sep or not code or not name:
        msg = f"expected CODE=NAME, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return code, name


def main() -> None:
    parser = argparse.ArgumentParser(description="Train lequel trigram profiles")
    parser.add_argument(
        "--corpus-dir",
        type=Path,
        default=_DEFAULT_CORPUS_DIR,
        help="Directory of per-language corpus text (default: scripts/corpus)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=_DEFAULT_OUTPUT_DIR,
        help="Reference data directory to write (default: src/lequel/models)",
    )
    parser.add_argument(
        "--max-trigrams",
        type=_positive_int,
        default=None,
        help="Keep only the N most frequent trigrams per language (default: all)",
    )
    parser.add_argument(
        "--names",
        type=_parse_name,
        action="append",
        default=[],
        metavar="CODE=NAME",
        help="Display name for a language code (repeatable)",
    )
    parser.add_argument(
        "--languages",
        nargs="+",
        default=None,
        help="Only train these language codes (default: all in the corpus)",
    )
    args = parser.parse_args()

    start = time.time()
    corpus = collect_corpus_files(args.corpus_dir)
    if args.languages:
        unknown = [code for code in args.languages if code not in corpus]
        if unknown:
            print(f"ERROR: No corpus for: {', '.join(unknown)}")
            print(f"Available: {', '.join(sorted(corpus))}")
            raise SystemExit(1)
        corpus = {code: corpus[code] for code in args.languages}

    print(f"Training trigram profiles for {len(corpus)} languages")
    print()

    skipped: list[str] = []
    trained: dict[str, int] = {}
    for code, paths in corpus.items():
        counts = compute_trigram_counts(paths)
        if not counts:
            print(f"  SKIP {code}: no trigrams")
            skipped.append(code)
            continue
        ranked = rank_trigrams(counts, args.max_trigrams)
        write_trigram_csv(ranked, args.output_dir / TRIGRAMS_DIR / f"{code}.csv")
        trained[code] = len(ranked)
        print(f"  {code:8s}: {len(ranked):6d} trigrams from {len(paths)} file(s)")

    names_path = args.output_dir / LANGUAGE_NAMES_FILE
    names = read_language_codes(names_path) if names_path.is_file() else {}
    for code in trained:
        names.setdefault(code, code)
    for code, name in args.names:
        if code in names:
            names[code] = name
    write_language_names(names, names_path)

    print()
    print("=" * 60)
    print(f"Profiles trained: {len(trained)}")
    print(f"Profiles skipped: {len(skipped)}")
    if skipped:
        print(f"  Skipped: {', '.join(skipped)}")
    print(f"Output directory: {args.output_dir}")
    print(f"Elapsed time:     {time.time() - start:.1f}s")


if __name__ == "__main__":
    main()
