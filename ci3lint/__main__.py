"""
Command line entry point.

Usage:
    python -m ci3lint PATH [PATH ...]     Analyze PHP files or directories
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ci3lint.diagnostics import format_diagnostic
from ci3lint.document import Document
from ci3lint.lint import default_rules
from ci3lint.pipeline import analyze_document, expand_paths

logger = logging.getLogger("ci3lint")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ci3lint",
        description="Check CodeIgniter 3 controllers and models for framework conventions.",
    )
    parser.add_argument("paths", nargs="+", help="PHP files or directories to analyze")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rules = default_rules()
    exit_code = 0
    total = 0
    for path in expand_paths(args.paths):
        try:
            document = Document.from_path(path)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"{path}: cannot read file: {exc}", file=sys.stderr)
            exit_code = 2
            continue
        result = analyze_document(document, rules=rules)
        logger.debug("%s classified as %s", path, result.classification)
        for diagnostic in result.diagnostics:
            print(format_diagnostic(document.identity, diagnostic))
        total += len(result.diagnostics)
        if result.has_errors and exit_code == 0:
            exit_code = 1

    logger.info("%d diagnostic(s) reported", total)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
