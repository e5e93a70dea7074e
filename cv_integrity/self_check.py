"""
Self-check for the site content.

Loads data/cv.json (or the given file), runs the schema and consistency
checks and logs what it found. Exit code 0 when the document may be
rendered and saved, 1 when it is blocked, 2 when it could not be checked.

Usage:
    cv-self-check
    cv-self-check path/to/cv.json --lang en --report report.html
    python -m cv_integrity.self_check --json
"""

from __future__ import annotations
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from .config import CV_PATH, LOG_LEVEL
from .checks import load_document, run_checks
from .report import report_to_html
from .schema_loader import SchemaLoader, SchemaLoadError

logger = logging.getLogger("self_check")


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Validate the CV content document.")
    parser.add_argument("document", nargs="?", default=str(CV_PATH), help="CV JSON file")
    parser.add_argument("--schema", default=None, help="schema JSON file")
    parser.add_argument("--lang", default=None, help="message language (pt, es, en)")
    parser.add_argument("--report", default=None, help="write an HTML report to this file")
    parser.add_argument("--json", action="store_true", help="print the report as JSON")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(message)s")
    logger.info("Running self-check on %s", args.document)

    try:
        document = load_document(args.document)
    except (OSError, ValueError) as e:
        logger.error("Could not read %s: %s", args.document, e)
        return 2

    try:
        report = asyncio.run(run_checks(document, args.lang, SchemaLoader(args.schema)))
    except SchemaLoadError as e:
        logger.error("%s", e)
        return 2

    for msg in report.critical_messages:
        logger.error("%s", msg)
    for msg in report.warning_messages:
        logger.warning("%s", msg)
    if not report.blocked:
        logger.info("CV schema OK.")

    if args.report:
        Path(args.report).write_text(report_to_html(report), encoding="utf-8")
        logger.info("Report written to %s", args.report)
    if args.json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))

    return 1 if report.blocked else 0


if __name__ == "__main__":
    sys.exit(main())
