"""i18nlint: report missing, redundant and malformed messages.

Usage:
    i18nlint -d ./locales --reference en --fail
"""

import argparse
import sys
from typing import List, Optional, TextIO

from core.config import settings
from infrastructure.i18n.checker import CoverageReport, check_messages


def print_report(report: CoverageReport, out: TextIO = sys.stdout) -> None:
    """Write a per-language report."""
    print("=== I18N CHECK RESULT ===", file=out)
    print(f"Languages: {', '.join(report.languages)}", file=out)
    if report.reference_language:
        print(f"Reference language: {report.reference_language}", file=out)
    print(f"Total keys: {len(report.all_keys)}", file=out)

    for language in report.languages:
        print(f"\n--- [{language}] ---", file=out)

        for title, keys in (
            ("Missing keys", report.missing_keys.get(language)),
            ("Redundant keys", report.redundant_keys.get(language)),
        ):
            if keys:
                print(f"{title}:", file=out)
                for key in keys:
                    print(f"  - {key}", file=out)
            else:
                print(f"{title}: None", file=out)

        errors = report.syntax_errors.get(language)
        if errors:
            print("Syntax errors:", file=out)
            for key, issues in errors.items():
                for issue in issues:
                    print(f"  - {key}: {issue.message}", file=out)
        else:
            print("Syntax errors: None", file=out)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="i18nlint", description="Check YAML message files"
    )
    parser.add_argument(
        "-d",
        "--dir",
        default=settings.i18n.MESSAGES_DIR,
        help="Directory of YAML message files (default: I18N_MESSAGES_DIR)",
    )
    parser.add_argument(
        "--reference",
        default=None,
        help="Language whose keys every other language must have",
    )
    parser.add_argument(
        "--fail",
        action="store_true",
        help="Exit with status 1 if any issue is found",
    )
    args = parser.parse_args(argv)

    try:
        report = check_messages(args.dir, reference_language=args.reference)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_report(report)

    if args.fail and report.has_issues:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
