#!/usr/bin/env python3
"""
CSS Class Minifier
Main entry point for the application.
"""

import argparse
import logging
import sys
from typing import List, Optional

from minifier import ClassMinifier, preview_lines
from reporting import ReportBuilder

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description='Shorten CSS class names consistently across HTML, PHP, CSS and JS files'
    )
    ap.add_argument('--dir', default='.',
                    help='Directory to recursively scan for HTML, CSS, JS, and PHP files')
    ap.add_argument('--preview', action='store_true',
                    help='Only show class renaming without modifying files')
    ap.add_argument('--allow-duplicates', action='store_true',
                    help='Allow duplicate classes in HTML attributes')
    ap.add_argument('--audit', action='store_true',
                    help='Parse markup and stylesheets to list classes the rewrite would miss')
    ap.add_argument('--report', metavar='PATH',
                    help='Write a run report (.html for HTML, anything else for JSON)')
    ap.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    minifier = ClassMinifier(args.dir, suppress_duplicates=not args.allow_duplicates)
    result = minifier.run(preview=args.preview, audit=args.audit)

    if args.preview and not result.aborted:
        for line in preview_lines(result.class_map):
            print(line)

    for path, classes in result.missed_classes.items():
        logger.warning(f"{path}: not rewritten: {', '.join(sorted(classes))}")

    if args.report:
        try:
            ReportBuilder().generate_report(result, args.report)
        except OSError as e:
            logger.error(f"Failed to write report {args.report}: {e}")

    # Per-file failures and aborted walks are logged, not reflected in the exit status
    return 0


if __name__ == "__main__":
    sys.exit(main())
