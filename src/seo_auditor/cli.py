# src/seo_auditor/cli.py
import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError
from tqdm.auto import tqdm

from .controllers.audit_controller import AuditController
from .rules.registry import RuleRegistry
from .site import load_site
from .utils.config_loader import ConfigError, load_config
from .utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

# The filesystem host only sees rendered output, never .md sources.
DEFAULT_SITE_EXTENSIONS = [".html"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seo-audit",
        description="Audit a directory of rendered pages for common SEO problems."
    )
    parser.add_argument("site_dir", nargs="?", help="Directory with the rendered site.")
    parser.add_argument("--config", type=str, default=None, help="JSON settings file with audit options.")
    parser.add_argument("--output", type=str, default=None, help="Write the JSON report to this file.")
    parser.add_argument("--extensions", nargs="+", default=None, help="File extensions to audit (default: .html).")
    parser.add_argument("--ignore", nargs="+", default=None, help="URLs to skip, e.g. /404.html.")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level (default: WARNING).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show per-page audit notices.")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")
    parser.add_argument("--list-rules", action="store_true", help="Print the available issue codes and exit.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for `seo-audit`.

    Returns:
        int: 0 when no warnings were reported, 1 when there were warnings,
             2 on usage or configuration errors.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logger(args.log_level, audit_level="INFO" if args.verbose else None)

    if args.list_rules:
        for code in RuleRegistry.get_all_codes():
            print(code)
        return 0

    if not args.site_dir:
        parser.print_usage()
        print("❌ Error: SITE_DIR is required.")
        return 2

    try:
        config = load_config(
            args.config,
            defaults={"extensions": DEFAULT_SITE_EXTENSIONS},
            output=args.output,
            ignore=args.ignore,
            extensions=args.extensions
        )
    except (ConfigError, ValidationError) as e:
        print(f"❌ Invalid configuration: {e}")
        return 2

    logger.debug("Audit options: %s", config.model_dump(exclude={"output"}))
    controller = AuditController(config)
    try:
        pages = controller.select_pages(load_site(args.site_dir, config.extensions))
    except NotADirectoryError as e:
        print(f"❌ Error: {e}")
        return 2

    with tqdm(total=len(pages), desc="SEO audit", unit="page", disable=args.no_progress) as bar:
        report = controller.run_batch(pages, progress_callback=lambda done, total: bar.update(1))

    return 0 if report.is_empty() else 1


if __name__ == "__main__":
    sys.exit(main())
