from __future__ import annotations

import argparse
import sys

import structlog

from .config import settings
from .errors import InvalidDomain, NormalizationError
from .logging_config import setup_logging
from .output import get_handler
from .rules import get_splitter

log = structlog.get_logger()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="suffix-splitter",
        description="Split domains into public suffix, registrable label and subdomain.",
    )
    parser.add_argument("domains", nargs="+", metavar="DOMAIN")
    parser.add_argument(
        "--format",
        choices=("json", "text"),
        default=settings.output_format,
        help="output format (default: %(default)s)",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(settings.log_level)

    try:
        splitter = get_splitter()
    except NormalizationError as e:
        log.error("rule_list_unusable", line=e.line)
        return 2

    handler = get_handler(args.format)
    status = 0
    for domain in args.domains:
        try:
            parts = splitter.split(domain)
        except InvalidDomain as e:
            log.warning("invalid_domain", domain=domain)
            handler.emit_error(e)
            status = 1
            continue
        handler.emit_parts(parts)
    return status


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
