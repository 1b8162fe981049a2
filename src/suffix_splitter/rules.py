"""Rule-list loading and the process-wide splitter built from settings."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import structlog

from .config import settings
from .splitter import DomainSplitter

log = structlog.get_logger()

BUNDLED_RULES = Path(__file__).parent / "data" / "public_suffix_list.dat"


def read_rules(path: str | Path | None = None) -> str:
    """Return rule-list text from ``path``, or the bundled snapshot."""
    with open(BUNDLED_RULES if path is None else path, encoding="utf-8") as f:
        return f.read()


@lru_cache(maxsize=1)
def get_splitter() -> DomainSplitter:
    """Build the splitter once from the configured rule list."""
    source = settings.rules_path or "bundled"
    splitter = DomainSplitter.from_text(
        read_rules(settings.rules_path),
        include_private=settings.include_private_domains,
    )
    log.info(
        "rules_loaded",
        source=source,
        rules=splitter.trie.rule_count,
        include_private=settings.include_private_domains,
    )
    return splitter
