"""Build a RuleTrie from public suffix list text."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from .errors import NormalizationError
from .trie import RuleTrie, TrieBuilder

log = structlog.get_logger()

BEGIN_PRIVATE = "// ===begin private domains==="
END_PRIVATE = "// ===end private domains==="


def to_ascii(text: str) -> str:
    """Convert a non-ASCII rule or domain to its IDNA (punycode) form."""
    try:
        return text.encode("idna").decode("ascii")
    except UnicodeError as e:
        raise NormalizationError(text) from e


def _rule_lines(text: str, include_private: bool):
    in_private = False
    for raw in text.splitlines():
        line = raw.strip().lower()
        if line.startswith(BEGIN_PRIVATE):
            in_private = True
            continue
        if line.startswith(END_PRIVATE):
            in_private = False
            continue
        if not line or line.startswith("//"):
            continue
        if in_private and not include_private:
            continue
        # A rule ends at the first whitespace
        yield line.split()[0]


def _insert(builder: TrieBuilder, rule: str) -> None:
    labels = rule.split(".")
    labels.reverse()
    node = builder.root(labels[0])
    for label in labels[1:]:
        if label.startswith("!"):
            node.blacklist.add(label[1:])
        elif label == "*":
            node.is_wildcard = True
        else:
            node = node.child(label)
    builder.rule_count += 1


def parse_rules(
    text: str,
    normalize: Callable[[str], str] = to_ascii,
    include_private: bool = True,
) -> RuleTrie:
    """Parse rule-list text into an immutable RuleTrie.

    Non-ASCII rules are inserted twice: as written and as returned by
    ``normalize``. Any normalization failure aborts the whole parse with
    NormalizationError.
    """
    builder = TrieBuilder()
    for line in _rule_lines(text, include_private):
        rules = [line]
        if not line.isascii():
            try:
                rules.append(normalize(line).lower())
            except NormalizationError:
                log.error("normalization_failed", line=line)
                raise
            except (UnicodeError, ValueError) as e:
                log.error("normalization_failed", line=line, error=str(e))
                raise NormalizationError(line) from e
        for rule in rules:
            _insert(builder, rule)

    trie = builder.freeze()
    log.debug("rules_parsed", rules=trie.rule_count, tlds=len(trie))
    return trie
