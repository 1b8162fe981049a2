"""Longest-match splitting of a domain against a RuleTrie."""

from __future__ import annotations

from typing import Any

from .errors import InvalidDomain
from .models import DomainParts
from .parser import parse_rules
from .trie import RuleTrie


class DomainSplitter:
    """Answer read-only split queries against one immutable RuleTrie.

    The splitter keeps no state besides the trie, so a single instance can be
    shared between threads.
    """

    def __init__(self, trie: RuleTrie) -> None:
        self.trie = trie

    @classmethod
    def from_text(cls, text: str, **parse_kwargs: Any) -> DomainSplitter:
        return cls(parse_rules(text, **parse_kwargs))

    def split(self, domain: str) -> DomainParts:
        """Split ``domain`` into (suffix, registrable label, subdomain prefix).

        Labels are walked right to left, following the trie as deep as the
        rules allow. Under a wildcard node the next label is absorbed into
        the suffix unless it is blacklisted there. The returned strings are
        slices of ``domain``, so the caller's casing is kept.

        Raises InvalidDomain if any label is empty.
        """
        labels = domain.split(".")
        if not all(labels):
            raise InvalidDomain(domain)

        starts = []
        pos = 0
        for label in labels:
            starts.append(pos)
            pos += len(label) + 1

        def registrable_at(i: int) -> DomainParts:
            suffix = domain[starts[i + 1]:] if i + 1 < len(labels) else ""
            subdomain = domain[: starts[i] - 1] if i > 0 else ""
            return DomainParts(suffix=suffix, domain=labels[i], subdomain=subdomain)

        level = self.trie.roots
        node = None
        in_wildcard = False
        for i in range(len(labels) - 1, -1, -1):
            key = labels[i].lower()
            if in_wildcard:
                if key in node.blacklist:
                    return registrable_at(i)
                # absorbed by the wildcard, whether or not an explicit rule continues
                child = level.get(key)
                if child is None:
                    if i == 0:
                        break
                    return registrable_at(i - 1)
            else:
                child = level.get(key)
                if child is None:
                    return registrable_at(i)
            node = child
            level = child.children
            in_wildcard = child.is_wildcard

        # every label belongs to the suffix
        return DomainParts(suffix=domain, domain="", subdomain="")
