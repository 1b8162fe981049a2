"""Errors raised while building the rule trie or splitting a domain."""

from __future__ import annotations


class SuffixSplitterError(Exception):
    """Base class for every error this package raises."""


class NormalizationError(SuffixSplitterError):
    """A non-ASCII rule line could not be converted to its ASCII form."""

    def __init__(self, line: str) -> None:
        super().__init__(f"cannot normalize rule line: {line!r}")
        self.line = line


class InvalidDomain(SuffixSplitterError):
    """The queried domain has an empty label."""

    def __init__(self, domain: str) -> None:
        super().__init__(f"invalid domain: {domain!r}")
        self.domain = domain
