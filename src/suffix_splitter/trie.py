"""Immutable label trie holding public-suffix rules."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class SuffixNode:
    """One label-depth of the rule trie.

    ``is_wildcard`` and ``blacklist`` describe the labels one level below
    this node, never the node's own label.
    """

    children: Mapping[str, SuffixNode] = field(default_factory=lambda: MappingProxyType({}))
    is_wildcard: bool = False
    blacklist: frozenset[str] = frozenset()


@dataclass(frozen=True)
class RuleTrie:
    """Forest of suffix nodes keyed by top-level label ("com", "uk", ...)."""

    roots: Mapping[str, SuffixNode] = field(default_factory=lambda: MappingProxyType({}))
    rule_count: int = 0

    def __contains__(self, tld: object) -> bool:
        return tld in self.roots

    def __len__(self) -> int:
        return len(self.roots)


@dataclass
class NodeBuilder:
    """Mutable counterpart of ``SuffixNode``, used only while parsing."""

    children: dict[str, NodeBuilder] = field(default_factory=dict)
    is_wildcard: bool = False
    blacklist: set[str] = field(default_factory=set)

    def child(self, label: str) -> NodeBuilder:
        node = self.children.get(label)
        if node is None:
            node = self.children[label] = NodeBuilder()
        return node

    def freeze(self) -> SuffixNode:
        return SuffixNode(
            children=MappingProxyType({k: v.freeze() for k, v in self.children.items()}),
            is_wildcard=self.is_wildcard,
            blacklist=frozenset(self.blacklist),
        )


@dataclass
class TrieBuilder:
    roots: dict[str, NodeBuilder] = field(default_factory=dict)
    rule_count: int = 0

    def root(self, label: str) -> NodeBuilder:
        node = self.roots.get(label)
        if node is None:
            node = self.roots[label] = NodeBuilder()
        return node

    def freeze(self) -> RuleTrie:
        return RuleTrie(
            roots=MappingProxyType({k: v.freeze() for k, v in self.roots.items()}),
            rule_count=self.rule_count,
        )
