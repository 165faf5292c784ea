"""Typed containers shared across ranking modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass
class TriageResult(Generic[T]):
    """Five disjoint tiers that together hold every triaged candidate."""

    exact_matches: List[T] = field(default_factory=list)
    begins_with_case_sensitive_matches: List[T] = field(default_factory=list)
    begins_with_case_insensitive_matches: List[T] = field(default_factory=list)
    word_boundary_matches: List[T] = field(default_factory=list)
    no_matches: List[T] = field(default_factory=list)

    def total(self) -> int:
        return (
            len(self.exact_matches)
            + len(self.begins_with_case_sensitive_matches)
            + len(self.begins_with_case_insensitive_matches)
            + len(self.word_boundary_matches)
            + len(self.no_matches)
        )


@dataclass
class TriageMatches(Generic[T]):
    """Ranked matches followed by everything that did not match."""

    matches: List[T] = field(default_factory=list)
    rest: List[T] = field(default_factory=list)
