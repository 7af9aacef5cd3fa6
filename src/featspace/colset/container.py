"""
Containers hold bundles of ColSets.

A ColSetContainer is a workspace for combinatorial work on feature
sets: collect some ColSets, then form every set reachable by adding or
removing a single feature.

The container is a plain ordered list. It does not deduplicate and
keeps no index; lookups by hash scan the contents. It has no lock, so
callers sharing one across threads must synchronise mutation themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from featspace.colset.models import ColSet, add_one_to_colset, remove_one_from_colset

logger = logging.getLogger(__name__)


@dataclass
class ColSetContainer:
    """Ordered collection of ColSets."""

    contents: list[ColSet] = field(default_factory=list)

    def add(self, colset: ColSet) -> None:
        self.contents.append(colset)

    def hashes(self) -> list[str]:
        return [colset.colset_hash for colset in self.contents]

    def find_by_hash(self, colset_hash: str) -> ColSet | None:
        """Return the first ColSet with the given hash, or None."""
        for colset in self.contents:
            if colset.colset_hash == colset_hash:
                return colset
        return None

    def __len__(self) -> int:
        return len(self.contents)

    def __iter__(self) -> Iterator[ColSet]:
        return iter(self.contents)


def _source_colsets(source: ColSet | ColSetContainer) -> list[ColSet]:
    if isinstance(source, ColSet):
        return [source]
    return list(source.contents)


def form_subsets_with_an_added_element(
    source: ColSet | ColSetContainer,
    candidates: Iterable[str],
) -> list[ColSet]:
    """
    Form every ColSet reachable by adding one candidate feature.

    For each source ColSet (in container order) and each candidate (in
    the order given), a new ColSet is built with add_one_to_colset.
    Candidates already in a ColSet are skipped for that ColSet, since
    adding them would not change its hash.

    No deduplication happens across source ColSets: two sources can
    produce ColSets with the same hash. Callers that need unique sets
    should dedup on colset_hash.

    Args:
        source: A single ColSet or a container of them
        candidates: Feature names to try adding

    Returns:
        List of derived ColSets
    """
    candidate_list = list(candidates)
    derived = []
    for colset in _source_colsets(source):
        for candidate in candidate_list:
            if candidate in colset:
                continue
            derived.append(add_one_to_colset(colset, candidate))

    logger.info(
        "Formed %d colsets by adding one of %d candidates",
        len(derived),
        len(candidate_list),
    )
    return derived


def form_subsets_with_a_removed_element(source: ColSet | ColSetContainer) -> list[ColSet]:
    """
    Form every ColSet reachable by removing one feature.

    For each source ColSet (in container order) and each of its unique
    features (in canonical order), a new ColSet is built with
    remove_one_from_colset. A ColSet with n unique features yields n
    results; an empty ColSet yields none.

    As with form_subsets_with_an_added_element, results are not
    deduplicated across sources.
    """
    derived = []
    for colset in _source_colsets(source):
        for feature in colset.unique_features:
            derived.append(remove_one_from_colset(colset, feature))

    logger.info("Formed %d colsets by removing one feature", len(derived))
    return derived
