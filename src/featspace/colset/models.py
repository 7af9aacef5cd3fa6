"""
ColSet: an immutable, hash-identified set of feature names.

A ColSet keeps the feature list exactly as it was supplied, alongside
the canonical hash of the underlying set and a short nickname for
display. Two ColSets describe the same set of features exactly when
their hashes are equal (see identical_colset_hash).

ColSets are never modified. Adding or removing a feature builds a new
ColSet with its hash computed from scratch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from featspace.colset.hashing import canonicalize_features, hash_colset

logger = logging.getLogger(__name__)

# Hash-derived nicknames are the last 6 hex characters of the digest
NICKNAME_LENGTH = 6


class ColSetError(ValueError):
    """Base class for errors raised while building or deriving ColSets."""
    pass


class NicknameLengthError(ColSetError):
    """Raised when a hash is too short to derive a nickname from."""
    pass


class FeatureNotPresentError(ColSetError):
    """Raised when removing a feature the ColSet does not contain."""
    pass


def derive_nickname(colset_hash: str, length: int = NICKNAME_LENGTH) -> str:
    """
    Derive a display nickname from the trailing characters of a hash.

    Args:
        colset_hash: Hash string to take the nickname from
        length: Number of trailing characters

    Returns:
        The last `length` characters of `colset_hash`

    Raises:
        NicknameLengthError: If the hash is shorter than `length`
    """
    if len(colset_hash) < length:
        raise NicknameLengthError(
            f"Hash {colset_hash!r} has {len(colset_hash)} characters, "
            f"need at least {length} for a nickname"
        )
    return colset_hash[len(colset_hash) - length:]


def _feature_tuple(feature_vector: Iterable[str]) -> tuple[str, ...]:
    # A bare string would otherwise be split into single characters
    if isinstance(feature_vector, str):
        raise TypeError(
            f"feature_vector must be an iterable of feature names, not a str: {feature_vector!r}"
        )
    return tuple(feature_vector)


@dataclass(frozen=True)
class ColSet:
    """
    A set of feature names identified by its canonical hash.

    Build instances with ColSet.new() or ColSet.new_with_nickname()
    rather than the dataclass constructor, so the hash is always
    computed from the feature vector.

    Attributes:
        feature_vector: Features as supplied (order and duplicates kept)
        colset_hash: SHA-256 hex digest of the canonical feature set
        nickname: Caller supplied label, or the hash's trailing characters
    """
    feature_vector: tuple[str, ...]
    colset_hash: str
    nickname: str

    @classmethod
    def new(cls, feature_vector: Iterable[str]) -> ColSet:
        """Build a ColSet whose nickname is derived from its hash."""
        features = _feature_tuple(feature_vector)
        colset_hash = hash_colset(features)
        return cls(
            feature_vector=features,
            colset_hash=colset_hash,
            nickname=derive_nickname(colset_hash),
        )

    @classmethod
    def new_with_nickname(cls, feature_vector: Iterable[str], nickname: str) -> ColSet:
        """Build a ColSet with an explicit nickname, stored verbatim."""
        features = _feature_tuple(feature_vector)
        return cls(
            feature_vector=features,
            colset_hash=hash_colset(features),
            nickname=nickname,
        )

    def get_nickname(self) -> str:
        return self.nickname

    @property
    def unique_features(self) -> list[str]:
        """Canonical (sorted, deduplicated) feature names."""
        return canonicalize_features(self.feature_vector)

    def __contains__(self, feature: object) -> bool:
        return feature in self.feature_vector

    def __repr__(self) -> str:
        return (
            f"<ColSet(nickname='{self.nickname}', "
            f"features={len(self.unique_features)}, hash='{self.colset_hash[:12]}...')>"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "feature_vector": list(self.feature_vector),
            "colset_hash": self.colset_hash,
            "nickname": self.nickname,
        }


# Alias matching the "feature set" terminology used by callers
FeatureSet = ColSet


def identical_colset_hash(colset1: ColSet, colset2: ColSet) -> bool:
    """
    Test whether two ColSets have the same hash.

    This is set identity: feature order and duplicates are ignored, as
    are nicknames.
    """
    return colset1.colset_hash == colset2.colset_hash


def add_one_to_colset(parent: ColSet, new_feature: str) -> ColSet:
    """
    Create a new ColSet by appending one feature to the parent's vector.

    The parent is left untouched and its nickname is not carried over;
    the result gets a hash-derived nickname. Adding a feature the parent
    already contains yields a ColSet with the same hash.

    Args:
        parent: ColSet to derive from
        new_feature: Feature name to append

    Returns:
        A new ColSet over parent.feature_vector + (new_feature,)

    Example:
        >>> parent = ColSet.new(["foo", "bar"])
        >>> child = add_one_to_colset(parent, "baz")
        >>> child.colset_hash == hash_colset(["foo", "bar", "baz"])
        True
    """
    child = ColSet.new(parent.feature_vector + (new_feature,))
    logger.debug("Derived %s from %s by adding %r", child.nickname, parent.nickname, new_feature)
    return child


def remove_one_from_colset(parent: ColSet, feature: str) -> ColSet:
    """
    Create a new ColSet with one feature removed from the parent's set.

    Every occurrence of the feature is dropped from the vector, since
    removing only one of several duplicates would not change the set.
    The remaining features keep their original order.

    Args:
        parent: ColSet to derive from
        feature: Feature name to remove

    Returns:
        A new ColSet without `feature`, with a hash-derived nickname

    Raises:
        FeatureNotPresentError: If the parent does not contain `feature`
    """
    if feature not in parent:
        raise FeatureNotPresentError(
            f"Feature {feature!r} not in ColSet {parent.nickname}"
        )
    child = ColSet.new(f for f in parent.feature_vector if f != feature)
    logger.debug("Derived %s from %s by removing %r", child.nickname, parent.nickname, feature)
    return child
