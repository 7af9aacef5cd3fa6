"""
Canonical hashing of feature-name sets.

A set of features (column names) can reach us in any order and with
repeated names. To identify the *set* rather than the list, names are
put into a canonical form before hashing:

- ["foo", "bar", "baz"]
- ["bar", "foo", "baz", "foo"]

both canonicalize to ["bar", "baz", "foo"] and hash identically.

Known limitation: the canonical names are joined with no delimiter, so
{"ab", "c"} and {"a", "bc"} share the hash input "abc" and collide.
Stored hashes depend on this exact form, so it must not be changed.
"""

import hashlib
import logging
from typing import Iterable

logger = logging.getLogger(__name__)

# SHA-256 rendered as lowercase hex
COLSET_HASH_LENGTH = 64


def canonicalize_features(features: Iterable[str]) -> list[str]:
    """
    Return the sorted, deduplicated copy of a feature list.

    Sorting uses Python's native string ordering, which compares code
    points and is independent of locale. The input is never modified.

    Args:
        features: Feature names in any order, duplicates allowed

    Returns:
        New list of unique feature names in code point order

    Raises:
        TypeError: If features is itself a str, or any feature is not a str

    Examples:
        >>> canonicalize_features(["foo", "bar", "foo"])
        ['bar', 'foo']
        >>> canonicalize_features([])
        []
    """
    if isinstance(features, str):
        raise TypeError(f"features must be an iterable of feature names, not a str: {features!r}")
    unique = set()
    for feature in features:
        if not isinstance(feature, str):
            raise TypeError(
                f"Feature names must be str, got {type(feature).__name__}: {feature!r}"
            )
        unique.add(feature)
    return sorted(unique)


def canonical_form(features: Iterable[str]) -> str:
    """Join the canonical feature list with no separator (the hash input)."""
    return "".join(canonicalize_features(features))


def hash_colset(features: Iterable[str]) -> str:
    """
    Get a string hash that identifies a set of feature names.

    The hash is the SHA-256 hex digest of the UTF-8 encoded canonical
    form, so it is invariant to ordering and to duplicated names, and
    stable across runs and processes.

    Args:
        features: Feature names in any order, duplicates allowed

    Returns:
        64-character lowercase hex digest

    Raises:
        TypeError: As for canonicalize_features
        UnicodeEncodeError: If a feature contains a lone surrogate
            (e.g. "\\ud800"), which has no UTF-8 encoding

    Examples:
        >>> hash_colset(["foo", "bar", "baz"]) == hash_colset(["bar", "foo", "baz"])
        True
        >>> hash_colset([]) == hashlib.sha256(b"").hexdigest()
        True
    """
    joined = canonical_form(features)
    colset_hash = hashlib.sha256(joined.encode("utf-8")).hexdigest()
    logger.debug("Hashed canonical form %r -> %s", joined, colset_hash)
    return colset_hash
