"""
featspace - identity hashes for sets of feature names

Gives every set of feature ("column") names a canonical hash that does not
depend on the order or repetition of the names, so that two feature lists
describing the same set can be recognised as the same set.

Main components:
- colset: canonical hashing, the ColSet value type and the ColSetContainer
- config: logging settings loaded from FEATSPACE_* environment variables
- logging_config: optional logging setup for applications
"""

from featspace.colset import (
    ColSet,
    ColSetContainer,
    ColSetError,
    FeatureNotPresentError,
    FeatureSet,
    NicknameLengthError,
    add_one_to_colset,
    form_subsets_with_a_removed_element,
    form_subsets_with_an_added_element,
    hash_colset,
    identical_colset_hash,
    remove_one_from_colset,
)

__version__ = "0.1.0"

__all__ = [
    "ColSet",
    "ColSetContainer",
    "ColSetError",
    "FeatureNotPresentError",
    "FeatureSet",
    "NicknameLengthError",
    "add_one_to_colset",
    "form_subsets_with_a_removed_element",
    "form_subsets_with_an_added_element",
    "hash_colset",
    "identical_colset_hash",
    "remove_one_from_colset",
]
