"""
ColSet module: hashing and manipulation of feature-name sets.

Key components:
- hash_colset: order- and duplicate-invariant SHA-256 of a feature list
- ColSet: immutable feature list with its hash and nickname
- ColSetContainer: ordered bundle of ColSets
- add/remove derivations for single ColSets and whole containers
"""

from featspace.colset.container import (
    ColSetContainer,
    form_subsets_with_a_removed_element,
    form_subsets_with_an_added_element,
)
from featspace.colset.hashing import (
    COLSET_HASH_LENGTH,
    canonical_form,
    canonicalize_features,
    hash_colset,
)
from featspace.colset.models import (
    NICKNAME_LENGTH,
    ColSet,
    ColSetError,
    FeatureNotPresentError,
    FeatureSet,
    NicknameLengthError,
    add_one_to_colset,
    derive_nickname,
    identical_colset_hash,
    remove_one_from_colset,
)

__all__ = [
    "COLSET_HASH_LENGTH",
    "ColSet",
    "ColSetContainer",
    "ColSetError",
    "FeatureNotPresentError",
    "FeatureSet",
    "NICKNAME_LENGTH",
    "NicknameLengthError",
    "add_one_to_colset",
    "canonical_form",
    "canonicalize_features",
    "derive_nickname",
    "form_subsets_with_a_removed_element",
    "form_subsets_with_an_added_element",
    "hash_colset",
    "identical_colset_hash",
    "remove_one_from_colset",
]
