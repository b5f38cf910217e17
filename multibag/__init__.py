from multibag.base import InvalidMultiplicityError
from multibag.multiset import Multiset, mutable_multiset_of
from multibag.hashed import HashedMultiset
from multibag.version import version
from multibag import config


__all__ = [
    "base", "multiset", "hashed", "config",
    "Multiset", "HashedMultiset", "mutable_multiset_of",
    "InvalidMultiplicityError", "version"
]
