import logging

from .base import check_multiplicity
from .multiset import Multiset

logger = logging.getLogger(__name__)


class HashedMultiset(Multiset):
    '''
    Implements a MultiSet data structure on top of a dictionary mapping each
    value to its multiplicity, and remembers the order values were first
    added in.

    Behaves exactly like :class:`~.Multiset`, but all lookups are done by
    hashing, so elements must be hashable. An unhashable element raises
    :class:`TypeError` before the multiset is modified.

    Attributes
    ----------
    _counts: dict
        Maps each distinct value to its multiplicity
    _elements: list
        The keys of :attr:`_counts` in insertion order
    '''

    def __init__(self, iterable=None):
        self._counts = dict()
        self._elements = []
        if iterable is not None:
            self.update(iterable)

    @property
    def multiplicities(self):
        return [self._counts[key] for key in self._elements]

    def add(self, element, count=1):
        count = check_multiplicity(count)
        present = self._counts.get(element, 0)
        if count == 0:
            return
        if present == 0:
            self._elements.append(element)
        self._counts[element] = present + count

    def remove(self, element, count=1):
        count = check_multiplicity(count)
        present = self._counts.get(element, 0)
        if present == 0:
            return False
        if present < count:
            logger.debug("Refused to remove %d of %r (present %d)", count, element, present)
            return False
        present -= count
        if present == 0:
            self._drop(element)
        else:
            self._counts[element] = present
        return True

    def remove_all(self, element):
        if element not in self._counts:
            return 0
        return self._drop(element)

    def _drop(self, element):
        self._elements.pop(self._elements.index(element))
        return self._counts.pop(element)

    def clear(self):
        self._counts = dict()
        self._elements = []

    def contains(self, element):
        return element in self._counts

    def count(self, element):
        return self._counts.get(element, 0)

    def items(self):
        return iter([(key, self._counts[key]) for key in self._elements])

    @property
    def size(self):
        return sum(self._counts.values())

    def __eq__(self, other):
        if isinstance(other, HashedMultiset):
            return self._counts == other._counts
        if isinstance(other, Multiset):
            # lookups go through the linear scan, which accepts unhashable values
            return Multiset.__eq__(other, self)
        return NotImplemented

    __hash__ = None
