import logging

from .base import check_multiplicity, render

logger = logging.getLogger(__name__)


class Multiset(object):
    '''
    Implements a MultiSet (bag) data structure on top of a pair of
    parallel lists.

    :attr:`_elements` holds each distinct value once, in the order it was
    first added, and :attr:`_multiplicities` holds the number of times the
    value at the same index occurs. An entry is dropped from both lists as
    soon as its multiplicity reaches zero, so no value with multiplicity zero
    is ever observable.

    Values are located by equality alone, so elements need not be hashable.
    For hashable elements, :class:`~.HashedMultiset` offers the same behavior
    with constant time lookups.

    Parameters
    ----------
    iterable: iterable, optional
        Elements to add, each with multiplicity 1.

    Attributes
    ----------
    _elements: list
        The distinct values of the multiset
    _multiplicities: list of int
        The occurrence count of the value at the same index in :attr:`_elements`
    '''

    def __init__(self, iterable=None):
        self._elements = []
        self._multiplicities = []
        if iterable is not None:
            self.update(iterable)

    def _index(self, element):
        try:
            return self._elements.index(element)
        except ValueError:
            return -1

    @property
    def elements(self):
        '''
        A copy of the distinct values in this multiset, in insertion order.
        Modifying the returned list does not affect the multiset.

        Returns
        -------
        list
        '''
        return list(self._elements)

    @property
    def multiplicities(self):
        '''
        A copy of the multiplicities of :attr:`elements`, aligned by index.
        Modifying the returned list does not affect the multiset.

        Returns
        -------
        list of int
        '''
        return list(self._multiplicities)

    def add(self, element, count=1):
        '''
        Add `count` occurrences of `element` to this multiset. Adding zero
        occurrences does nothing.

        Parameters
        ----------
        element: object
            The value to add
        count: int, optional
            The number of occurrences to add. Defaults to 1.

        Raises
        ------
        InvalidMultiplicityError
            If `count` is negative. The multiset is left unchanged.
        '''
        count = check_multiplicity(count)
        if count == 0:
            return
        index = self._index(element)
        # new element for this multiset
        if index == -1:
            self._elements.append(element)
            self._multiplicities.append(count)
        else:
            self._multiplicities[index] += count

    def add_all(self, *elements):
        '''
        Add each of `elements` to this multiset once, in order.

        When called with a single iterable which is not a string, the
        contents of that iterable are added instead, so ``add_all('a', 'b')``
        and ``add_all(['a', 'b'])`` are equivalent.
        '''
        if len(elements) == 1 and _is_collection(elements[0]):
            elements = elements[0]
        for element in elements:
            self.add(element)

    def update(self, iterable):
        '''
        Add each element of `iterable` to this multiset once, in order.
        '''
        for element in iterable:
            self.add(element)

    def remove(self, element, count=1):
        '''
        Remove `count` occurrences of `element` from this multiset.

        Removal is all-or-nothing: if fewer than `count` occurrences of
        `element` are present, nothing is removed.

        Parameters
        ----------
        element: object
            The value to remove
        count: int, optional
            The number of occurrences to remove. Defaults to 1.

        Returns
        -------
        bool:
            Whether the removal took place

        Raises
        ------
        InvalidMultiplicityError
            If `count` is negative. The multiset is left unchanged.
        '''
        count = check_multiplicity(count)
        index = self._index(element)
        if index == -1:
            return False
        present = self._multiplicities[index]
        if present < count:
            logger.debug("Refused to remove %d of %r (present %d)", count, element, present)
            return False
        present -= count
        if present == 0:
            self._elements.pop(index)
            self._multiplicities.pop(index)
        else:
            self._multiplicities[index] = present
        return True

    def remove_all(self, element):
        '''
        Remove every occurrence of `element` from this multiset.

        Returns
        -------
        int:
            The number of occurrences removed, 0 if `element` was absent
        '''
        index = self._index(element)
        if index == -1:
            return 0
        self._elements.pop(index)
        return self._multiplicities.pop(index)

    def clear(self):
        self._elements = []
        self._multiplicities = []

    def contains(self, element):
        return self._index(element) != -1

    def count(self, element):
        '''
        The multiplicity of `element`, or 0 if it is absent.

        Returns
        -------
        int
        '''
        index = self._index(element)
        if index == -1:
            return 0
        return self._multiplicities[index]

    def items(self):
        '''
        Returns an iterator over `(value, multiplicity)` pairs in the order
        values were first added.
        '''
        return zip(list(self._elements), list(self._multiplicities))

    def distinct(self):
        '''
        Returns an iterator over the distinct values in the order they were
        first added.
        '''
        return iter(list(self._elements))

    @property
    def size(self):
        '''
        The number of elements in this multiset, counting duplicates.

        Returns
        -------
        int
        '''
        return sum(multiplicity for _, multiplicity in self.items())

    @property
    def is_empty(self):
        return len(self._elements) == 0

    def for_each(self, action):
        '''
        Call `action` on every element of this multiset, duplicates included.

        Parameters
        ----------
        action: callable
            A function of one argument
        '''
        for element in self:
            action(element)

    def __iter__(self):
        for value, multiplicity in self.items():
            for _ in range(multiplicity):
                yield value

    def __len__(self):
        return self.size

    def __bool__(self):
        return not self.is_empty

    def __contains__(self, element):
        return self.contains(element)

    def __iadd__(self, element):
        self.add(element)
        return self

    def __isub__(self, element):
        self.remove(element)
        return self

    def __eq__(self, other):
        if not isinstance(other, Multiset):
            return NotImplemented
        if len(self._elements) != len(other._elements):
            return False
        for value, multiplicity in other.items():
            if self.count(value) != multiplicity:
                return False
        return True

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def clone(self):
        '''
        Create an independent copy of this multiset with the same contents
        and insertion order.

        Returns
        -------
        Multiset
        '''
        dup = self.__class__()
        for value, multiplicity in self.items():
            dup.add(value, multiplicity)
        return dup

    copy = clone

    def to_string(self, separator=", "):
        '''
        Render every element of this multiset, duplicates included, as a
        bracketed list joined by `separator`.

        Returns
        -------
        str
        '''
        return render(self, separator)

    def __str__(self):
        return self.to_string(separator=" , ")

    def __repr__(self):  # pragma: no cover
        return "{}({!r})".format(self.__class__.__name__, list(self.items()))


def _is_collection(obj):
    if isinstance(obj, (bytes, str)):
        return False
    try:
        iter(obj)
    except TypeError:
        return False
    return True


def mutable_multiset_of(*elements):
    '''
    Create a multiset of the configured default type holding each of
    `elements` once. With no arguments, the multiset is empty.

    Returns
    -------
    Multiset

    See Also
    --------
    :func:`multibag.config.default_multiset_type`
    '''
    # late binding, :mod:`multibag.config` imports this module
    from .config import default_multiset_type
    multiset = default_multiset_type()()
    for element in elements:
        multiset.add(element)
    return multiset
