from numbers import Integral


class InvalidMultiplicityError(ValueError):
    pass


def check_multiplicity(count):
    '''
    Validate a multiplicity argument before it is used to mutate a multiset.

    Parameters
    ----------
    count: int
        The number of occurrences requested.

    Returns
    -------
    int

    Raises
    ------
    TypeError
        If `count` is not an integer
    InvalidMultiplicityError
        If `count` is negative
    '''
    if not isinstance(count, Integral):
        raise TypeError(
            'Only integers allowed as multiplicities, got {}.'.format(type(count).__name__))
    if count < 0:
        raise InvalidMultiplicityError(
            "Element multiplicity cannot be negative: {}".format(count))
    return int(count)


def render(elements, separator=", "):
    """Render an iterable of elements in the bracketed form used by
    :meth:`~.Multiset.to_string`.

    Parameters
    ----------
    elements: iterable
    separator: str, optional

    Returns
    -------
    :class:`str`
    """
    return "[%s]" % separator.join(str(e) for e in elements)
