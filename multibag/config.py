'''
Selects the multiset implementation built by :func:`~.mutable_multiset_of`.

Set the environment variable ``MULTIBAG_USE_HASHING=1`` before importing
:mod:`multibag` to default to :class:`~.HashedMultiset`, or call
:func:`set_default_multiset_type` at runtime.
'''
import logging
import os

from .multiset import Multiset
from .hashed import HashedMultiset

logger = logging.getLogger(__name__)

use_hashing = bool(int(os.environ.get("MULTIBAG_USE_HASHING", 0)))

_default_type = HashedMultiset if use_hashing else Multiset
logger.debug("Default multiset type is %s", _default_type.__name__)


def default_multiset_type():
    return _default_type


def set_default_multiset_type(multiset_type):
    '''
    Change the type constructed by :func:`~.mutable_multiset_of`.

    Parameters
    ----------
    multiset_type: type
        A subclass of :class:`~.Multiset`

    Returns
    -------
    type:
        The previously selected type
    '''
    global _default_type
    if not (isinstance(multiset_type, type) and issubclass(multiset_type, Multiset)):
        raise TypeError("Expected a Multiset type, got {!r}".format(multiset_type))
    previous = _default_type
    _default_type = multiset_type
    logger.debug("Default multiset type is %s", multiset_type.__name__)
    return previous
