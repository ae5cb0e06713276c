"""Conversion of arbitrary values to and from iterators."""

import array
from collections.abc import Collection, Iterable, Iterator, Mapping
from functools import singledispatch
from typing import Protocol, runtime_checkable

from .sources import EMPTY_ITERATOR, ArrayIterator, IteratorWrapper, \
    SingletonIterator
from .utils import check_not_none, get_logger, isint


logger = get_logger(__name__)


@runtime_checkable
class ProvidesIterator(Protocol):
    """Objects which expose their elements through an `iterator()` method."""

    def iterator(self):
        ...


def get_iterator(obj):
    """Return a suitable iterator for any object.

    The following conversions are tried in order:

    - `None`: an empty iterator;
    - an iterator: returned unchanged;
    - a collection (list, set, range...): an iterator over its elements;
    - an array (:class:`python:array.array`, :class:`python:memoryview`,
      numpy arrays): an iterator over its elements as python objects;
    - an object implementing the legacy `__getitem__` iteration protocol:
      an iterator over its items;
    - a mapping: an iterator over its values;
    - a dictionary-like object (`keys()` and `__getitem__`): an iterator
      over its values;
    - an object with an `iterator()` method or an `__iter__` method which
      returns an iterator: that iterator;
    - any other value (including strings): an iterator over that single
      value.

    This function never raises: a failure while looking up an iterator
    falls back to the single value iterator.

    Example:

        >>> list(seqiter.get_iterator(None))
        []
        >>> list(seqiter.get_iterator({'a': 1, 'b': 2}))
        [1, 2]
        >>> list(seqiter.get_iterator(42))
        [42]
    """
    if obj is None:
        return EMPTY_ITERATOR

    return _get_iterator(obj)


@singledispatch
def _get_iterator(obj):
    if hasattr(obj, '__getitem__') and not hasattr(obj, '__iter__') \
            and not hasattr(obj, 'keys'):
        try:
            return IteratorWrapper(iter(obj))
        except Exception as error:
            logger.debug("ignoring failed item iteration on %s: %r",
                         obj.__class__.__name__, error)

    if hasattr(obj, 'keys') and hasattr(obj, '__getitem__'):
        try:
            keys = list(obj.keys())
        except Exception as error:
            logger.debug("ignoring failed keys lookup on %s: %r",
                         obj.__class__.__name__, error)
        else:
            return (obj[k] for k in keys)

    iterator = _lookup_iterator(obj)
    if iterator is not None:
        return iterator

    return SingletonIterator(obj)


@_get_iterator.register(Iterator)
def _(obj):
    return obj


@_get_iterator.register(Collection)
def _(obj):
    return iter(obj)


@_get_iterator.register(str)
@_get_iterator.register(bytes)
def _(obj):
    return SingletonIterator(obj)


@_get_iterator.register(array.array)
@_get_iterator.register(memoryview)
def _(obj):
    return ArrayIterator(obj)


@_get_iterator.register(Mapping)
def _(obj):
    return iter(obj.values())


try:
    import numpy as np
except ImportError:
    pass
else:
    @_get_iterator.register(np.ndarray)
    def _(obj):
        if obj.ndim == 0:
            return SingletonIterator(obj.item())
        return ArrayIterator(obj)

    @_get_iterator.register(np.generic)
    def _(obj):
        return SingletonIterator(obj.item())


def _lookup_iterator(obj):
    try:
        if isinstance(obj, ProvidesIterator):
            iterator = obj.iterator()
        elif isinstance(obj, Iterable):
            iterator = iter(obj)
        else:
            return None

    except Exception as error:
        logger.debug("ignoring failed iterator lookup on %s: %r",
                     obj.__class__.__name__, error)
        return None

    if not isinstance(iterator, Iterator):
        logger.debug("ignoring non iterator %s returned by %s",
                     iterator.__class__.__name__, obj.__class__.__name__)
        return None

    return iterator


def to_list(iterator, estimated_size=10):
    """Drain an iterator into a list.

    Args:
        iterator (Iterator): the iterator to consume.
        estimated_size (int): expected number of elements, must be positive.

    Example:

        >>> seqiter.to_list(seqiter.filtered(iter(range(10)), lambda x: x > 6))
        [7, 8, 9]
    """
    check_not_none(iterator, "iterator")
    if not isint(estimated_size):
        raise TypeError("estimated_size must be an integer")
    if estimated_size < 1:
        raise ValueError("estimated_size must be greater than 0")

    return list(iterator)
