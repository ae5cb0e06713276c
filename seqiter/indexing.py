"""Iterators cycling indefinitely over a collection."""

from collections.abc import MutableSequence, Sequence

from .base import BaseListIterator, ResettableIterator
from .errors import ConcurrentModificationError, IllegalStateError, \
    UnsupportedOperationError
from .sources import ListIterator
from .utils import check_not_none


_missing = object()


class LoopingIterator(ResettableIterator):
    def __init__(self, collection):
        check_not_none(collection, "collection")

        self.collection = collection
        self.indexed = isinstance(collection, Sequence)
        self.expected_size = len(collection)
        self.cursor = 0
        self.last = -1
        self.iterator = None if self.indexed else iter(collection)

    def _check_size(self):
        if len(self.collection) != self.expected_size:
            raise ConcurrentModificationError(
                "collection size changed from {} to {} during "
                "iteration".format(self.expected_size, len(self.collection)))

    def size(self):
        return len(self.collection)

    def has_next(self):
        self._check_size()
        return self.expected_size > 0

    def __next__(self):
        self._check_size()
        if self.expected_size == 0:
            raise StopIteration

        if not self.indexed:
            value = next(self.iterator, _missing)
            if value is _missing:
                self.reset()
                value = next(self.iterator)
            return value

        if self.cursor >= self.expected_size:
            self.cursor = 0
        value = self.collection[self.cursor]
        self.last = self.cursor
        self.cursor += 1
        return value

    def remove(self):
        if not isinstance(self.collection, MutableSequence):
            raise UnsupportedOperationError(
                "remove() requires a mutable sequence, got "
                + self.collection.__class__.__name__)
        self._check_size()
        if self.last < 0:
            raise IllegalStateError("remove() must follow a call to next()")

        del self.collection[self.last]
        self.cursor = self.last
        self.last = -1
        self.expected_size -= 1

    def reset(self):
        self.cursor = 0
        self.last = -1
        if not self.indexed:
            self.iterator = iter(self.collection)


def looping(collection):
    """Return an iterator cycling indefinitely over a collection.

    The iteration only stops once every element has been removed through
    :meth:`remove`. Modifying the size of the collection by other means is
    detected and raises a
    :class:`~seqiter.errors.ConcurrentModificationError`.

    Args:
        collection (Collection): the elements to cycle through, removal is
            only supported for mutable sequences.

    Example:

        >>> data = ['a', 'b']
        >>> loop = seqiter.looping(data)
        >>> [loop.next() for _ in range(5)]
        ['a', 'b', 'a', 'b', 'a']
        >>> loop.remove()
        >>> loop.next(), loop.next()
        ('b', 'b')
        >>> loop.remove()
        >>> loop.has_next()
        False
    """
    return LoopingIterator(collection)


class LoopingListIterator(BaseListIterator, ResettableIterator):
    def __init__(self, sequence):
        check_not_none(sequence, "sequence")

        self.sequence = sequence
        self.iterator = ListIterator(sequence)
        self.expected_size = len(sequence)

    def _check_size(self):
        if len(self.sequence) != self.expected_size:
            raise ConcurrentModificationError(
                "list size changed from {} to {} during iteration".format(
                    self.expected_size, len(self.sequence)))

    def size(self):
        return len(self.sequence)

    def has_next(self):
        self._check_size()
        return self.expected_size > 0

    def __next__(self):
        self._check_size()
        if self.expected_size == 0:
            raise StopIteration

        if not self.iterator.has_next():
            self.reset()
        return next(self.iterator)

    def has_previous(self):
        return self.has_next()

    def previous(self):
        self._check_size()
        if self.expected_size == 0:
            raise StopIteration

        if not self.iterator.has_previous():
            self.iterator = ListIterator(self.sequence, self.expected_size)
        return self.iterator.previous()

    def next_index(self):
        self._check_size()
        if not self.iterator.has_next():
            return 0
        return self.iterator.next_index()

    def previous_index(self):
        self._check_size()
        if not self.iterator.has_previous():
            return self.expected_size - 1
        return self.iterator.previous_index()

    def remove(self):
        self._check_size()
        self.iterator.remove()
        self.expected_size -= 1

    def set(self, value):
        self._check_size()
        self.iterator.set(value)

    def add(self, value):
        self._check_size()
        self.iterator.add(value)
        self.expected_size += 1

    def reset(self):
        self.iterator = ListIterator(self.sequence)


def looping_list(sequence):
    """Return a bidirectional iterator cycling over a list.

    Moving backward from the first element continues from the last one.
    Indexes are reported modulo the size of the list.

    Example:

        >>> loop = seqiter.looping_list([1, 2, 3])
        >>> loop.previous()
        3
        >>> loop.next()
        3
        >>> loop.next()
        1
    """
    return LoopingListIterator(sequence)
