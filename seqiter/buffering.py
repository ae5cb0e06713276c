from .base import BaseListIterator, ResettableIterator
from .errors import IllegalStateError, UnsupportedOperationError
from .sources import as_iterator
from .utils import check_not_none


class ListIteratorWrapper(BaseListIterator, ResettableIterator):
    def __init__(self, iterator, strict=False):
        check_not_none(iterator, "iterator")

        self.iterator = as_iterator(iterator)
        self.buffer = []
        self.cursor = 0
        self.last = -1
        self.strict = strict

    def has_next(self):
        return self.cursor < len(self.buffer) or self.iterator.has_next()

    def __next__(self):
        if self.cursor < len(self.buffer):
            value = self.buffer[self.cursor]
        else:
            value = next(self.iterator)
            self.buffer.append(value)

        self.last = self.cursor
        self.cursor += 1
        return value

    def has_previous(self):
        return self.cursor > 0

    def previous(self):
        if self.cursor == 0:
            raise StopIteration

        self.cursor -= 1
        self.last = self.cursor
        return self.buffer[self.cursor]

    def next_index(self):
        return self.cursor

    def _check_mutable(self, operation):
        if self.strict:
            raise UnsupportedOperationError(
                operation + "() is not supported in strict mode")

    def _check_last(self, operation):
        if self.last < 0:
            raise IllegalStateError(
                operation + "() must follow a call to next() or previous()")

    def remove(self):
        self._check_mutable("remove")
        self._check_last("remove")

        del self.buffer[self.last]
        if self.last < self.cursor:
            self.cursor -= 1
        self.last = -1

    def set(self, value):
        self._check_mutable("set")
        self._check_last("set")

        self.buffer[self.last] = value

    def add(self, value):
        self._check_mutable("add")

        self.buffer.insert(self.cursor, value)
        self.cursor += 1
        self.last = -1

    def reset(self):
        self.cursor = 0
        self.last = -1


def to_list_iterator(iterator, strict=False):
    """Add backward movement to a forward-only iterator.

    Elements are cached as they are pulled from `iterator`, which is only
    advanced when moving forward past the cached elements.

    Args:
        iterator (Iterator): the source iterator.
        strict (bool): if true, :meth:`set`, :meth:`add` and :meth:`remove`
            raise :class:`~seqiter.errors.UnsupportedOperationError`,
            otherwise they modify the cached elements (never the source).

    Return:
        A resettable list iterator.

    Example:

        >>> def produce():
        ...     for i in range(3):
        ...         print("producing", i)
        ...         yield i
        >>> it = seqiter.to_list_iterator(produce())
        >>> it.next()
        producing 0
        0
        >>> it.previous()
        0
        >>> it.next()  # cached
        0
    """
    return ListIteratorWrapper(iterator, strict)
