"""Primitive iterators over python containers and native iterators."""

from .base import BaseIterator, BaseListIterator, ResettableIterator
from .errors import IllegalStateError, UnsupportedOperationError
from .utils import check_not_none, isint, to_python_value


_missing = object()


class IteratorWrapper(BaseIterator):
    def __init__(self, iterator):
        check_not_none(iterator, "iterator")
        self.iterator = iter(iterator)
        self.value = _missing
        self.exhausted = False

    def has_next(self):
        if self.value is not _missing:
            return True
        if self.exhausted:
            return False

        try:
            self.value = next(self.iterator)
        except StopIteration:
            self.exhausted = True
            return False
        else:
            return True

    def __next__(self):
        if not self.has_next():
            raise StopIteration

        value, self.value = self.value, _missing
        return value


def as_iterator(iterable):
    """Return `iterable` if it is a library iterator, a wrapper otherwise.

    Raises:
        TypeError: if `iterable` is None or not iterable.
    """
    check_not_none(iterable, "iterator")
    if isinstance(iterable, BaseIterator):
        return iterable

    return IteratorWrapper(iterable)


class ListIterator(BaseListIterator, ResettableIterator):
    def __init__(self, sequence, start=0):
        check_not_none(sequence, "sequence")
        if not isint(start):
            raise TypeError("start must be an integer")
        if start < 0 or start > len(sequence):
            raise IndexError("start index out of range")

        self.sequence = sequence
        self.cursor = start
        self.last = -1

    def has_next(self):
        return self.cursor < len(self.sequence)

    def __next__(self):
        if self.cursor >= len(self.sequence):
            raise StopIteration

        value = self.sequence[self.cursor]
        self.last = self.cursor
        self.cursor += 1
        return value

    def has_previous(self):
        return self.cursor > 0

    def previous(self):
        if self.cursor <= 0:
            raise StopIteration

        self.cursor -= 1
        self.last = self.cursor
        return self.sequence[self.cursor]

    def next_index(self):
        return self.cursor

    def remove(self):
        if self.last < 0:
            raise IllegalStateError(
                "remove() must follow a call to next() or previous()")

        del self.sequence[self.last]
        if self.last < self.cursor:
            self.cursor -= 1
        self.last = -1

    def set(self, value):
        if self.last < 0:
            raise IllegalStateError(
                "set() must follow a call to next() or previous()")

        self.sequence[self.last] = value

    def add(self, value):
        self.sequence.insert(self.cursor, value)
        self.cursor += 1
        self.last = -1

    def reset(self):
        self.cursor = 0
        self.last = -1


def list_iterator(sequence, start=0):
    """Return a bidirectional iterator over a mutable sequence.

    The iterator supports :meth:`remove`, :meth:`set` and :meth:`add` which
    apply to the sequence itself.

    Example:

        >>> data = [1, 2, 3, 4]
        >>> it = seqiter.list_iterator(data)
        >>> it.next()
        1
        >>> it.remove()
        >>> data
        [2, 3, 4]
    """
    return ListIterator(sequence, start)


class ArrayIterator(ResettableIterator):
    def __init__(self, array, start=0, end=None):
        check_not_none(array, "array")
        size = len(array)
        if end is None:
            end = size

        if not isint(start) or not isint(end):
            raise TypeError("start and end must be integers")
        if start < 0 or start > size:
            raise IndexError("start index out of range")
        if end < 0 or end > size:
            raise IndexError("end index out of range")
        if end < start:
            raise ValueError("end must not be less than start")

        self.array = array
        self.start = start
        self.end = end
        self.index = start

    def has_next(self):
        return self.index < self.end

    def __next__(self):
        if self.index >= self.end:
            raise StopIteration

        value = to_python_value(self.array[self.index])
        self.index += 1
        return value

    def reset(self):
        self.index = self.start


def array_iterator(array, start=0, end=None):
    """Return a resettable iterator over an indexable fixed-size container.

    Args:
        array (Sequence): a tuple, :class:`python:array.array`, numpy
            array...
        start (int): index of the first element (default 0).
        end (Optional[int]): index after the last element, defaults to the
            size of the array.

    Array scalars are converted to python objects.

    Example:

        >>> it = seqiter.array_iterator(array.array('i', [1, 2, 3, 4]), 1)
        >>> list(it)
        [2, 3, 4]
    """
    return ArrayIterator(array, start, end)


class ArrayListIterator(BaseListIterator, ArrayIterator):
    def __init__(self, array, start=0, end=None):
        super().__init__(array, start, end)
        self.last = -1

    def __next__(self):
        value = super().__next__()
        self.last = self.index - 1
        return value

    def has_previous(self):
        return self.index > self.start

    def previous(self):
        if self.index <= self.start:
            raise StopIteration

        self.index -= 1
        self.last = self.index
        return to_python_value(self.array[self.index])

    def next_index(self):
        return self.index - self.start

    def set(self, value):
        if self.last < 0:
            raise IllegalStateError(
                "set() must follow a call to next() or previous()")

        self.array[self.last] = value

    def reset(self):
        super().reset()
        self.last = -1


def array_list_iterator(array, start=0, end=None):
    """Return a bidirectional iterator over a fixed-size container.

    Same as :func:`array_iterator` with backward movement and :meth:`set`,
    indexes are relative to `start`. Elements cannot be added or removed.
    """
    return ArrayListIterator(array, start, end)


class EmptyIterator(ResettableIterator):
    def has_next(self):
        return False

    def __next__(self):
        raise StopIteration

    def remove(self):
        raise IllegalStateError("iterator contains no elements")

    def reset(self):
        pass


EMPTY_ITERATOR = EmptyIterator()


def empty_iterator():
    """Return the shared empty iterator."""
    return EMPTY_ITERATOR


class SingletonIterator(ResettableIterator):
    def __init__(self, value, removable=True):
        self.value = value
        self.removable = removable
        self.first = True
        self.removed = False

    def has_next(self):
        return self.first and not self.removed

    def __next__(self):
        if not self.has_next():
            raise StopIteration

        self.first = False
        return self.value

    def remove(self):
        if not self.removable:
            raise UnsupportedOperationError(
                self.__class__.__name__ + " does not support remove")
        if self.removed or self.first:
            raise IllegalStateError(
                "remove() must follow a call to next()")

        self.value = None
        self.removed = True

    def reset(self):
        self.first = True


def singleton_iterator(value):
    """Return an iterator over a single value."""
    return SingletonIterator(value)


class SingletonListIterator(BaseListIterator, ResettableIterator):
    def __init__(self, value):
        self.value = value
        self.before_first = True
        self.last_set = False
        self.removed = False

    def has_next(self):
        return self.before_first and not self.removed

    def __next__(self):
        if not self.has_next():
            raise StopIteration

        self.before_first = False
        self.last_set = True
        return self.value

    def has_previous(self):
        return not self.before_first and not self.removed

    def previous(self):
        if not self.has_previous():
            raise StopIteration

        self.before_first = True
        self.last_set = True
        return self.value

    def next_index(self):
        return 0 if self.before_first or self.removed else 1

    def remove(self):
        if not self.last_set or self.removed:
            raise IllegalStateError(
                "remove() must follow a call to next() or previous()")

        self.value = None
        self.removed = True
        self.last_set = False

    def set(self, value):
        if not self.last_set:
            raise IllegalStateError(
                "set() must follow a call to next() or previous()")

        self.value = value

    def reset(self):
        self.before_first = True
        self.last_set = False


def singleton_list_iterator(value):
    """Return a list iterator over a single value."""
    return SingletonListIterator(value)


class UnmodifiableIterator(BaseIterator):
    def __init__(self, iterator):
        self.iterator = as_iterator(iterator)

    def has_next(self):
        return self.iterator.has_next()

    def __next__(self):
        return next(self.iterator)


def unmodifiable(iterator):
    """Return a view of an iterator which rejects :meth:`remove`."""
    if isinstance(iterator, UnmodifiableIterator):
        return iterator

    return UnmodifiableIterator(iterator)


class UnmodifiableListIterator(BaseListIterator):
    def __init__(self, iterator):
        check_not_none(iterator, "iterator")
        if not isinstance(iterator, BaseListIterator):
            raise TypeError("iterator must be a list iterator")

        self.iterator = iterator

    def has_next(self):
        return self.iterator.has_next()

    def __next__(self):
        return next(self.iterator)

    def has_previous(self):
        return self.iterator.has_previous()

    def previous(self):
        return self.iterator.previous()

    def next_index(self):
        return self.iterator.next_index()

    def previous_index(self):
        return self.iterator.previous_index()


def unmodifiable_list(iterator):
    """Return a view of a list iterator which rejects modifications."""
    if isinstance(iterator, UnmodifiableListIterator):
        return iterator

    return UnmodifiableListIterator(iterator)
