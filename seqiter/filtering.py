"""Iterators which only expose the elements matching a predicate."""

from .base import BaseIterator, BaseListIterator
from .errors import IllegalStateError, evaluate, format_stack
from .sources import as_iterator
from .utils import check_callable, check_not_none


class FilterIterator(BaseIterator):
    def __init__(self, iterator, predicate):
        check_not_none(iterator, "iterator")
        check_callable(predicate, "predicate")

        self.iterator = as_iterator(iterator)
        self.predicate = predicate
        self.next_value = None
        self.next_set = False
        self.stack = format_stack(2)

    def _set_next(self):
        while self.iterator.has_next():
            value = next(self.iterator)
            if evaluate(self, self.predicate, value):
                self.next_value = value
                self.next_set = True
                return True

        return False

    def has_next(self):
        return self.next_set or self._set_next()

    def __next__(self):
        if not self.next_set and not self._set_next():
            raise StopIteration

        value = self.next_value
        self.next_value = None
        self.next_set = False
        return value

    def remove(self):
        # the source already moved past the last returned element
        if self.next_set:
            raise IllegalStateError(
                "remove() cannot be called after has_next()")

        self.iterator.remove()


def filtered(iterator, predicate):
    """Return a view on the elements of `iterator` that satisfy `predicate`.

    Equivalent to :func:`python:filter` with the additional
    :meth:`has_next` look-ahead. The source iterator may be advanced ahead
    of the elements returned so far.

    Example:

        >>> it = seqiter.filtered(iter([1, 2, 3, 4, 5, 6]), lambda x: x % 2 == 0)
        >>> it.has_next()
        True
        >>> list(it)
        [2, 4, 6]
    """
    return FilterIterator(iterator, predicate)


class FilterListIterator(BaseListIterator):
    def __init__(self, iterator, predicate):
        check_not_none(iterator, "iterator")
        check_callable(predicate, "predicate")
        if not isinstance(iterator, BaseListIterator):
            raise TypeError("iterator must be a list iterator")

        self.iterator = iterator
        self.predicate = predicate
        self.next_value = None
        self.next_set = False
        self.previous_value = None
        self.previous_set = False
        self.index = 0
        self.last_move = None
        self.stack = format_stack(2)

    def _clear_next(self):
        self.next_value = None
        self.next_set = False

    def _clear_previous(self):
        self.previous_value = None
        self.previous_set = False

    def _set_next(self):
        # a pending backward look-ahead moved the source one match back,
        # walk forward over that match first
        if self.previous_set:
            self._clear_previous()
            if not self._set_next():
                return False
            self._clear_next()

        while self.iterator.has_next():
            value = next(self.iterator)
            if evaluate(self, self.predicate, value):
                self.next_value = value
                self.next_set = True
                return True

        return False

    def _set_previous(self):
        if self.next_set:
            self._clear_next()
            if not self._set_previous():
                return False
            self._clear_previous()

        while self.iterator.has_previous():
            value = self.iterator.previous()
            if evaluate(self, self.predicate, value):
                self.previous_value = value
                self.previous_set = True
                return True

        return False

    def has_next(self):
        return self.next_set or self._set_next()

    def __next__(self):
        if not self.next_set and not self._set_next():
            raise StopIteration

        value = self.next_value
        self._clear_next()
        self.index += 1
        self.last_move = 'next'
        return value

    def has_previous(self):
        return self.previous_set or self._set_previous()

    def previous(self):
        if not self.previous_set and not self._set_previous():
            raise StopIteration

        value = self.previous_value
        self._clear_previous()
        self.index -= 1
        self.last_move = 'previous'
        return value

    def next_index(self):
        return self.index

    def _check_cursor(self, operation):
        if self.next_set or self.previous_set:
            raise IllegalStateError(
                operation + "() cannot be called after has_next() "
                "or has_previous()")

    def remove(self):
        self._check_cursor("remove")
        if self.last_move is None:
            raise IllegalStateError(
                "remove() must follow a call to next() or previous()")

        self.iterator.remove()
        if self.last_move == 'next':
            self.index -= 1
        self.last_move = None

    def set(self, value):
        self._check_cursor("set")
        self.iterator.set(value)

    def add(self, value):
        self._check_cursor("add")
        self.iterator.add(value)
        if evaluate(self, self.predicate, value):
            self.index += 1
        self.last_move = None


def filtered_list(iterator, predicate):
    """Return a bidirectional filtered view over a list iterator.

    Walking backward skips non-matching elements as well. Modifications
    (:meth:`remove`, :meth:`set`, :meth:`add`) are forwarded to the source
    iterator, which is only possible when no look-ahead element is pending.

    Example:

        >>> it = seqiter.filtered_list(
        ...     seqiter.list_iterator([1, 2, 3, 4, 5, 6]), lambda x: x > 3)
        >>> it.next(), it.next()
        (4, 5)
        >>> it.previous()
        5
    """
    return FilterListIterator(iterator, predicate)
