"""Interfaces shared by all iterators of the library.

Every iterator is a regular python iterator which also exposes
:meth:`~BaseIterator.has_next` so that it can be inspected without being
consumed. Optional operations (removal, backward movement, reset...) raise
:class:`~seqiter.errors.UnsupportedOperationError` when an iterator does not
provide them.
"""

from abc import abstractmethod
from collections.abc import Iterator

from .errors import UnsupportedOperationError


class BaseIterator(Iterator):
    @abstractmethod
    def has_next(self):
        """Return whether more elements can be produced."""
        raise NotImplementedError

    @abstractmethod
    def __next__(self):
        raise NotImplementedError

    def next(self):
        """Produce the next element or raise :class:`StopIteration`."""
        return self.__next__()

    def remove(self):
        """Remove the last element returned by :meth:`next`."""
        raise UnsupportedOperationError(
            self.__class__.__name__ + " does not support remove")


class ResettableIterator(BaseIterator):
    @abstractmethod
    def reset(self):
        """Rewind the iterator to its first element."""
        raise NotImplementedError


class BaseListIterator(BaseIterator):
    @abstractmethod
    def has_previous(self):
        raise NotImplementedError

    @abstractmethod
    def previous(self):
        raise NotImplementedError

    @abstractmethod
    def next_index(self):
        raise NotImplementedError

    def previous_index(self):
        return self.next_index() - 1

    def set(self, value):
        """Replace the last element returned by :meth:`next` or
        :meth:`previous`."""
        raise UnsupportedOperationError(
            self.__class__.__name__ + " does not support set")

    def add(self, value):
        """Insert an element right before the cursor."""
        raise UnsupportedOperationError(
            self.__class__.__name__ + " does not support add")
