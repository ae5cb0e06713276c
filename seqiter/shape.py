"""Operations that assemble several iterators into one."""

from .base import BaseIterator
from .errors import IllegalStateError, UnsupportedOperationError
from .sources import as_iterator
from .utils import check_callable, check_not_none, get_logger


logger = get_logger(__name__)


class IteratorChain(BaseIterator):
    def __init__(self, iterators=()):
        check_not_none(iterators, "iterators")

        self.iterators = []
        self.current_index = 0
        self.current = None
        self.last_used = None
        self.locked = False

        for it in iterators:
            self.add_iterator(it)

    def add_iterator(self, iterator):
        if self.locked:
            raise UnsupportedOperationError(
                "IteratorChain cannot be changed after the first use")
        check_not_none(iterator, "iterator")

        if isinstance(iterator, IteratorChain) and not iterator.locked:
            self.iterators.extend(iterator.iterators)
        else:
            self.iterators.append(as_iterator(iterator))

    def size(self):
        return len(self.iterators)

    def is_locked(self):
        return self.locked

    def _update_current(self):
        if not self.locked:
            logger.debug("locking chain of %d iterators", len(self.iterators))
            self.locked = True

        if self.current is None:
            if len(self.iterators) == 0:
                return
            self.current = self.iterators[0]

        # only move over children which are known to be exhausted
        while not self.current.has_next() \
                and self.current_index < len(self.iterators) - 1:
            self.current_index += 1
            self.current = self.iterators[self.current_index]

    def has_next(self):
        self._update_current()
        return self.current is not None and self.current.has_next()

    def __next__(self):
        self._update_current()
        if self.current is None:
            raise StopIteration

        value = next(self.current)
        self.last_used = self.current
        return value

    def remove(self):
        if self.last_used is None:
            raise IllegalStateError(
                "remove() must follow a call to next()")

        self.last_used.remove()
        self.last_used = None


def chained(*iterators):
    """Return an iterator over the concatenated iterators.

    Iterators are consumed one after another, a child iterator is only
    queried once all the previous ones are exhausted. Calling
    :func:`chained` without arguments returns an exhausted iterator.

    Args:
        iterators (Iterator): the iterators to concatenate, `None` entries
            are rejected with a :class:`TypeError`.

    Example:

        >>> it = seqiter.chained(iter([0, 1, 2]), iter([3, 4]), iter([5]))
        >>> list(it)
        [0, 1, 2, 3, 4, 5]
    """
    return IteratorChain(iterators)


def natural_order(a, b):
    if a < b:
        return -1
    elif b < a:
        return 1
    else:
        return 0


class CollatingIterator(BaseIterator):
    def __init__(self, comparator, iterators):
        check_not_none(iterators, "iterators")
        if comparator is not None:
            check_callable(comparator, "comparator")

        self.iterators = []
        for it in iterators:
            check_not_none(it, "iterator")
            self.iterators.append(as_iterator(it))

        if len(self.iterators) < 2:
            raise ValueError("at least two iterators must be provided")

        self.comparator = natural_order if comparator is None else comparator
        self.values = [None] * len(self.iterators)
        self.value_set = [False] * len(self.iterators)
        self.last_returned = -1
        self.removable = False

    def _fill(self, i):
        if not self.value_set[i] and self.iterators[i].has_next():
            self.values[i] = next(self.iterators[i])
            self.value_set[i] = True

        return self.value_set[i]

    def _least(self):
        least_index = -1
        least_value = None
        for i in range(len(self.iterators)):
            if not self._fill(i):
                continue

            # strict comparison keeps the lowest index on ties
            if least_index < 0 \
                    or self.comparator(self.values[i], least_value) < 0:
                least_index = i
                least_value = self.values[i]

        return least_index

    def has_next(self):
        return any(self.value_set) \
            or any(it.has_next() for it in self.iterators)

    def __next__(self):
        least_index = self._least()
        if least_index < 0:
            raise StopIteration

        value = self.values[least_index]
        self.values[least_index] = None
        self.value_set[least_index] = False
        self.last_returned = least_index
        self.removable = True
        return value

    def get_iterator_index(self):
        """Return the index of the iterator which yielded last, or -1."""
        return self.last_returned

    def remove(self):
        if not self.removable:
            raise IllegalStateError("remove() must follow a call to next()")

        self.iterators[self.last_returned].remove()
        self.removable = False


def collated(iterators, comparator=None):
    """Return a sorted merge of already sorted iterators.

    Each input is read exactly once per element it contributes and at most
    one element per input is kept in memory. Equal elements are returned in
    the order of the iterators that hold them.

    The inputs must be sorted, this is not verified: unsorted inputs produce
    an unsorted output.

    Args:
        iterators (Sequence[Iterator]): two or more sorted iterators.
        comparator (Optional[Callable[[Any, Any], int]]): a function
            returning a negative number, zero or a positive number when its
            first argument is respectively lower, equal or greater than the
            second. Defaults to the natural order of the elements.

    Example:

        >>> list(seqiter.collated([iter([1, 3, 5]), iter([2, 4, 6])]))
        [1, 2, 3, 4, 5, 6]
    """
    return CollatingIterator(comparator, iterators)
