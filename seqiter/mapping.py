from .base import BaseIterator
from .errors import evaluate, format_stack
from .sources import as_iterator
from .utils import check_callable, check_not_none


class TransformIterator(BaseIterator):
    def __init__(self, iterator, f):
        check_not_none(iterator, "iterator")
        check_callable(f, "f")

        self.iterator = as_iterator(iterator)
        self.f = f
        self.stack = format_stack(2)

    def has_next(self):
        return self.iterator.has_next()

    def __next__(self):
        return evaluate(self, self.f, next(self.iterator))

    def remove(self):
        self.iterator.remove()


def transformed(iterator, f):
    """Return an iterator of `f` applied over the elements of `iterator`.

    Equivalent to :code:`map(f, iterator)` with on-demand evaluation.
    :meth:`remove` removes the original element from the source iterator.

    Example:

        >>> data = [1, 2, 3, 4]
        >>> it = seqiter.transformed(seqiter.list_iterator(data), str)
        >>> it.next()
        '1'
        >>> it.remove()
        >>> list(it), data
        (['2', '3', '4'], [2, 3, 4])
    """
    return TransformIterator(iterator, f)
