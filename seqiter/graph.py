"""Lazy depth-first flattening of nested iterators."""

from collections.abc import Iterator

from .base import BaseIterator
from .errors import evaluate, format_stack
from .sources import SingletonIterator, as_iterator
from .utils import check_callable


class ObjectGraphIterator(BaseIterator):
    def __init__(self, root, classifier=None):
        if classifier is not None:
            check_callable(classifier, "classifier")

        self.root = root
        self.classifier = classifier
        self.iterators = []  # traversal stack, deepest iterator last
        self.started = False
        self.next_value = None
        self.next_set = False
        self.stack = format_stack(2)

    def _classify(self, value):
        if self.classifier is None:
            return value
        return evaluate(self, self.classifier, value)

    def _start(self):
        self.started = True
        root, self.root = self.root, None
        if root is None:
            return
        elif isinstance(root, Iterator):
            self.iterators.append(as_iterator(root))
        else:
            self.iterators.append(SingletonIterator(root, removable=False))

    def _find_next(self):
        if not self.started:
            self._start()

        while len(self.iterators) > 0:
            top = self.iterators[-1]
            if not top.has_next():
                self.iterators.pop()
                continue

            value = self._classify(next(top))
            if isinstance(value, Iterator):
                self.iterators.append(as_iterator(value))
            else:
                self.next_value = value
                self.next_set = True
                return True

        return False

    def has_next(self):
        return self.next_set or self._find_next()

    def __next__(self):
        if not self.next_set and not self._find_next():
            raise StopIteration

        value = self.next_value
        self.next_value = None
        self.next_set = False
        return value


def object_graph(root, classifier=None):
    """Return an iterator over the leaves of a nested structure.

    Starting from `root`, each value is passed to `classifier` which returns
    either a leaf, or an iterator over further values to examine. Leaves are
    returned depth-first, from left to right, without building any
    intermediate list: deep or even infinite branches are only explored on
    demand.

    Args:
        root (Any): the value to start from, `None` gives an empty iterator.
            If `root` is an iterator, its elements are examined directly.
        classifier (Optional[Callable[[Any], Any]]): a function returning
            a leaf value or an iterator for each examined value. It is called
            exactly once per examined value. By default every value which
            is not an iterator is a leaf.

    Example:

        >>> forest = [[1, [2, 3]], [[4], 5]]
        >>> def classify(value):
        ...     return iter(value) if isinstance(value, list) else value
        >>> list(seqiter.object_graph(forest, classify))
        [1, 2, 3, 4, 5]
    """
    return ObjectGraphIterator(root, classifier)
