"""
A python library to compose and adapt iterators.

The seqiter package contains decorators that filter, transform, chain,
merge, loop over or flatten iterators without building intermediate
collections. Every iterator of the library exposes a
:meth:`~seqiter.base.BaseIterator.has_next` method on top of the python
iterator protocol, and optionally supports removal of the last returned
element, backward movement or reset.

All operations are evaluated on demand: an element is only pulled from
the source iterators when it is requested.
"""

from .base import BaseIterator, BaseListIterator, ResettableIterator
from .buffering import to_list_iterator
from .conversion import ProvidesIterator, get_iterator, to_list
from .errors import (
    ConcurrentModificationError,
    EvaluationError,
    IllegalStateError,
    UnsupportedOperationError,
    seterr,
)
from .filtering import filtered, filtered_list
from .graph import object_graph
from .indexing import looping, looping_list
from .mapping import transformed
from .shape import chained, collated
from .sources import (
    EMPTY_ITERATOR,
    array_iterator,
    array_list_iterator,
    as_iterator,
    empty_iterator,
    list_iterator,
    singleton_iterator,
    singleton_list_iterator,
    unmodifiable,
    unmodifiable_list,
)

__all__ = [
    "BaseIterator",
    "BaseListIterator",
    "ResettableIterator",
    "ProvidesIterator",
    "EvaluationError",
    "IllegalStateError",
    "UnsupportedOperationError",
    "ConcurrentModificationError",
    "seterr",
    "EMPTY_ITERATOR",
    "as_iterator",
    "empty_iterator",
    "singleton_iterator",
    "singleton_list_iterator",
    "array_iterator",
    "array_list_iterator",
    "list_iterator",
    "unmodifiable",
    "unmodifiable_list",
    "filtered",
    "filtered_list",
    "transformed",
    "chained",
    "collated",
    "looping",
    "looping_list",
    "object_graph",
    "to_list_iterator",
    "get_iterator",
    "to_list",
]
