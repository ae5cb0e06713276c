import array
import pytest
from seqiter import as_iterator, array_iterator, array_list_iterator, \
    empty_iterator, list_iterator, singleton_iterator, \
    singleton_list_iterator, unmodifiable, unmodifiable_list, seterr, \
    EMPTY_ITERATOR, IllegalStateError, UnsupportedOperationError
from seqiter.sources import IteratorWrapper
from seqiter.errors import unindent


def test_iterator_wrapper():
    it = as_iterator([1, 2, 3])
    assert isinstance(it, IteratorWrapper)
    assert it.has_next()
    assert it.has_next()
    assert list(it) == [1, 2, 3]
    assert not it.has_next()

    assert as_iterator(it) is it

    # exhaustion is final even if the source revives
    class Reviving:
        def __init__(self):
            self.calls = 0

        def __iter__(self):
            return self

        def __next__(self):
            self.calls += 1
            if self.calls == 1:
                raise StopIteration
            return self.calls

    it = as_iterator(Reviving())
    assert not it.has_next()
    assert not it.has_next()
    with pytest.raises(StopIteration):
        it.next()

    with pytest.raises(TypeError):
        as_iterator(None)

    with pytest.raises(TypeError):
        as_iterator(42)


def test_list_iterator():
    arr = [1, 2, 3, 4]
    it = list_iterator(arr)
    assert not it.has_previous()
    assert it.next() == 1
    assert it.next() == 2
    assert it.previous() == 2
    assert it.next_index() == 1
    it.remove()
    assert arr == [1, 3, 4]
    assert it.next() == 3
    it.add(0)
    assert arr == [1, 3, 0, 4]
    with pytest.raises(IllegalStateError):
        it.set(5)
    assert it.next() == 4
    it.set(5)
    assert arr == [1, 3, 0, 5]
    assert not it.has_next()
    with pytest.raises(StopIteration):
        it.next()

    it.reset()
    assert list(it) == [1, 3, 0, 5]

    assert list(list_iterator(arr, 2)) == [0, 5]
    with pytest.raises(IndexError):
        list_iterator(arr, 5)


def test_array_iterator():
    arr = array.array('i', [1, 2, 3, 4, 5])
    it = array_iterator(arr)
    assert list(it) == [1, 2, 3, 4, 5]
    it.reset()
    assert it.next() == 1

    assert list(array_iterator(arr, 1, 3)) == [2, 3]
    assert list(array_iterator((1, 2, 3), 3)) == []

    with pytest.raises(IndexError):
        array_iterator(arr, -1)
    with pytest.raises(IndexError):
        array_iterator(arr, 0, 6)
    with pytest.raises(ValueError):
        array_iterator(arr, 3, 2)
    with pytest.raises(TypeError):
        array_iterator(arr, 1.0)

    it = array_iterator(arr)
    it.next()
    with pytest.raises(UnsupportedOperationError):
        it.remove()


def test_array_list_iterator():
    arr = array.array('i', [1, 2, 3, 4, 5])
    it = array_list_iterator(arr, 1, 4)
    assert not it.has_previous()
    assert it.next_index() == 0
    assert it.previous_index() == -1
    with pytest.raises(StopIteration):
        it.previous()
    with pytest.raises(IllegalStateError):
        it.set(0)

    assert [it.next(), it.next(), it.next()] == [2, 3, 4]
    assert not it.has_next()
    assert it.next_index() == 3
    assert it.previous() == 4
    assert it.previous() == 3
    it.set(30)
    assert arr.tolist() == [1, 2, 30, 4, 5]
    assert it.next() == 30

    with pytest.raises(UnsupportedOperationError):
        it.remove()
    with pytest.raises(UnsupportedOperationError):
        it.add(0)

    it.reset()
    assert it.next_index() == 0
    with pytest.raises(IllegalStateError):
        it.set(0)
    assert list(it) == [2, 30, 4]

    with pytest.raises(IndexError):
        array_list_iterator(arr, 0, 6)


def test_array_iterator_numpy():
    np = pytest.importorskip("numpy")

    values = list(array_iterator(np.arange(4)))
    assert values == [0, 1, 2, 3]
    assert all(type(v) is int for v in values)


def test_empty_and_singleton():
    it = empty_iterator()
    assert it is EMPTY_ITERATOR
    assert not it.has_next()
    with pytest.raises(StopIteration):
        it.next()
    with pytest.raises(IllegalStateError):
        it.remove()

    it = singleton_iterator('a')
    with pytest.raises(IllegalStateError):
        it.remove()
    assert it.has_next()
    assert it.next() == 'a'
    assert not it.has_next()
    it.reset()
    assert list(it) == ['a']
    it.remove()
    with pytest.raises(IllegalStateError):
        it.remove()
    it.reset()
    assert not it.has_next()


def test_singleton_list_iterator():
    it = singleton_list_iterator('a')
    assert it.next_index() == 0
    assert not it.has_previous()
    with pytest.raises(IllegalStateError):
        it.set('b')
    with pytest.raises(IllegalStateError):
        it.remove()

    assert it.next() == 'a'
    assert not it.has_next()
    assert it.next_index() == 1
    assert it.previous_index() == 0
    it.set('b')
    assert it.previous() == 'b'
    assert it.next_index() == 0
    assert it.next() == 'b'

    with pytest.raises(UnsupportedOperationError):
        it.add('c')

    it.remove()
    with pytest.raises(IllegalStateError):
        it.remove()
    assert not it.has_next()
    assert not it.has_previous()
    it.reset()
    assert list(it) == []

    it = singleton_list_iterator(1)
    assert list(it) == [1]
    it.reset()
    assert list(it) == [1]


def test_unmodifiable():
    arr = [1, 2, 3]
    it = unmodifiable(list_iterator(arr))
    assert unmodifiable(it) is it
    assert it.next() == 1
    with pytest.raises(UnsupportedOperationError):
        it.remove()
    assert list(it) == [2, 3]
    assert arr == [1, 2, 3]


def test_seterr():
    assert seterr() == 'wrap'
    assert seterr('passthrough') == 'passthrough'
    assert seterr() == 'passthrough'
    assert seterr('wrap') == 'wrap'

    with pytest.raises(ValueError):
        seterr('ignore')


def test_unmodifiable_list():
    arr = [1, 2, 3]
    it = unmodifiable_list(list_iterator(arr))
    assert unmodifiable_list(it) is it
    assert it.next() == 1
    assert it.next() == 2
    assert it.previous() == 2
    assert it.has_previous()
    assert it.next_index() == 1
    assert it.previous_index() == 0

    with pytest.raises(UnsupportedOperationError):
        it.remove()
    with pytest.raises(UnsupportedOperationError):
        it.set(0)
    with pytest.raises(UnsupportedOperationError):
        it.add(0)
    assert list(it) == [2, 3]
    assert arr == [1, 2, 3]

    with pytest.raises(TypeError):
        unmodifiable_list(iter(arr))
    with pytest.raises(TypeError):
        unmodifiable_list(None)


def test_unindent():
    assert unindent(None) == []
    assert unindent(["    a = 1\n", "      b = 2\n"]) == ["a = 1\n", "  b = 2\n"]
    assert unindent(["x\n", "  y\n"]) == ["x\n", "  y\n"]
