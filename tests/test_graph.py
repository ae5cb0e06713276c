import itertools
from random import randint
import pytest
from seqiter import object_graph, EvaluationError, UnsupportedOperationError


class Node:
    def __init__(self, children):
        self.children = children


def classify(value):
    if isinstance(value, Node):
        return iter(value.children)
    return value


def build_tree(depth):
    if depth == 0 or randint(0, 3) == 0:
        return randint(0, 1000)

    return Node([build_tree(depth - 1) for _ in range(randint(0, 4))])


def leaves(tree):
    if isinstance(tree, Node):
        return [l for c in tree.children for l in leaves(c)]
    return [tree]


def test_object_graph():
    tree = Node([Node([1, 2]), Node([3]), Node([]), Node([4, 5, 6])])
    it = object_graph(tree, classify)
    assert list(it) == [1, 2, 3, 4, 5, 6]
    assert not it.has_next()
    assert not it.has_next()

    for _ in range(20):
        tree = build_tree(6)
        assert list(object_graph(tree, classify)) == leaves(tree)


def test_object_graph_defaults():
    assert list(object_graph(None)) == []
    assert list(object_graph(None, classify)) == []
    assert list(object_graph(42)) == [42]
    assert list(object_graph([1, [2]])) == [[1, [2]]]

    nested = iter([1, iter([2, iter([3])]), iter([]), 4])
    assert list(object_graph(nested)) == [1, 2, 3, 4]

    # the root iterator itself is not classified
    it = object_graph(iter([Node([1]), 2]), classify)
    assert list(it) == [1, 2]

    with pytest.raises(TypeError):
        object_graph(1, "not callable")


def test_object_graph_classifier_calls():
    def count(value):
        count.calls += 1
        return classify(value)

    count.calls = 0

    tree = Node([Node([1, 2]), 3, Node([Node([4])])])
    it = object_graph(tree, count)
    assert it.has_next()
    assert count.calls == 3
    assert list(it) == [1, 2, 3, 4]
    assert count.calls == 8


@pytest.mark.timeout(5)
def test_object_graph_lazy():
    # infinite branches are fine as long as they are not exhausted
    def infinite(value):
        if value == 'root':
            return iter(['branch', 'other'])
        if value == 'branch':
            return itertools.count()
        return value

    it = object_graph('root', infinite)
    assert [next(it) for _ in range(100)] == list(range(100))

    # deeper than the interpreter recursion limit
    depth = 5000
    root = 0
    for _ in range(depth):
        root = Node([root])
    assert list(object_graph(root, classify)) == [0]


def test_object_graph_errors():
    def fail(value):
        raise ValueError

    it = object_graph(1, fail)
    with pytest.raises(EvaluationError):
        it.has_next()

    it = object_graph(Node([1]), classify)
    it.next()
    with pytest.raises(UnsupportedOperationError):
        it.remove()
