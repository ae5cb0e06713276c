import random
import pytest
from seqiter import transformed, list_iterator, EvaluationError, seterr, \
    UnsupportedOperationError


def test_transformed_basics():
    n = 100
    data = [random.random() for _ in range(n)]

    def do(x):
        do.call_cnt += 1
        return x + 1

    do.call_cnt = 0

    result = transformed(iter(data), do)
    assert do.call_cnt == 0
    assert result.has_next()
    assert do.call_cnt == 0
    assert list(result) == [x + 1 for x in data]
    assert do.call_cnt == n
    assert not result.has_next()
    with pytest.raises(StopIteration):
        result.next()
    assert do.call_cnt == n


def test_transformed_remove():
    data = [1, 2, 3, 4]
    result = transformed(list_iterator(data), lambda x: -x)
    assert result.next() == -1
    assert result.next() == -2
    result.remove()
    assert data == [1, 3, 4]
    assert list(result) == [-3, -4]

    result = transformed(iter(data), lambda x: -x)
    result.next()
    with pytest.raises(UnsupportedOperationError):
        result.remove()


class CustomException(Exception):
    pass


@pytest.mark.parametrize('evaluation', ['wrap', 'passthrough'])
def test_transformed_exceptions(evaluation):
    def do(x):
        del x
        raise CustomException

    data = [random.random() for _ in range(100)]
    m = transformed(iter(data), do)

    seterr(evaluation)
    error_t = EvaluationError if evaluation == "wrap" else CustomException

    with pytest.raises(error_t):
        next(m)

    if evaluation == "wrap":
        m = transformed(iter(data), do)
        with pytest.raises(EvaluationError) as excinfo:
            next(m)
        assert isinstance(excinfo.value.__cause__, CustomException)
        assert "TransformIterator" in str(excinfo.value)
        assert "in test_transformed_exceptions\n" in str(excinfo.value)
        assert "    m = transformed(iter(data), do)\n" in str(excinfo.value)

    seterr('wrap')

    with pytest.raises(TypeError):
        transformed(iter(data), None)

    with pytest.raises(TypeError):
        transformed(None, do)
