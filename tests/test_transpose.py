import pytest
import jax.numpy as jnp
import numpy as np
from jax import random

from lazy_transpose import (
    EmptyInputError,
    RaggedShapeError,
    ShapeError,
    Transform,
    chunk,
    ints,
    join,
    materialize,
    transpose,
)
from lazy_transpose.reference import dense_transpose, to_array


@pytest.mark.parametrize("m,n", [(1, 1), (1, 5), (5, 1), (2, 3), (3, 2), (4, 4)])
def test_shape_and_values_vs_numpy(m, n):
    rows = ints(0, m * n) | chunk(n)
    Y = to_array(transpose(rows))
    npY = np.transpose(np.arange(m * n).reshape(m, n))
    assert Y.shape == (n, m)
    assert np.array_equal(Y, npY)


def test_matches_dense_jax_transpose():
    key = random.PRNGKey(0)
    X = np.asarray(random.normal(key, (3, 5)))
    rows = X.tolist()
    assert jnp.allclose(jnp.asarray(to_array(transpose(rows))), dense_transpose(rows))


def test_concrete_examples():
    assert materialize(transpose([[1, 2, 3], [4, 5, 6]])) == [[1, 4], [2, 5], [3, 6]]
    assert materialize(transpose([[1, 2], [3, 4], [5, 6]])) == [[1, 3, 5], [2, 4, 6]]


def test_pipe_syntax():
    assert materialize([[1, 2], [3, 4]] | transpose) == [[1, 3], [2, 4]]


@pytest.mark.parametrize("m,n", [(1, 1), (2, 3), (3, 2), (4, 7)])
def test_involution_property(m, n):
    rows = ints(0, m * n) | chunk(n)
    twice = transpose(transpose(rows))
    assert materialize(twice) == materialize(rows)
    assert materialize(twice | join) == list(range(m * n))


def test_column_i_collects_element_i_of_every_row():
    rows = [[3, 1, 4, 1], [5, 9, 2, 6], [5, 3, 5, 8]]
    columns = transpose(rows)
    assert len(columns) == 4
    for i, column in enumerate(columns):
        assert list(column) == [row[i] for row in rows]


def test_single_row_gives_singleton_columns():
    assert materialize(transpose([[7, 8, 9]])) == [[7], [8], [9]]


def test_construction_reads_no_elements():
    reads = []

    def record(value):
        reads.append(value)
        return value

    rows = Transform(ints(0, 12), record) | chunk(4)
    columns = transpose(rows)
    assert reads == []

    assert list(columns[1]) == [1, 5, 9]
    assert reads == [1, 5, 9]

    materialize(columns)
    assert sorted(reads[3:]) == list(range(12))


def test_iterating_twice_rereads_the_source():
    rows = [[1, 2], [3, 4]]
    columns = transpose(rows)
    assert materialize(columns) == [[1, 3], [2, 4]]
    rows[0][1] = 20
    assert materialize(columns) == [[1, 3], [20, 4]]


def test_empty_input_fails_fast():
    with pytest.raises(EmptyInputError, match="empty input has no defined transpose"):
        transpose([])


def test_zero_width_rows_rejected():
    with pytest.raises(ShapeError):
        transpose([[], []])


def test_ragged_rows_rejected_when_strict():
    with pytest.raises(RaggedShapeError) as info:
        transpose([[1, 2, 3], [4, 5]], strict=True)
    assert info.value.path == (1,)
    assert info.value.expected == 3
    assert info.value.actual == 2


def test_ragged_rows_read_best_effort_by_default():
    columns = transpose([[1, 2], [3, 4, 5]])
    assert len(columns) == 2
    assert materialize(columns) == [[1, 3, 5], [2, 4]]


def test_reject_wrong_rank():
    with pytest.raises(ShapeError):
        transpose([1, 2, 3])


def test_generator_rows_rejected():
    with pytest.raises(ShapeError, match="random-access"):
        transpose(r for r in [[1, 2], [3, 4]])


def test_construction_visits_only_the_first_row():
    calls = []
    rows = Transform(ints(0, 1000), lambda i: calls.append(i) or [i, i + 1])
    columns = transpose(rows)
    assert calls == [0]
    assert len(columns) == 2

    calls.clear()
    transpose(rows, strict=True)
    assert len(calls) == 1001
