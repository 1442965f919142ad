import numpy as np
import pytest

from structmat.matrix import DenseMatrix, MatrixKind


def test_dense_basic():
    a = DenseMatrix([[1.0, 2.0], [3.0, 4.0]])
    assert a.get(0, 0) == 1.0
    assert a.get(0, 1) == 2.0
    assert a.get(1, 0) == 3.0
    assert a.get(1, 1) == 4.0
    assert a.nb_rows() == 2
    assert a.nb_cols() == 2
    assert a.kind() is MatrixKind.ANY


def test_dense_rectangular_and_out_of_range():
    a = DenseMatrix(np.arange(6, dtype=np.float64).reshape(2, 3))
    assert a.shape == (2, 3)
    assert a.get(1, 2) == 5.0
    assert a.get(2, 0) == 0.0
    assert a.get(0, 3) == 0.0
    assert a.diag_default() is None
    assert a.off_diag_default() is None


def test_dense_toarray_matches_input():
    values = np.array([[1.0, -2.0, 0.5], [3.0, 4.0, 8.0]])
    np.testing.assert_allclose(DenseMatrix(values).toarray(), values)


def test_dense_empty_has_zero_columns():
    a = DenseMatrix([])
    assert a.shape == (0, 0)
    assert a.get(0, 0) == 0.0


def test_dense_ragged_lenient():
    a = DenseMatrix([[1.0, 2.0], [3.0]], check=False)
    assert a.get(1, 1) == 0.0
    assert a.get(1, 0) == 3.0
    np.testing.assert_allclose(a.toarray(), np.array([[1.0, 2.0], [3.0, 0.0]]))


def test_dense_ragged_strict():
    with pytest.raises(ValueError, match="row 1"):
        DenseMatrix([[1.0, 2.0], [3.0]], check=True)
