import numpy as np
import pytest

from structmat.matrix import MatrixKind, SymmetricMatrix


def make_symmetric():
    # A = [[1,2,4],[2,3,5],[4,5,6]] packed as its lower triangle
    return SymmetricMatrix([[1.0], [2.0, 3.0], [4.0, 5.0, 6.0]])


def test_symmetric_basic():
    s = make_symmetric()
    assert s.get(0, 0) == 1.0
    assert s.get(1, 1) == 3.0
    assert s.get(0, 1) == 2.0
    assert s.get(1, 0) == 2.0
    assert s.nb_rows() == 3
    assert s.nb_cols() == 3
    assert s.kind() is MatrixKind.SYMMETRIC


def test_symmetric_two_by_two_reflection():
    s = SymmetricMatrix([[1.0], [2.0, 3.0]])
    assert s.get(0, 0) == 1.0
    assert s.get(1, 0) == 2.0
    assert s.get(0, 1) == 2.0


def test_symmetric_reflection_all_pairs():
    s = make_symmetric()
    for i in range(3):
        for j in range(3):
            assert s.get(i, j) == s.get(j, i)


def test_symmetric_toarray():
    s = make_symmetric()
    expected = np.array([[1.0, 2.0, 4.0], [2.0, 3.0, 5.0], [4.0, 5.0, 6.0]])
    np.testing.assert_allclose(s.toarray(), expected)
    np.testing.assert_allclose(s.toarray(), s.toarray().T)


def test_symmetric_out_of_range():
    s = make_symmetric()
    assert s.get(3, 0) == 0.0
    assert s.get(0, 3) == 0.0
    assert s.get(10, 10) == 0.0


def test_symmetric_defaults_unsupported():
    s = make_symmetric()
    assert s.diag_default() is None
    assert s.off_diag_default() is None
    assert s.default() == 0.0


def test_symmetric_short_rows_lenient():
    # row 2 is missing its last two entries
    s = SymmetricMatrix([[1.0], [2.0, 3.0], [4.0]], check=False)
    assert s.get(2, 0) == 4.0
    assert s.get(0, 2) == 4.0
    assert s.get(2, 1) == 0.0
    assert s.get(1, 2) == 0.0
    assert s.get(2, 2) == 0.0
    # columns are taken from the last row
    assert s.nb_cols() == 1


def test_symmetric_short_rows_strict():
    with pytest.raises(ValueError, match="row 2"):
        SymmetricMatrix([[1.0], [2.0, 3.0], [4.0]], check=True)


def test_symmetric_empty():
    s = SymmetricMatrix([])
    assert s.shape == (0, 0)
    assert s.get(0, 0) == 0.0
