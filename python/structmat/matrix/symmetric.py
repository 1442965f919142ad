import logging

from . import _validation
from .base import Matrix, MatrixKind, _as_rows, _index, _resolve_check

LOG = logging.getLogger(__name__)


class SymmetricMatrix(Matrix):
    """Symmetric matrix stored as its packed lower triangle.

    Parameters
    ----------
    values : sequence of array_like of float64
        Ragged rows; row ``i`` holds entries ``(i, 0) .. (i, i)``.
    check : bool, optional
        If True, reject rows shorter than ``i + 1``. Otherwise short rows
        are accepted and their missing entries read as :meth:`default`.

    Attributes
    ----------
    values : tuple of numpy.ndarray
        Read-only rows of the lower triangle.

    Notes
    -----
    Entry ``(i, j)`` with ``i < j`` is read from ``values[j][i]``, so
    ``get(i, j) == get(j, i)`` for every coordinate pair.

    Examples
    --------
        >>> from structmat import SymmetricMatrix
        >>> s = SymmetricMatrix([[1.0], [2.0, 3.0]])
        >>> s.get(0, 1), s.get(1, 0), s.get(1, 1)
        (2.0, 2.0, 3.0)
    """

    def __init__(self, values, check=None):
        self.values = _as_rows(values)
        check = _resolve_check(check)
        if check:
            _validation.check_symmetric_rows(self.values)
        LOG.debug("SymmetricMatrix(n=%d, checked=%s)", len(self.values), check)

    def get(self, i, j):
        i, j = _index(i), _index(j)
        n = len(self.values)
        if i is None or j is None or i >= n or j >= n:
            return self.default()
        # lower triangle: (r, c) with r >= c lives at values[r][c]
        r, c = (i, j) if i >= j else (j, i)
        row = self.values[r]
        if c < row.size:
            return float(row[c])
        return self.default()

    def nb_rows(self):
        return len(self.values)

    def nb_cols(self):
        if not self.values:
            return 0
        return int(self.values[-1].size)

    def kind(self):
        return MatrixKind.SYMMETRIC
