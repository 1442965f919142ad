import logging

import numpy as np

from . import _validation
from .base import Matrix, MatrixKind, _as_rows, _index, _resolve_check

LOG = logging.getLogger(__name__)


class DenseMatrix(Matrix):
    """Dense row-major matrix.

    Parameters
    ----------
    values : sequence of array_like of float64
        Rows of the matrix, expected to share one length.
    check : bool, optional
        If True, reject rows of unequal length.

    Notes
    -----
    Any coordinate outside the stored rows reads as :meth:`default`; there is
    no separate diagonal rule.
    """

    def __init__(self, values, check=None):
        self.values = _as_rows(values)
        check = _resolve_check(check)
        if check:
            _validation.check_dense_rows(self.values)
        LOG.debug("DenseMatrix(shape=%s, checked=%s)", self.shape, check)

    def get(self, i, j):
        i, j = _index(i), _index(j)
        if i is not None and j is not None and i < len(self.values):
            row = self.values[i]
            if j < row.size:
                return float(row[j])
        return self.default()

    def nb_rows(self):
        return len(self.values)

    def nb_cols(self):
        if not self.values:
            return 0
        return int(self.values[0].size)

    def kind(self):
        return MatrixKind.ANY

    def toarray(self):
        nrows, ncols = self.shape
        out = np.zeros((nrows, ncols), dtype=np.float64)
        for i, row in enumerate(self.values):
            k = min(row.size, ncols)
            out[i, :k] = row[:k]
        return out
