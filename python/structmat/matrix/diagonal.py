import logging

import numpy as np

from .base import Matrix, MatrixKind, _as_vector, _index, _optional_float, _resolve_check

LOG = logging.getLogger(__name__)


class DiagonalMatrix(Matrix):
    """Square matrix storing only its main diagonal.

    Parameters
    ----------
    values : array_like of float64, shape ``(n,)``
        Diagonal entries.
    off_diag_default : float, optional
        Value of every off-diagonal entry. Falls back to :meth:`default`.
    check : bool, optional
        Accepted for a uniform constructor signature. The only invariant,
        a 1D ``values``, is enforced either way.

    Notes
    -----
    A diagonal coordinate past ``n`` reads as :meth:`default`; off-diagonal
    coordinates always use the off-diagonal rule, in range or not.

    Examples
    --------
        >>> from structmat import DiagonalMatrix
        >>> d = DiagonalMatrix([1.0, 2.0, 3.0])
        >>> d.get(1, 1), d.get(0, 2)
        (2.0, 0.0)
    """

    def __init__(self, values, off_diag_default=None, check=None):
        # the 1D shape is the only invariant, enforced whatever check says
        self.values = _as_vector(values)
        self._off_diag_default = _optional_float(off_diag_default)
        LOG.debug("DiagonalMatrix(n=%d, checked=%s)", self.values.size, _resolve_check(check))

    def get(self, i, j):
        i, j = _index(i), _index(j)
        if i is not None and i == j:
            if i < self.values.size:
                return float(self.values[i])
            return self.default()
        return self._fallback(self._off_diag_default)

    def off_diag_default(self):
        return self._off_diag_default

    def nb_rows(self):
        return int(self.values.size)

    def nb_cols(self):
        return int(self.values.size)

    def kind(self):
        return MatrixKind.DIAGONAL

    def toarray(self):
        n = self.values.size
        out = np.full((n, n), self._fallback(self._off_diag_default), dtype=np.float64)
        np.fill_diagonal(out, self.values)
        return out
