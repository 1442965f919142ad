import logging

import numpy as np

from . import _validation
from .base import (
    Matrix,
    MatrixKind,
    _as_index_vector,
    _as_vector,
    _index,
    _optional_float,
    _resolve_check,
)

LOG = logging.getLogger(__name__)


class SparseMatrix(Matrix):
    """Compressed Sparse Column (CSC) matrix with configurable fill values.

    Parameters
    ----------
    indptr : array_like of int64, shape ``(ncols + 1,)``
        Column pointer array.
    indices : array_like of int64, shape ``(nnz,)``
        Row indices of stored values. Within a column they need not be
        sorted but must not repeat.
    data : array_like of float64, shape ``(nnz,)``
        Stored values.
    shape : tuple of int
        Matrix shape ``(nrows, ncols)``. Declarative only: it is reported by
        :meth:`nb_rows` and :meth:`nb_cols` but not consulted by :meth:`get`.
    diag_default : float, optional
        Value of an unstored diagonal entry. Falls back to :meth:`default`.
    off_diag_default : float, optional
        Value of an unstored off-diagonal entry. Falls back to
        :meth:`default`.
    check : bool, optional
        If True, validate the CSC invariants (pointer monotonicity, lengths,
        row bounds, no duplicate row in a column).

    Attributes
    ----------
    indptr, indices, data : numpy.ndarray
        Read-only storage arrays for the CSC structure and values.
    nnz : int
        Number of stored elements.

    Notes
    -----
    Lookup scans the row indices of column ``j``, so :meth:`get` costs
    O(column length). A column outside the pointer table holds no entries.

    Examples
    --------
    A shifted identity where unstored diagonal entries read as ``1.0``::

        >>> from structmat import SparseMatrix
        >>> a = SparseMatrix([0, 1, 1, 2], [0, 2], [5.0, 7.0], shape=(3, 3),
        ...                  diag_default=1.0)
        >>> a.get(0, 0), a.get(1, 1), a.get(2, 2), a.get(0, 2)
        (5.0, 1.0, 7.0, 0.0)
        >>> a.nnz
        2
    """

    def __init__(
        self,
        indptr,
        indices,
        data,
        shape,
        diag_default=None,
        off_diag_default=None,
        check=None,
    ):
        shape = tuple(int(s) for s in shape)
        if len(shape) != 2:
            raise ValueError("SparseMatrix requires 2D shape")
        if shape[0] < 0 or shape[1] < 0:
            raise ValueError("shape must be non-negative")
        self._shape = shape
        self.indptr = _as_index_vector(indptr, "indptr")
        self.indices = _as_index_vector(indices, "indices")
        self.data = _as_vector(data, name="data")
        self._diag_default = _optional_float(diag_default)
        self._off_diag_default = _optional_float(off_diag_default)
        check = _resolve_check(check)
        if check:
            _validation.check_csc(shape[0], shape[1], self.indptr, self.indices, self.data)
        LOG.debug("SparseMatrix(shape=%s, nnz=%d, checked=%s)", shape, self.nnz, check)

    @classmethod
    def from_arrays(
        cls, indptr, indices, data, shape, diag_default=None, off_diag_default=None, check=None
    ):
        """Construct from CSC arrays.

        Parameters
        ----------
        indptr, indices, data : array_like
            CSC structure and values.
        shape : tuple[int, int]
            Matrix shape.
        diag_default, off_diag_default : float, optional
            Fill values for unstored entries.
        check : bool, optional
            Validate invariants.
        """
        return cls(
            indptr,
            indices,
            data,
            shape,
            diag_default=diag_default,
            off_diag_default=off_diag_default,
            check=check,
        )

    @property
    def col_ptrs(self):
        return self.indptr

    @property
    def row_indices(self):
        return self.indices

    @property
    def values(self):
        return self.data

    @property
    def nnz(self):
        """Number of stored values."""
        return int(self.data.size)

    def _position(self, i, j):
        """Offset of ``(i, j)`` in ``indices``/``data``, or ``None`` if unstored."""
        if j + 1 >= self.indptr.size:
            return None
        s = int(self.indptr[j])
        e = int(self.indptr[j + 1])
        # clamp a malformed pointer pair to the stored range
        s, e = max(s, 0), min(e, self.indices.size)
        if s >= e:
            return None
        hits = np.flatnonzero(self.indices[s:e] == i)
        if hits.size == 0:
            return None
        return s + int(hits[0])

    def get(self, i, j):
        i, j = _index(i), _index(j)
        pos = None
        if i is not None and j is not None:
            pos = self._position(i, j)
        if pos is not None and pos < self.data.size:
            return float(self.data[pos])
        if i is not None and i == j:
            return self._fallback(self._diag_default)
        return self._fallback(self._off_diag_default)

    def diag_default(self):
        return self._diag_default

    def off_diag_default(self):
        return self._off_diag_default

    def nb_rows(self):
        return self._shape[0]

    def nb_cols(self):
        return self._shape[1]

    def kind(self):
        return MatrixKind.ANY

    def toarray(self):
        """Convert to a dense NumPy ``ndarray`` of shape ``(nrows, ncols)``."""
        nrows, ncols = self._shape
        out = np.full((nrows, ncols), self._fallback(self._off_diag_default), dtype=np.float64)
        k = min(nrows, ncols)
        out[np.arange(k), np.arange(k)] = self._fallback(self._diag_default)
        for j in range(min(ncols, self.indptr.size - 1)):
            s = max(int(self.indptr[j]), 0)
            e = min(int(self.indptr[j + 1]), self.indices.size, self.data.size)
            # walk backwards so the first stored occurrence wins, as in get
            for p in range(e - 1, s - 1, -1):
                i = int(self.indices[p])
                if 0 <= i < nrows:
                    out[i, j] = self.data[p]
        return out

    def __repr__(self):
        return f"SparseMatrix(shape={self.shape}, nnz={self.nnz}, dtype={self.data.dtype.name})"
