"""Base classes for the matrix access layer.

These classes define the read-only contract shared by every storage variant in
`structmat.matrix`: element lookup, dimension queries, default-value rules and
the structural kind tag.
"""

import enum
import operator

import numpy as np

from .._runtime import get_check_default


class MatrixKind(enum.Enum):
    """Coarse structural tag of a matrix.

    ``ANY`` means no structure is assumed; it does not name a storage layout.
    Both :class:`~structmat.matrix.DenseMatrix` and
    :class:`~structmat.matrix.SparseMatrix` report it.
    """

    DIAGONAL = "diagonal"
    SYMMETRIC = "symmetric"
    ANY = "any"


def _index(k):
    """Return ``k`` as a Python int, or ``None`` if it is negative."""
    k = operator.index(k)
    return k if k >= 0 else None


def _readonly(arr):
    arr.flags.writeable = False
    return arr


def _as_vector(values, name="values"):
    arr = _readonly(np.array(values, dtype=np.float64))
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D")
    return arr


def _as_index_vector(values, name):
    arr = _readonly(np.array(values, dtype=np.int64))
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D")
    return arr


def _as_rows(values):
    return tuple(_as_vector(row, name="rows") for row in values)


def _resolve_check(check):
    return get_check_default() if check is None else bool(check)


def _optional_float(value):
    return None if value is None else float(value)


class Matrix:
    """Abstract base class for read-only 2D matrices.

    Every concrete variant answers the same queries, so callers can hold any
    of them and read elements without knowing the storage layout.

    Notes
    -----
    ``get`` never raises for integer coordinates: unstored and out-of-range
    entries resolve to a default value. Callers that need bounds validation
    compare against :meth:`nb_rows` and :meth:`nb_cols` themselves.
    A negative coordinate is out of range and never on the diagonal: a
    pair such as ``(-1, -1)`` resolves through the off-diagonal rule
    (:meth:`off_diag_default` where supported, else :meth:`default`).
    """

    def get(self, i, j):
        """Return the value at row ``i``, column ``j`` as a float."""
        raise NotImplementedError

    def default(self):
        """Global fallback value, ``0.0`` for every variant."""
        return 0.0

    def diag_default(self):
        """Override for unstored diagonal entries, or ``None`` if unsupported."""
        return None

    def off_diag_default(self):
        """Override for unstored off-diagonal entries, or ``None`` if unsupported."""
        return None

    def nb_rows(self):
        raise NotImplementedError

    def nb_cols(self):
        raise NotImplementedError

    def kind(self):
        return MatrixKind.ANY

    @property
    def shape(self):
        """Declared dimensions ``(nb_rows, nb_cols)``."""
        return (self.nb_rows(), self.nb_cols())

    @property
    def dtype(self):
        return np.dtype(np.float64)

    def __getitem__(self, key):
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("index must be a pair (i, j)")
        return self.get(*key)

    def toarray(self):
        """Return a dense numpy.ndarray with the same shape.

        Notes
        -----
        The base implementation calls :meth:`get` for every coordinate.
        Concrete types may override this with a faster equivalent.
        """
        nrows, ncols = self.shape
        out = np.empty((nrows, ncols), dtype=np.float64)
        for i in range(nrows):
            for j in range(ncols):
                out[i, j] = self.get(i, j)
        return out

    def _fallback(self, default):
        return self.default() if default is None else default

    def __repr__(self):
        return f"{type(self).__name__}(shape={self.shape}, kind={self.kind().value})"

    def __str__(self):
        return self.__repr__()
