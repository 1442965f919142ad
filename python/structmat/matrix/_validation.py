"""Structural checks run by constructors called with ``check=True``."""

import logging

import numpy as np

LOG = logging.getLogger(__name__)


def _fail(msg):
    LOG.debug("validation failed: %s", msg)
    raise ValueError(msg)


def check_symmetric_rows(rows):
    for i, row in enumerate(rows):
        if row.size < i + 1:
            _fail(f"row {i} must hold at least {i + 1} entries, got {row.size}")


def check_dense_rows(rows):
    if not rows:
        return
    ncols = rows[0].size
    for i, row in enumerate(rows):
        if row.size != ncols:
            _fail(f"row {i} has length {row.size}, expected {ncols}")


def check_csc(nrows, ncols, indptr, indices, data):
    if indptr.size != ncols + 1:
        _fail("indptr length must equal ncols + 1")
    if indptr[0] != 0:
        _fail("indptr[0] must be 0")
    if np.any(np.diff(indptr) < 0):
        _fail("indptr must be non-decreasing")
    if indptr[-1] != indices.size:
        _fail("indptr[-1] must equal the number of stored entries")
    if indices.size != data.size:
        _fail("indices and data must have the same length")
    if indices.size and (indices.min() < 0 or indices.max() >= nrows):
        _fail("row index out of bounds")
    for j in range(ncols):
        col = indices[indptr[j] : indptr[j + 1]]
        if np.unique(col).size != col.size:
            _fail(f"duplicate row index in column {j}")
