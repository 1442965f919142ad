import logging

from ._runtime import get_check_default, set_check_default
from .matrix import (
    DenseMatrix,
    DiagonalMatrix,
    Matrix,
    MatrixKind,
    SparseMatrix,
    SymmetricMatrix,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "set_check_default",
    "get_check_default",
    "Matrix",
    "MatrixKind",
    "DiagonalMatrix",
    "SymmetricMatrix",
    "DenseMatrix",
    "SparseMatrix",
]
