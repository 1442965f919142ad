from .base import Matrix, MatrixKind
from .dense import DenseMatrix
from .diagonal import DiagonalMatrix
from .sparse import SparseMatrix
from .symmetric import SymmetricMatrix

__all__ = [
    "Matrix",
    "MatrixKind",
    "DiagonalMatrix",
    "SymmetricMatrix",
    "DenseMatrix",
    "SparseMatrix",
]
