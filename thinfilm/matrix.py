"""2x2 complex characteristic matrix.

A ``TransferMatrix`` holds the characteristic matrix of one layer or of an
accumulated sub-stack::

    ( m11   m12 )
    (           )
    ( m21   m22 )

Matrices are immutable values; every product returns a new matrix.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce

import numpy as np


@dataclass(frozen=True)
class TransferMatrix:
    """Characteristic (Abelès) matrix of a layer or sub-stack.

    Parameters
    ----------
    m11, m12, m21, m22 : complex
        Matrix elements, row-major.

    Examples
    --------
    >>> from thinfilm.matrix import TransferMatrix
    >>> a = TransferMatrix(1, 2j, 3j, 4)
    >>> a @ TransferMatrix.identity() == a
    True
    """

    m11: complex
    m12: complex
    m21: complex
    m22: complex

    @classmethod
    def identity(cls) -> TransferMatrix:
        """diag(1, 1), the product of an empty stack."""
        return cls(1.0 + 0j, 0j, 0j, 1.0 + 0j)

    @classmethod
    def product(cls, matrices: Iterable[TransferMatrix]) -> TransferMatrix:
        """Ordered product M1 @ M2 @ ... of ``matrices``."""
        return reduce(cls.__matmul__, matrices, cls.identity())

    def __matmul__(self, other: TransferMatrix) -> TransferMatrix:
        if not isinstance(other, TransferMatrix):
            return NotImplemented
        return TransferMatrix(
            self.m11 * other.m11 + self.m12 * other.m21,
            self.m11 * other.m12 + self.m12 * other.m22,
            self.m21 * other.m11 + self.m22 * other.m21,
            self.m21 * other.m12 + self.m22 * other.m22,
        )

    __mul__ = __matmul__

    def determinant(self) -> complex:
        return self.m11 * self.m22 - self.m12 * self.m21

    def to_array(self) -> np.ndarray:
        """Return the matrix as a complex (2, 2) ndarray."""
        return np.asarray([[self.m11, self.m12], [self.m21, self.m22]], dtype=complex)

    @classmethod
    def from_array(cls, a) -> TransferMatrix:
        a = np.asarray(a)
        if a.shape != (2, 2):
            raise ValueError(f"expected a (2, 2) array, got shape {a.shape}")
        return cls(a[0, 0], a[0, 1], a[1, 0], a[1, 1])
