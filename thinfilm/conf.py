"""Configuration for this instance of thinfilm.

The numeric precision and the handling of floating point errors are
process-wide. They are read by every simulation and are normally set once, at
import time of the calling application.
"""

from __future__ import annotations

import numpy as np

_DEFAULT_FP_ERRORS = {"divide": "ignore", "invalid": "ignore", "over": "ignore"}


class Config:
    """Global configuration of thinfilm."""

    def __init__(self, precision: int = 64, fp_errors: dict | None = None):
        """Create a new Config object.

        Args:
            precision: 32 or 64, number of bits of precision of the real part.
            fp_errors: keyword arguments forwarded to ``numpy.errstate`` while
                a stack is evaluated. Defaults to ignoring divide, invalid and
                overflow errors, so degenerate inputs yield inf/NaN silently.
        """
        self.precision = precision
        self.fp_errors = dict(_DEFAULT_FP_ERRORS if fp_errors is None else fp_errors)

    @property
    def precision(self) -> int:
        """Number of bits of precision used for real computations."""
        return self._precision

    @precision.setter
    def precision(self, precision: int):
        """Adjust the precision used by thinfilm.

        Args:
            precision: what precision to use; either 32 or 64 bits

        Raises:
            ValueError: if precision is not a valid option
        """
        if precision not in (32, 64):
            raise ValueError("invalid precision. Precision should be 32 or 64.")

        self._precision = precision
        if precision == 32:
            self._precision_complex = np.complex64
        else:
            self._precision_complex = np.complex128

    @property
    def precision_complex(self):
        """numpy.complex64 or numpy.complex128, matching ``precision``."""
        return self._precision_complex

    def errstate(self):
        """Context manager applying ``fp_errors`` to numpy arithmetic."""
        return np.errstate(**self.fp_errors)

    def reset(self):
        """Restore the defaults."""
        self.precision = 64
        self.fp_errors = dict(_DEFAULT_FP_ERRORS)


config = Config()
