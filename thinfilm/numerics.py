"""Complex inverse trigonometric functions.

Both functions use the logarithmic closed forms

    asin(z) = -i ln(i z + sqrt(1 - z^2))
    acos(z) = -i ln(z + sqrt(z^2 - 1))

evaluated with numpy's complex ``sqrt`` and ``log``. Those take their
principal branch, with the cut along the negative real axis and the sign of a
signed zero imaginary part selecting the side of the cut.

In acos the root sqrt(z^2 - 1) is taken as i sqrt(1 - z^2). Both square to
z^2 - 1; the second makes acos the principal value, so that
asin(z) + acos(z) = pi/2. Taking sqrt(z^2 - 1) directly follows the signed
zero of z*z and gives -acos(x) for real x < 0.

On the cuts (real arguments outside [-1, 1]) both functions land on the side
selected by the signed zeros of the intermediate terms. Nothing is
special-cased. A zero argument to ``log`` gives ``-inf`` rather than an
exception.
"""

from __future__ import annotations

import numpy as np

from .conf import config

ONE_I = 1j


def _as_complex(z):
    return np.asarray(z, dtype=config.precision_complex)


def asin(z):
    """Inverse sine of a complex number (or array of complex numbers).

    Args:
        z: complex scalar or array-like.

    Returns:
        complex scalar for a scalar input, complex ndarray otherwise.
    """
    z = _as_complex(z)
    with config.errstate():
        out = -ONE_I * np.log(ONE_I * z + np.sqrt(1.0 - z * z))
    return out[()]


def acos(z):
    """Inverse cosine of a complex number (or array of complex numbers).

    Args:
        z: complex scalar or array-like.

    Returns:
        complex scalar for a scalar input, complex ndarray otherwise.
    """
    z = _as_complex(z)
    with config.errstate():
        out = -ONE_I * np.log(z + ONE_I * np.sqrt(1.0 - z * z))
    return out[()]
