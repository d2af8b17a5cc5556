from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Layer:
    """Represents a thin-film layer.

    Parameters
    ----------
    thickness : float
        Physical thickness, in the same unit as the wavelength.
    refractive_index : complex
        Complex index n - i*k. The extinction coefficient is stored as the
        (negative or null) imaginary part, e.g. ``1.5 - 0.001j``.
    name : str | None
        Optional label for display.

    Examples
    --------
    >>> from thinfilm import Layer
    >>> layer = Layer(0.1, 1.46 + 0j, name="SiO2 100 nm")
    """

    thickness: float
    refractive_index: complex
    name: str | None = None

    @classmethod
    def from_nk(
        cls, thickness: float, n: float, k: float = 0.0, name: str | None = None
    ) -> Layer:
        """Build a layer from real n and k; k is used as given (k <= 0)."""
        return cls(thickness, complex(n, k), name)

    @property
    def extinction(self) -> float:
        return complex(self.refractive_index).imag
