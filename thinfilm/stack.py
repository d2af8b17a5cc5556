from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .core import UNPOLARIZED, SimulationRequest, SimulationResult, simulate
from .layer import Layer


@dataclass
class ThinFilmStack:
    """Multilayer thin-film stack between two semi-infinite media.

    The stack owns the structure (incident/exit media and layers) and
    evaluates it with :func:`thinfilm.core.simulate`, one wavelength and one
    angle of incidence per call.

    Units and conventions:
    - Wavelength and thickness in microns (µm); helpers accept nm.
    - AOI in radians; helpers accept degrees.
    - Layers are ordered from the incident side to the exit side.
    - Complex indices are n - i*k with k <= 0.

    Parameters
    ----------
    incident_index : complex
        Index of the incident medium (e.g., air).
    exit_index : complex
        Index of the exit medium (e.g., glass).
    layers : list[Layer], optional
        Ordered layers between incident and exit media, default empty.
    reference_wl : float | None, optional
        Reference wavelength in µm for quarter-wave thicknesses.
    reference_aoi_deg : float | None, optional
        Reference angle of incidence in degrees for quarter-wave thicknesses,
        by default 0 degrees (normal incidence).

    Examples
    --------
    >>> from thinfilm import ThinFilmStack
    >>> tf = ThinFilmStack(incident_index=1.0, exit_index=1.52, reference_wl=0.55)
    >>> tf.add_layer_qwot(1.38, name="MgF2")
    ThinFilmStack(1 layers: MgF2)
    >>> R = tf.reflectance(0.55)
    """

    incident_index: complex
    exit_index: complex
    layers: list[Layer] = field(default_factory=list)
    reference_wl: float | None = None
    reference_aoi_deg: float | None = 0

    # ----- structure helpers -----
    def add_layer(
        self, index: complex, thickness: float, name: str | None = None
    ) -> ThinFilmStack:
        """Append a layer to the exit side of the stack.

        Args:
            index: complex refractive index n - i*k.
            thickness: thickness in microns (µm).
            name: optional label.

        Returns:
            self for chaining.
        """
        self.layers.append(Layer(thickness, complex(index), name))
        return self

    def add_layer_nm(
        self, index: complex, thickness_nm: float, name: str | None = None
    ) -> ThinFilmStack:
        """Append a layer, thickness in nm."""
        return self.add_layer(index, thickness_nm / 1000.0, name)

    def add_layer_qwot(
        self, index: complex, qwot_thickness: float = 1.0, name: str | None = None
    ) -> ThinFilmStack:
        """Append a layer of ``qwot_thickness`` quarter-wave optical thicknesses
        at the reference wavelength and angle of incidence.

        Raises:
            ValueError: If reference_wl is not set.
        """
        if self.reference_wl is None:
            raise ValueError("reference_wl must be set for adding QWOT layer")
        th_rad = 0.0
        if self.reference_aoi_deg is not None:
            th_rad = np.deg2rad(self.reference_aoi_deg)
        n = complex(index).real
        thickness = qwot_thickness * self.reference_wl / (4 * n * np.cos(th_rad))
        return self.add_layer(index, float(thickness), name)

    def reversed(self) -> ThinFilmStack:
        """Same coating seen from the exit side: media swapped, layers reversed."""
        return ThinFilmStack(
            incident_index=self.exit_index,
            exit_index=self.incident_index,
            layers=list(reversed(self.layers)),
            reference_wl=self.reference_wl,
            reference_aoi_deg=self.reference_aoi_deg,
        )

    @staticmethod
    def incident_cos_theta(aoi_rad: float) -> complex:
        return complex(np.cos(aoi_rad))

    # ----- evaluation -----
    def simulate(
        self,
        wavelength: float,
        aoi_rad: float = 0.0,
        polarization: float = UNPOLARIZED,
        request: SimulationRequest | None = None,
        *,
        stacklevel: int = 3,
    ) -> SimulationResult:
        """Evaluate the stack at one wavelength (µm) and one AOI (radians).

        Args:
            wavelength: wavelength in microns.
            aoi_rad: angle of incidence in radians, default 0.
            polarization: polarization angle in radians (0 is P, π/2 is S),
                default unpolarized.
            request: outputs to compute, default reflectance, transmittance
                and absorptance.
            stacklevel: frames between the caller and ``warnings.warn``.
        """
        if request is None:
            request = SimulationRequest.rta()
        return simulate(
            self.incident_cos_theta(aoi_rad),
            wavelength,
            polarization,
            self.incident_index,
            self.exit_index,
            self.layers,
            request,
            stacklevel=stacklevel,
        )

    def simulate_nm_deg(
        self,
        wavelength_nm: float,
        aoi_deg: float = 0.0,
        polarization: float = UNPOLARIZED,
        request: SimulationRequest | None = None,
    ) -> SimulationResult:
        """Same as simulate() but inputs in nm and degrees."""
        return self.simulate(
            wavelength_nm / 1000.0,
            np.deg2rad(aoi_deg),
            polarization,
            request,
            stacklevel=4,
        )

    # ----- convenience getters -----
    def reflectance(
        self, wavelength: float, aoi_rad: float = 0.0, polarization=UNPOLARIZED
    ) -> float:
        return self.simulate(
            wavelength, aoi_rad, polarization, SimulationRequest()
        ).reflectance

    def transmittance(
        self, wavelength: float, aoi_rad: float = 0.0, polarization=UNPOLARIZED
    ) -> float:
        request = SimulationRequest(reflectance=True, transmittance=True)
        result = self.simulate(
            wavelength, aoi_rad, polarization, request, stacklevel=4
        )
        return result.transmittance

    def absorptance(
        self, wavelength: float, aoi_rad: float = 0.0, polarization=UNPOLARIZED
    ) -> float:
        return self.simulate(
            wavelength, aoi_rad, polarization, stacklevel=4
        ).absorptance

    def psi_delta(self, wavelength: float, aoi_rad: float = 0.0) -> tuple[float, float]:
        """Return (psi, delta) in radians."""
        result = self.simulate(
            wavelength, aoi_rad, request=SimulationRequest.psi_delta()
        )
        return result.psi, result.delta

    def __len__(self):
        return len(self.layers)

    def __repr__(self):
        parts = [layer.name or f"Layer({i})" for i, layer in enumerate(self.layers)]
        return f"ThinFilmStack({len(self.layers)} layers: " + " -> ".join(parts) + ")"
