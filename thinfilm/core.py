"""Thin film optics core functions.

This provides the transfer matrix method (TMM) used to compute the optical
response of a planar multilayer coating for one wavelength, one angle of
incidence and one polarization state.

Layers are traversed from the incident side to the exit side and the
characteristic matrices are right-multiplied in that order. Complex indices
follow the n - i*k convention (k <= 0).

Ref :
- F. Abelès, Researches sur la propagation des ondes électromagnétiques
    sinusoïdales dans les milieus stratifies.
    Applications aux couches minces, Ann. Phys. Paris,
    12ième Series 5 (1950): 596–640.
- Chap 2. Thin-Film Optical Filters, Fifth Edition, Macleod, Hugh Angus CRC Press
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Literal

import numpy as np

from .conf import config
from .layer import Layer
from .matrix import TransferMatrix
from .numerics import ONE_I

PolSP = Literal["s", "p"]

# polarization angles, in radians
P_POLARIZATION = 0.0
S_POLARIZATION = np.pi / 2
UNPOLARIZED = np.pi / 4


class AbsorbingIncidentMediumWarning(UserWarning):
    """Transmittance requested while the incident medium absorbs."""


@dataclass(frozen=True)
class SimulationRequest:
    """Outputs wanted from :func:`simulate`.

    Transmittance needs reflectance, and absorptance needs transmittance.
    ``ellipsometry`` requests psi and delta together and does not depend on
    the other three.

    Raises:
        ValueError: if the dependency order is not respected.
    """

    reflectance: bool = True
    transmittance: bool = False
    absorptance: bool = False
    ellipsometry: bool = False

    def __post_init__(self):
        if self.transmittance and not self.reflectance:
            raise ValueError("transmittance can only be requested with reflectance")
        if self.absorptance and not self.transmittance:
            raise ValueError("absorptance can only be requested with transmittance")

    @classmethod
    def rta(cls) -> SimulationRequest:
        return cls(reflectance=True, transmittance=True, absorptance=True)

    @classmethod
    def psi_delta(cls) -> SimulationRequest:
        return cls(reflectance=False, ellipsometry=True)

    @classmethod
    def everything(cls) -> SimulationRequest:
        return cls(True, True, True, True)


@dataclass(frozen=True)
class SimulationResult:
    """Outputs of :func:`simulate`. Quantities not requested are None."""

    reflectance: float | None = None
    transmittance: float | None = None
    absorptance: float | None = None
    psi: float | None = None
    delta: float | None = None

    def as_dict(self) -> dict[str, float]:
        """Computed quantities keyed 'R', 'T', 'A', 'psi', 'delta'."""
        items = {
            "R": self.reflectance,
            "T": self.transmittance,
            "A": self.absorptance,
            "psi": self.psi,
            "delta": self.delta,
        }
        return {key: value for key, value in items.items() if value is not None}


def snell_cos(cos_incident: complex, n_incident: complex, n: complex) -> complex:
    """Cosine of the propagation angle in a medium of index ``n``.

    From n0 sin(θ0) = n1 sin(θ1), solved for the cosine:
    c1 = sqrt(1 - (1 - c0²) (n0 / n1)²), principal branch of the complex sqrt.
    """
    ratio = n_incident / n
    return np.sqrt(1.0 - (1.0 - cos_incident * cos_incident) * ratio * ratio)


def admittance(n: complex, cos_theta: complex, pol: PolSP) -> complex:
    """Tilted admittance, n / cos(θ) for p and n * cos(θ) for s polarization."""
    if pol == "s":
        return n * cos_theta
    elif pol == "p":
        return n / cos_theta
    else:
        raise ValueError("Invalid polarization state")


def layer_matrix(
    layer: Layer,
    wavelength: float,
    cos_incident: complex,
    n_incident: complex,
    pol: PolSP,
) -> TransferMatrix:
    """Characteristic matrix of a single layer.

    Args:
        layer: the layer; thickness in the same unit as ``wavelength``.
        wavelength: wavelength of light.
        cos_incident: cosine of the angle of incidence in the incident medium.
        n_incident: complex index of the incident medium.
        pol: 's' or 'p'.

    Returns:
        TransferMatrix with m11 = m22 = cos(δ), m12 = i sin(δ) / η and
        m21 = i sin(δ) η, where δ = -2π n d cos(θ) / λ.
    """
    dtype = config.precision_complex
    n_layer = dtype(layer.refractive_index)
    cos_layer = snell_cos(dtype(cos_incident), dtype(n_incident), n_layer)
    eta = admittance(n_layer, cos_layer, pol)
    delta = -2.0 * np.pi * n_layer * layer.thickness * cos_layer / wavelength

    c = np.cos(delta)
    s = np.sin(delta) * ONE_I
    return TransferMatrix(c, s / eta, s * eta, c)


def stack_matrix(
    layers: Sequence[Layer],
    wavelength: float,
    cos_incident: complex,
    n_incident: complex,
    pol: PolSP,
) -> TransferMatrix:
    """Product of the layer matrices, incident side first."""
    return TransferMatrix.product(
        layer_matrix(layer, wavelength, cos_incident, n_incident, pol)
        for layer in layers
    )


def _coefficients(product: TransferMatrix, eta_incident, eta_exit):
    b = product.m11 + product.m12 * eta_exit
    c = product.m21 + product.m22 * eta_exit
    denom = b + c / eta_incident
    r = (b - c / eta_incident) / denom
    t = 2.0 / denom
    return r, t


def simulate(
    incident_cos_theta: complex,
    wavelength: float,
    polarization: float,
    n_incident: complex,
    n_exit: complex,
    layers: Iterable[Layer],
    request: SimulationRequest | None = None,
    *,
    stacklevel: int = 2,
) -> SimulationResult:
    """Simulate a multilayer coating at one wavelength and angle.

    Args:
        incident_cos_theta: cosine of the incidence angle, complex to allow an
            absorbing incident medium.
        wavelength: wavelength of light, same unit as the layer thicknesses.
        polarization: angle of polarization in radians; 0 means P and π/2
            means S, values in between weight P by cos² and S by sin².
        n_incident: complex index of the incident medium, k <= 0.
        n_exit: complex index of the exit medium, k <= 0.
        layers: layers ordered from the incident side to the exit side.
        request: outputs to compute, by default reflectance only.
        stacklevel: forwarded to ``warnings.warn``; wrappers raise it by one
            per frame so the warning points at their caller.

    Returns:
        SimulationResult holding the requested quantities.

    Note:
        No input is validated. Degenerate conditions, such as grazing
        incidence, propagate as inf or NaN. The transmittance is only known to
        be correct for a non-absorbing incident medium; when
        ``n_incident.imag != 0`` an ``AbsorbingIncidentMediumWarning`` is
        emitted and the value is returned anyway.
    """
    if request is None:
        request = SimulationRequest()

    dtype = config.precision_complex
    cos0 = dtype(incident_cos_theta)
    n0 = dtype(n_incident)
    ns = dtype(n_exit)

    with config.errstate():
        coss = snell_cos(cos0, n0, ns)

        # single pass over the layers, one running product per basis
        product = {"p": TransferMatrix.identity(), "s": TransferMatrix.identity()}
        for layer in layers:
            for pol in ("p", "s"):
                product[pol] = product[pol] @ layer_matrix(
                    layer, wavelength, cos0, n0, pol
                )

        r = {}
        t = {}
        for pol in ("p", "s"):
            eta0 = admittance(n0, cos0, pol)
            etas = admittance(ns, coss, pol)
            r[pol], t[pol] = _coefficients(product[pol], eta0, etas)
        t["p"] = t["p"] * cos0 / coss

        weight_p = np.cos(polarization) ** 2
        weight_s = np.sin(polarization) ** 2

        reflectance = transmittance = absorptance = psi = delta = None
        if request.reflectance:
            reflectance = float(
                weight_p * np.abs(r["p"]) ** 2 + weight_s * np.abs(r["s"]) ** 2
            )

            if request.transmittance:
                if np.imag(n0) != 0.0:
                    warnings.warn(
                        "the transmittance may be inaccurate, the incident medium "
                        f"is absorbing (n = {complex(n0)})",
                        AbsorbingIncidentMediumWarning,
                        stacklevel=stacklevel,
                    )
                transmittance = float(
                    weight_p * np.abs(t["p"]) ** 2 + weight_s * np.abs(t["s"]) ** 2
                )

                if request.absorptance:
                    absorptance = 1.0 - reflectance - transmittance

        if request.ellipsometry:
            psi = float(np.arctan2(np.abs(r["p"]), np.abs(r["s"])))
            delta = float(np.angle(r["p"]) - np.angle(r["s"]))

    return SimulationResult(reflectance, transmittance, absorptance, psi, delta)
