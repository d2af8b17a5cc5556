"""Thin-film multilayer calculations (Transfer Matrix Method).

Public API:
- ``Layer``: one thin-film layer (thickness + complex index n - i*k)
- ``TransferMatrix``: 2x2 complex characteristic matrix
- ``simulate``: R, T, A, psi and delta of a stack for one condition
- ``ThinFilmStack``: stack structure with unit helpers
- ``asin``, ``acos``: complex inverse trigonometry

Units: wavelength and thickness in the same unit (µm for ``ThinFilmStack``),
angles in radians (deg helpers).
"""

from __future__ import annotations

from .conf import config
from .core import (
    P_POLARIZATION,
    S_POLARIZATION,
    UNPOLARIZED,
    AbsorbingIncidentMediumWarning,
    SimulationRequest,
    SimulationResult,
    simulate,
)
from .layer import Layer
from .matrix import TransferMatrix
from .numerics import ONE_I, acos, asin
from .stack import ThinFilmStack

__all__ = [
    "config",
    "Layer",
    "TransferMatrix",
    "ThinFilmStack",
    "SimulationRequest",
    "SimulationResult",
    "AbsorbingIncidentMediumWarning",
    "simulate",
    "asin",
    "acos",
    "ONE_I",
    "P_POLARIZATION",
    "S_POLARIZATION",
    "UNPOLARIZED",
]
