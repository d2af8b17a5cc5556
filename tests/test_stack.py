import numpy as np
import pytest

from thinfilm import (
    P_POLARIZATION,
    S_POLARIZATION,
    UNPOLARIZED,
    AbsorbingIncidentMediumWarning,
    Layer,
    SimulationRequest,
    ThinFilmStack,
    simulate,
)
from .utils import assert_allclose

n_MgF2 = 1.38
n_SiO2 = 1.46
n_TiO2 = 2.35


@pytest.fixture
def simple_stack():
    """Stack with no layers (air-glass interface)."""
    return ThinFilmStack(incident_index=1.0, exit_index=1.52)


@pytest.fixture
def single_layer_stack():
    stack = ThinFilmStack(incident_index=1.0, exit_index=1.52)
    stack.add_layer_nm(n_SiO2, 100.0, name="SiO2")
    return stack


@pytest.fixture
def multilayer_stack():
    stack = ThinFilmStack(incident_index=1.0, exit_index=1.52, reference_wl=0.6)
    for i in range(3):
        stack.add_layer_qwot(n_TiO2, 1.0, name=f"TiO2_{i}")
        stack.add_layer_qwot(n_SiO2, 1.0, name=f"SiO2_{i}")
    return stack


class TestThinFilmStackBasic:
    def test_stack_creation(self, simple_stack):
        assert simple_stack.incident_index == 1.0
        assert simple_stack.exit_index == 1.52
        assert len(simple_stack.layers) == 0
        assert len(simple_stack) == 0

    def test_stack_with_reference(self):
        stack = ThinFilmStack(1.0, 1.52, reference_wl=0.55, reference_aoi_deg=30.0)
        assert stack.reference_wl == 0.55
        assert stack.reference_aoi_deg == 30.0

    def test_stack_repr(self, single_layer_stack):
        repr_str = repr(single_layer_stack)
        assert repr_str == "ThinFilmStack(1 layers: SiO2)"

    def test_repr_unnamed_layers(self):
        stack = ThinFilmStack(1.0, 1.52).add_layer(1.46, 0.1).add_layer(2.0, 0.1)
        assert repr(stack) == "ThinFilmStack(2 layers: Layer(0) -> Layer(1))"


class TestThinFilmStackLayerManipulation:
    def test_add_layer(self, simple_stack):
        simple_stack.add_layer(n_SiO2, 0.1, "SiO2")
        assert len(simple_stack) == 1
        assert simple_stack.layers[0] == Layer(0.1, complex(n_SiO2), "SiO2")

    def test_add_layer_nm(self, simple_stack):
        simple_stack.add_layer_nm(n_SiO2, 100.0, "SiO2")
        assert simple_stack.layers[0].thickness == pytest.approx(0.1)

    def test_add_layer_qwot(self):
        stack = ThinFilmStack(1.0, 1.52, reference_wl=0.55)
        stack.add_layer_qwot(n_SiO2, 1.0, "SiO2_QWOT")
        assert_allclose(stack.layers[0].thickness, 0.55 / (4 * n_SiO2), rtol=1e-12)

    def test_add_layer_qwot_oblique(self):
        stack = ThinFilmStack(1.0, 1.52, reference_wl=0.55, reference_aoi_deg=60.0)
        stack.add_layer_qwot(n_SiO2, 2.0)
        expected = 2.0 * 0.55 / (4 * n_SiO2 * 0.5)
        assert_allclose(stack.layers[0].thickness, expected, rtol=1e-12)

    def test_add_layer_qwot_no_reference_fails(self, simple_stack):
        with pytest.raises(ValueError, match="reference_wl must be set"):
            simple_stack.add_layer_qwot(n_SiO2, 1.0, "SiO2_QWOT")

    def test_chaining_add_layer(self, simple_stack):
        result = simple_stack.add_layer(n_SiO2, 0.1).add_layer(n_TiO2, 0.05)
        assert result is simple_stack
        assert len(simple_stack) == 2

    def test_reversed(self, multilayer_stack):
        back = multilayer_stack.reversed()
        assert back.incident_index == multilayer_stack.exit_index
        assert back.exit_index == multilayer_stack.incident_index
        assert back.layers == multilayer_stack.layers[::-1]
        assert back.layers[0].name == "SiO2_2"


class TestThinFilmStackCalculations:
    def test_simple_interface_normal_incidence(self, simple_stack):
        result = simple_stack.simulate(0.55)
        r = (1.0 - 1.52) / (1.0 + 1.52)
        assert result.reflectance == pytest.approx(r**2, rel=1e-12)
        total = result.reflectance + result.transmittance + result.absorptance
        assert total == pytest.approx(1.0, rel=1e-12)

    def test_matches_simulate(self, multilayer_stack):
        aoi = np.deg2rad(25)
        result = multilayer_stack.simulate(0.6, aoi, S_POLARIZATION)
        expected = simulate(
            np.cos(aoi),
            0.6,
            S_POLARIZATION,
            1.0,
            1.52,
            multilayer_stack.layers,
            SimulationRequest.rta(),
        )
        assert result == expected

    def test_nm_deg_interface(self, multilayer_stack):
        result_um_rad = multilayer_stack.simulate(0.55, np.deg2rad(30.0), 0.0)
        result_nm_deg = multilayer_stack.simulate_nm_deg(550.0, 30.0, 0.0)
        for key in ["R", "T", "A"]:
            assert_allclose(
                result_um_rad.as_dict()[key], result_nm_deg.as_dict()[key], rtol=1e-10
            )

    def test_convenience_methods(self, single_layer_stack):
        result = single_layer_stack.simulate(0.55, 0.2, P_POLARIZATION)
        R = single_layer_stack.reflectance(0.55, 0.2, P_POLARIZATION)
        T = single_layer_stack.transmittance(0.55, 0.2, P_POLARIZATION)
        A = single_layer_stack.absorptance(0.55, 0.2, P_POLARIZATION)
        assert R == result.reflectance
        assert T == result.transmittance
        assert A == result.absorptance

    def test_quarter_wave_mirror_is_reflective(self, multilayer_stack):
        R = multilayer_stack.reflectance(0.6)
        assert R > 0.8

    def test_polarization_modes(self, multilayer_stack):
        aoi = np.deg2rad(45)
        R_s = multilayer_stack.reflectance(0.6, aoi, S_POLARIZATION)
        R_p = multilayer_stack.reflectance(0.6, aoi, P_POLARIZATION)
        R_u = multilayer_stack.reflectance(0.6, aoi, UNPOLARIZED)
        assert not np.isclose(R_s, R_p)
        assert R_u == pytest.approx(0.5 * (R_s + R_p), rel=1e-12)

    def test_reciprocity(self, multilayer_stack):
        R_forward = multilayer_stack.reflectance(0.58)
        R_backward = multilayer_stack.reversed().reflectance(0.58)
        assert R_forward == pytest.approx(R_backward, rel=1e-9)

    def test_psi_delta(self, single_layer_stack):
        psi, delta = single_layer_stack.psi_delta(0.55)
        assert psi == pytest.approx(np.pi / 4)
        assert delta == pytest.approx(0.0, abs=1e-12)

    def test_absorbing_incident_warning_points_at_caller(self):
        stack = ThinFilmStack(incident_index=1.5 - 0.01j, exit_index=1.52)
        stack.add_layer(n_SiO2, 0.1)
        with pytest.warns(AbsorbingIncidentMediumWarning) as record:
            stack.simulate(0.55)
            stack.simulate_nm_deg(550.0)
            stack.transmittance(0.55)
            stack.absorptance(0.55)
        assert len(record) == 4
        assert all(w.filename == __file__ for w in record)

    def test_physical_constraints(self, multilayer_stack):
        for wl in np.linspace(0.4, 0.8, 5):
            for aoi_deg in np.linspace(0, 80, 5):
                R = multilayer_stack.simulate_nm_deg(wl * 1000, aoi_deg).reflectance
                assert 0.0 <= R <= 1.0
