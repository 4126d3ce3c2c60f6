import pytest
import torch

import mbpair
from mbpair._constants import BODY_A, BODY_B, SiteRole, VariableKind
from mbpair._models import BodyDef, PrimitiveDef, SiteKey, VSiteWeights, _cast

_WEIGHTS = VSiteWeights(-9.721486914088159e-02, 9.859272078406150e-02)


def _ion_ion_model(**kwargs) -> mbpair.TensorPairModel:
    variables = [
        PrimitiveDef(
            VariableKind.EXP,
            SiteKey(BODY_A, SiteRole.ANCHOR),
            SiteKey(BODY_B, SiteRole.ANCHOR),
            0.5,
            5.0,
        )
    ]

    default_kwargs = {
        "name": "x-y",
        "body_a": BodyDef("x", 1),
        "body_b": BodyDef("y", 1),
        "variables": variables,
        "coefficients": torch.tensor([1.0, 2.0], dtype=torch.float64),
        "polynomial_fn": mbpair.MonomialPolynomial.power_series(2),
        "r_inner": 7.0,
        "r_outer": 8.0,
    }
    return mbpair.TensorPairModel(**{**default_kwargs, **kwargs})


@pytest.mark.parametrize(
    "tensor, precision, expected_device, expected_dtype",
    [
        (torch.zeros(2, dtype=torch.float32), "single", "cpu", torch.float32),
        (torch.zeros(2, dtype=torch.float64), "single", "cpu", torch.float32),
        (torch.zeros(2, dtype=torch.float32), "double", "cpu", torch.float64),
        (torch.zeros(2, dtype=torch.float64), "double", "cpu", torch.float64),
        (torch.zeros(2, dtype=torch.int32), "single", "cpu", torch.int32),
        (torch.zeros(2, dtype=torch.int64), "single", "cpu", torch.int32),
        (torch.zeros(2, dtype=torch.int32), "double", "cpu", torch.int64),
        (torch.zeros(2, dtype=torch.int64), "double", "cpu", torch.int64),
    ],
)
def test_cast(tensor, precision, expected_device, expected_dtype):
    output = _cast(tensor, precision=precision)

    assert output.shape == tensor.shape
    assert output.device.type == expected_device
    assert output.dtype == expected_dtype


class TestBodyDef:
    def test_roles(self):
        assert BodyDef("na", 1).roles == (SiteRole.ANCHOR,)
        assert BodyDef("h2o", 3).roles == (
            SiteRole.ANCHOR,
            SiteRole.PERIPHERAL_1,
            SiteRole.PERIPHERAL_2,
        )
        assert BodyDef("h2o", 3, _WEIGHTS).roles == (
            SiteRole.ANCHOR,
            SiteRole.PERIPHERAL_1,
            SiteRole.PERIPHERAL_2,
            SiteRole.VIRTUAL_1,
            SiteRole.VIRTUAL_2,
        )

    def test_n_v_sites(self):
        assert BodyDef("na", 1).n_v_sites == 0
        assert BodyDef("h2o", 3, _WEIGHTS).n_v_sites == 2

    @pytest.mark.parametrize(
        "n_atoms, v_sites, expected_raises",
        [
            (2, None, "a body must contain 1 or 3 atoms"),
            (1, _WEIGHTS, "virtual sites can only be attached to 3 atom bodies"),
        ],
    )
    def test_invalid(self, n_atoms, v_sites, expected_raises):
        with pytest.raises(ValueError, match=expected_raises):
            BodyDef("x", n_atoms, v_sites)


class TestTensorPairModel:
    def test_site_index_water_water(self, water_water_model):
        expected_idxs = {
            SiteKey(BODY_A, SiteRole.ANCHOR): 0,
            SiteKey(BODY_A, SiteRole.PERIPHERAL_1): 1,
            SiteKey(BODY_A, SiteRole.PERIPHERAL_2): 2,
            SiteKey(BODY_B, SiteRole.ANCHOR): 3,
            SiteKey(BODY_B, SiteRole.PERIPHERAL_1): 4,
            SiteKey(BODY_B, SiteRole.PERIPHERAL_2): 5,
            SiteKey(BODY_A, SiteRole.VIRTUAL_1): 6,
            SiteKey(BODY_A, SiteRole.VIRTUAL_2): 7,
            SiteKey(BODY_B, SiteRole.VIRTUAL_1): 8,
            SiteKey(BODY_B, SiteRole.VIRTUAL_2): 9,
        }
        idxs = {key: water_water_model.site_index(key) for key in expected_idxs}

        assert idxs == expected_idxs
        assert water_water_model.n_real_sites == 6
        assert water_water_model.n_sites == 10

    def test_site_index_water_ion(self, water_ion_model):
        assert water_ion_model.site_index(SiteKey(BODY_B, SiteRole.ANCHOR)) == 3
        assert water_ion_model.site_idxs(
            BODY_A, (SiteRole.VIRTUAL_1, SiteRole.VIRTUAL_2)
        ) == [4, 5]

        assert water_ion_model.n_real_sites == 4
        assert water_ion_model.n_sites == 6

    def test_site_index_missing(self, water_ion_model):
        with pytest.raises(ValueError, match="body b \\(na\\) has no virtual_1 site"):
            water_ion_model.site_index(SiteKey(BODY_B, SiteRole.VIRTUAL_1))

    def test_body_unknown(self, ion_ion_model):
        with pytest.raises(ValueError, match="unknown body c"):
            ion_ion_model.body("c")

    def test_variable_tensors(self, water_ion_model):
        assert water_ion_model.variable_idxs.shape == (8, 2)
        assert water_ion_model.variable_idxs[0].tolist() == [1, 2]
        assert water_ion_model.variable_idxs[5].tolist() == [3, 0]
        assert water_ion_model.variable_idxs[7].tolist() == [3, 5]

        assert water_ion_model.variable_params.shape == (8, 2)
        assert water_ion_model.variable_params.dtype == torch.float64

        expected_is_coul = [False, False, False, True, True, True, False, False]
        assert water_ion_model.variable_is_coul.tolist() == expected_is_coul

    @pytest.mark.parametrize(
        "kwargs, expected_raises",
        [
            ({"r_inner": 8.0}, "the switching radii must satisfy"),
            ({"r_inner": -1.0}, "the switching radii must satisfy"),
            (
                {"coefficients": torch.tensor([1.0])},
                "the polynomial expects 2 coefficients but 1 were provided",
            ),
            (
                {"polynomial_fn": mbpair.MonomialPolynomial.full(2, 1)},
                "the polynomial expects 2 variables but the model defines 1",
            ),
        ],
    )
    def test_invalid(self, kwargs, expected_raises):
        with pytest.raises(ValueError, match=expected_raises):
            _ion_ion_model(**kwargs)

    def test_invalid_self_pair(self):
        site = SiteKey(BODY_A, SiteRole.ANCHOR)
        variable = PrimitiveDef(VariableKind.EXP, site, site, 0.5, 5.0)

        with pytest.raises(ValueError, match="couples a site with itself"):
            _ion_ion_model(variables=[variable])

    def test_invalid_site(self):
        variable = PrimitiveDef(
            VariableKind.EXP,
            SiteKey(BODY_A, SiteRole.ANCHOR),
            SiteKey(BODY_B, SiteRole.PERIPHERAL_1),
            0.5,
            5.0,
        )

        with pytest.raises(ValueError, match="has no peripheral_1 site"):
            _ion_ion_model(variables=[variable])

    def test_to(self):
        model = _ion_ion_model()
        model_single = model.to(precision="single")

        assert model_single.coefficients.dtype == torch.float32
        assert model.coefficients.dtype == torch.float64

        assert model_single.variables == model.variables
        assert model_single.r_outer == model.r_outer
