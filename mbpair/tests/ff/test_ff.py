import openff.units
import pydantic
import pytest
import torch

import mbpair
import mbpair.ff
import mbpair.tests.utils
from mbpair._constants import VariableKind
from mbpair.ff import (
    PARAMETER_SETS,
    IonIonParameters,
    PairParameters,
    WaterIonParameters,
    WaterWaterParameters,
    build_ion_ion_model,
    build_model,
    build_water_ion_model,
    build_water_water_model,
    model_builder,
)

_ANGSTROM = openff.units.unit.angstrom
_NM = openff.units.unit.nanometer


@pytest.mark.parametrize("name", [*PARAMETER_SETS])
def test_parameter_sets_json_round_trip(name):
    parameters = PARAMETER_SETS[name]

    parameters_json = parameters.model_dump_json()
    assert type(parameters).model_validate_json(parameters_json) == parameters

    adapter = pydantic.TypeAdapter(PairParameters)
    assert adapter.validate_json(parameters_json) == parameters


def test_parameter_sets_ion_ion_coefficients():
    for name in ["cs-cs", "k-br", "li-li"]:
        assert isinstance(PARAMETER_SETS[name], IonIonParameters)
        assert len(PARAMETER_SETS[name].coefficients) == 13


@pytest.mark.parametrize(
    "name, expected_n_coefficients, expected_first, expected_last",
    [
        ("mbpol", 1153, 7.832551386996325e00, -1.637656207819073e00),
        ("h2o-br-pol0", 429, 2.099911490487774e02, 5.210684213014147e00),
        ("h2o-br-pol50", 429, 1.320257448835526e02, 3.153034616815733e-01),
        ("h2o-br-pol100", 429, 1.980059421531693e01, -8.290239835635084e00),
        ("h2o-cs-pol0", 429, -1.105614770018504e02, 6.078832499225732e-02),
        ("h2o-f-pol0", 429, 1.115710584309605e01, 1.862399522998303e-02),
        ("h2o-f-pol50", 429, 1.073521509858902e02, 7.686436219316948e-03),
        ("h2o-i-pol75", 429, 3.328235414306171e01, -1.342403106690647e01),
        ("h2o-na-pol0", 429, 1.114874625194155e01, 7.553232746626447e-01),
        ("h2o-rb-pol100", 429, -2.243283187216157e02, -8.876936623099642e00),
    ],
)
def test_parameter_sets_water_coefficients(
    name, expected_n_coefficients, expected_first, expected_last
):
    coefficients = PARAMETER_SETS[name].coefficients

    assert isinstance(coefficients, tuple)
    assert len(coefficients) == expected_n_coefficients

    assert coefficients[0] == expected_first
    assert coefficients[-1] == expected_last


def test_parameters_quantities():
    parameters = IonIonParameters(
        ion_a="x",
        ion_b="y",
        k=1.0 / _NM,
        d=0.5 * _NM,
        r_inner=7.0 * _ANGSTROM,
        r_outer=0.8 * _NM,
    )

    assert parameters.k == pytest.approx(0.1)
    assert parameters.d == pytest.approx(5.0)
    assert parameters.r_inner == pytest.approx(7.0)
    assert parameters.r_outer == pytest.approx(8.0)


@pytest.mark.parametrize(
    "kwargs, expected_raises",
    [
        ({"r_inner": 8.0, "r_outer": 7.0}, "the switching radii must satisfy"),
        ({"r_inner": 7.0, "r_outer": 8.0, "unknown": 1.0}, "Extra inputs"),
    ],
)
def test_parameters_invalid(kwargs, expected_raises):
    with pytest.raises(pydantic.ValidationError, match=expected_raises):
        IonIonParameters(ion_a="x", ion_b="y", k=0.5, d=5.0, **kwargs)


def test_parameters_frozen():
    with pytest.raises(pydantic.ValidationError):
        PARAMETER_SETS["li-li"].k = 1.0


def test_build_water_water_model():
    polynomial = mbpair.MonomialPolynomial.full(31, 1)
    coefficients = torch.ones(31, dtype=torch.float64)

    model = build_water_water_model(PARAMETER_SETS["mbpol"], polynomial, coefficients)

    assert model.name == "h2o-h2o"
    assert len(model.variables) == 31
    assert model.n_sites == 10

    n_coul = sum(variable.kind == VariableKind.COUL for variable in model.variables)
    assert n_coul == 9

    n_intra = sum(variable.r0 == 1.0 for variable in model.variables)
    assert n_intra == 6

    assert model.body_a.v_sites == (-9.721486914088159e-02, 9.859272078406150e-02)
    assert (model.r_inner, model.r_outer) == (4.5, 6.5)


def test_build_water_ion_model():
    parameters = PARAMETER_SETS["h2o-f-pol0"]
    polynomial = mbpair.MonomialPolynomial.full(8, 1)

    model = build_water_ion_model(parameters, polynomial, torch.ones(8))

    assert model.name == "h2o-f"
    assert model.body_b.name == "f"
    assert model.body_b.v_sites is None
    assert len(model.variables) == 8
    assert model.variables[7].r0 == parameters.d_xlp_main
    assert (model.r_inner, model.r_outer) == (5.0, 6.0)


def test_build_ion_ion_model():
    model = build_ion_ion_model(PARAMETER_SETS["k-br"])

    assert model.name == "k-br"
    assert model.polynomial_fn.n_terms == 13
    assert model.coefficients.shape == (13,)
    assert model.coefficients.dtype == torch.float64


@pytest.mark.parametrize("build_fn", [build_water_water_model, build_water_ion_model])
def test_build_water_model_no_polynomial(build_fn):
    name = "mbpol" if build_fn == build_water_water_model else "h2o-na-pol0"

    with pytest.raises(ValueError, match="a polynomial_fn must be provided"):
        build_fn(PARAMETER_SETS[name])


def test_build_model_no_coefficients():
    parameters = WaterIonParameters(
        **{**PARAMETER_SETS["h2o-na-pol0"].model_dump(), "coefficients": None}
    )
    polynomial = mbpair.MonomialPolynomial.full(8, 1)

    with pytest.raises(ValueError, match="no polynomial coefficients were provided"):
        build_model(parameters, polynomial)


@pytest.mark.parametrize("name", ["mbpol", "h2o-f-pol50"])
def test_build_model_stored_coefficients(name):
    parameters = PARAMETER_SETS[name]

    polynomial = mbpair.autograd_polynomial(
        lambda coefficients, variables: coefficients[0] * variables.sum(dim=-1)
    )
    model = build_model(name, polynomial)

    expected_coefficients = torch.tensor(parameters.coefficients, dtype=torch.float64)
    assert torch.equal(model.coefficients, expected_coefficients)

    coords_a, coords_b = mbpair.tests.utils.pair_coords(model, 3.5)
    energy, _, _ = mbpair.compute_pair_term(model, coords_a, coords_b)

    assert torch.isfinite(energy)
    assert energy.item() != 0.0


def test_build_model_by_name():
    polynomial = mbpair.MonomialPolynomial.full(8, 2)
    coefficients = torch.zeros(polynomial.n_terms)

    model = build_model("h2o-na-pol0", polynomial, coefficients)

    assert model.name == "h2o-na-pol0"
    assert model.body_b.name == "na"


def test_build_model_by_parameters():
    parameters = WaterIonParameters(
        **{**PARAMETER_SETS["h2o-na-pol0"].model_dump(), "ion": "k"}
    )
    model = build_model(parameters, mbpair.MonomialPolynomial.full(8, 1), torch.ones(8))

    assert model.name == "h2o-k"


def test_build_model_overrides_coefficients():
    model = build_model("li-li", coefficients=torch.tensor([1.0, 2.0]))

    assert model.polynomial_fn.n_terms == 2
    assert torch.allclose(
        model.coefficients, torch.tensor([1.0, 2.0], dtype=torch.float64)
    )


def test_build_model_unknown():
    with pytest.raises(KeyError, match="unknown parameter set h2o-xx"):
        build_model("h2o-xx")


def test_model_builder_duplicate():
    with pytest.raises(KeyError, match="A model builder is already registered"):
        model_builder(WaterWaterParameters)(lambda *args: None)


@pytest.mark.parametrize("name", [*PARAMETER_SETS])
def test_build_model_all(name):
    model = mbpair.tests.utils.build_test_model(name)

    expected_n_variables = mbpair.tests.utils.N_VARIABLES[type(PARAMETER_SETS[name])]
    assert len(model.variables) == expected_n_variables
