import logging

import numpy
import pytest
import torch

import mbpair
import mbpair.ff
import mbpair.tests.utils
from mbpair.potentials import compute_cutoff, compute_pair_energy, compute_pair_term

_MODEL_NAMES = [
    "mbpol",
    "h2o-na-pol0",
    "h2o-f-pol0",
    "h2o-cs-pol0",
    "li-li",
    "k-br",
    "cs-cs",
]


def _distances(model: mbpair.TensorPairModel) -> dict[str, float]:
    """Returns anchor-anchor distances inside, within and beyond the switching
    band of a model."""
    return {
        "inside": max(model.r_inner - 1.5, 3.5),
        "band": 0.5 * (model.r_inner + model.r_outer),
        "outside": model.r_outer + 0.5,
    }


@pytest.mark.parametrize("name", _MODEL_NAMES)
def test_compute_pair_term_beyond_cutoff(name):
    model = mbpair.tests.utils.build_test_model(name)

    for distance in [model.r_outer + 1.0e-6, model.r_outer + 0.5, 20.0]:
        coords_a, coords_b = mbpair.tests.utils.pair_coords(model, distance)

        energy, grad_a, grad_b = compute_pair_term(model, coords_a, coords_b)

        assert energy.shape == ()
        assert grad_a.shape == coords_a.shape
        assert grad_b.shape == coords_b.shape

        assert energy.item() == 0.0
        assert (grad_a == 0.0).all()
        assert (grad_b == 0.0).all()


@pytest.mark.parametrize("name", ["mbpol", "h2o-na-pol0", "li-li"])
def test_compute_pair_term_beyond_cutoff_backward(name, caplog):
    model = mbpair.tests.utils.build_test_model(name)

    coords_a, coords_b = mbpair.tests.utils.batched_pair_coords(
        model, [model.r_outer + 0.5, model.r_outer + 2.0]
    )
    coords_a.requires_grad_(True)
    coords_b.requires_grad_(True)

    with caplog.at_level(logging.DEBUG, logger="mbpair.potentials._pair"):
        energy, _, _ = compute_pair_term(model, coords_a, coords_b)

    assert f"all {model.name} pairs are beyond the" in caplog.text

    assert energy.requires_grad
    assert (energy == 0.0).all()

    energy.sum().backward()

    assert torch.equal(coords_a.grad, torch.zeros_like(coords_a))
    assert torch.equal(coords_b.grad, torch.zeros_like(coords_b))


def test_compute_pair_term_at_cutoff(ion_ion_model):
    coords_a = torch.zeros((1, 3), dtype=torch.float64)
    coords_b = torch.tensor([[ion_ion_model.r_outer, 0.0, 0.0]], dtype=torch.float64)

    energy, grad_a, grad_b = compute_pair_term(ion_ion_model, coords_a, coords_b)

    assert energy.item() == 0.0
    assert (grad_a == 0.0).all()
    assert (grad_b == 0.0).all()


@pytest.mark.parametrize("name", _MODEL_NAMES)
@pytest.mark.parametrize("region", ["inside", "band"])
def test_compute_pair_term_grads(name, region):
    model = mbpair.tests.utils.build_test_model(name)

    coords_a, coords_b = mbpair.tests.utils.pair_coords(
        model, _distances(model)[region], seed=3
    )
    coords_a.requires_grad_(True)
    coords_b.requires_grad_(True)

    energy, grad_a, grad_b = compute_pair_term(model, coords_a, coords_b)
    assert energy.item() != 0.0

    expected_grad_a, expected_grad_b = torch.autograd.grad(
        energy, [coords_a, coords_b]
    )

    assert torch.allclose(grad_a, expected_grad_a)
    assert torch.allclose(grad_b, expected_grad_b)


@pytest.mark.parametrize("name", ["mbpol", "h2o-na-pol0", "li-li"])
def test_compute_pair_term_finite_difference(name):
    model = mbpair.tests.utils.build_test_model(name)

    coords_a, coords_b = mbpair.tests.utils.pair_coords(
        model, _distances(model)["band"], seed=4
    )
    _, grad_a, grad_b = compute_pair_term(model, coords_a, coords_b)

    expected_grad_a = mbpair.tests.utils.compute_finite_difference_grad(
        lambda x: compute_pair_term(model, x, coords_b).energy, coords_a
    )
    expected_grad_b = mbpair.tests.utils.compute_finite_difference_grad(
        lambda x: compute_pair_term(model, coords_a, x).energy, coords_b
    )

    assert torch.allclose(grad_a, expected_grad_a, atol=1.0e-6)
    assert torch.allclose(grad_b, expected_grad_b, atol=1.0e-6)


@pytest.mark.parametrize("name", _MODEL_NAMES)
@pytest.mark.parametrize("region", ["inside", "band"])
def test_compute_pair_term_conserves_momentum(name, region):
    model = mbpair.tests.utils.build_test_model(name)

    coords_a, coords_b = mbpair.tests.utils.pair_coords(
        model, _distances(model)[region], seed=5
    )
    _, grad_a, grad_b = compute_pair_term(model, coords_a, coords_b)

    total_grad = grad_a.sum(dim=0) + grad_b.sum(dim=0)
    assert torch.allclose(
        total_grad, torch.zeros(3, dtype=torch.float64), atol=1.0e-6
    )


@pytest.mark.parametrize("name", ["mbpol", "h2o-na-pol0"])
def test_compute_pair_term_rotation_invariant(name):
    model = mbpair.tests.utils.build_test_model(name)

    coords_a, coords_b = mbpair.tests.utils.pair_coords(
        model, _distances(model)["band"], seed=6
    )
    energy, grad_a, grad_b = compute_pair_term(model, coords_a, coords_b)

    rotation = mbpair.tests.utils.random_rotation(torch.Generator().manual_seed(7))
    rotation = rotation * torch.sign(torch.linalg.det(rotation))

    translation = torch.tensor([1.0, -2.0, 0.5], dtype=torch.float64)

    rotated_energy, rotated_grad_a, rotated_grad_b = compute_pair_term(
        model, coords_a @ rotation.T + translation, coords_b @ rotation.T + translation
    )

    assert torch.isclose(rotated_energy, energy)
    assert torch.allclose(rotated_grad_a, grad_a @ rotation.T)
    assert torch.allclose(rotated_grad_b, grad_b @ rotation.T)


@pytest.mark.parametrize("name", _MODEL_NAMES)
def test_compute_pair_term_batched(name):
    model = mbpair.tests.utils.build_test_model(name)

    distances = [*_distances(model).values()]
    coords_a, coords_b = mbpair.tests.utils.batched_pair_coords(model, distances)

    energy, grad_a, grad_b = compute_pair_term(model, coords_a, coords_b)

    assert energy.shape == (3,)
    assert grad_a.shape == coords_a.shape
    assert grad_b.shape == coords_b.shape

    for i in range(len(distances)):
        expected_energy, expected_grad_a, expected_grad_b = compute_pair_term(
            model, coords_a[i], coords_b[i]
        )

        assert torch.isclose(energy[i], expected_energy)
        assert torch.allclose(grad_a[i], expected_grad_a)
        assert torch.allclose(grad_b[i], expected_grad_b)

    assert energy[2] == 0.0


def test_compute_pair_term_ion_ion_reference():
    parameters = mbpair.ff.PARAMETER_SETS["li-li"]
    model = mbpair.ff.build_model("li-li")

    distances = numpy.array([2.5, 5.0, 7.25, 7.9])

    coords_a = torch.zeros((len(distances), 1, 3), dtype=torch.float64)
    coords_b = torch.zeros((len(distances), 1, 3), dtype=torch.float64)
    coords_b[:, 0, 2] = torch.from_numpy(distances)

    energy, _, grad_b = compute_pair_term(model, coords_a, coords_b)

    v = numpy.exp(parameters.k * (parameters.d - distances))
    energy_raw = sum(c * v ** (i + 1) for i, c in enumerate(parameters.coefficients))

    r_inner, r_outer = parameters.r_inner, parameters.r_outer

    x = numpy.pi * (distances - r_inner) / (r_outer - r_inner)
    switch = numpy.where(distances <= r_inner, 1.0, 0.5 * (1.0 + numpy.cos(x)))

    expected_energy = torch.from_numpy(switch * energy_raw)

    assert torch.allclose(energy, expected_energy)
    assert grad_b.shape == (4, 1, 3)
    assert torch.allclose(grad_b[:, 0, :2], torch.zeros((4, 2), dtype=torch.float64))


@pytest.mark.parametrize(
    "coords_a, coords_b, expected_raises",
    [
        (torch.zeros((2, 3)), torch.zeros((1, 3)), "the coordinates of body a must"),
        (torch.zeros((1, 3)), torch.zeros((1, 1, 3)), "either both or neither"),
        (torch.zeros((2, 1, 3)), torch.zeros((3, 1, 3)), "the number of conformers"),
        (torch.zeros((1, 2)), torch.zeros((1, 2)), "the coordinates of body a must"),
    ],
)
def test_compute_pair_term_invalid_coords(
    ion_ion_model, coords_a, coords_b, expected_raises
):
    with pytest.raises(ValueError, match=expected_raises):
        compute_pair_term(ion_ion_model, coords_a, coords_b)


@pytest.mark.parametrize("name", ["mbpol", "h2o-na-pol0", "li-li"])
@pytest.mark.parametrize("region", ["inside", "band"])
def test_compute_pair_energy_gradcheck(name, region):
    model = mbpair.tests.utils.build_test_model(name)

    coords_a, coords_b = mbpair.tests.utils.pair_coords(
        model, _distances(model)[region], seed=8
    )
    coords_a.requires_grad_(True)
    coords_b.requires_grad_(True)

    assert torch.autograd.gradcheck(
        lambda a, b: compute_pair_energy(model, a, b), (coords_a, coords_b)
    )


def test_compute_pair_energy_backward(water_water_model):
    distances = [3.0, 5.5, 7.0]
    coords_a, coords_b = mbpair.tests.utils.batched_pair_coords(
        water_water_model, distances
    )

    expected_energy, expected_grad_a, expected_grad_b = compute_pair_term(
        water_water_model, coords_a, coords_b
    )

    coords_a.requires_grad_(True)
    coords_b.requires_grad_(True)

    energy = compute_pair_energy(water_water_model, coords_a, coords_b)
    assert torch.allclose(energy, expected_energy)

    energy.sum().backward()

    assert torch.allclose(coords_a.grad, expected_grad_a)
    assert torch.allclose(coords_b.grad, expected_grad_b)


@pytest.mark.parametrize("name, expected_cutoff", [("mbpol", 6.5), ("li-li", 8.0)])
def test_compute_cutoff(name, expected_cutoff):
    model = mbpair.tests.utils.build_test_model(name)
    assert compute_cutoff(model) == expected_cutoff
