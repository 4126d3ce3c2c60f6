import logging

import pytest
import torch

import mbpair
import mbpair.tests.utils
from mbpair.potentials import compute_force_matrix, compute_pair_term
from mbpair.potentials._pair import _compute_polynomial_term
from mbpair.potentials.force_matrix import _compute_dense_force_matrix

_MODEL_NAMES = ["mbpol", "h2o-na-pol0", "h2o-i-pol75", "li-li", "k-br"]


def _distances(model: mbpair.TensorPairModel) -> list[float]:
    """Returns anchor-anchor distances spanning the region inside the switching band,
    the band itself and the region beyond the cutoff."""

    inside = max(model.r_inner - 1.5, 3.5)
    band = 0.5 * (model.r_inner + model.r_outer)

    return [inside, inside + 0.4, band - 0.2, band + 0.2, model.r_outer + 0.5]


@pytest.mark.parametrize("name", _MODEL_NAMES)
@pytest.mark.parametrize("seed", [0, 1])
def test_compute_force_matrix_row_sums(name, seed):
    model = mbpair.tests.utils.build_test_model(name)

    coords_a, coords_b = mbpair.tests.utils.batched_pair_coords(
        model, _distances(model), seed=seed
    )

    energy, grad_a, grad_b, force_matrix = compute_force_matrix(
        model, coords_a, coords_b
    )
    n_real_sites = model.n_real_sites

    assert force_matrix.shape == (5, n_real_sites, n_real_sites, 3)

    expected_energy, expected_grad_a, expected_grad_b = compute_pair_term(
        model, coords_a, coords_b
    )
    assert torch.allclose(energy, expected_energy)
    assert torch.allclose(grad_a, expected_grad_a)
    assert torch.allclose(grad_b, expected_grad_b)

    expected_grads = torch.cat([grad_a, grad_b], dim=1)
    assert torch.allclose(force_matrix.sum(dim=2), expected_grads)

    # pairs beyond the cutoff do not contribute.
    assert (force_matrix[-1] == 0.0).all()


@pytest.mark.parametrize(
    "name, expected_shape",
    [("mbpol", (6, 6, 3)), ("h2o-na-pol0", (4, 4, 3)), ("li-li", (2, 2, 3))],
)
def test_compute_force_matrix_unbatched(name, expected_shape):
    model = mbpair.tests.utils.build_test_model(name)

    coords_a, coords_b = mbpair.tests.utils.pair_coords(model, 4.0)
    energy, grad_a, grad_b, force_matrix = compute_force_matrix(
        model, coords_a, coords_b
    )

    assert energy.shape == ()
    assert grad_a.shape == coords_a.shape
    assert grad_b.shape == coords_b.shape
    assert force_matrix.shape == expected_shape


def test_compute_force_matrix_ion_ion(ion_ion_model):
    coords_a = torch.zeros((1, 3), dtype=torch.float64)
    coords_b = torch.tensor([[0.0, 3.0, 4.0]], dtype=torch.float64)

    _, grad_a, grad_b, force_matrix = compute_force_matrix(
        ion_ion_model, coords_a, coords_b
    )

    assert torch.allclose(force_matrix[0, 1], grad_a[0])
    assert torch.allclose(force_matrix[1, 0], grad_b[0])

    assert (force_matrix[0, 0] == 0.0).all()
    assert (force_matrix[1, 1] == 0.0).all()


@pytest.mark.parametrize("name", ["mbpol", "h2o-na-pol0", "li-li"])
def test_compute_force_matrix_beyond_cutoff(name, caplog):
    model = mbpair.tests.utils.build_test_model(name)

    coords_a, coords_b = mbpair.tests.utils.batched_pair_coords(
        model, [model.r_outer + 0.5, model.r_outer + 2.0]
    )
    coords_a.requires_grad_(True)
    coords_b.requires_grad_(True)

    with caplog.at_level(logging.DEBUG, logger="mbpair.potentials.force_matrix"):
        energy, grad_a, grad_b, force_matrix = compute_force_matrix(
            model, coords_a, coords_b
        )

    assert f"all {model.name} pairs are beyond the" in caplog.text

    n_real_sites = model.n_real_sites
    assert force_matrix.shape == (2, n_real_sites, n_real_sites, 3)

    assert (energy == 0.0).all()
    assert (grad_a == 0.0).all()
    assert (grad_b == 0.0).all()
    assert (force_matrix == 0.0).all()

    energy.sum().backward()

    assert torch.equal(coords_a.grad, torch.zeros_like(coords_a))
    assert torch.equal(coords_b.grad, torch.zeros_like(coords_b))


@pytest.mark.parametrize("name", _MODEL_NAMES)
def test_compute_force_matrix_conserves_momentum(name):
    model = mbpair.tests.utils.build_test_model(name)

    coords_a, coords_b = mbpair.tests.utils.batched_pair_coords(
        model, _distances(model), seed=2
    )
    *_, force_matrix = compute_force_matrix(model, coords_a, coords_b)

    total = force_matrix.sum(dim=(1, 2))
    assert torch.allclose(total, torch.zeros_like(total), atol=1.0e-6)


@pytest.mark.parametrize("name", _MODEL_NAMES)
def test_compute_dense_force_matrix_antisymmetric(name):
    model = mbpair.tests.utils.build_test_model(name)

    coords_a, coords_b = mbpair.tests.utils.batched_pair_coords(
        model, _distances(model)[:3], seed=3
    )
    term = _compute_polynomial_term(model, coords_a, coords_b)

    force_matrix = _compute_dense_force_matrix(model, term.variables, term.d_energy)

    assert force_matrix.shape == (3, model.n_sites, model.n_sites, 3)
    assert torch.allclose(force_matrix, -force_matrix.transpose(1, 2))
