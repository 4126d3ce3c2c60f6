import pytest
import torch

import mbpair.tests.utils
from mbpair.potentials.variables import (
    compute_coul_variable,
    compute_exp_variable,
    compute_primitive_contributions,
    compute_primitive_variables,
    distribute_primitive_grads,
)


def _random_site_pair(seed: int) -> tuple[torch.Tensor, torch.Tensor]:
    generator = torch.Generator().manual_seed(seed)

    coords_1 = torch.randn(3, generator=generator, dtype=torch.float64)
    coords_2 = coords_1 + 2.0 * torch.randn(3, generator=generator, dtype=torch.float64)

    return coords_1, coords_2


@pytest.mark.parametrize("k", [-0.648, 0.0, 0.5, 1.674])
def test_compute_exp_variable_at_r0(k):
    coords_1 = torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)
    coords_2 = torch.tensor([1.0, 2.0, 7.0], dtype=torch.float64)

    value, _ = compute_exp_variable(k, 4.0, coords_1, coords_2)
    assert value.item() == 1.0


def test_compute_exp_variable():
    coords_1 = torch.tensor([0.0, 0.0, 0.0], dtype=torch.float64)
    coords_2 = torch.tensor([3.0, 0.0, 0.0], dtype=torch.float64)

    value, grad = compute_exp_variable(0.5, 4.0, coords_1, coords_2)

    expected_value = torch.exp(torch.tensor(0.5, dtype=torch.float64))
    # dv/dx_1 = -k v / r (x_1 - x_2)
    expected_grad = torch.tensor([0.5 * expected_value, 0.0, 0.0], dtype=torch.float64)

    assert torch.isclose(value, expected_value)
    assert torch.allclose(grad, expected_grad)


def test_compute_coul_variable():
    coords_1 = torch.tensor([0.0, 0.0, 0.0], dtype=torch.float64)
    coords_2 = torch.tensor([0.0, 2.0, 0.0], dtype=torch.float64)

    value, grad = compute_coul_variable(1.0, 2.0, coords_1, coords_2)

    assert torch.isclose(value, torch.tensor(0.5, dtype=torch.float64))
    # -(k + 1/r) v / r (x_1 - x_2) = -(1.5)(0.5)/2 (0, -2, 0)
    assert torch.allclose(grad, torch.tensor([0.0, 0.75, 0.0], dtype=torch.float64))


@pytest.mark.parametrize("variable_fn", [compute_exp_variable, compute_coul_variable])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_variable_grads(variable_fn, seed):
    coords_1, coords_2 = _random_site_pair(seed)

    coords_1.requires_grad_(True)
    coords_2.requires_grad_(True)

    value, grad = variable_fn(0.8, 3.0, coords_1, coords_2)
    grad_1, grad_2 = torch.autograd.grad(value, [coords_1, coords_2])

    assert torch.allclose(grad, grad_1)
    assert torch.allclose(-grad, grad_2)


def test_compute_primitive_variables(water_ion_model):
    coords_a, coords_b = mbpair.tests.utils.pair_coords(water_ion_model, 3.0)

    v_site_coords = mbpair.geometry.compute_v_site_coords(
        coords_a, *water_ion_model.body_a.v_sites
    )
    site_coords = torch.cat([coords_a, coords_b, v_site_coords])

    variables = compute_primitive_variables(water_ion_model, site_coords)

    assert variables.values.shape == (8,)
    assert variables.grads.shape == (8, 3)

    for i, variable in enumerate(water_ion_model.variables):
        idx_1, idx_2 = variables.idxs[i]

        variable_fn = (
            compute_coul_variable
            if variable.kind == mbpair.VariableKind.COUL
            else compute_exp_variable
        )
        expected_value, expected_grad = variable_fn(
            variable.k, variable.r0, site_coords[idx_1], site_coords[idx_2]
        )

        assert torch.isclose(variables.values[i], expected_value)
        assert torch.allclose(variables.grads[i], expected_grad)


def test_distribute_primitive_grads(water_water_model):
    coords_a, coords_b = mbpair.tests.utils.batched_pair_coords(
        water_water_model, [3.0, 4.0]
    )
    v_sites = water_water_model.body_a.v_sites

    site_coords = torch.cat(
        [
            coords_a,
            coords_b,
            mbpair.geometry.compute_v_site_coords(coords_a, *v_sites),
            mbpair.geometry.compute_v_site_coords(coords_b, *v_sites),
        ],
        dim=1,
    )
    variables = compute_primitive_variables(water_water_model, site_coords)

    generator = torch.Generator().manual_seed(0)
    d_energy = torch.randn((2, 31), generator=generator, dtype=torch.float64)

    grads = distribute_primitive_grads(variables, d_energy, water_water_model.n_sites)
    assert grads.shape == (2, 10, 3)

    # every contribution is added to one site and removed from another.
    assert torch.allclose(grads.sum(dim=1), torch.zeros((2, 3), dtype=torch.float64))

    contributions = compute_primitive_contributions(variables, d_energy)
    expected_grads = torch.zeros_like(grads)

    for i, (idx_1, idx_2) in enumerate(variables.idxs.tolist()):
        expected_grads[:, idx_1] += contributions[:, i]
        expected_grads[:, idx_2] -= contributions[:, i]

    assert torch.allclose(grads, expected_grads)
